"""Loading and caching of image textures."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from PIL import Image

from zeroengine import logger

PathLike = Union[str, "os.PathLike[str]"]


class TextureLoadError(OSError):
    """Raised when an image file cannot be read as a texture."""


@dataclass(frozen=True)
class Texture:
    """An image loaded from disk, with its pixel size."""

    path: str
    width: int
    height: int
    image: Optional[Any] = field(default=None, compare=False, repr=False)


class TextureManager:
    """Loads each image file once and hands out the cached texture."""

    def __init__(self) -> None:
        self._textures: Dict[str, Texture] = {}

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, (str, os.PathLike)):
            return os.fspath(path) in self._textures
        return False

    def load(self, path: PathLike) -> Texture:
        """The texture for path, reading the file on first use."""
        key = os.fspath(path)
        cached = self._textures.get(key)
        if cached is not None:
            return cached
        try:
            with Image.open(key) as img:
                image = img.convert("RGBA")
        except OSError as exc:
            logger.error("Load Texture Error : %s", key)
            raise TextureLoadError(f"cannot load texture {key!r}: {exc}") from exc
        texture = Texture(key, image.width, image.height, image)
        self._textures[key] = texture
        return texture

    def release(self) -> None:
        """Drop every cached texture."""
        for texture in self._textures.values():
            if texture.image is not None:
                texture.image.close()
        self._textures.clear()