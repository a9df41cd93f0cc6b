"""Sprite rendering components."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from zeroengine.ecs import Component
from zeroengine.geometry import Rect, Vec2
from zeroengine.textures import Texture

if TYPE_CHECKING:
    from zeroengine.transform import Affine

Color = Tuple[float, float, float, float]
WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class DrawCall:
    """One sprite drawn in a frame."""

    texture: Texture
    source_rect: Rect
    matrix: "Affine"
    color: Color


def _texture_manager():
    from zeroengine.engine import Engine

    manager = Engine.instance().texture_manager
    if manager is None:
        raise RuntimeError("engine is not initialised: no texture manager")
    return manager


class Sprite2DRenderer(Component):
    """Draws a texture with the owner's transform."""

    def __init__(self, texture: Union[Texture, str, "os.PathLike[str]", None] = None) -> None:
        super().__init__()
        self.texture: Optional[Texture] = None
        self.color: Color = WHITE
        self.visible_rect = Rect()
        self.width = 0
        self.height = 0
        self.is_visible = True
        if texture is not None:
            self.set_texture(texture)

    def set_texture(self, texture: Union[Texture, str, "os.PathLike[str]"]) -> None:
        """Use a texture, loading it through the engine when given a path."""
        if isinstance(texture, (str, os.PathLike)):
            texture = _texture_manager().load(texture)
        self.texture = texture
        self.width = texture.width
        self.height = texture.height
        self.visible_rect = Rect(0, 0, self.width, self.height)
        self.color = WHITE

    def texture_size(self) -> Vec2:
        return Vec2(float(self.width), float(self.height))

    def render(self) -> None:
        """Add this sprite to the engine's current frame."""
        super().render()
        if not self.is_visible or self.texture is None:
            return
        from zeroengine.engine import Engine

        Engine.instance().frame.append(
            DrawCall(self.texture, self.visible_rect, self.owner.transform.matrix, self.color)
        )


class UIImageRenderer(Sprite2DRenderer):
    """A sprite used as a user-interface image."""


class UIHp(UIImageRenderer):
    """A health bar image; it has no per-frame behaviour."""

    def update(self) -> None:
        pass