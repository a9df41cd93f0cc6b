"""The engine singleton: managers and the main loop."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from zeroengine import logger
from zeroengine.input import InputManager
from zeroengine.scene import SceneManager
from zeroengine.textures import TextureManager
from zeroengine.timing import TimeManager

InputSource = Callable[[], Tuple[Iterable, Tuple[float, float]]]


def _no_input():
    return (), (0.0, 0.0)


class Engine:
    """Owns the managers and drives frames until closed."""

    _instance: Optional["Engine"] = None

    def __init__(self, debug: bool = False) -> None:
        self.app_name = "ZeroApplication"
        self.width = 1280
        self.height = 720
        self.full_screen = False
        self.debug = debug
        logger.set_debug(debug)
        self.scene_manager: Optional[SceneManager] = None
        self.time_manager: Optional[TimeManager] = None
        self.input_manager: Optional[InputManager] = None
        self.texture_manager: Optional[TextureManager] = None
        self.input_source: InputSource = _no_input
        self.presenter: Optional[Callable[[List], None]] = None
        self.frame: List = []
        self._closed = False

    @classmethod
    def instance(cls) -> "Engine":
        """The shared engine, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def is_closed(self) -> bool:
        return self._closed

    def register(self, app_name: str, width: int, height: int, full_screen: bool = False) -> None:
        self.app_name = app_name
        self.width = width
        self.height = height
        self.full_screen = full_screen

    def initialize(self) -> None:
        """Create fresh managers and start the clock."""
        self.scene_manager = SceneManager()
        self.time_manager = TimeManager()
        self.texture_manager = TextureManager()
        self.input_manager = InputManager()
        self.time_manager.start()
        self.frame = []
        self._closed = False

    def _require(self) -> SceneManager:
        if self.scene_manager is None:
            raise RuntimeError("engine is not initialised")
        return self.scene_manager

    def start(self) -> None:
        """Begin a frame: advance time and input, start new components."""
        scenes = self._require()
        self.time_manager.update()
        keys, cursor = self.input_source()
        self.input_manager.update(keys, cursor)
        scenes.start()

    def update(self) -> bool:
        self._require().update()
        return True

    def late_update(self) -> None:
        self._require().late_update()

    def render(self) -> None:
        """Collect this frame's draw calls and hand them to the presenter."""
        scenes = self._require()
        self.frame = []
        scenes.render()
        if self.presenter is not None:
            self.presenter(self.frame)

    def end_scene(self) -> None:
        self._require().end_scene()

    def release(self) -> None:
        """Free the textures and drop the managers."""
        if self.texture_manager is not None:
            self.texture_manager.release()
        self.scene_manager = None
        self.time_manager = None
        self.texture_manager = None
        self.input_manager = None

    def close(self) -> None:
        """Ask the main loop to stop after the current frame."""
        self._closed = True

    def main_loop(self) -> int:
        while not self._closed:
            self.start()
            self.update()
            self.late_update()
            self.render()
            self.end_scene()
        self.release()
        return 0