"""Frame-based sprite animations and a parameter-driven animation state machine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from zeroengine.ecs import Component
from zeroengine.sprite import Sprite2DRenderer
from zeroengine.textures import Texture, TextureManager

TextureSource = Union[Texture, str, "os.PathLike[str]"]


def _engine_delta_time() -> float:
    from zeroengine.engine import Engine

    time_manager = Engine.instance().time_manager
    if time_manager is None:
        raise RuntimeError("engine is not initialised: no time manager")
    return time_manager.delta_time


def _engine_texture_manager() -> TextureManager:
    from zeroengine.engine import Engine

    manager = Engine.instance().texture_manager
    if manager is None:
        raise RuntimeError("engine is not initialised: no texture manager")
    return manager


class SpriteAnimation:
    """A sequence of textures played at a fixed number of frames per second."""

    def __init__(self, fps: float = 0.0, texture_manager: Optional[TextureManager] = None) -> None:
        self.textures: List[Texture] = []
        self.fps = fps
        self.texture_count = 0
        self.is_loop = True
        self.is_loop_end = True
        self.is_end = True
        self.current_frame = 0.0
        self._texture_manager = texture_manager

    @property
    def is_animation_end(self) -> bool:
        """True once a loop has wrapped or a one-shot animation has finished."""
        return self.is_loop_end or self.is_end

    def _load(self, source: TextureSource) -> Texture:
        if isinstance(source, Texture):
            return source
        manager = self._texture_manager or _engine_texture_manager()
        return manager.load(source)

    def update(self, delta_time: Optional[float] = None) -> None:
        """Advance the animation; without a delta the engine's frame time is used."""
        if delta_time is None:
            delta_time = _engine_delta_time()
        self.current_frame += delta_time * self.fps
        if self.is_loop_end:
            self.is_loop_end = False
        if int(self.current_frame) >= self.texture_count:
            if self.is_loop:
                self.is_loop_end = True
                self.current_frame = 0.0
            else:
                self.current_frame = float(self.texture_count - 1)
                self.is_end = True

    def add_textures(self, root: Union[str, "os.PathLike[str]"], count: int) -> None:
        """Load root/1.png to root/<count>.png; the texture count becomes count."""
        self.texture_count = count
        base = os.fspath(root)
        for number in range(1, count + 1):
            self.textures.append(self._load(f"{base}/{number}.png"))

    def add_texture(self, path: TextureSource) -> None:
        self.textures.append(self._load(path))
        self.texture_count += 1

    def reset_textures(self) -> None:
        self.textures.clear()
        self.texture_count = 0

    def restart(self) -> None:
        self.current_frame = 0.0
        self.is_end = False
        self.is_loop_end = False

    def current_texture(self) -> Texture:
        return self.textures[int(self.current_frame)]


class AnimOper(Enum):
    GREATER = 0
    LESS = 1
    EQUALS = 2
    N_EQUALS = 3


@dataclass
class StateNode:
    """A condition comparing a parameter's value with a target."""

    param_name: str
    operator: AnimOper
    target_value: Any

    def check(self, value: Any) -> bool:
        if self.operator is AnimOper.GREATER:
            return value > self.target_value
        if self.operator is AnimOper.LESS:
            return value < self.target_value
        if self.operator is AnimOper.EQUALS:
            return value == self.target_value
        if self.operator is AnimOper.N_EQUALS:
            return value != self.target_value
        return False


@dataclass
class StateGroup:
    """All conditions for one transition; every one must hold."""

    has_exit_time: bool = True
    int_states: List[StateNode] = field(default_factory=list)
    float_states: List[StateNode] = field(default_factory=list)
    bool_states: List[StateNode] = field(default_factory=list)


@dataclass
class AnimationNode:
    """An animation and its outgoing transitions keyed by target node name."""

    animation: SpriteAnimation
    state_groups: Dict[str, StateGroup] = field(default_factory=dict)


class ParamKind(Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TRIGGER = "trigger"


_KIND_OF_TYPE = {int: ParamKind.INT, float: ParamKind.FLOAT, bool: ParamKind.BOOL}


def _resolve_kind(kind: Any) -> ParamKind:
    if isinstance(kind, ParamKind):
        return kind
    try:
        return _KIND_OF_TYPE[kind]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported animation parameter type: {kind!r}") from None


class AnimationController(Component):
    """Switches between animation nodes according to typed parameters."""

    def __init__(self) -> None:
        super().__init__()
        self.nodes: Dict[str, AnimationNode] = {}
        self.trigger_states: Dict[str, StateNode] = {}
        self.ints: Dict[str, int] = {}
        self.floats: Dict[str, float] = {}
        self.bools: Dict[str, bool] = {}
        self.triggers: Dict[str, bool] = {}
        self.entry_node: Optional[str] = None
        self.current_node: Optional[str] = None

    def _node(self, name: str) -> AnimationNode:
        try:
            return self.nodes[name]
        except KeyError:
            raise KeyError(f"nonexistent animation identifier {name!r}") from None

    def start(self) -> None:
        """Enter the entry node (the first by name if none was chosen)."""
        super().start()
        entry = self.entry_node
        if entry is None:
            if not self.nodes:
                raise RuntimeError("animation controller has no animation nodes")
            entry = min(self.nodes)
        self._change_node(entry)

    def update(self) -> None:
        super().update()
        self.current_animation().update(_engine_delta_time())

    def late_update(self) -> None:
        super().late_update()
        self.check_animation_state()

    def render(self) -> None:
        """Show the current frame on the owner's sprite renderer."""
        super().render()
        renderer = self.owner.get_component(Sprite2DRenderer)
        renderer.set_texture(self.current_animation().current_texture())

    def check_animation_state(self) -> None:
        """Move to the first target (by name) whose conditions all hold."""
        node = self._node(self._require_current())
        for next_name, group in sorted(node.state_groups.items()):
            can_change = not group.has_exit_time or node.animation.is_animation_end
            if not can_change:
                continue
            if not all(s.check(self.get_int(s.param_name)) for s in group.int_states):
                continue
            if not all(s.check(self.get_float(s.param_name)) for s in group.float_states):
                continue
            if not all(s.check(self.get_bool(s.param_name)) for s in group.bool_states):
                continue
            self._change_node(next_name)
            break

    def _require_current(self) -> str:
        if self.current_node is None:
            raise RuntimeError("animation controller has not been started")
        return self.current_node

    def current_animation(self) -> SpriteAnimation:
        return self._node(self._require_current()).animation

    def add_parameter(self, key: str, kind: Any, value: Any = None) -> None:
        """Declare a parameter; an existing one keeps its value."""
        resolved = _resolve_kind(kind)
        if resolved is ParamKind.INT:
            self.ints.setdefault(key, int(value) if value is not None else 0)
        elif resolved is ParamKind.FLOAT:
            self.floats.setdefault(key, float(value) if value is not None else 0.0)
        elif resolved is ParamKind.BOOL:
            self.bools.setdefault(key, bool(value) if value is not None else False)
        else:
            self.triggers.setdefault(key, bool(value) if value is not None else False)

    def add_animation_node(self, name: str, animation: SpriteAnimation) -> None:
        if name in self.nodes:
            raise ValueError(f"duplicated animation identifier {name!r}")
        self.nodes[name] = AnimationNode(animation)

    def set_has_exit_time(self, target: str, next_node: str, has_exit_time: bool) -> None:
        """Whether the target must finish its animation before moving to next_node."""
        node = self._node(target)
        group = node.state_groups.get(next_node)
        if group is None:
            node.state_groups[next_node] = StateGroup(has_exit_time)
        else:
            group.has_exit_time = has_exit_time

    def add_state(self, target: str, param: str, oper: AnimOper, value: Any, next_node: str) -> None:
        """Add a condition on the transition from target to next_node."""
        if target not in self.nodes or next_node not in self.nodes:
            raise KeyError(f"nonexistent animation identifier {target!r} or {next_node!r}")
        node = self.nodes[target]
        if next_node not in node.state_groups:
            self.set_has_exit_time(target, next_node, True)
        group = node.state_groups[next_node]
        state = StateNode(param, oper, value)
        if isinstance(value, bool):
            group.bool_states.append(state)
        elif isinstance(value, int):
            group.int_states.append(state)
        elif isinstance(value, float):
            group.float_states.append(state)
        else:
            raise TypeError(f"unsupported animation state type: {type(value).__name__}")

    def add_trigger(self, key: str, target: str) -> None:
        self._node(target)
        self.trigger_states.setdefault(target, StateNode(key, AnimOper.EQUALS, True))

    def set_entry_node(self, target: str) -> None:
        self._node(target)
        self.entry_node = target

    @staticmethod
    def _set(table: Dict[str, Any], key: str, value: Any, kind: str) -> None:
        if key not in table:
            raise KeyError(f"nonexistent animation parameter identifier ({kind}) {key!r}")
        table[key] = value

    @staticmethod
    def _get(table: Dict[str, Any], key: str, kind: str) -> Any:
        try:
            return table[key]
        except KeyError:
            raise KeyError(f"nonexistent animation parameter identifier ({kind}) {key!r}") from None

    def set_int(self, key: str, value: int) -> None:
        self._set(self.ints, key, int(value), "int")

    def set_float(self, key: str, value: float) -> None:
        self._set(self.floats, key, float(value), "float")

    def set_bool(self, key: str, value: bool) -> None:
        self._set(self.bools, key, bool(value), "bool")

    def set_trigger(self, key: str) -> None:
        self._set(self.triggers, key, True, "trigger")

    def get_int(self, key: str) -> int:
        return self._get(self.ints, key, "int")

    def get_float(self, key: str) -> float:
        return self._get(self.floats, key, "float")

    def get_bool(self, key: str) -> bool:
        return self._get(self.bools, key, "bool")

    def _change_node(self, name: str) -> None:
        node = self._node(name)
        self.current_node = name
        node.animation.restart()