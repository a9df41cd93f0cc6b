"""Collision detection between box colliders and simple resolution."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Tuple

from zeroengine.geometry import Vec2
from zeroengine.physics import BoxCollider, RigidBody2D, deg_to_rad

CORRECTION_MULTIPLY_VALUE = 1.0


class AABBDirection(Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def inverse(self) -> "AABBDirection":
        return _INVERSE[self]


_INVERSE = {
    AABBDirection.UP: AABBDirection.DOWN,
    AABBDirection.DOWN: AABBDirection.UP,
    AABBDirection.LEFT: AABBDirection.RIGHT,
    AABBDirection.RIGHT: AABBDirection.LEFT,
}


def _delta_time() -> float:
    from zeroengine.engine import Engine

    time_manager = Engine.instance().time_manager
    if time_manager is None:
        raise RuntimeError("engine is not initialised: no time manager")
    return time_manager.delta_time


def _height_vector(box: BoxCollider) -> Vec2:
    # Only the x component is ever set for the height axis.
    return Vec2(box.scale_value.y * math.sin(deg_to_rad(box.rotation - 90)), 0.0)


def _width_vector(box: BoxCollider) -> Vec2:
    radians = deg_to_rad(box.rotation)
    return Vec2(box.scale_value.x * math.cos(radians), box.scale_value.x * math.sin(radians))


def _unit(v: Vec2) -> Vec2:
    size = math.hypot(v.x, v.y)
    if size == 0:
        return Vec2(math.nan, math.nan)
    return Vec2(v.x / size, v.y / size)


def _abs_dot(a: Vec2, b: Vec2) -> float:
    return abs(a.x * b.x + a.y * b.y)


def intersection_depth(a: BoxCollider, b: BoxCollider) -> Vec2:
    """Overlap depth of two boxes along each axis, or zero when apart."""
    dx = float(a.center_pos.x) - b.center_pos.x
    dy = float(a.center_pos.y) - b.center_pos.y
    min_x = float(a.scale_value.x) + b.scale_value.x
    min_y = float(a.scale_value.y) + b.scale_value.y
    if abs(dx) >= min_x or abs(dy) >= min_y:
        return Vec2(0.0, 0.0)
    depth_x = min_x - dx if dx > 0 else -min_x - dx
    depth_y = min_y - dy if dy > 0 else -min_y - dy
    return Vec2(depth_x, depth_y)


def eval_aabb(a: BoxCollider, b: BoxCollider) -> bool:
    """Axis-aligned overlap test; touching edges count as overlapping."""
    a_min, a_max = a.left_top(), a.right_bottom()
    b_min, b_max = b.left_top(), b.right_bottom()
    if a_max.x < b_min.x or a_min.x > b_max.x:
        return False
    if a_max.y < b_min.y or a_min.y > b_max.y:
        return False
    return True


def eval_obb(a: BoxCollider, b: BoxCollider) -> bool:
    """Separating-axis test for rotated boxes."""
    dist = a.center_pos - b.center_pos
    axes = [_height_vector(a), _height_vector(b), _width_vector(a), _width_vector(b)]
    for axis in axes:
        unit = _unit(axis)
        total = sum(_abs_dot(v, unit) for v in axes)
        if _abs_dot(dist, unit) > total:
            return False
    return True


def _along(v: Vec2, vertical: bool) -> float:
    return v.y if vertical else v.x


def _replace(v: Vec2, value: float, vertical: bool) -> Vec2:
    return Vec2(v.x, value) if vertical else Vec2(value, v.y)


def _bounce(moving: RigidBody2D, wall: RigidBody2D, vertical: bool) -> None:
    transform = moving.owner.transform
    correction = _delta_time() * -_along(moving.velocity, vertical) * CORRECTION_MULTIPLY_VALUE
    pos = transform.local_pos
    transform.local_pos = _replace(pos, _along(pos, vertical) + correction, vertical)
    speed = _along(moving.velocity, vertical) * -1.0 * moving.mass * wall.restitution
    moving.velocity = _replace(moving.velocity, speed, vertical)


def _resolve(a: BoxCollider, b: BoxCollider, direction: AABBDirection) -> None:
    if a.is_previous_loop_collision_resolved or b.is_previous_loop_collision_resolved:
        a.is_previous_loop_collision_resolved = False
        b.is_previous_loop_collision_resolved = False
        return
    a.is_previous_loop_collision_resolved = True
    b.is_previous_loop_collision_resolved = True

    body_a = a.owner.get_component(RigidBody2D)
    body_b = b.owner.get_component(RigidBody2D)
    vertical = direction in (AABBDirection.UP, AABBDirection.DOWN)

    if body_a.is_strict and body_b.is_strict:
        return
    if body_a.is_strict:
        _bounce(body_b, body_a, vertical)
        return
    if body_b.is_strict:
        _bounce(body_a, body_b, vertical)
        return

    new_a = _along(body_b.velocity, vertical) * body_b.mass * body_a.restitution
    new_b = _along(body_a.velocity, vertical) * body_a.mass * body_b.restitution
    body_a.velocity = _replace(body_a.velocity, new_a, vertical)
    body_b.velocity = _replace(body_b.velocity, new_b, vertical)


def resolve_aabb(a: BoxCollider, b: BoxCollider) -> None:
    """Adjust the rigid bodies of two overlapping boxes."""
    depth = intersection_depth(a, b)
    if depth.x == 0 or depth.y == 0:
        return
    if abs(depth.x) < abs(depth.y):
        direction = AABBDirection.RIGHT if math.sin(depth.x) < 0 else AABBDirection.LEFT
    elif abs(depth.x) > abs(depth.y):
        direction = AABBDirection.DOWN if math.sin(depth.y) < 0 else AABBDirection.UP
    else:
        return
    _resolve(a, b, direction)


class ColliderManager:
    """Pairs up the scene's box colliders and reports their contacts."""

    def __init__(self, scene=None) -> None:
        self.scene = scene
        self._pairs: List[Tuple[BoxCollider, BoxCollider]] = []

    @property
    def queue(self) -> List[Tuple[BoxCollider, BoxCollider]]:
        return list(self._pairs)

    def mount(self, a: Optional[BoxCollider], b: Optional[BoxCollider]) -> None:
        """Queue a pair of colliders unless the same pair is already queued."""
        if a is None or b is None:
            return
        key = frozenset((a, b))
        if any(frozenset(pair) == key for pair in self._pairs):
            return
        self._pairs.append((a, b))

    def _current_scene(self):
        if self.scene is not None:
            return self.scene
        from zeroengine.engine import Engine

        manager = Engine.instance().scene_manager
        if manager is None or manager.current_scene is None:
            raise RuntimeError("no current scene")
        return manager.current_scene

    def update(self) -> None:
        """Rebuild the pair queue from the scene's box colliders."""
        colliders = self._current_scene().components_of(BoxCollider)
        if not colliders:
            return
        self._pairs.clear()
        for first in colliders:
            for second in colliders:
                if first is not second:
                    self.mount(first, second)

    def late_update(self) -> None:
        """Test every queued pair and fire enter, stay and exit callbacks."""
        for a, b in list(self._pairs):
            if a.rotation == 0.0 and b.rotation == 0.0:
                hit = eval_aabb(a, b)
            else:
                hit = eval_obb(a, b)
            solid = not a.is_trigger and not b.is_trigger

            if hit:
                if solid:
                    if not a.is_collided:
                        resolve_aabb(a, b)
                        a.on_collision_enter(b)
                    else:
                        a.on_collision_stay(b)
                    if not b.is_collided:
                        b.on_collision_enter(a)
                    else:
                        a.on_collision_stay(b)
                else:
                    if not a.is_collided:
                        a.on_trigger_enter(b)
                    else:
                        a.on_trigger_stay(b)
                    if not b.is_collided:
                        b.on_trigger_enter(a)
                    else:
                        b.on_trigger_stay(a)
                a.is_collided = True
                b.is_collided = True
            else:
                if solid:
                    if a.is_collided:
                        a.on_collision_exit(b)
                    if b.is_collided:
                        b.on_collision_exit(a)
                else:
                    if a.is_collided:
                        a.on_trigger_exit(b)
                    if b.is_collided:
                        b.on_trigger_exit(a)
                a.is_collided = False
                b.is_collided = False