"""Box colliders, rectangle colliders and a simple rigid body."""

from __future__ import annotations

from zeroengine.ecs import Component
from zeroengine.geometry import Rect, Vec2

PI = 3.14159265358979


def deg_to_rad(degrees: float) -> float:
    return degrees / 180 * PI


def rad_to_deg(radians: float) -> float:
    return radians * 180 / PI


def _delta_time() -> float:
    from zeroengine.engine import Engine

    time_manager = Engine.instance().time_manager
    if time_manager is None:
        raise RuntimeError("engine is not initialised: no time manager")
    return time_manager.delta_time


class BoxCollider(Component):
    """A box given by its centre, half-size and rotation in degrees."""

    def __init__(
        self,
        center: Vec2 = Vec2(0.0, 0.0),
        scale: Vec2 = Vec2(0.0, 0.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__()
        self.center_pos = center
        self.scale_value = scale
        self.rotation = rotation
        self.is_collided = False
        self.is_trigger = False
        self.is_previous_loop_collision_resolved = False

    def left_top(self) -> Vec2:
        return self.center_pos - self.scale_value

    def right_bottom(self) -> Vec2:
        return self.center_pos + self.scale_value

    def left(self) -> float:
        return float(self.center_pos.x) - self.scale_value.x

    def right(self) -> float:
        return float(self.center_pos.x) + self.scale_value.x

    def top(self) -> float:
        return float(self.center_pos.y) - self.scale_value.y

    def bottom(self) -> float:
        return float(self.center_pos.y) + self.scale_value.y

    def set_relative_pos(self, left_top: Vec2, right_bottom: Vec2, rotation: float = 0.0) -> None:
        """Fit the box to two corners; rotation is given in radians."""
        scale = (right_bottom - left_top) / 2
        self.center_pos = left_top + scale
        self.scale_value = scale
        self.rotation = rad_to_deg(rotation)

    def set_absolute_pos(self, center: Vec2, scale: Vec2, rotation: float = 0.0) -> None:
        """Set centre, half-size and rotation in degrees directly."""
        self.center_pos = center
        self.scale_value = scale
        self.rotation = rotation

    def _fit_to_owner(self) -> None:
        transform = self.owner.transform
        self.set_relative_pos(
            transform.world_pos, transform.right_bottom_pos(), transform.rotation
        )

    def start(self) -> None:
        super().start()
        self._fit_to_owner()

    def update(self) -> None:
        super().update()
        self._fit_to_owner()


class RigidBody2D(Component):
    """Velocity, mass and gravity; strict bodies never move."""

    def __init__(self) -> None:
        super().__init__()
        self.velocity = Vec2(0.0, 0.0)
        self.mass = 0.0
        self.inv_mass = 1.0
        self.restitution = 0.0
        self.gravity = 980.0
        self.is_strict = False

    def add_velocity(self, delta: Vec2) -> None:
        self.velocity = self.velocity + delta

    def late_update(self) -> None:
        """Apply gravity and move the owner, or stop a strict body."""
        delta_time = _delta_time()
        if not self.is_strict:
            self.add_velocity(Vec2(0.0, delta_time * self.gravity))
            self.owner.transform.translate(
                Vec2(delta_time * self.velocity.x, delta_time * self.velocity.y)
            )
        else:
            self.velocity = Vec2(0.0, 0.0)


class RectCollider(Component):
    """An axis-aligned rectangle relative to the owner's position."""

    def __init__(self) -> None:
        super().__init__()
        self.rect = Rect(0, 0, 0, 0)

    def rect_with_pos(self) -> Rect:
        return self.rect.offset(self.owner.transform.local_pos)