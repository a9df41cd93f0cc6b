"""Position, scale and rotation of an entity, with parent-child links."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from zeroengine.ecs import Component
from zeroengine.geometry import Vec2


@dataclass(frozen=True)
class Affine:
    """A 2D affine matrix for row vectors: [x y 1] times the matrix."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Affine":
        return cls()

    @classmethod
    def translation(cls, offset: Vec2) -> "Affine":
        return cls(tx=offset.x, ty=offset.y)

    @classmethod
    def scaling(cls, factors: Vec2) -> "Affine":
        return cls(a=factors.x, d=factors.y)

    @classmethod
    def rotation(cls, radians: float) -> "Affine":
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    @classmethod
    def transformation_2d(
        cls,
        scale_center: Vec2,
        scale: Vec2,
        rotation_center: Vec2,
        rotation: float,
        translation: Vec2,
    ) -> "Affine":
        """Scale about scale_center, rotate about rotation_center, then translate."""
        return (
            cls.translation(-scale_center)
            @ cls.scaling(scale)
            @ cls.translation(scale_center)
            @ cls.translation(-rotation_center)
            @ cls.rotation(rotation)
            @ cls.translation(rotation_center)
            @ cls.translation(translation)
        )

    def __matmul__(self, other: "Affine") -> "Affine":
        """The matrix applying self first, then other."""
        return Affine(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    def apply(self, point: Vec2) -> Vec2:
        return Vec2(
            point.x * self.a + point.y * self.c + self.tx,
            point.x * self.b + point.y * self.d + self.ty,
        )


class Transform(Component):
    """Local placement of an entity; world placement follows its parent."""

    def __init__(self) -> None:
        super().__init__()
        self.local_pos = Vec2(0.0, 0.0)
        self.world_pos = Vec2(0.0, 0.0)
        self.scale_center = Vec2(0.0, 0.0)
        self.scale = Vec2(1.0, 1.0)
        self.rotation_center = Vec2(0.0, 0.0)
        self.rotation = 0.0
        self.matrix = Affine.identity()
        self.is_ui_object = False
        self.parent: Optional["Transform"] = None
        self.children: List["Transform"] = []

    def start(self) -> None:
        super().start()
        if self.parent is None:
            self.update_transformation()

    def render(self) -> None:
        super().render()
        if self.parent is None:
            self.update_transformation()

    def end_scene(self) -> None:
        """Destroy the owner when the parent's owner has been destroyed."""
        super().end_scene()
        if self.parent is not None and self.parent.owner is not None:
            if self.parent.owner.is_destroyed:
                self.owner.destroy()

    def update_transformation(self) -> None:
        """Recompute the matrix and world position, then those of the children."""
        self.matrix = Affine.transformation_2d(
            self.scale_center, self.scale, self.rotation_center, self.rotation, self.local_pos
        )
        self.world_pos = self.local_pos
        if self.parent is not None:
            self.matrix = self.matrix @ self.parent.matrix
            self.world_pos = self.world_pos + self.parent.world_pos
        for child in self.children:
            child.update_transformation()

    def right_bottom_pos(self) -> Vec2:
        """World position plus the size of the owner's sprite texture."""
        from zeroengine.sprite import Sprite2DRenderer

        size = self.owner.get_component(Sprite2DRenderer).texture_size()
        return self.world_pos + size

    def child(self, index: int) -> "Transform":
        return self.children[index]

    def translate(self, offset: Vec2) -> None:
        self.local_pos = self.local_pos + offset

    def add_child(self, child: "Transform") -> None:
        child.parent = self
        self.children.append(child)

    def pop_child(self, child: "Transform") -> None:
        self.children = [c for c in self.children if c is not child]

    def mul_matrix(self, matrix: Affine) -> None:
        """Post-multiply the matrix, unless this is a UI object."""
        if not self.is_ui_object:
            self.matrix = self.matrix @ matrix