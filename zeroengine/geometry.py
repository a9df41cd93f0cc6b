"""Two-dimensional vectors, integer rectangles and small math helpers."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from typing import Iterator, Optional, TypeVar

T = TypeVar("T")

_rng = random.Random(time.time_ns())


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vec2":
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; float coordinates are truncated toward zero."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            object.__setattr__(self, name, int(getattr(self, name)))

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        """A rectangle at the origin with the given size."""
        return cls(0, 0, width, height)

    @classmethod
    def from_points(cls, left_top: Vec2, right_bottom: Vec2) -> "Rect":
        """A rectangle spanning two corner points."""
        return cls(left_top.x, left_top.y, right_bottom.x, right_bottom.y)

    def intersects(self, other: "Rect") -> bool:
        """True if the two rectangles share a non-empty area."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def contains(self, point: Vec2) -> bool:
        """True if the point lies strictly inside the rectangle."""
        return self.left < point.x < self.right and self.top < point.y < self.bottom

    def offset(self, point: Vec2) -> "Rect":
        """A copy moved by the given vector."""
        return Rect(
            self.left + point.x,
            self.top + point.y,
            self.right + point.x,
            self.bottom + point.y,
        )

    def width(self) -> float:
        return float(self.right - self.left)

    def height(self) -> float:
        return float(self.bottom - self.top)

    def center(self) -> Vec2:
        """Half the rectangle's size, relative to its own corner."""
        return Vec2(self.width(), self.height()) / 2.0


def clamp(value: T, maximum: T, minimum: Optional[T] = None) -> T:
    """Limit value to maximum, and to minimum when one is given."""
    if value > maximum:  # type: ignore[operator]
        return maximum
    if minimum is not None and value < minimum:  # type: ignore[operator]
        return minimum
    return value


def lerp(start: T, end: T, t: float) -> T:
    """Linear interpolation; t is limited to at most 1."""
    t = clamp(t, 1.0)
    return start + (end - start) * t  # type: ignore[operator]


def random_range(low: float, high: float) -> float:
    """A uniformly distributed float between low and high."""
    return _rng.uniform(low, high)


def angle(p1: Vec2, p2: Vec2) -> float:
    """Angle in radians of the vector from p1 to p2."""
    d = p2 - p1
    return math.atan2(d.y, d.x)


def length(p1: Vec2, p2: Vec2) -> float:
    """Distance between two points."""
    d = p2 - p1
    return math.hypot(d.x, d.y)