import math

import pytest

from zeroengine.geometry import (
    Rect,
    Vec2,
    angle,
    clamp,
    length,
    lerp,
    random_range,
)


def test_vec2_arithmetic_round_trips():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2
    assert -(-a) == a
    assert tuple(a) == (1.5, -2.0)


def test_rect_from_size_truncates():
    assert Rect.from_size(5.7, 3.2) == Rect(0, 0, 5, 3)


def test_rect_from_points_matches_constructor():
    r = Rect.from_points(Vec2(1, 2), Vec2(7, 9))
    assert r == Rect(1, 2, 7, 9)
    assert r.width() == 6.0
    assert r.height() == 7.0


def test_rect_contains_is_strict():
    r = Rect(0, 0, 10, 10)
    assert r.contains(Vec2(5, 5))
    assert not r.contains(Vec2(0, 5))
    assert not r.contains(Vec2(5, 10))
    assert not r.contains(Vec2(11, 5))


def test_rect_intersects():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 15, 15))
    assert Rect(5, 5, 15, 15).intersects(a)
    assert not a.intersects(Rect(10, 0, 20, 10))
    assert not a.intersects(Rect(3, 3, 3, 3))


def test_rect_offset_keeps_size():
    r = Rect(1, 2, 5, 8)
    moved = r.offset(Vec2(10, 20))
    assert moved.width() == r.width()
    assert moved.height() == r.height()
    assert moved.left == 11 and moved.top == 22
    assert r.offset(Vec2(0, 0)) == r


def test_rect_center_is_half_size():
    assert Rect(2, 2, 6, 10).center() == Vec2(2.0, 4.0)


def test_clamp():
    assert clamp(5, 3) == 3
    assert clamp(2, 3) == 2
    assert clamp(-1, 3, 0) == 0
    assert clamp(2, 3, 0) == 2


def test_lerp_limits_t_above_only():
    assert lerp(0.0, 10.0, 0.0) == 0.0
    assert lerp(0.0, 10.0, 2.0) == 10.0
    assert lerp(0.0, 10.0, -1.0) == -10.0


def test_lerp_vectors():
    start = Vec2(1, 1)
    end = Vec2(4, 5)
    assert lerp(start, end, 1.0) == end
    assert lerp(start, end, 0.0) == start


def test_random_range_bounds():
    values = [random_range(2.0, 3.0) for _ in range(200)]
    assert all(2.0 <= v <= 3.0 for v in values)


def test_angle_and_length():
    assert angle(Vec2(0, 0), Vec2(0, 1)) == pytest.approx(math.pi / 2)
    assert angle(Vec2(1, 1), Vec2(2, 1)) == pytest.approx(0.0)
    assert length(Vec2(1, 1), Vec2(4, 5)) == pytest.approx(5.0)
    assert length(Vec2(3, 3), Vec2(3, 3)) == 0.0