import math

import pytest

from zeroengine.geometry import Vec2
from zeroengine.scene import GameObject, Scene
from zeroengine.sprite import Sprite2DRenderer
from zeroengine.textures import Texture
from zeroengine.transform import Affine, Transform


@pytest.fixture
def scene():
    s = Scene()
    s.init()
    return s


def test_plain_translation(scene):
    obj = GameObject(scene)
    obj.transform.local_pos = Vec2(12.0, 34.0)
    obj.transform.update_transformation()
    assert obj.transform.world_pos == Vec2(12.0, 34.0)
    p = obj.transform.matrix.apply(Vec2(0.0, 0.0))
    assert (p.x, p.y) == pytest.approx((12.0, 34.0), abs=1e-9)


def test_child_world_position_follows_parent(scene):
    parent = GameObject(scene).transform
    child = GameObject(scene).transform
    parent.add_child(child)
    parent.local_pos = Vec2(100.0, 50.0)
    child.local_pos = Vec2(5.0, 6.0)
    parent.update_transformation()
    assert child.world_pos == parent.world_pos + child.local_pos
    p = child.matrix.apply(Vec2(0.0, 0.0))
    q = parent.matrix.apply(child.local_pos)
    assert (p.x, p.y) == pytest.approx((q.x, q.y), abs=1e-9)


def test_scale_center_is_fixed_point():
    center = Vec2(4.0, 8.0)
    m = Affine.transformation_2d(center, Vec2(3.0, 2.0), Vec2(0.0, 0.0), 0.0, Vec2(0.0, 0.0))
    p = m.apply(center)
    assert (p.x, p.y) == pytest.approx((4.0, 8.0), abs=1e-9)


def test_quarter_turn_rotation():
    m = Affine.transformation_2d(
        Vec2(0.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 0.0), math.pi / 2, Vec2(0.0, 0.0)
    )
    p = m.apply(Vec2(1.0, 0.0))
    assert (p.x, p.y) == pytest.approx((0.0, 1.0), abs=1e-9)


def test_rotation_center_is_fixed_point():
    center = Vec2(3.0, -2.0)
    m = Affine.transformation_2d(Vec2(0.0, 0.0), Vec2(1.0, 1.0), center, 1.2, Vec2(0.0, 0.0))
    p = m.apply(center)
    assert (p.x, p.y) == pytest.approx((3.0, -2.0), abs=1e-9)


def test_translate_accumulates(scene):
    t = GameObject(scene).transform
    t.translate(Vec2(1.0, 2.0))
    t.translate(Vec2(3.0, 4.0))
    assert t.local_pos == Vec2(1.0, 2.0) + Vec2(3.0, 4.0)


def test_add_and_pop_child(scene):
    parent = GameObject(scene).transform
    child = GameObject(scene).transform
    parent.add_child(child)
    assert child.parent is parent
    assert parent.child(0) is child
    parent.pop_child(child)
    assert parent.children == []
    with pytest.raises(IndexError):
        parent.child(0)


def test_child_destroyed_with_parent(scene):
    parent = GameObject(scene)
    child = GameObject(scene)
    parent.transform.add_child(child.transform)
    scene.start()
    parent.destroy()
    scene.end_scene()
    assert parent.entity_id not in scene.entities
    assert child.entity_id not in scene.entities


def test_mul_matrix_skipped_for_ui_objects():
    t = Transform()
    shift = Affine.translation(Vec2(2.0, 3.0))
    t.is_ui_object = True
    t.mul_matrix(shift)
    assert t.matrix == Affine.identity()
    t.is_ui_object = False
    t.mul_matrix(shift)
    assert t.matrix == shift


def test_right_bottom_pos_adds_texture_size(scene):
    obj = GameObject(scene)
    sprite = obj.add_component(Sprite2DRenderer)
    sprite.set_texture(Texture("t.png", 30, 20))
    obj.transform.local_pos = Vec2(1.0, 2.0)
    obj.transform.update_transformation()
    assert obj.transform.right_bottom_pos() == obj.transform.world_pos + sprite.texture_size()


def test_start_updates_root_transformation(scene):
    obj = GameObject(scene)
    obj.transform.local_pos = Vec2(9.0, 9.0)
    scene.start()
    assert obj.transform.is_started
    assert obj.transform.world_pos == obj.transform.local_pos