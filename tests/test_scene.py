import pytest

from zeroengine.ecs import Component
from zeroengine.engine import Engine
from zeroengine.scene import Entity, GameObject, Scene, SceneManager
from zeroengine.transform import Transform


class Counter(Component):
    def __init__(self):
        super().__init__()
        self.updates = 0

    def update(self):
        self.updates += 1


class Recorder:
    def __init__(self):
        self.mounted = []
        self.updates = 0
        self.late_updates = 0

    def mount(self, a, b):
        self.mounted.append((a, b))

    def update(self):
        self.updates += 1

    def late_update(self):
        self.late_updates += 1


@pytest.fixture
def scene():
    s = Scene()
    s.init()
    s.register_component(Counter)
    return s


def test_uninitialised_scene_rejects_entities():
    with pytest.raises(RuntimeError):
        GameObject(Scene())


def test_game_object_gets_id_and_transform(scene):
    obj = GameObject(scene)
    assert scene.entities[obj.entity_id] is obj
    assert obj.get_component(Transform) is obj.transform
    assert obj.transform.owner is obj


def test_ids_are_distinct(scene):
    a, b = GameObject(scene), GameObject(scene)
    assert a.entity_id != b.entity_id


def test_add_component_sets_signature(scene):
    obj = GameObject(scene)
    counter = obj.add_component(Counter)
    sig = scene.entity_id_manager.signature(obj.entity_id)
    assert sig & (1 << scene.component_type_id(Counter))
    assert sig & (1 << scene.component_type_id(Transform))
    assert counter.owner is obj
    assert obj.components == [obj.transform, counter]


def test_destroy_component_clears_signature(scene):
    obj = GameObject(scene)
    obj.add_component(Counter)
    scene.destroy_component(Counter, obj.entity_id)
    sig = scene.entity_id_manager.signature(obj.entity_id)
    assert not sig & (1 << scene.component_type_id(Counter))
    with pytest.raises(KeyError):
        obj.get_component(Counter)


def test_unregistered_component_raises(scene):
    class Other(Component):
        pass

    with pytest.raises(KeyError):
        GameObject(scene).add_component(Other)


def test_set_active_propagates(scene):
    obj = GameObject(scene)
    counter = obj.add_component(Counter)
    obj.set_active(False)
    assert not counter.active and not obj.transform.active


def test_update_runs_only_started_active(scene):
    obj = GameObject(scene)
    counter = obj.add_component(Counter)
    scene.update()
    assert counter.updates == 0
    scene.start()
    scene.update()
    obj.set_active(False)
    scene.update()
    assert counter.updates == 1


def test_end_scene_removes_destroyed(scene):
    keep = GameObject(scene)
    gone = GameObject(scene)
    gone.add_component(Counter)
    gone_id = gone.entity_id
    gone.destroy()
    scene.end_scene()
    assert list(scene.entities) == [keep.entity_id]
    assert scene.find_entity_components(gone_id) == []
    assert scene.components_of(Counter) == []


def test_destroy_unknown_entity_raises(scene):
    with pytest.raises(KeyError):
        scene.destroy_entity(42)


def test_find_game_object(scene):
    obj = GameObject(scene)
    obj.name = "TeamMgr"
    GameObject(scene)
    assert scene.find_game_object("TeamMgr") is obj
    with pytest.raises(KeyError):
        scene.find_game_object("nobody")


def test_entity_subclass_init_runs_once(scene):
    class Unit(GameObject):
        def init(self):
            super().init()
            self.counter = self.add_component(Counter)

    unit = Unit(scene)
    assert unit.get_component(Counter) is unit.counter
    assert len(scene.components_of(Transform)) == 1


def test_plain_entity_has_no_components(scene):
    entity = Entity(scene)
    assert scene.find_entity_components(entity.entity_id) == []


def test_collider_manager_hooks():
    recorder = Recorder()
    s = Scene(collider_manager=recorder)
    s.init()
    a, b = object(), object()
    s.register_collider(a, b)
    s.update()
    s.late_update()
    assert recorder.mounted == [(a, b)]
    assert (recorder.updates, recorder.late_updates) == (1, 1)


def test_register_collider_without_manager(scene):
    with pytest.raises(RuntimeError):
        scene.register_collider(object(), object())


def test_change_scene_rejects_non_scene():
    with pytest.raises(TypeError):
        SceneManager().change_scene(None)


def test_change_scene_deferred_until_end_scene():
    manager = SceneManager()
    first, second = Scene(), Scene()
    manager.change_scene(first)
    assert manager.current_scene is first
    assert first.component_manager is not None
    manager.change_scene(second)
    assert manager.current_scene is first
    assert second.component_manager is None
    manager.end_scene()
    assert manager.current_scene is second
    assert manager.next_scene is None
    assert second.component_manager is not None


def test_default_scene_comes_from_engine():
    engine = Engine.instance()
    engine.initialize()
    scene = Scene()
    engine.scene_manager.change_scene(scene)
    obj = GameObject()
    assert obj.scene is scene
    assert scene.entities[obj.entity_id] is obj
    engine.release()
    with pytest.raises(RuntimeError):
        GameObject()