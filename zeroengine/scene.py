"""Entities, game objects, scenes and scene switching."""

from __future__ import annotations

from typing import Dict, List, Optional, Type, TypeVar

from zeroengine import logger
from zeroengine.ecs import Component, ComponentManager, EntityIDManager
from zeroengine.sprite import Sprite2DRenderer
from zeroengine.transform import Transform
from zeroengine.types import ComponentID, EntityID

C = TypeVar("C", bound=Component)


def _current_scene() -> "Scene":
    from zeroengine.engine import Engine

    manager = Engine.instance().scene_manager
    if manager is None or manager.current_scene is None:
        raise RuntimeError("no current scene to create the entity in")
    return manager.current_scene


class Entity:
    """Something that lives in a scene and owns components."""

    def __init__(self, scene: Optional["Scene"] = None) -> None:
        self.entity_id: Optional[EntityID] = None
        self.name = ""
        self.tag = ""
        self.components: List[Component] = []
        self.is_destroyed = False
        self.active = True
        self.scene = scene if scene is not None else _current_scene()
        self.scene.create_entity(self)

    def init(self) -> None:
        """Set up the entity once it has an id; subclasses extend this."""

    def set_active(self, active: bool) -> None:
        self.active = active
        for component in self.components:
            component.active = active

    def destroy(self) -> None:
        """Mark the entity for removal at the end of the frame."""
        self.is_destroyed = True


class GameObject(Entity):
    """An entity that always has a Transform."""

    def __init__(self, scene: Optional["Scene"] = None) -> None:
        self.transform: Optional[Transform] = None
        super().__init__(scene)

    def init(self) -> None:
        super().init()
        self.transform = self.add_component(Transform)

    def add_component(self, component_type: Type[C]) -> C:
        component = component_type()
        self.scene.add_component(self, component)
        self.components.append(component)
        return component

    def get_component(self, component_type: Type[C]) -> C:
        return self.scene.get_component(component_type, self.entity_id)


class Scene:
    """A set of entities with their components and systems."""

    def __init__(self, collider_manager=None) -> None:
        self.entities: Dict[EntityID, Entity] = {}
        self.component_manager: Optional[ComponentManager] = None
        self.entity_id_manager: Optional[EntityIDManager] = None
        self.collider_manager = collider_manager

    @property
    def _components(self) -> ComponentManager:
        if self.component_manager is None:
            raise RuntimeError("scene is not initialised")
        return self.component_manager

    @property
    def _ids(self) -> EntityIDManager:
        if self.entity_id_manager is None:
            raise RuntimeError("scene is not initialised")
        return self.entity_id_manager

    def init(self) -> None:
        """Create the managers and register the built-in component types."""
        self.component_manager = ComponentManager()
        self.entity_id_manager = EntityIDManager()
        for component_type in (Transform, Sprite2DRenderer):
            self.register_component(component_type)

    def start(self) -> None:
        self._components.start()

    def update(self) -> None:
        self._components.update()
        if self.collider_manager is not None:
            self.collider_manager.update()

    def late_update(self) -> None:
        self._components.late_update()
        if self.collider_manager is not None:
            self.collider_manager.late_update()

    def render(self) -> None:
        self._components.render()

    def end_scene(self) -> None:
        """Run end-of-frame hooks, then remove destroyed entities."""
        self._components.end_scene()
        doomed = [eid for eid, entity in sorted(self.entities.items()) if entity.is_destroyed]
        for entity_id in doomed:
            self.destroy_entity(entity_id)

    def create_entity(self, entity: Entity) -> EntityID:
        entity_id = self._ids.create()
        self.entities[entity_id] = entity
        if entity.entity_id is None:
            entity.entity_id = entity_id
        entity.init()
        return entity_id

    def destroy_entity(self, entity_id: EntityID) -> None:
        if entity_id not in self.entities:
            raise KeyError(f"no entity with id {entity_id}")
        self._ids.destroy(entity_id)
        self._components.entity_destroyed(entity_id)
        del self.entities[entity_id]

    def register_component(self, component_type: Type[Component]) -> None:
        self._components.register(component_type)

    def add_component(self, entity: Entity, component: Component) -> None:
        entity_id = entity.entity_id
        self._components.add(entity_id, component)
        component.owner = entity
        bit = 1 << self._components.component_id(type(component))
        self._ids.set_signature(entity_id, self._ids.signature(entity_id) | bit)

    def get_component(self, component_type: Type[C], entity_id: EntityID) -> C:
        return self._components.get(component_type, entity_id)

    def destroy_component(self, component_type: Type[Component], entity_id: EntityID) -> None:
        self._components.remove(component_type, entity_id)
        bit = 1 << self._components.component_id(component_type)
        self._ids.set_signature(entity_id, self._ids.signature(entity_id) & ~bit)

    def component_type_id(self, component_type: Type[Component]) -> ComponentID:
        return self._components.component_id(component_type)

    def components_of(self, component_type: Type[C]) -> List[C]:
        return self._components.components_of(component_type)

    def register_collider(self, a, b) -> None:
        if self.collider_manager is None:
            raise RuntimeError("scene has no collider manager")
        self.collider_manager.mount(a, b)

    def find_entity_components(self, entity_id: EntityID) -> List[Component]:
        return self._components.find_entity_components(entity_id)

    def find_game_object(self, name: str) -> GameObject:
        for _, entity in sorted(self.entities.items()):
            if entity.name == name and isinstance(entity, GameObject):
                return entity
        logger.error("Failed to find game object name : %s ", name)
        raise KeyError(f"no game object named {name!r}")


class SceneManager:
    """Holds the current scene and switches scenes between frames."""

    def __init__(self) -> None:
        self.current_scene: Optional[Scene] = None
        self.next_scene: Optional[Scene] = None

    def start(self) -> None:
        if self.current_scene is not None:
            self.current_scene.start()

    def update(self) -> None:
        if self.current_scene is not None:
            self.current_scene.update()

    def late_update(self) -> None:
        if self.current_scene is not None:
            self.current_scene.late_update()

    def render(self) -> None:
        if self.current_scene is not None:
            self.current_scene.render()

    def end_scene(self) -> None:
        """Finish the frame and switch to a pending scene, if any."""
        if self.current_scene is not None:
            self.current_scene.end_scene()
        if self.next_scene is not None:
            self.current_scene = self.next_scene
            self.next_scene = None
            self.current_scene.init()

    def change_scene(self, scene: Scene) -> None:
        """Switch now if no scene is running, otherwise at the end of the frame."""
        if not isinstance(scene, Scene):
            raise TypeError("This is not supported type(Scene Manager)")
        if self.current_scene is not None:
            self.next_scene = scene
        else:
            self.current_scene = scene
            scene.init()