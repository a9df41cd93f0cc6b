"""Components, packed per-type component storage and entity id allocation."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from zeroengine.types import MAX_ENTITIES, ComponentID, EntityID, Signature

C = TypeVar("C", bound="Component")


def _add_contact(contacts: list, other) -> None:
    if not any(existing is other for existing in contacts):
        contacts.append(other)


def _drop_contact(contacts: list, other) -> None:
    contacts[:] = [existing for existing in contacts if existing is not other]


class Component:
    """Base class for behaviour attached to an entity.

    The base lifecycle hooks count how often each phase ran, and the base
    listeners keep the colliders currently touching this component.
    """

    def __init__(self) -> None:
        self.owner: Optional[Any] = None
        self.is_destroyed = False
        self.active = True
        self.is_started = False
        self.update_count = 0
        self.late_update_count = 0
        self.render_count = 0
        self.end_scene_count = 0
        self.collision_contacts: List[Any] = []
        self.trigger_contacts: List[Any] = []

    def start(self) -> None:
        self.is_started = True

    def update(self) -> None:
        self.update_count += 1

    def late_update(self) -> None:
        self.late_update_count += 1

    def render(self) -> None:
        self.render_count += 1

    def end_scene(self) -> None:
        self.end_scene_count += 1

    def destroy(self) -> None:
        """Mark the component for destruction."""
        self.is_destroyed = True

    def on_collision_enter(self, other) -> None:
        _add_contact(self.collision_contacts, other)

    def on_collision_stay(self, other) -> None:
        _add_contact(self.collision_contacts, other)

    def on_collision_exit(self, other) -> None:
        _drop_contact(self.collision_contacts, other)

    def on_trigger_enter(self, other) -> None:
        _add_contact(self.trigger_contacts, other)

    def on_trigger_stay(self, other) -> None:
        _add_contact(self.trigger_contacts, other)

    def on_trigger_exit(self, other) -> None:
        _drop_contact(self.trigger_contacts, other)


class ComponentArray(Generic[C]):
    """Densely packed components of one type, at most one per entity."""

    def __init__(self) -> None:
        self._components: List[C] = []
        self._entities: List[EntityID] = []
        self._index: Dict[EntityID, int] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._index

    def add(self, entity_id: EntityID, component: C) -> None:
        if entity_id in self._index:
            raise ValueError(f"component added to entity {entity_id} more than once")
        self._index[entity_id] = len(self._components)
        self._components.append(component)
        self._entities.append(entity_id)

    def remove(self, entity_id: EntityID) -> None:
        """Remove an entity's component, moving the last one into its slot."""
        try:
            removed = self._index.pop(entity_id)
        except KeyError:
            raise KeyError(f"removing non-existent component of entity {entity_id}") from None
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if removed < len(self._components):
            self._components[removed] = last_component
            self._entities[removed] = last_entity
            self._index[last_entity] = removed

    def get(self, entity_id: EntityID) -> C:
        try:
            return self._components[self._index[entity_id]]
        except KeyError:
            raise KeyError(f"retrieving non-existent component of entity {entity_id}") from None

    def entity_destroyed(self, entity_id: EntityID) -> None:
        """Drop the entity's component, if it has one."""
        if entity_id in self._index:
            self.remove(entity_id)

    def components(self) -> List[C]:
        """A snapshot of the stored components in storage order."""
        return list(self._components)


class ComponentManager:
    """Registry of component types and their storage arrays."""

    def __init__(self) -> None:
        self._ids: Dict[type, ComponentID] = {}
        self._arrays: Dict[type, ComponentArray] = {}
        self._next_id: ComponentID = 0

    def register(self, component_type: Type[Component]) -> None:
        if component_type in self._ids:
            raise ValueError(f"component type {component_type.__name__} registered more than once")
        self._ids[component_type] = self._next_id
        self._arrays[component_type] = ComponentArray()
        self._next_id += 1

    def component_id(self, component_type: Type[Component]) -> ComponentID:
        try:
            return self._ids[component_type]
        except KeyError:
            raise KeyError(f"component type {component_type.__name__} not registered") from None

    def array(self, component_type: Type[C]) -> ComponentArray[C]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise KeyError(
                f"component type {component_type.__name__} not registered before use"
            ) from None

    def add(self, entity_id: EntityID, component: Component) -> None:
        self.array(type(component)).add(entity_id, component)

    def get(self, component_type: Type[C], entity_id: EntityID) -> C:
        return self.array(component_type).get(entity_id)

    def remove(self, component_type: Type[Component], entity_id: EntityID) -> None:
        self.array(component_type).remove(entity_id)

    def entity_destroyed(self, entity_id: EntityID) -> None:
        for components in self._arrays.values():
            components.entity_destroyed(entity_id)

    def components_of(self, component_type: Type[C]) -> List[C]:
        """Components stored under the given type that are instances of it."""
        return [c for c in self.array(component_type).components() if isinstance(c, component_type)]

    def find_entity_components(self, entity_id: EntityID) -> List[Component]:
        return [
            components.get(entity_id)
            for components in self._arrays.values()
            if entity_id in components
        ]

    def _all(self):
        for components in list(self._arrays.values()):
            for component in components.components():
                if component is not None:
                    yield component

    def start(self) -> None:
        for component in self._all():
            if not component.is_started:
                component.start()

    def update(self) -> None:
        for component in self._all():
            if component.is_started and component.active:
                component.update()

    def late_update(self) -> None:
        for component in self._all():
            if component.is_started:
                component.late_update()

    def render(self) -> None:
        for component in self._all():
            if component.is_started and component.active:
                component.render()

    def end_scene(self) -> None:
        for component in self._all():
            if component.is_started and component.active:
                component.end_scene()


class EntityIDManager:
    """Hands out entity ids first-in first-out and keeps their signatures."""

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        self._max = max_entities
        self._next_fresh = 0
        self._recycled: deque[EntityID] = deque()
        self._signatures: Dict[EntityID, Signature] = {}
        self.living_count = 0

    def _check(self, entity_id: EntityID) -> None:
        if not 0 <= entity_id < self._max:
            raise IndexError(f"entity {entity_id} out of range")

    def create(self) -> EntityID:
        if self.living_count >= self._max:
            raise RuntimeError("entity out of range: no ids available")
        if self._next_fresh < self._max:
            entity_id = self._next_fresh
            self._next_fresh += 1
        else:
            entity_id = self._recycled.popleft()
        self.living_count += 1
        return entity_id

    def destroy(self, entity_id: EntityID) -> None:
        self._check(entity_id)
        self._signatures.pop(entity_id, None)
        self._recycled.append(entity_id)
        self.living_count -= 1

    def set_signature(self, entity_id: EntityID, signature: Signature) -> None:
        self._check(entity_id)
        self._signatures[entity_id] = signature

    def signature(self, entity_id: EntityID) -> Signature:
        self._check(entity_id)
        return self._signatures.get(entity_id, 0)