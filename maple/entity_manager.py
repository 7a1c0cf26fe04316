"""Ownership of entities and the component storages attached to them."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from .component import Systems
from .ecs_storage import ComponentView, ECSStorage, Query, StorageWrapper
from .registry import TypeIdentifier
from .uuids import generate_uuid

_log = logging.getLogger(__name__)

T = TypeVar("T")


class EntityManager:
    """Creates and destroys entities and stores their components by type."""

    def __init__(self) -> None:
        self._storage: dict[int, StorageWrapper] = {}
        self._by_name: dict[str, StorageWrapper] = {}
        self._entities: set[int] = set()
        self.enabled = False

    def register_component(self, type_id: int, storage: StorageWrapper, name: str) -> None:
        if type_id in self._storage:
            raise ValueError(f"a storage for type id {type_id} is already registered")
        if name in self._by_name:
            raise ValueError(f"a component named {name!r} is already registered")
        _log.info("Successfully registered component %s with typeid %d.", name, type_id)
        self._storage[type_id] = storage
        self._by_name[name] = storage

    def load_json(self, data: Mapping[str, Any], context: Systems) -> None:
        for entity_id in data["entities"]:
            self._entities.add(int(entity_id))
        for component_map in data.get("componentMaps") or []:
            name = component_map["name"]
            storage = self._by_name.get(name)
            if storage is None:
                raise KeyError(
                    f"could not find a registered component named {name!r}; "
                    "perhaps the component is not registered?"
                )
            storage.from_json(component_map["instances"], context)

    def to_json(self) -> dict[str, Any]:
        return {
            "ids": list(self._entities),
            "componentMaps": [
                {"name": name, "data": storage.to_json()}
                for name, storage in self._by_name.items()
            ],
        }

    def create(self) -> int:
        entity_id = generate_uuid()
        self._entities.add(entity_id)
        return entity_id

    def has_component(self, entity_id: int, component_type: type) -> bool:
        return entity_id in self._storage_for(component_type)

    def add_component(self, entity_id: int, component_type: type[T]) -> T:
        """Attach a default-constructed component to an entity and return it."""
        if entity_id not in self._entities:
            raise KeyError(f"entity {entity_id} does not exist")
        storage = self._storage_for(component_type)
        if entity_id in storage:
            raise ValueError(f"entity {entity_id} already has a {component_type.__name__}")
        return storage.add(entity_id, component_type())

    def remove_component(self, entity_id: int, component_type: type) -> None:
        if entity_id not in self._entities:
            raise KeyError(f"entity {entity_id} does not exist")
        self._storage_for(component_type).remove(entity_id)

    def get_component(self, entity_id: int, component_type: type[T]) -> T:
        return self._storage_for(component_type).get(entity_id)

    def destroy(self, entity_id: int) -> None:
        """Remove an entity and every component it owns."""
        try:
            self._entities.remove(entity_id)
        except KeyError:
            raise KeyError(f"entity {entity_id} does not exist") from None
        for wrapper in self._storage.values():
            wrapper.destroy_if_contains(entity_id)

    def entities(self) -> frozenset[int]:
        return frozenset(self._entities)

    def run_system(
        self,
        dt: float,
        system: Callable[[float, Query, Systems], None],
        systems: Systems,
        *args: type,
    ) -> None:
        """Run a system over the join of the given component types."""
        storages = [self._storage_for(component_type) for component_type in args]
        query = Query(self._entities, *storages)
        system(dt, query, systems)
        query.push_changes_to_original(*storages)

    def immutable_view(self, component_type: type[T]) -> ComponentView[T]:
        return ComponentView(self._storage_for(component_type))

    def _storage_for(self, component_type: type) -> ECSStorage:
        type_id = TypeIdentifier.get(component_type)
        try:
            return self._storage[type_id].storage
        except KeyError:
            raise KeyError(
                f"no storage registered for component {component_type.__name__}"
            ) from None