"""Dense component storage, joined queries over it and read-only views."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from .component import Systems

T = TypeVar("T")


class ECSStorage(Generic[T]):
    """Components packed in a list, indexed by the id of the entity owning each."""

    def __init__(self) -> None:
        self._index: dict[int, int] = {}
        self._data: list[T] = []
        self._ids: list[int] = []

    def get(self, entity_id: int) -> T:
        try:
            return self._data[self._index[entity_id]]
        except KeyError:
            raise KeyError(f"entity {entity_id} has no component here") from None

    def add(self, entity_id: int, component: T) -> T:
        if entity_id in self._index:
            raise ValueError(f"entity {entity_id} already has a component here")
        self._index[entity_id] = len(self._data)
        self._data.append(component)
        self._ids.append(entity_id)
        return component

    def remove(self, entity_id: int) -> None:
        """Remove an entity's component, moving the last one into its slot."""
        try:
            idx = self._index.pop(entity_id)
        except KeyError:
            raise KeyError(f"entity {entity_id} has no component here") from None
        last = self._data.pop()
        last_id = self._ids.pop()
        if idx < len(self._data):
            self._data[idx] = last
            self._ids[idx] = last_id
            self._index[last_id] = idx

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def synchronise(self, joined: ECSStorage[tuple], index: int) -> None:
        """Copy element ``index`` of each joined row back into this storage."""
        for entity_id, row_idx in joined._index.items():
            self._data[self._index[entity_id]] = joined._data[row_idx][index]

    def ids(self) -> list[int]:
        """The owning entity of each component, in storage order."""
        return list(self._ids)


class StorageWrapper(Generic[T]):
    """An ECSStorage of one component type that can be read from and written to JSON."""

    def __init__(self, component_type: type[T]) -> None:
        self.component_type = component_type
        self.storage: ECSStorage[T] = ECSStorage()

    def from_json(self, data: Iterable[dict[str, Any]], context: Systems) -> None:
        for entry in data:
            component = self.component_type()
            component.from_json(entry["data"], context)
            self.storage.add(int(entry["id"]), component)

    def to_json(self) -> list[dict[str, Any]]:
        return [
            {"id": entity_id, "data": self.storage._data[idx].to_json()}
            for entity_id, idx in self.storage._index.items()
        ]

    def destroy_if_contains(self, entity_id: int) -> None:
        if entity_id in self.storage:
            self.storage.remove(entity_id)


class Query:
    """The rows of entities that own a component in every given storage.

    Changes made while a system runs are written back with push_changes_to_original.
    """

    def __init__(self, ids: Iterable[int], *args: ECSStorage) -> None:
        self._storage: ECSStorage[tuple] = ECSStorage()
        for entity_id in ids:
            if all(entity_id in storage for storage in args):
                self._storage.add(entity_id, tuple(storage.get(entity_id) for storage in args))

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def push_changes_to_original(self, *args: ECSStorage) -> None:
        for position, storage in enumerate(args):
            storage.synchronise(self._storage, position)

    def ids(self) -> list[int]:
        return self._storage.ids()


class ComponentView(Generic[T]):
    """A read-only iterable over one component storage."""

    def __init__(self, storage: ECSStorage[T]) -> None:
        self._storage = storage

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage)