"""Registration of user components, scripts and scenes with the engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, TypeVar

from .component import ComponentMetadata
from .ecs_storage import StorageWrapper

_log = logging.getLogger(__name__)

C = TypeVar("C", bound=type)


class TypeIdentifier:
    """Hands out a small, sequential integer id to each registered component type."""

    _ids: ClassVar[dict[type, int]] = {}
    _next_id: ClassVar[int] = 0

    @classmethod
    def get(cls, component_type: type) -> int:
        try:
            return TypeIdentifier._ids[component_type]
        except KeyError:
            name = getattr(component_type, "__name__", repr(component_type))
            raise KeyError(f"component type {name} is not registered") from None

    @classmethod
    def register_type(cls, component_type: type) -> int:
        if component_type in TypeIdentifier._ids:
            raise ValueError(f"component type {component_type.__name__} is already registered")
        type_id = TypeIdentifier._next_id
        TypeIdentifier._ids[component_type] = type_id
        TypeIdentifier._next_id += 1
        return type_id


@dataclass(frozen=True)
class ComponentData:
    """A registered component type's id and the storage spawned for it."""

    type_id: int
    storage: StorageWrapper


@dataclass
class UserContents:
    """Everything user code has registered, keyed by name."""

    components: dict[str, ComponentData] = field(default_factory=dict)
    scripts: dict[str, Callable[[], Any]] = field(default_factory=dict)
    scenes: dict[str, Callable[[], Any]] = field(default_factory=dict)


class Registry:
    """Process-wide record of user code made available to the engine."""

    _components: ClassVar[dict[str, ComponentData]] = {}
    _scripts: ClassVar[dict[str, Callable[[], Any]]] = {}
    _scenes: ClassVar[dict[str, Callable[[], Any]]] = {}

    @classmethod
    def register_component(cls, component_type: type, name: str) -> None:
        """Register a component type under a name; a name seen before is ignored."""
        if not (isinstance(component_type, type) and issubclass(component_type, ComponentMetadata)):
            raise TypeError("a component must implement ComponentMetadata")
        if name in Registry._components:
            return
        type_id = TypeIdentifier.register_type(component_type)
        storage = StorageWrapper(component_type)
        _log.info("Spawned a new storage for component %s with id %d.", name, type_id)
        Registry._components[name] = ComponentData(type_id, storage)

    @classmethod
    def register_script(cls, name: str, factory: Callable[[], Any]) -> None:
        if name in Registry._scripts:
            raise ValueError(f"script {name!r} is already registered")
        Registry._scripts[name] = factory

    @classmethod
    def register_scene(cls, name: str, factory: Callable[[], Any]) -> None:
        if name in Registry._scenes:
            raise ValueError(f"scene {name!r} is already registered")
        Registry._scenes[name] = factory

    @classmethod
    def user_contents(cls) -> UserContents:
        """A snapshot of everything registered so far."""
        return UserContents(
            dict(Registry._components), dict(Registry._scripts), dict(Registry._scenes)
        )


def register_component(component_type: C) -> C:
    """Class decorator registering a component under its class name."""
    Registry.register_component(component_type, component_type.__name__)
    return component_type


def register_script(script_type: C) -> C:
    """Class decorator registering a script class as its own factory."""
    Registry.register_script(script_type.__name__, script_type)
    return script_type


def register_scene(scene_type: C) -> C:
    """Class decorator registering a scene class as its own factory."""
    Registry.register_scene(scene_type.__name__, scene_type)
    return scene_type