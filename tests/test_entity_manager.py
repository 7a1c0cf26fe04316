from dataclasses import dataclass

import pytest

from maple.component import ComponentMetadata, Systems
from maple.ecs_storage import StorageWrapper
from maple.entity_manager import EntityManager
from maple.registry import Registry, TypeIdentifier


@dataclass
class Position(ComponentMetadata):
    x: float = 0.0
    y: float = 0.0

    def from_json(self, data, context):
        self.x, self.y = data

    def to_json(self):
        return [self.x, self.y]


@dataclass
class Velocity(ComponentMetadata):
    dx: float = 0.0
    dy: float = 0.0

    def from_json(self, data, context):
        self.dx, self.dy = data

    def to_json(self):
        return [self.dx, self.dy]


class Unregistered(ComponentMetadata):
    def from_json(self, data, context):
        pass

    def to_json(self):
        return None


Registry.register_component(Position, "EntityManagerTestPosition")
Registry.register_component(Velocity, "EntityManagerTestVelocity")


@pytest.fixture
def manager():
    m = EntityManager()
    for cls in (Position, Velocity):
        m.register_component(TypeIdentifier.get(cls), StorageWrapper(cls), cls.__name__)
    return m


def test_create_adds_entity(manager):
    entity_id = manager.create()
    assert entity_id in manager.entities()
    assert 0 <= entity_id < 2**64


def test_add_and_get_component(manager):
    entity_id = manager.create()
    component = manager.add_component(entity_id, Position)
    assert component == Position()
    assert manager.get_component(entity_id, Position) is component
    assert manager.has_component(entity_id, Position)
    assert not manager.has_component(entity_id, Velocity)


def test_add_component_twice_rejected(manager):
    entity_id = manager.create()
    manager.add_component(entity_id, Position)
    with pytest.raises(ValueError):
        manager.add_component(entity_id, Position)


def test_add_component_to_unknown_entity(manager):
    with pytest.raises(KeyError):
        manager.add_component(42, Position)


def test_remove_component(manager):
    entity_id = manager.create()
    manager.add_component(entity_id, Position)
    manager.remove_component(entity_id, Position)
    assert not manager.has_component(entity_id, Position)
    with pytest.raises(KeyError):
        manager.remove_component(entity_id, Position)


def test_destroy_removes_components(manager):
    keep = manager.create()
    gone = manager.create()
    manager.add_component(keep, Position)
    manager.add_component(gone, Position)
    manager.add_component(gone, Velocity)
    manager.destroy(gone)
    assert manager.entities() == {keep}
    assert not manager.has_component(gone, Position)
    assert not manager.has_component(gone, Velocity)
    assert manager.has_component(keep, Position)
    with pytest.raises(KeyError):
        manager.destroy(gone)


def test_register_duplicates_rejected(manager):
    with pytest.raises(ValueError):
        manager.register_component(TypeIdentifier.get(Position), StorageWrapper(Position), "Other")
    with pytest.raises(ValueError):
        manager.register_component(10_000, StorageWrapper(Position), "Position")


def test_unregistered_type(manager):
    entity_id = manager.create()
    with pytest.raises(KeyError):
        manager.has_component(entity_id, Unregistered)


def test_load_json(manager):
    data = {
        "entities": [1, 2],
        "componentMaps": [
            {"name": "Position", "instances": [{"id": 1, "data": [3.0, 4.0]}]},
        ],
    }
    manager.load_json(data, Systems())
    assert manager.entities() == {1, 2}
    assert manager.get_component(1, Position) == Position(3.0, 4.0)
    assert not manager.has_component(2, Position)


def test_load_json_unknown_component(manager):
    data = {"entities": [], "componentMaps": [{"name": "Missing", "instances": []}]}
    with pytest.raises(KeyError):
        manager.load_json(data, Systems())


def test_to_json(manager):
    entity_id = manager.create()
    position = manager.add_component(entity_id, Position)
    position.x, position.y = 3.0, 4.0
    out = manager.to_json()
    assert out["ids"] == [entity_id]
    maps = {m["name"]: m["data"] for m in out["componentMaps"]}
    assert maps["Position"] == [{"id": entity_id, "data": [3.0, 4.0]}]
    assert maps["Velocity"] == []


def test_run_system_joins_and_writes_back(manager):
    a = manager.create()
    b = manager.create()
    manager.add_component(a, Position)
    manager.add_component(a, Velocity).dx = 2.0
    manager.add_component(b, Position)
    seen = []

    def system(dt, query, systems):
        seen.append((dt, systems, query.ids()))
        for position, velocity in query:
            position.x += velocity.dx * dt

    context = Systems(entity_manager=manager)
    manager.run_system(0.5, system, context, Position, Velocity)
    assert seen == [(0.5, context, [a])]
    assert manager.get_component(a, Position).x == 1.0
    assert manager.get_component(b, Position).x == 0.0


def test_immutable_view(manager):
    a = manager.create()
    b = manager.create()
    first = manager.add_component(a, Velocity)
    second = manager.add_component(b, Velocity)
    assert list(manager.immutable_view(Velocity)) == [first, second]