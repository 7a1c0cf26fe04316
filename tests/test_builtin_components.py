import pygame
import pytest
from pygame.math import Vector2

from maple.asset_manager import AssetManager
from maple.asset_properties import Rect
from maple.builtin_components import (
    AABBCollisionComponent,
    NameComponent,
    Physics2DComponent,
    Rectangle,
    SpriteComponent,
    TransformComponent,
)
from maple.component import Systems
from maple.registry import Registry


@pytest.fixture
def asset_context(tmp_path):
    textures = tmp_path / "assets" / "textures"
    textures.mkdir(parents=True)
    pygame.image.save(pygame.Surface((8, 4)), str(textures / "42.png"))
    manager = AssetManager(tmp_path)
    manager.load_registry({"assets": [{"name": "tex", "id": 42, "type": "Texture"}]})
    return Systems(asset_manager=manager)


def test_builtin_components_are_registered_by_name():
    components = Registry.user_contents().components
    for component_type in (
        SpriteComponent,
        Physics2DComponent,
        TransformComponent,
        AABBCollisionComponent,
        NameComponent,
    ):
        assert components[component_type.__name__].storage.component_type is component_type


def test_sprite_without_texture_has_no_texture_key():
    sprite = SpriteComponent()
    sprite.rectangle.position = Vector2(3, 4)
    sprite.rectangle.size = Vector2(5, 6)
    data = sprite.to_json()
    assert "texture" not in data
    assert data["pos"] == [3.0, 4.0]
    assert data["size"] == [5.0, 6.0]


def test_sprite_from_json_loads_texture(asset_context):
    sprite = SpriteComponent()
    sprite.from_json({"texture": 42, "pos": [1, 2], "size": [10, 20]}, asset_context)
    assert sprite.texture == 42
    assert sprite.rectangle.texture is not None
    assert sprite.rectangle.texture_rect == Rect(0, 0, 8, 4)
    assert sprite.rectangle.position == Vector2(1, 2)
    assert sprite.rectangle.size == Vector2(10, 20)


def test_sprite_round_trip_with_texture(asset_context):
    sprite = SpriteComponent()
    sprite.from_json({"texture": 42, "pos": [1, 2], "size": [10, 20]}, asset_context)
    copy = SpriteComponent()
    copy.from_json(sprite.to_json(), asset_context)
    assert copy.to_json() == sprite.to_json()
    assert copy.texture == 42


def test_sprite_from_json_unknown_texture_raises(asset_context):
    with pytest.raises(KeyError):
        SpriteComponent().from_json({"texture": 7, "pos": [0, 0], "size": [1, 1]}, asset_context)


def test_physics_is_not_persisted():
    physics = Physics2DComponent(mass=3.5)
    physics.from_json({"mass": 9}, Systems())
    assert physics.mass == 3.5
    assert physics.to_json() is None


def test_transform_round_trip():
    transform = TransformComponent(pos=Vector2(1.5, -2), velocity=Vector2(0, 9))
    copy = TransformComponent()
    copy.from_json(transform.to_json(), Systems())
    assert copy == transform


def test_aabb_round_trip():
    box = AABBCollisionComponent(pos=Vector2(4, 5), size=Vector2(64, 32))
    copy = AABBCollisionComponent()
    copy.from_json(box.to_json(), Systems())
    assert copy.pos == Vector2(4, 5)
    assert copy.size == Vector2(64, 32)


def test_name_round_trip():
    name = NameComponent(name="Sylvan")
    copy = NameComponent()
    copy.from_json(name.to_json(), Systems())
    assert copy.name == "Sylvan"


def test_transform_from_json_missing_key_raises():
    with pytest.raises(KeyError):
        TransformComponent().from_json({"pos": [0, 0]}, Systems())


def test_rectangle_defaults_are_independent():
    first, second = Rectangle(), Rectangle()
    first.position.x = 10
    assert second.position == Vector2(0, 0)
    assert first.texture is None