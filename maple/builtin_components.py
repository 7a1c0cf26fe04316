"""Components that every project gets: sprites, transforms, physics, colliders and names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pygame.math import Vector2

from .asset_manager import Texture
from .asset_properties import Rect
from .component import ComponentMetadata, Systems
from .registry import register_component

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


def _vector(values: Any) -> Vector2:
    return Vector2(float(values[0]), float(values[1]))


def _pair(vector: Any) -> list[float]:
    return [float(vector[0]), float(vector[1])]


@dataclass
class Rectangle:
    """An axis-aligned rectangle to draw, filled with a colour or a texture region."""

    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    texture: Optional[Texture] = None
    texture_rect: Rect = field(default_factory=Rect)
    fill_color: Color = WHITE
    outline_color: Color = WHITE
    outline_thickness: float = 0.0


@register_component
@dataclass
class SpriteComponent(ComponentMetadata):
    """A drawable rectangle; ``texture`` is the uuid of its texture when it has one."""

    rectangle: Rectangle = field(default_factory=Rectangle)
    texture: int = 0

    def from_json(self, data: Mapping[str, Any], context: Systems) -> None:
        if "texture" in data:
            texture_id = int(data["texture"])
            self.texture = texture_id
            texture = context.asset_manager.get_texture(texture_id)
            self.rectangle.texture_rect = texture.rect
            self.rectangle.texture = texture
        self.rectangle.position = _vector(data["pos"])
        self.rectangle.size = _vector(data["size"])

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.rectangle.texture is not None:
            out["texture"] = self.texture
        out["pos"] = _pair(self.rectangle.position)
        out["size"] = _pair(self.rectangle.size)
        return out


@register_component
@dataclass
class Physics2DComponent(ComponentMetadata):
    """Physical properties used by the gravity system."""

    mass: float = 0.0

    def from_json(self, data: Any, context: Systems) -> None:
        """Physics state is not persisted; nothing is read."""

    def to_json(self) -> None:
        return None


@register_component
@dataclass
class TransformComponent(ComponentMetadata):
    """Position and per-frame velocity of an entity."""

    pos: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)

    def from_json(self, data: Mapping[str, Any], context: Systems) -> None:
        self.pos = _vector(data["pos"])
        self.velocity = _vector(data["velocity"])

    def to_json(self) -> dict[str, Any]:
        return {"pos": _pair(self.pos), "velocity": _pair(self.velocity)}


@register_component
@dataclass
class AABBCollisionComponent(ComponentMetadata):
    """An axis-aligned bounding box used for collision."""

    pos: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)

    def from_json(self, data: Mapping[str, Any], context: Systems) -> None:
        self.pos = _vector(data["pos"])
        self.size = _vector(data["size"])

    def to_json(self) -> dict[str, Any]:
        return {"pos": _pair(self.pos), "size": _pair(self.size)}


@register_component
@dataclass
class NameComponent(ComponentMetadata):
    """A human-readable name for an entity."""

    name: str = ""

    def from_json(self, data: Mapping[str, Any], context: Systems) -> None:
        self.name = str(data["name"])

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name}