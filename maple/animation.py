"""Spritesheet animations and the component that plays them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .asset_properties import AssetType
from .component import ComponentMetadata, Systems
from .registry import register_component


@dataclass
class Animation:
    """A sequence of spritesheet tiles shown one after another.

    ``ids`` index into the parent tileset; ``frame_time`` is in milliseconds.
    """

    parent: int = 0
    ids: list[int] = field(default_factory=list)
    frame_time: int = 0

    def to_json(self) -> dict[str, Any]:
        return {"ids": list(self.ids), "frameTime": self.frame_time, "parent": self.parent}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Animation:
        return cls(
            parent=int(data["parent"]),
            ids=[int(tile) for tile in data["ids"]],
            frame_time=int(data["frameTime"]),
        )


@register_component
@dataclass
class AnimationStateComponent(ComponentMetadata):
    """Playback state of the animation attached to an entity."""

    last_update: int = 0
    offset: int = 0
    animation_id: int = 0
    prior_texture: int = 0
    play_forever: bool = False

    def from_json(self, data: Mapping[str, Any], context: Systems) -> None:
        self.last_update = int(data["lastUpdate"])
        self.offset = int(data["offset"])
        self.animation_id = int(data["animationID"])
        self.play_forever = bool(data["playForever"])
        self.prior_texture = int(data["priorTexture"])

    def to_json(self) -> dict[str, Any]:
        return {
            "offset": self.offset,
            "animationID": self.animation_id,
            "lastUpdate": self.last_update,
            "playForever": self.play_forever,
            "priorTexture": self.prior_texture,
        }


@dataclass
class TransitionComponent:
    """What an entity becomes when its animation stops: a sprite or another animation."""

    uuid: int
    type: AssetType