"""Descriptions of imported assets and their JSON form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class AssetType(Enum):
    """The kinds of asset the registry knows about."""

    TEXTURE = "Texture"
    SUBTEXTURE = "SubTexture"
    ANIMATION = "Animation"
    SPRITESHEET = "Spritesheet"


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and its size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_list(self) -> list[int]:
        return [self.x, self.y, self.width, self.height]

    @classmethod
    def from_list(cls, values: list[int]) -> Rect:
        x, y, width, height = values
        return cls(x, y, width, height)


@dataclass(frozen=True)
class SubTextureMetadata:
    """A tile cut out of a spritesheet."""

    parent_uuid: int
    rect: Rect


@dataclass(frozen=True)
class SpritesheetData:
    """The layout of a spritesheet's tiles."""

    rows: int = 0
    cols: int = 0
    tileset_ratio: int = 0
    tile_size: int = 0


Extra = Union[SubTextureMetadata, SpritesheetData, None]


@dataclass
class AssetProperties:
    """What the registry stores for one asset: its kind, its id and kind-specific data."""

    type: AssetType
    uuid: int
    extra: Extra = None

    def __post_init__(self) -> None:
        if self.type is AssetType.SUBTEXTURE and not isinstance(self.extra, SubTextureMetadata):
            raise ValueError("a SubTexture asset needs SubTextureMetadata")
        if self.type is AssetType.SPRITESHEET and not isinstance(self.extra, SpritesheetData):
            raise ValueError("a Spritesheet asset needs SpritesheetData")

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.uuid, "type": self.type.value}
        if isinstance(self.extra, SubTextureMetadata):
            out["extraneous"] = {
                "parentUUID": self.extra.parent_uuid,
                "rect": self.extra.rect.to_list(),
            }
        elif isinstance(self.extra, SpritesheetData):
            out["extraneous"] = {"tileSize": self.extra.tile_size}
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AssetProperties:
        try:
            asset_type = AssetType(data["type"])
        except ValueError:
            raise ValueError(f"unknown asset type {data['type']!r}") from None
        uuid = int(data["id"])
        extra: Extra = None
        if asset_type is AssetType.SUBTEXTURE:
            extraneous = data["extraneous"]
            extra = SubTextureMetadata(
                int(extraneous["parentUUID"]), Rect.from_list(extraneous["rect"])
            )
        elif asset_type is AssetType.SPRITESHEET:
            extra = SpritesheetData(tile_size=int(data["extraneous"]["tileSize"]))
        return cls(asset_type, uuid, extra)