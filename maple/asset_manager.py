"""Importing assets into a project and loading them into memory on demand."""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import pygame

from .animation import Animation
from .asset_properties import (
    AssetProperties,
    AssetType,
    Rect,
    SpritesheetData,
    SubTextureMetadata,
)
from .asset_registry import AssetRegistry
from .uuids import generate_uuid

_log = logging.getLogger(__name__)

REGISTRY_FILE = "assetregistry.json"
ANIMATION_FILE = Path("assets") / "animations" / "animation.json"


class AssetError(Exception):
    """An asset could not be imported or loaded."""


@dataclass(frozen=True)
class Texture:
    """A surface and the region of it that makes up one texture."""

    surface: pygame.Surface
    rect: Rect


@dataclass(frozen=True)
class _TextureData:
    texture: Texture
    parent: int


def _textures_dir(root: Path) -> Path:
    return root / "assets" / "textures"


def _load_surface(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise AssetError(f"could not load image {path}") from exc


def _full_texture(surface: pygame.Surface) -> Texture:
    width, height = surface.get_size()
    return Texture(surface, Rect(0, 0, width, height))


def _validate_file(path: Union[str, Path], suffix: str) -> Path:
    path = Path(path)
    if path.suffix != suffix:
        raise AssetError(f"{path} is not a {suffix} file")
    if not path.exists():
        raise AssetError(f"{path} does not exist")
    return path


class AssetManager:
    """Keeps the asset registry of a project and the assets loaded from it."""

    def __init__(self, project_root: Union[str, Path]) -> None:
        self._root = Path(project_root)
        self._registry = AssetRegistry()
        self._textures: dict[int, pygame.Surface] = {}
        self._sub_textures: dict[int, _TextureData] = {}
        self._animations: dict[int, Animation] = {}

    def load_registry(self, data: Mapping[str, Any]) -> None:
        self._registry.load_registry(data)

    @property
    def registry(self) -> AssetRegistry:
        return self._registry

    def save_registry(self) -> dict[str, Any]:
        return self._registry.save_registry()

    def _uuid_of(self, key: Union[str, int]) -> int:
        if isinstance(key, str):
            return self._registry.get_properties(key).uuid
        return key

    def get_texture(self, key: Union[str, int]) -> Texture:
        """Return a texture by name or uuid, loading it from disk if needed."""
        uuid = self._uuid_of(key)
        if uuid in self._sub_textures:
            return self._sub_textures[uuid].texture
        if uuid in self._textures:
            return _full_texture(self._textures[uuid])

        properties = self._registry.get_properties(uuid)
        if properties.type is AssetType.TEXTURE:
            self._load_texture(uuid)
            return _full_texture(self._textures[uuid])
        if properties.type is AssetType.SUBTEXTURE:
            self._load_sub_texture(uuid)
            return self._sub_textures[uuid].texture
        raise AssetError(f"asset {uuid} is a {properties.type.value}, not a texture")

    def get_animation(self, key: Union[str, int]) -> Animation:
        uuid = self._uuid_of(key)
        try:
            return self._animations[uuid]
        except KeyError:
            raise KeyError(f"animation {key!r} is not loaded") from None

    def load_scene_assets(self, asset_ids: Iterable[int], root: Union[str, Path]) -> None:
        """Load the listed assets from ``root``; the registry must be loaded first."""
        textures_dir = _textures_dir(Path(root))
        for asset_id in asset_ids:
            properties = self._registry.get_properties(int(asset_id))
            if properties.type is AssetType.TEXTURE:
                if properties.uuid in self._textures:
                    raise AssetError(f"texture {properties.uuid} is already loaded")
                self._textures[properties.uuid] = _load_surface(
                    textures_dir / f"{properties.uuid}.png"
                )
            elif properties.type is AssetType.SUBTEXTURE:
                extra = properties.extra
                assert isinstance(extra, SubTextureMetadata)
                parent = extra.parent_uuid
                if parent not in self._textures:
                    self._textures[parent] = _load_surface(textures_dir / f"{parent}.png")
                self._sub_textures[properties.uuid] = _TextureData(
                    Texture(self._textures[parent], extra.rect), parent
                )
            else:
                raise AssetError(
                    f"scene asset {properties.uuid} is a {properties.type.value}, "
                    "which scenes cannot preload"
                )

    def import_animation(self, name: str, animation: Animation) -> int:
        """Register an animation and append it to the project's animation file."""
        if not animation.ids:
            raise ValueError("an animation needs at least one frame")
        if not self._registry.exists(animation.parent):
            raise ValueError(f"parent asset {animation.parent} is not registered")
        if self._registry.get_properties(animation.parent).type is not AssetType.SPRITESHEET:
            raise ValueError("an animation's parent must be a spritesheet")
        if animation.frame_time < 0:
            raise ValueError("frame time cannot be negative")

        uuid = generate_uuid()
        self._registry.insert(name, AssetProperties(AssetType.ANIMATION, uuid), uuid)
        self._animations[uuid] = animation

        path = self._root / ANIMATION_FILE
        if path.exists():
            with path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            data = {}
        entry = animation.to_json()
        entry["uuid"] = uuid
        data.setdefault("animations", []).append(entry)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle)
        return uuid

    def import_sound_effect(self, name: str, path: Union[str, Path]) -> None:
        _validate_file(path, ".ogg")
        raise AssetError("sound effects cannot be imported yet")

    def import_music(self, name: str, path: Union[str, Path]) -> None:
        _validate_file(path, ".ogg")
        raise AssetError("music cannot be imported yet")

    def import_font(self, name: str, path: Union[str, Path]) -> None:
        _validate_file(path, ".ttf")
        raise AssetError("fonts cannot be imported yet")

    def import_spritesheet(
        self, path: Union[str, Path], name: str, data: SpritesheetData
    ) -> int:
        """Copy a PNG into the project as a spritesheet and register each of its tiles."""
        source = _validate_file(path, ".png")
        _load_surface(source)

        uuid = generate_uuid()
        properties = AssetProperties(AssetType.SPRITESHEET, uuid, data)
        if not self._has_asset_folders():
            self._create_folders()
        shutil.copyfile(source, _textures_dir(self._root) / f"{uuid}.png")

        self._registry.insert(name, properties, uuid)
        self._load_spritesheet(uuid)
        self._import_sub_textures(uuid, data)
        return uuid

    def load_all_assets_in_registry(self, project_root: Union[str, Path]) -> None:
        for properties in list(self._registry.all_assets().values()):
            if properties.type is AssetType.TEXTURE:
                self._load_texture(properties.uuid)
            elif properties.type is AssetType.SUBTEXTURE:
                self._load_sub_texture(properties.uuid)
            elif properties.type is AssetType.SPRITESHEET:
                self._load_spritesheet(properties.uuid)
        self._load_all_animations(Path(project_root) / ANIMATION_FILE)

    def import_texture(self, path: Union[str, Path], name: str) -> int:
        """Copy a PNG into the project as a texture and register it."""
        source = _validate_file(path, ".png")
        _load_surface(source)

        if not (self._root / "assets").exists():
            raise AssetError(f"{self._root} has no assets folder")

        uuid = generate_uuid()
        shutil.copyfile(source, _textures_dir(self._root) / f"{uuid}.png")
        self._registry.insert(name, AssetProperties(AssetType.TEXTURE, uuid), uuid)
        self._load_texture(uuid)
        self._write_registry()
        return uuid

    def _import_sub_textures(self, sheet_uuid: int, data: SpritesheetData) -> None:
        properties = self._registry.get_properties(sheet_uuid)
        if properties.type is not AssetType.SPRITESHEET:
            raise AssetError(f"asset {sheet_uuid} is not a spritesheet")
        sheet_name = self._registry.get_name(sheet_uuid)
        size = data.tile_size
        for tile in range(data.rows * data.cols):
            column, row = tile % data.tileset_ratio, tile // data.tileset_ratio
            rect = Rect(column * size, row * size, size, size)
            uuid = generate_uuid()
            self._registry.insert(
                f"{sheet_name}_{tile}",
                AssetProperties(AssetType.SUBTEXTURE, uuid, SubTextureMetadata(sheet_uuid, rect)),
                uuid,
            )
            self._load_sub_texture(uuid)
        self._write_registry()

    def _write_registry(self) -> None:
        with (self._root / REGISTRY_FILE).open("w", encoding="utf-8") as handle:
            json.dump(self._registry.save_registry(), handle)

    def _has_asset_folders(self) -> bool:
        assets = self._root / "assets"
        return all(
            folder.exists() for folder in (assets, assets / "textures", assets / "animations")
        )

    def _create_folders(self) -> None:
        assets = self._root / "assets"
        (assets / "textures").mkdir(parents=True, exist_ok=True)
        (assets / "animations").mkdir(parents=True, exist_ok=True)

    def _load_texture(self, uuid: int) -> None:
        if self._registry.get_properties(uuid).type is not AssetType.TEXTURE:
            raise AssetError(f"asset {uuid} is not a texture")
        if uuid in self._textures:
            return
        self._textures[uuid] = _load_surface(_textures_dir(self._root) / f"{uuid}.png")

    def _load_sub_texture(self, uuid: int) -> None:
        properties = self._registry.get_properties(uuid)
        if properties.type is not AssetType.SUBTEXTURE:
            raise AssetError(f"asset {uuid} is not a subtexture")
        extra = properties.extra
        assert isinstance(extra, SubTextureMetadata)
        self._load_spritesheet(extra.parent_uuid)
        if uuid in self._sub_textures:
            return
        surface = self._textures[extra.parent_uuid]
        self._sub_textures[uuid] = _TextureData(Texture(surface, extra.rect), extra.parent_uuid)

    def _load_spritesheet(self, uuid: int) -> None:
        """Load the image a spritesheet's tiles share, falling back to error.png."""
        if self._registry.get_properties(uuid).type is not AssetType.SPRITESHEET:
            raise AssetError(f"asset {uuid} is not a spritesheet")
        if uuid in self._textures:
            return
        textures_dir = _textures_dir(self._root)
        try:
            self._textures[uuid] = _load_surface(textures_dir / f"{uuid}.png")
        except AssetError:
            self._textures[uuid] = _load_surface(textures_dir / "error.png")

    def _load_all_animations(self, path: Path) -> None:
        if not path.exists():
            _log.warning(
                "No animation json file. If the project has animations, "
                "they have not been located."
            )
            return
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        for entry in data.get("animations") or []:
            uuid = int(entry["uuid"])
            if uuid in self._animations:
                raise AssetError(f"animation {uuid} appears twice")
            self._animations[uuid] = Animation.from_json(entry)