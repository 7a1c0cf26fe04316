"""A two-way index between asset names and asset ids."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Union

from .asset_properties import AssetProperties


class AssetRegistry:
    """Records which assets exist, by name and by uuid."""

    def __init__(self) -> None:
        self._by_name: dict[str, AssetProperties] = {}
        self._by_uuid: dict[int, str] = {}

    def insert(self, name: str, properties: AssetProperties, uuid: int) -> None:
        if name in self._by_name:
            raise ValueError(f"asset name {name!r} is already registered")
        if uuid in self._by_uuid:
            raise ValueError(f"asset id {uuid} is already registered")
        if properties.uuid != uuid:
            raise ValueError("properties carry a different uuid")
        self._by_uuid[uuid] = name
        self._by_name[name] = properties

    def exists(self, key: Union[str, int]) -> bool:
        """Whether an asset with this name (str) or uuid (int) is registered."""
        if isinstance(key, str):
            properties = self._by_name.get(key)
            return properties is not None and properties.uuid in self._by_uuid
        name = self._by_uuid.get(key)
        return name is not None and name in self._by_name

    def get_properties(self, key: Union[str, int]) -> AssetProperties:
        if not self.exists(key):
            raise KeyError(key)
        name = key if isinstance(key, str) else self._by_uuid[key]
        return self._by_name[name]

    def get_name(self, uuid: int) -> str:
        if not self.exists(uuid):
            raise KeyError(uuid)
        return self._by_uuid[uuid]

    def load_registry(self, data: Mapping[str, Any]) -> None:
        assets = data.get("assets")
        if not assets:
            return
        for entry in assets:
            name = entry["name"]
            properties = AssetProperties.from_json(entry)
            self._by_name.setdefault(name, properties)
            self._by_uuid.setdefault(properties.uuid, name)

    def save_registry(self) -> dict[str, Any]:
        assets = []
        for name, properties in self._by_name.items():
            entry = properties.to_json()
            entry["name"] = name
            assets.append(entry)
        return {"assets": assets}

    def all_assets(self) -> Mapping[str, AssetProperties]:
        """A read-only view of every asset, keyed by name."""
        return MappingProxyType(self._by_name)