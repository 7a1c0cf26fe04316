"""The shared engine context and the base class every component implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class Systems:
    """The engine's managers, handed to scripts, scenes and components."""

    script_manager: Any = None
    entity_manager: Any = None
    asset_manager: Any = None


class ComponentMetadata(ABC):
    """Serialisation behaviour that every component type must provide."""

    @abstractmethod
    def from_json(self, data: Any, context: Systems) -> None:
        """Fill this component from its JSON form."""

    @abstractmethod
    def to_json(self) -> Any:
        """Return this component's JSON form."""