"""Building blocks for 2D games: an entity-component system, assets and pygame drawing."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "asset_manager",
    "asset_properties",
    "asset_registry",
    "builtin_components",
    "component",
    "ecs_storage",
    "entity_manager",
    "registry",
    "render_target",
    "utils",
    "uuids",
]