# maple

Building blocks for 2D games on top of pygame:

- an entity-component system: `EntityManager` (in `maple.entity_manager`) with
  `ECSStorage`, `StorageWrapper`, `Query` and `ComponentView` (in `maple.ecs_storage`)
- a process-wide registry of user components, scripts and scenes (`maple.registry`:
  `Registry`, `TypeIdentifier` and the class decorators `register_component`,
  `register_script`, `register_scene`)
- an asset registry and manager for textures, spritesheets and animations, kept as JSON
  inside a project folder (`maple.asset_registry`, `maple.asset_manager`,
  `maple.asset_properties`, `maple.animation`)
- built-in components: `SpriteComponent`, `TransformComponent`, `Physics2DComponent`,
  `AABBCollisionComponent` and `NameComponent` (`maple.builtin_components`)
- `RenderTarget`, which draws sprite rectangles and lines onto a pygame surface through a
  camera view (`maple.render_target`)
- tile grid helpers `create_grid` and `map_vector_to_id` (`maple.utils`)

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Components and entities

A component is a class implementing `ComponentMetadata` (`maple.component`), which asks
for `from_json(data, context)` and `to_json()`. Decorating it with `register_component`
registers it under its class name and spawns a storage for it. The built-in components
and `AnimationStateComponent` are registered when their modules are imported.

```python
from maple.builtin_components import TransformComponent
from maple.component import Systems
from maple.entity_manager import EntityManager
from maple.registry import Registry

manager = EntityManager()
for name, data in Registry.user_contents().components.items():
    manager.register_component(data.type_id, data.storage, name)

entity_id = manager.create()
transform = manager.add_component(entity_id, TransformComponent)
transform.velocity.x = 3.0


def move(dt, query, systems):
    for (transform,) in query:
        transform.pos += transform.velocity * dt


manager.run_system(0.5, move, Systems(entity_manager=manager), TransformComponent)
```

`run_system` joins the storages of the given component types: the query holds a row
for each entity owning all of them, and the rows are written back after the system
returns. `immutable_view(component_type)` iterates over one storage without joining.
`destroy(entity_id)` removes an entity and every component it owns.

`load_json` reads a mapping with an `entities` list of ids and a `componentMaps` list
whose entries name a registered component and give its `instances` as
`{"id": ..., "data": ...}` objects.

## Assets

`AssetManager(project_root)` keeps an `AssetRegistry` of named assets and loads them on
demand:

- `import_texture(path, name)` copies a PNG into `assets/textures/` (the project must
  already have an `assets` folder) and writes `assetregistry.json`.
- `import_spritesheet(path, name, SpritesheetData(...))` creates the asset folders if
  needed, copies the PNG, and registers one subtexture per tile, named
  `<name>_<index>`.
- `import_animation(name, Animation(...))` registers an animation over a spritesheet
  and appends it to `assets/animations/animation.json`.
- `get_texture(name_or_uuid)` returns a `Texture` (a surface and a `Rect`), loading it
  if needed; `get_animation(name_or_uuid)` returns a loaded `Animation`.
- `load_registry`, `save_registry`, `load_scene_assets` and
  `load_all_assets_in_registry` move the registry and assets between JSON and memory.

Failures to load or import raise `AssetError`.

## What the package does not do

It has no command and no program to run: there is no window, event handling or frame
loop, and nothing here opens a project file or steps the animation, gravity or
collision systems each frame. It has no script or scene classes and does not load
scenes from scene files; `Registry` only records script and scene factories by name
for code that uses them. Sound effects, music and fonts are checked for the right file
type and then refused with `AssetError`.