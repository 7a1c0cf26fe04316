import pytest

from maple.asset_properties import (
    AssetProperties,
    AssetType,
    Rect,
    SpritesheetData,
    SubTextureMetadata,
)


def test_texture_json_has_only_id_and_type():
    props = AssetProperties(AssetType.TEXTURE, 42)
    assert props.to_json() == {"id": 42, "type": "Texture"}


def test_subtexture_json_layout():
    props = AssetProperties(
        AssetType.SUBTEXTURE, 5, SubTextureMetadata(7, Rect(1, 2, 3, 4))
    )
    assert props.to_json() == {
        "id": 5,
        "type": "SubTexture",
        "extraneous": {"parentUUID": 7, "rect": [1, 2, 3, 4]},
    }


def test_spritesheet_json_keeps_tile_size_only():
    props = AssetProperties(
        AssetType.SPRITESHEET, 9, SpritesheetData(rows=2, cols=3, tileset_ratio=3, tile_size=16)
    )
    data = props.to_json()
    assert data["extraneous"] == {"tileSize": 16}
    back = AssetProperties.from_json(data)
    assert back.extra == SpritesheetData(tile_size=16)


@pytest.mark.parametrize(
    "props",
    [
        AssetProperties(AssetType.TEXTURE, 1),
        AssetProperties(AssetType.ANIMATION, 2),
        AssetProperties(AssetType.SUBTEXTURE, 3, SubTextureMetadata(4, Rect(0, 16, 16, 16))),
        AssetProperties(AssetType.SPRITESHEET, 2**63, SpritesheetData(tile_size=32)),
    ],
)
def test_round_trip(props):
    assert AssetProperties.from_json(props.to_json()) == props


def test_unknown_type_is_rejected():
    with pytest.raises(ValueError):
        AssetProperties.from_json({"id": 1, "type": "Sound"})


def test_subtexture_requires_metadata():
    with pytest.raises(ValueError):
        AssetProperties(AssetType.SUBTEXTURE, 1)


def test_spritesheet_defaults_are_zero():
    assert SpritesheetData() == SpritesheetData(0, 0, 0, 0)


def test_rect_list_round_trip():
    rect = Rect(3, 5, 7, 11)
    assert Rect.from_list(rect.to_list()) == rect