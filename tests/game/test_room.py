"""Tests for the room template schemas."""

import pytest
from pydantic import ValidationError

from timeline.game.room import DEFAULT_ROOM_SIZE, RoomTemplate, RoomTemplateItem, WorkRoomConfig


def make_item(**overrides) -> RoomTemplateItem:
    data = {
        "id": "cadeira",
        "src": "/game/assets/furniture/libraryChair_S.png",
        "label": "Cadeira",
        "left": 150,
        "bottom": 40,
        "width": 56,
        "height": 56,
    }
    data.update(overrides)
    return RoomTemplateItem.model_validate(data)


def test_default_template_is_empty_room():
    template = RoomTemplate.default()
    assert template.room_width == DEFAULT_ROOM_SIZE["width"]
    assert template.room_height == DEFAULT_ROOM_SIZE["height"]
    assert template.to_json() == {"roomWidth": 380, "roomHeight": 340, "items": []}


def test_unsliced_item_uses_src():
    item = make_item()
    assert item.sprite_style() is None
    assert "slice" not in item.model_dump(by_alias=True, exclude_none=True)


def test_slice_crop_style():
    item = make_item(slice={"sheetSrc": "/game/sheets/office.png", "x": 64, "y": 32.5, "sheetW": 512, "sheetH": 256})
    assert item.sprite_style() == {
        "background-image": "url(/game/sheets/office.png)",
        "background-position": "-64px -32.5px",
        "background-size": "512px 256px",
    }


def test_slice_wins_over_src():
    item = make_item(src="sheet1:0", slice={"sheetSrc": "/s.png", "x": 0, "y": 0, "sheetW": 10, "sheetH": 10})
    assert item.sprite_style()["background-image"] == "url(/s.png)"


def test_template_keeps_item_order_and_camel_case():
    template = RoomTemplate.model_validate({
        "roomWidth": 380,
        "roomHeight": 340,
        "items": [make_item(id="b").model_dump(by_alias=True), make_item(id="a").model_dump(by_alias=True)],
    })
    data = template.to_json()
    assert [i["id"] for i in data["items"]] == ["b", "a"]
    assert set(data) == {"roomWidth", "roomHeight", "items"}


@pytest.mark.parametrize("payload", [
    {"roomWidth": 380, "roomHeight": 340},
    {"roomWidth": 380, "items": []},
    {"roomWidth": 380, "roomHeight": 340, "items": "nope"},
    {"roomWidth": 380, "roomHeight": 340, "items": [{"id": "x"}]},
])
def test_incomplete_template_is_rejected(payload):
    with pytest.raises(ValidationError):
        RoomTemplate.model_validate(payload)


def test_work_room_config_only_emits_set_fields():
    assert WorkRoomConfig().to_json() == {}
    assert WorkRoomConfig.model_validate({"fullRoomImageSrc": None}).to_json() == {"fullRoomImageSrc": None}
    config = WorkRoomConfig(full_room_image_src="/game/casa/escritorio_firefly_1.png")
    assert config.to_json() == {"fullRoomImageSrc": "/game/casa/escritorio_firefly_1.png"}


@pytest.mark.parametrize("value", ["56", True, None])
def test_item_sizes_must_be_json_numbers(value):
    with pytest.raises(ValidationError):
        make_item(width=value)


def test_numbers_keep_their_type():
    item = make_item(left=150, bottom=40.5)
    data = item.model_dump(by_alias=True)
    assert data["left"] == 150 and isinstance(data["left"], int)
    assert data["bottom"] == 40.5


def test_unknown_keys_survive_to_json():
    template = RoomTemplate.model_validate({
        "roomWidth": 380,
        "roomHeight": 340,
        "items": [make_item(zIndex=3).model_dump(by_alias=True, exclude_none=True)],
        "floor": "carpet",
    })
    data = template.to_json()
    assert data["floor"] == "carpet"
    assert data["items"][0]["zIndex"] == 3
    assert WorkRoomConfig.model_validate({"caption": "Escritório"}).to_json() == {"caption": "Escritório"}
