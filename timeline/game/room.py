"""Room template schemas.

A room template is the layout edited in dev mode: a canvas size plus an
ordered list of items, each drawn either from a single asset or from a slice
of a sprite sheet. The work room config optionally replaces the whole layout
with one full-room image.

JSON keys are camelCase (``roomWidth``, ``sheetSrc``, ``fullRoomImageSrc``);
attributes are snake_case. Keys the schemas do not declare are kept and
written back as received.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

DEFAULT_ROOM_SIZE = {"width": 380, "height": 340}

# JSON numbers only: "380" and true are rejected, integers stay integers
Number = Union[StrictInt, StrictFloat]


class SpriteSlice(BaseModel):
    """Sub-rectangle of a sprite sheet, used as a CSS background crop."""
    sheet_src: str = Field(alias="sheetSrc")
    x: Number
    y: Number
    sheet_w: Number = Field(alias="sheetW")
    sheet_h: Number = Field(alias="sheetH")

    class Config:
        populate_by_name = True
        extra = "allow"


class RoomTemplateItem(BaseModel):
    """One positioned item in the room, in layout pixels."""
    id: str
    # Asset path (/game/assets/...) or slice key (sheetId:index)
    src: str
    label: str
    left: Number
    bottom: Number
    width: Number
    height: Number
    slice: Optional[SpriteSlice] = None

    class Config:
        populate_by_name = True
        extra = "allow"

    def sprite_style(self) -> Optional[Dict[str, str]]:
        """CSS crop for a sliced item; None when the item uses ``src`` directly.

        When both are present the slice wins.
        """
        if self.slice is None:
            return None
        return {
            "background-image": f"url({self.slice.sheet_src})",
            "background-position": f"-{_px(self.slice.x)}px -{_px(self.slice.y)}px",
            "background-size": f"{_px(self.slice.sheet_w)}px {_px(self.slice.sheet_h)}px",
        }


class RoomTemplate(BaseModel):
    """Room canvas plus items in draw order."""
    room_width: Number = Field(alias="roomWidth")
    room_height: Number = Field(alias="roomHeight")
    items: List[RoomTemplateItem]

    class Config:
        populate_by_name = True
        extra = "allow"

    @classmethod
    def default(cls) -> "RoomTemplate":
        return cls(
            room_width=DEFAULT_ROOM_SIZE["width"],
            room_height=DEFAULT_ROOM_SIZE["height"],
            items=[],
        )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class WorkRoomConfig(BaseModel):
    """Work room override. When ``full_room_image_src`` is set the page shows
    that image instead of the composed layout."""
    full_room_image_src: Optional[str] = Field(default=None, alias="fullRoomImageSrc")

    class Config:
        populate_by_name = True
        extra = "allow"

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _px(value: Number) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
