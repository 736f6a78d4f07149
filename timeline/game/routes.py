"""Game page routes."""

from litestar import get
from litestar.response import Template

from timeline.game.storage import ROOM_TEMPLATE_FILE, WORK_ROOM_FILE
from timeline.game.room import DEFAULT_ROOM_SIZE


@get("/game", sync_to_thread=False)
def game_room() -> Template:
    """Game room - shows a loading placeholder until the room data arrives."""
    return Template(
        template_name="game/room.html",
        context={
            "room_template_file": ROOM_TEMPLATE_FILE,
            "work_room_file": WORK_ROOM_FILE,
            "default_room": DEFAULT_ROOM_SIZE,
        },
    )


routes = [game_room]
