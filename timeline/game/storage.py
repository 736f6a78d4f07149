"""JSON file persistence for the room template and the work room config.

Both files live in the game data directory (``GAME_DATA_DIR``), which is
also served read-only at ``/game-data`` for the game page.
"""

import json
import logging
import tempfile
from os import getenv
from pathlib import Path
from typing import Any

from timeline.game.room import RoomTemplate, WorkRoomConfig

logger = logging.getLogger("Timeline.game.storage")

DEFAULT_GAME_DATA_DIR = Path(__file__).resolve().parent.parent / "static" / "game"

ROOM_TEMPLATE_FILE = "room-template.json"
WORK_ROOM_FILE = "work-room.json"


def game_data_dir() -> Path:
    """Directory holding the game JSON files. Read on every call so tests can redirect it."""
    configured = getenv("GAME_DATA_DIR")
    return Path(configured) if configured else DEFAULT_GAME_DATA_DIR


def room_template_path() -> Path:
    return game_data_dir() / ROOM_TEMPLATE_FILE


def work_room_path() -> Path:
    return game_data_dir() / WORK_ROOM_FILE


def load_room_template() -> RoomTemplate:
    """Persisted template, or the default empty room if none was saved yet.

    Raises OSError / ValueError when the file exists but cannot be read or parsed.
    """
    path = room_template_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No room template at {path}, using default")
        return RoomTemplate.default()
    return RoomTemplate.model_validate_json(raw)


def save_room_template(template: RoomTemplate) -> None:
    _write_json(room_template_path(), template.to_json())


def load_work_room_config() -> WorkRoomConfig:
    """Persisted work room config, or an empty config if none was saved yet."""
    path = work_room_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return WorkRoomConfig()
    return WorkRoomConfig.model_validate_json(raw)


def save_work_room_config(config: WorkRoomConfig) -> None:
    _write_json(work_room_path(), config.to_json())


def _write_json(path: Path, data: Any) -> None:
    """Write to a temporary file next to ``path``, then swap it in.

    A failed write leaves the previous file untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(json.dumps(data, indent=2, ensure_ascii=False))
        tmp_path.replace(path)
    except OSError:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise
    logger.info(f"Saved {path.name} to {path.parent}")
