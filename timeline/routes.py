from pathlib import Path

from litestar.static_files import create_static_files_router

from timeline.game.routes import routes as routes_game
from timeline.game.storage import game_data_dir
from timeline.api import HealthController, GameController, GameDevController, UsersController

STATIC_DIR = Path(__file__).parent / "static"

ROUTES = [
    *routes_game,
    HealthController,
    GameController,
    GameDevController,
    UsersController,
    create_static_files_router(
        path="/game-data",
        directories=[game_data_dir()],
        name="game-data",
    ),
    create_static_files_router(
        path="/static",
        directories=[STATIC_DIR],
        name="static-files",
    ),
]
