import logging
import os
from os import getenv
from pathlib import Path

# Load .env before any module below reads its configuration at import time
ENV_FILE_PATHS = [
    Path("/opt/timeline/.env"),
    Path(__file__).parent.parent / ".env",
]


def load_env_file_fallback() -> bool:
    """Load .env file directly if environment variables aren't set."""
    # Logger is not configured yet
    for env_file in ENV_FILE_PATHS:
        if env_file.exists() and env_file.is_file():
            try:
                loaded_count = 0
                with open(env_file, "r") as f:
                    for line in f:
                        line = line.strip()
                        if not line or line.startswith("#"):
                            continue
                        if "=" in line:
                            key, value = line.split("=", 1)
                            key = key.strip()
                            value = value.strip()
                            if value[:1] in ("'", '"') and value[-1:] == value[:1]:
                                value = value[1:-1]
                            # Never override the real environment
                            if key and value and key not in os.environ:
                                os.environ[key] = value
                                loaded_count += 1
                if loaded_count > 0:
                    print(f"[Timeline] Loaded {loaded_count} environment variables from {env_file}")
                return True
            except OSError as e:
                print(f"[Timeline] Warning: Could not load .env file from {env_file}: {e}")
    return False


if not getenv("DATABASE_URL"):
    load_env_file_fallback()

from typing import Any

from litestar import Litestar
from litestar.contrib.jinja import JinjaTemplateEngine
from litestar.exceptions import HTTPException
from litestar.plugins.sqlalchemy import SQLAlchemyInitPlugin, SQLAlchemyAsyncConfig
from litestar.template.config import TemplateConfig

from timeline.api.errors import handle_http_exception, handle_unexpected_exception
from timeline.game.storage import game_data_dir
from timeline.models import Base
from timeline.utils import get_base_path

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"
# Default DATABASE_URL is for local dev only (Docker Compose)
DATABASE_URL = getenv(
    "DATABASE_URL",
    "postgresql+asyncpg://postgres:postgres@db:5432/timeline"
)

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("Timeline")

logger.info(f"Starting app in {'DEBUG' if DEBUG else 'PRODUCTION'} mode")
logger.info(f"Game data directory: {game_data_dir()}")

# Served read-only at /game-data
game_data_dir().mkdir(parents=True, exist_ok=True)

from timeline.routes import ROUTES

# --- SQLAlchemy config
db_config = SQLAlchemyAsyncConfig(
    connection_string=DATABASE_URL,
    session_dependency_key="session",
    metadata=Base.metadata,
    create_all=DEBUG,  # Auto-create tables on startup (dev only)
)
plugin = SQLAlchemyInitPlugin(db_config)

# --- Template config (auto-discovery)
template_dirs = [
    str(p) for p in Path(__file__).parent.glob("**/templates") if p.is_dir()
]


def register_template_globals(engine: JinjaTemplateEngine) -> None:
    """Register template globals and callables."""

    def base_path_helper(ctx: dict[str, Any]) -> str:
        """Base path of the current request, for building URLs in templates."""
        request = ctx.get("request")
        return get_base_path(request) if request else ""

    engine.register_template_callable("get_base_path", base_path_helper)


template_config = TemplateConfig(
    directory=template_dirs,
    engine=JinjaTemplateEngine,
    engine_callback=register_template_globals,
)

# --- App init
app = Litestar(
    route_handlers=ROUTES,
    debug=DEBUG,
    plugins=[plugin],
    template_config=template_config,
    exception_handlers={
        HTTPException: handle_http_exception,
        Exception: handle_unexpected_exception,
    },
)
