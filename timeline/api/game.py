"""Game API endpoints: activity types and the dev-mode room editors."""

import logging
from os import getenv
from typing import Any, Dict, List

from litestar import Controller, Request, get, patch
from litestar.connection import ASGIConnection
from litestar.exceptions import SerializationException
from litestar.handlers.base import BaseRouteHandler
from pydantic import BaseModel, ValidationError as SchemaError
from sqlalchemy.ext.asyncio import AsyncSession

from timeline.api.errors import ForbiddenError, InternalError, ValidationError
from timeline.db import get_activity_types
from timeline.game import storage
from timeline.game.room import RoomTemplate, WorkRoomConfig
from timeline.utils.logging import error_log

logger = logging.getLogger("Timeline.game")


class ActivityTypeResponse(BaseModel):
    """Activity type with its rewards and costs."""
    id: str
    label_pt: str
    coins: int
    xp: int
    health_change: int
    stress_change: int
    
    class Config:
        from_attributes = True


def dev_tools_enabled() -> bool:
    """Room editors are only exposed when APP_DEBUG is on."""
    return getenv("APP_DEBUG", "false").lower() == "true"


async def require_dev_mode_guard(connection: ASGIConnection, handler: BaseRouteHandler) -> None:
    """Guard rejecting dev-only endpoints outside debug mode."""
    if not dev_tools_enabled():
        logger.warning(f"Dev endpoint requested outside debug mode: {connection.url.path}")
        raise ForbiddenError()


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except SerializationException as e:
        logger.debug(f"Rejected request body: {e}")
        raise ValidationError("Invalid JSON") from e


# --- Controllers ---

class GameController(Controller):
    """Public game endpoints."""
    
    path = "/api/game"
    tags = ["game"]
    
    @get("/activity-types")
    async def activity_types(self, session: AsyncSession) -> List[ActivityTypeResponse]:
        """List every activity type, ordered by id."""
        try:
            types = await get_activity_types(session)
        except Exception as e:
            error_log("[game/activity-types GET]", exc=e)
            raise InternalError() from e
        
        return [ActivityTypeResponse.model_validate(t) for t in types]


class GameDevController(Controller):
    """Room template and work room editors (debug mode only)."""
    
    path = "/api/game/dev"
    tags = ["game", "dev"]
    guards = [require_dev_mode_guard]
    
    @get("/room-template", sync_to_thread=False)
    def get_room_template(self) -> Dict[str, Any]:
        """Saved room template, or the default empty room."""
        try:
            template = storage.load_room_template()
        except (OSError, ValueError) as e:
            error_log("[game/dev/room-template GET]", exc=e, context={"path": storage.room_template_path()})
            raise InternalError() from e
        return template.to_json()
    
    @patch("/room-template")
    async def update_room_template(self, request: Request) -> Dict[str, Any]:
        """Replace the saved room template."""
        body = await read_json_body(request)
        try:
            template = RoomTemplate.model_validate(body)
        except SchemaError as e:
            logger.debug(f"Invalid room template: {e.error_count()} error(s)")
            raise ValidationError("Invalid template: roomWidth, roomHeight, items required") from e
        
        try:
            storage.save_room_template(template)
        except OSError as e:
            error_log("[game/dev/room-template PATCH]", exc=e, context={"path": storage.room_template_path()})
            raise InternalError() from e
        
        logger.info(f"Room template saved ({len(template.items)} items)")
        return template.to_json()
    
    @get("/work-room", sync_to_thread=False)
    def get_work_room(self) -> Dict[str, Any]:
        """Saved work room config; empty when missing or unreadable."""
        try:
            config = storage.load_work_room_config()
        except (OSError, ValueError) as e:
            error_log("[game/dev/work-room GET]", exc=e, context={"path": storage.work_room_path()})
            return {}
        return config.to_json()
    
    @patch("/work-room")
    async def update_work_room(self, request: Request) -> Dict[str, Any]:
        """Replace the saved work room config."""
        body = await read_json_body(request)
        try:
            config = WorkRoomConfig.model_validate(body)
        except SchemaError as e:
            raise ValidationError("Invalid work room config") from e
        
        try:
            storage.save_work_room_config(config)
        except OSError as e:
            error_log("[game/dev/work-room PATCH]", exc=e, context={"path": storage.work_room_path()})
            raise InternalError() from e
        
        return config.to_json()
