"""Health check endpoints."""

from datetime import datetime, timezone
from os import getenv
from typing import Any, Dict

from litestar import Controller, get
from litestar.response import Response
from litestar.status_codes import HTTP_503_SERVICE_UNAVAILABLE
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from timeline.utils.logging import error_log

SERVICE_NAME = getenv("SERVICE_NAME", "timeline-agenda")

DB_HINT = "Check DATABASE_URL and that the schema was created (python deploy/init_db.py)"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthController(Controller):
    """Liveness and database connectivity probes."""
    
    path = "/api/health"
    tags = ["health"]
    
    @get("/", sync_to_thread=False)
    def health(self) -> Dict[str, Any]:
        """Liveness probe. Never touches the database."""
        return {
            "ok": True,
            "service": SERVICE_NAME,
            "timestamp": utc_timestamp(),
        }
    
    @get("/db")
    async def health_db(self, session: AsyncSession) -> Response[Dict[str, Any]]:
        """Returns 200 if DATABASE_URL is set and the database answers."""
        if not getenv("DATABASE_URL"):
            return Response(
                content={"ok": False, "error": "DATABASE_URL is not set", "hint": DB_HINT},
                status_code=HTTP_503_SERVICE_UNAVAILABLE,
            )
        
        try:
            await session.execute(text("SELECT 1"))
        except Exception as e:
            error_log("[health/db GET] database check failed", exc=e)
            return Response(
                content={"ok": False, "error": str(e) or type(e).__name__, "hint": DB_HINT},
                status_code=HTTP_503_SERVICE_UNAVAILABLE,
            )
        
        return Response(
            content={
                "ok": True,
                "database": session.get_bind().dialect.name,
                "message": "Connection OK",
            },
        )
