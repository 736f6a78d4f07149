"""User lookup API endpoints."""

import uuid
from datetime import datetime
from typing import Optional

from litestar import Controller, get
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from timeline.api.errors import InternalError, NotFoundError, ValidationError
from timeline.db import get_user_by_username
from timeline.utils.logging import debug_log, error_log


class UserResponse(BaseModel):
    """Public user record."""
    id: uuid.UUID
    email: str
    username: str
    name: str
    avatar: Optional[str]
    created_at: datetime
    
    class Config:
        from_attributes = True


class UsersController(Controller):
    """API endpoints for user lookups."""
    
    path = "/api/users"
    tags = ["users"]
    
    @get("/by-username")
    async def by_username(
        self,
        session: AsyncSession,
        username: Optional[str] = None,
    ) -> UserResponse:
        """Look up a user by exact username."""
        if not username:
            raise ValidationError("username is required")
        
        try:
            user = await get_user_by_username(session, username)
        except Exception as e:
            error_log("[users/by-username GET] lookup failed", exc=e, context={"username": username})
            raise InternalError() from e
        
        if user is None:
            debug_log("User not found: %s", username)
            raise NotFoundError("User not found")
        
        return UserResponse.model_validate(user)
