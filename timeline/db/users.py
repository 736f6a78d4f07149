"""User lookups."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from timeline.models import User


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    """Return the user with this exact username, or None."""
    stmt = select(User).where(User.username == username).limit(1)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
