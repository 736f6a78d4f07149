"""Game catalogue lookups."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from timeline.models import ActivityType


async def get_activity_types(session: AsyncSession) -> List[ActivityType]:
    """All activity types, ordered by id."""
    result = await session.execute(select(ActivityType).order_by(ActivityType.id))
    return list(result.scalars().all())
