"""Timeline database models."""

from timeline.models.base import Base
from timeline.models.user import User
from timeline.models.activity_type import ActivityType

__all__ = [
    "Base",
    "User",
    "ActivityType",
]
