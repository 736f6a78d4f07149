"""Database access functions used by the API layer."""

from timeline.db.game import get_activity_types
from timeline.db.users import get_user_by_username

__all__ = ["get_activity_types", "get_user_by_username"]
