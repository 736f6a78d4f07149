"""Game activity type model."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from timeline.models.base import Base


class ActivityType(Base):
    """Kind of activity a player can schedule, with its rewards and costs."""
    
    __tablename__ = "game_activity_types"
    
    # Slug, e.g. "work" or "exercise"
    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    label_pt: Mapped[str] = mapped_column(String(100))
    
    coins: Mapped[int] = mapped_column(Integer, default=0)
    xp: Mapped[int] = mapped_column(Integer, default=0)
    health_change: Mapped[int] = mapped_column(Integer, default=0)
    stress_change: Mapped[int] = mapped_column(Integer, default=0)
    
    def __repr__(self) -> str:
        return f"<ActivityType {self.id}>"
