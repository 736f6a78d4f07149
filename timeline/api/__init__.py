"""Timeline API routes."""

from timeline.api.health import HealthController
from timeline.api.game import GameController, GameDevController
from timeline.api.users import UsersController

__all__ = ["HealthController", "GameController", "GameDevController", "UsersController"]
