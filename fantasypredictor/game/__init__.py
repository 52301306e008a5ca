"""Game blueprint: sport picker, tournaments, predictions and results."""

from flask import Blueprint

bp = Blueprint("game", __name__)

from . import routes  # noqa: E402, F401
from .models import GameMode, Match, Outcome, Sport, Tournament  # noqa: E402
from .services import GameService  # noqa: E402
from .state import GameState  # noqa: E402

__all__ = [
    "GameMode",
    "GameService",
    "GameState",
    "Match",
    "Outcome",
    "Sport",
    "Tournament",
    "routes",
]
