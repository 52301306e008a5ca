"""Tournament blueprint: hosting new tournaments."""

from flask import Blueprint

bp = Blueprint("tournament", __name__, url_prefix="/host")

from . import routes  # noqa: E402, F401
from .models import HostedTournament, MatchSelection  # noqa: E402
from .services import TournamentService, prize_distribution  # noqa: E402

__all__ = [
    "HostedTournament",
    "MatchSelection",
    "TournamentService",
    "prize_distribution",
    "routes",
]
