"""Data models for the game blueprint."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional


class Sport(str, enum.Enum):
    """Sports with a match catalog."""

    BASKETBALL = "basketball"
    FOOTBALL = "football"
    TENNIS = "tennis"


class Outcome(str, enum.Enum):
    """Possible results of a match, from the point of view of team1."""

    TEAM1 = "team1"
    DRAW = "draw"
    TEAM2 = "team2"


class GameMode(str, enum.Enum):
    """The screen a player is currently on."""

    SELECT = "select"
    TOURNAMENT = "tournament"
    PREDICT = "predict"
    RESULTS = "results"
    CREATE_TOURNAMENT = "create-tournament"


@dataclass(frozen=True)
class Match:
    """A catalog match. actual_result stays None until the match is settled."""

    id: int
    team1: str
    team2: str
    sport: Sport
    actual_result: Optional[Outcome] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage alongside a hosted tournament."""
        return {
            "id": self.id,
            "team1": self.team1,
            "team2": self.team2,
            "sport": self.sport.value,
            "actualResult": self.actual_result.value if self.actual_result else None,
        }


@dataclass(frozen=True)
class Tournament:
    """A joinable tournament tier."""

    id: str
    name: str
    entry_fee: Decimal
    prize_pool: Decimal
    participants: int
    max_participants: int

    @property
    def is_full(self) -> bool:
        """Return True when no seats are left."""
        return self.participants >= self.max_participants

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the session cookie."""
        return {
            "id": self.id,
            "name": self.name,
            "entry_fee": str(self.entry_fee),
            "prize_pool": str(self.prize_pool),
            "participants": self.participants,
            "max_participants": self.max_participants,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tournament:
        """Rebuild a tournament from its session form."""
        return cls(
            id=data["id"],
            name=data["name"],
            entry_fee=Decimal(data["entry_fee"]),
            prize_pool=Decimal(data["prize_pool"]),
            participants=int(data["participants"]),
            max_participants=int(data["max_participants"]),
        )


@dataclass(frozen=True)
class ScoreSummary:
    """Outcome of scoring a set of predictions."""

    correct: int
    total: int
    score: Decimal

    @property
    def accuracy(self) -> Decimal:
        """Percentage of answered matches predicted correctly, one decimal."""
        if self.total == 0:
            return Decimal("0")
        return (Decimal(self.correct) * 100 / Decimal(self.total)).quantize(
            Decimal("0.1")
        )
