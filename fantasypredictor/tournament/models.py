"""Data models for the tournament blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, TypedDict

from fantasypredictor.core.constants import MATCHES_PER_GAME
from fantasypredictor.errors import CapacityError, ValidationError
from fantasypredictor.game.catalog import get_match
from fantasypredictor.game.models import Match, Sport


class HostedTournament(TypedDict, total=False):
    """A tournament document in Firestore."""

    host_id: str
    name: str
    sport: str
    entry_fee: float
    prize_pool: float
    participants: int
    max_participants: int
    # JSON list of the ten chosen matches
    selected_matches: str
    createdAt: Any


class PrizeSplit(TypedDict):
    """Prize pool share per finishing place plus the host cut."""

    first: Decimal
    second: Decimal
    third: Decimal
    host: Decimal


@dataclass
class MatchSelection:
    """The matches a host has picked for a new tournament, in pick order."""

    sport: Sport
    matches: list[Match] = field(default_factory=list)
    capacity: int = MATCHES_PER_GAME

    def __len__(self) -> int:
        return len(self.matches)

    def __contains__(self, match_id: object) -> bool:
        return any(m.id == match_id for m in self.matches)

    @property
    def is_full(self) -> bool:
        return len(self.matches) >= self.capacity

    @property
    def remaining(self) -> int:
        return self.capacity - len(self.matches)

    def toggle(self, match: Match) -> bool:
        """Add the match, or remove it if already picked.

        Returns True when the match ends up selected. Adding to a full
        selection raises CapacityError and leaves it untouched. Matches from
        another sport raise ValidationError; ids are only unique per sport.
        """
        if match.sport is not self.sport:
            raise ValidationError(
                f"Match {match.id} is not a {self.sport.value} match."
            )
        if match.id in self:
            self.matches = [m for m in self.matches if m.id != match.id]
            return False
        if self.is_full:
            raise CapacityError(
                f"Maximum matches selected: you can only select up to "
                f"{self.capacity} matches for a tournament."
            )
        self.matches.append(match)
        return True

    def can_create(
        self, name: Optional[str], entry_fee: Any, max_participants: Any
    ) -> bool:
        """True when the selection and settings make a valid tournament."""
        return (
            len(self.matches) == self.capacity
            and bool(name and name.strip())
            and entry_fee is not None
            and entry_fee > 0
            and max_participants is not None
            and max_participants > 0
        )

    def to_dict(self) -> dict[str, Any]:
        return {"sport": self.sport.value, "match_ids": [m.id for m in self.matches]}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]], sport: Sport) -> MatchSelection:
        """Rebuild a draft, dropping it if it belonged to another sport."""
        if not data or data.get("sport") != sport.value:
            return cls(sport=sport)
        return cls(
            sport=sport,
            matches=[get_match(sport, int(i)) for i in data.get("match_ids", [])],
        )
