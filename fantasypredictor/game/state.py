"""Per-player game state and its legal screen transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from fantasypredictor.errors import InvalidTransitionError, ValidationError

from .catalog import get_matches
from .models import GameMode, Match, Outcome, ScoreSummary, Sport, Tournament
from .scoring import calculate_score, remaining_predictions

TRANSITIONS: dict[GameMode, frozenset[GameMode]] = {
    GameMode.SELECT: frozenset(
        {GameMode.TOURNAMENT, GameMode.PREDICT, GameMode.RESULTS}
    ),
    GameMode.TOURNAMENT: frozenset(
        {GameMode.SELECT, GameMode.TOURNAMENT, GameMode.CREATE_TOURNAMENT}
    ),
    GameMode.PREDICT: frozenset({GameMode.RESULTS, GameMode.SELECT}),
    GameMode.RESULTS: frozenset({GameMode.SELECT}),
    GameMode.CREATE_TOURNAMENT: frozenset({GameMode.TOURNAMENT}),
}


@dataclass
class GameState:
    """Everything one player has chosen in the current game.

    All mutation goes through the methods below so the mode always matches
    the data: a tournament is only set outside the sport/tournament screens,
    and captain and vice-captain never name the same match.
    """

    sport: Optional[Sport] = None
    tournament: Optional[Tournament] = None
    mode: GameMode = GameMode.SELECT
    predictions: dict[int, Outcome] = field(default_factory=dict)
    captain: Optional[int] = None
    vice_captain: Optional[int] = None

    # -- queries ---------------------------------------------------------

    @property
    def matches(self) -> tuple[Match, ...]:
        """Catalog for the selected sport, empty before a sport is chosen."""
        if self.sport is None:
            return ()
        return get_matches(self.sport)

    @property
    def has_predictions(self) -> bool:
        return bool(self.predictions)

    @property
    def remaining(self) -> int:
        return remaining_predictions(self.matches, self.predictions)

    def score(self) -> ScoreSummary:
        """Score the current predictions."""
        return calculate_score(
            self.matches, self.predictions, self.captain, self.vice_captain
        )

    def can_move_to(self, target: GameMode) -> bool:
        return target in TRANSITIONS[self.mode]

    # -- transitions -----------------------------------------------------

    def _move(self, target: GameMode) -> None:
        if not self.can_move_to(target):
            raise InvalidTransitionError(
                f"Cannot go from {self.mode.value} to {target.value}."
            )
        self.mode = target

    def reset(self) -> None:
        """Return to a clean sport picker. Safe to call from any state."""
        self.sport = None
        self.tournament = None
        self.mode = GameMode.SELECT
        self.predictions = {}
        self.captain = None
        self.vice_captain = None

    def select_sport(self, sport: Sport) -> None:
        """Pick a sport and move to its tournament list.

        Changing sport throws away the previous tournament and predictions.
        """
        self._move(GameMode.TOURNAMENT)
        self.sport = sport
        self.tournament = None
        self.predictions = {}
        self.captain = None
        self.vice_captain = None

    def ensure_can_join(self) -> None:
        if self.sport is None or self.mode is not GameMode.TOURNAMENT:
            raise InvalidTransitionError("Pick a sport before joining a tournament.")

    def join_tournament(self, tournament: Tournament) -> None:
        self.ensure_can_join()
        self._move(GameMode.SELECT)
        self.tournament = tournament

    def choose_mode(self, mode: GameMode) -> None:
        """Switch between predicting and viewing results."""
        if mode not in (GameMode.PREDICT, GameMode.RESULTS):
            raise InvalidTransitionError(f"{mode.value} is not a game mode.")
        if self.tournament is None:
            raise InvalidTransitionError("Join a tournament first.")
        if mode is GameMode.RESULTS:
            if self.mode is GameMode.PREDICT and self.remaining:
                raise InvalidTransitionError(
                    f"Make {self.remaining} more predictions to view results."
                )
            if not self.has_predictions:
                raise InvalidTransitionError("Make some predictions first.")
        self._move(mode)

    def open_creator(self) -> None:
        if self.sport is None:
            raise InvalidTransitionError("Pick a sport before creating a tournament.")
        self._move(GameMode.CREATE_TOURNAMENT)

    def close_creator(self) -> None:
        self._move(GameMode.TOURNAMENT)

    def back(self) -> None:
        """Step back one screen."""
        if self.mode in (GameMode.PREDICT, GameMode.RESULTS):
            self._move(GameMode.SELECT)
        elif self.mode is GameMode.CREATE_TOURNAMENT:
            self._move(GameMode.TOURNAMENT)
        elif self.mode is GameMode.TOURNAMENT:
            self._move(GameMode.SELECT)
            self.sport = None
            self.tournament = None
        elif self.tournament is not None:
            self._move(GameMode.TOURNAMENT)
            self.tournament = None

    # -- predictions and captaincy ---------------------------------------

    def set_prediction(self, match_id: int, outcome: Outcome) -> None:
        """Record a prediction, replacing any earlier one for the match."""
        self.predictions[match_id] = outcome

    def _require_prediction(self, match_id: int, role: str) -> None:
        if match_id not in self.predictions:
            raise ValidationError(
                f"Predict match {match_id} before making it {role}."
            )

    def set_captain(self, match_id: int) -> None:
        """Toggle the captain role on a match."""
        if self.captain == match_id:
            self.captain = None
            return
        self._require_prediction(match_id, "captain")
        self.captain = match_id
        if self.vice_captain == match_id:
            self.vice_captain = None

    def set_vice_captain(self, match_id: int) -> None:
        """Toggle the vice-captain role on a match."""
        if self.vice_captain == match_id:
            self.vice_captain = None
            return
        self._require_prediction(match_id, "vice-captain")
        self.vice_captain = match_id
        if self.captain == match_id:
            self.captain = None

    # -- session serialization -------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        # Session JSON only allows string keys.
        return {
            "sport": self.sport.value if self.sport else None,
            "tournament": self.tournament.to_dict() if self.tournament else None,
            "mode": self.mode.value,
            "predictions": {str(k): v.value for k, v in self.predictions.items()},
            "captain": self.captain,
            "vice_captain": self.vice_captain,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> GameState:
        if not data:
            return cls()
        tournament = data.get("tournament")
        return cls(
            sport=Sport(data["sport"]) if data.get("sport") else None,
            tournament=Tournament.from_dict(tournament) if tournament else None,
            mode=GameMode(data.get("mode", GameMode.SELECT.value)),
            predictions={
                int(k): Outcome(v) for k, v in (data.get("predictions") or {}).items()
            },
            captain=data.get("captain"),
            vice_captain=data.get("vice_captain"),
        )
