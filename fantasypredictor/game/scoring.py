"""Scoring engine for match predictions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Optional

from fantasypredictor.core.constants import (
    BASE_POINTS,
    CAPTAIN_MULTIPLIER,
    MATCHES_PER_GAME,
    VICE_CAPTAIN_MULTIPLIER,
)

from .models import Match, Outcome, ScoreSummary


def match_points(
    match_id: int, captain: Optional[int], vice_captain: Optional[int]
) -> Decimal:
    """Points awarded for a correct prediction on a match."""
    if captain == match_id:
        return BASE_POINTS * CAPTAIN_MULTIPLIER
    if vice_captain == match_id:
        return BASE_POINTS * VICE_CAPTAIN_MULTIPLIER
    return BASE_POINTS


def calculate_score(
    matches: Iterable[Match],
    predictions: Mapping[int, Outcome],
    captain: Optional[int] = None,
    vice_captain: Optional[int] = None,
) -> ScoreSummary:
    """Score predictions against the settled results of a catalog.

    Unanswered matches count towards neither total nor correct. A wrong
    prediction scores nothing even on a captain.
    """
    correct = 0
    total = 0
    score = Decimal("0")

    for match in matches:
        predicted = predictions.get(match.id)
        if predicted is None:
            continue
        total += 1
        if predicted == match.actual_result:
            correct += 1
            score += match_points(match.id, captain, vice_captain)

    return ScoreSummary(correct=correct, total=total, score=score)


def remaining_predictions(
    matches: Iterable[Match], predictions: Mapping[int, Outcome]
) -> int:
    """How many catalog matches still need a prediction."""
    return sum(1 for match in matches if match.id not in predictions)


def max_score() -> Decimal:
    """Best possible score: every match right, captain and vice-captain used."""
    return (
        BASE_POINTS * (MATCHES_PER_GAME - 2)
        + BASE_POINTS * CAPTAIN_MULTIPLIER
        + BASE_POINTS * VICE_CAPTAIN_MULTIPLIER
    )
