"""Tests for the match and tournament catalogs."""

import pytest

from fantasypredictor.errors import NotFoundError
from fantasypredictor.game.catalog import (
    get_match,
    get_matches,
    get_sport,
    get_tournament,
    get_tournaments,
)
from fantasypredictor.game.models import Outcome, Sport


@pytest.mark.parametrize("sport", list(Sport))
def test_every_sport_has_ten_settled_matches(sport):
    matches = get_matches(sport)
    assert [m.id for m in matches] == list(range(1, 11))
    assert all(m.sport is sport for m in matches)
    assert all(m.actual_result is not None for m in matches)


def test_tennis_has_no_draws():
    assert all(m.actual_result is not Outcome.DRAW for m in get_matches(Sport.TENNIS))


def test_get_sport():
    assert get_sport("football") is Sport.FOOTBALL
    with pytest.raises(NotFoundError):
        get_sport("cricket")
    with pytest.raises(NotFoundError):
        get_sport(None)


def test_get_match():
    match = get_match(Sport.BASKETBALL, 1)
    assert (match.team1, match.team2) == ("Lakers", "Warriors")
    with pytest.raises(NotFoundError):
        get_match(Sport.BASKETBALL, 11)


def test_tournament_tiers():
    tiers = get_tournaments(Sport.FOOTBALL)
    assert [t.id for t in tiers] == [
        "football-basic",
        "football-premium",
        "football-elite",
    ]
    assert [int(t.entry_fee) for t in tiers] == [100, 500, 1000]
    assert not any(t.is_full for t in tiers)
    assert get_tournament(Sport.FOOTBALL, "football-elite").max_participants == 25
    with pytest.raises(NotFoundError):
        get_tournament(Sport.FOOTBALL, "basketball-elite")
