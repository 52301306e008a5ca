"""Static match and tournament catalogs.

Every sport ships exactly ten settled matches. Match ids are only unique
within one sport's catalog.
"""

from __future__ import annotations

from decimal import Decimal

from fantasypredictor.errors import NotFoundError

from .models import Match, Outcome, Sport, Tournament

T1, DRAW, T2 = Outcome.TEAM1, Outcome.DRAW, Outcome.TEAM2


def _catalog(sport: Sport, fixtures: list[tuple[str, str, Outcome]]) -> tuple[Match, ...]:
    return tuple(
        Match(id=i, team1=team1, team2=team2, sport=sport, actual_result=result)
        for i, (team1, team2, result) in enumerate(fixtures, start=1)
    )


MATCH_CATALOGS: dict[Sport, tuple[Match, ...]] = {
    Sport.BASKETBALL: _catalog(
        Sport.BASKETBALL,
        [
            ("Lakers", "Warriors", T1),
            ("Celtics", "Heat", T2),
            ("Bulls", "Nets", T1),
            ("Knicks", "Sixers", DRAW),
            ("Nuggets", "Clippers", T2),
            ("Suns", "Mavericks", T1),
            ("Bucks", "Hawks", T1),
            ("Jazz", "Blazers", T2),
            ("Kings", "Rockets", DRAW),
            ("Spurs", "Magic", T1),
        ],
    ),
    Sport.FOOTBALL: _catalog(
        Sport.FOOTBALL,
        [
            ("Chiefs", "Bills", T1),
            ("Cowboys", "Eagles", T2),
            ("Packers", "Bears", T1),
            ("Rams", "Seahawks", DRAW),
            ("Patriots", "Dolphins", T2),
            ("Steelers", "Ravens", T1),
            ("Broncos", "Raiders", T1),
            ("Saints", "Falcons", T2),
            ("Vikings", "Lions", DRAW),
            ("Titans", "Colts", T1),
        ],
    ),
    # Tennis has no draws.
    Sport.TENNIS: _catalog(
        Sport.TENNIS,
        [
            ("Sinner", "Alcaraz", T2),
            ("Djokovic", "Medvedev", T1),
            ("Zverev", "Rune", T1),
            ("Fritz", "Ruud", T2),
            ("Sabalenka", "Swiatek", T1),
            ("Gauff", "Rybakina", T1),
            ("Pegula", "Zheng", T2),
            ("Tsitsipas", "De Minaur", T2),
            ("Paolini", "Keys", T1),
            ("Draper", "Shelton", T2),
        ],
    ),
}

# (suffix, name, entry fee, prize pool, participants, max participants)
_TIERS = (
    ("basic", "Basic Tournament", 100, 5000, 45, 100),
    ("premium", "Premium Tournament", 500, 25000, 32, 50),
    ("elite", "Elite Tournament", 1000, 50000, 18, 25),
)


def get_sport(value: str | None) -> Sport:
    """Parse a sport name, raising NotFoundError for unknown sports."""
    try:
        return Sport(value)
    except ValueError:
        raise NotFoundError(f"Unknown sport: {value}") from None


def get_matches(sport: Sport) -> tuple[Match, ...]:
    """Return the fixed match catalog for a sport."""
    return MATCH_CATALOGS[sport]


def get_match(sport: Sport, match_id: int) -> Match:
    """Look up one catalog match."""
    for match in MATCH_CATALOGS[sport]:
        if match.id == match_id:
            return match
    raise NotFoundError(f"Match {match_id} is not in the {sport.value} catalog.")


def get_tournaments(sport: Sport) -> list[Tournament]:
    """Return the joinable tournament tiers for a sport."""
    return [
        Tournament(
            id=f"{sport.value}-{suffix}",
            name=name,
            entry_fee=Decimal(fee),
            prize_pool=Decimal(pool),
            participants=participants,
            max_participants=max_participants,
        )
        for suffix, name, fee, pool, participants, max_participants in _TIERS
    ]


def get_tournament(sport: Sport, tournament_id: str) -> Tournament:
    """Look up one tournament tier by id."""
    for tournament in get_tournaments(sport):
        if tournament.id == tournament_id:
            return tournament
    raise NotFoundError("Tournament not found.")
