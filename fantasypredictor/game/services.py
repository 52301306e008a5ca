"""Service layer tying the game state to the session and the wallet."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flask import session

from fantasypredictor.errors import CapacityError, InsufficientFundsError
from fantasypredictor.utils import format_money, to_money
from fantasypredictor.wallet.services import WalletService

from .models import Tournament
from .state import GameState

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

    from fantasypredictor.auth.models import User

logger = logging.getLogger(__name__)

SESSION_KEY = "game"


class GameService:
    """Loads, stores and advances the game kept in the user's session."""

    @staticmethod
    def load() -> GameState:
        """Return the game stored in the session, or a fresh one."""
        try:
            return GameState.from_dict(session.get(SESSION_KEY))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable game state: {e}")
            return GameState()

    @staticmethod
    def save(state: GameState) -> None:
        session[SESSION_KEY] = state.to_dict()

    @staticmethod
    def reset() -> GameState:
        """Start over from the sport picker."""
        state = GameState()
        GameService.save(state)
        return state

    @staticmethod
    def join_tournament(
        state: GameState, user: User, tournament: Tournament, db: Client | None = None
    ) -> None:
        """Take the entry fee and enter the tournament.

        The balance check here only gives a friendly message early; the
        ledger debit is what actually guards against overdrawing.
        """
        if tournament.is_full:
            raise CapacityError(f"{tournament.name} is full.")
        balance = to_money(user.get("balance"))
        if balance < tournament.entry_fee:
            raise InsufficientFundsError(
                f"Insufficient balance: {tournament.name} costs "
                f"{format_money(tournament.entry_fee)}."
            )

        state.ensure_can_join()

        WalletService.debit(
            user["uid"],
            tournament.entry_fee,
            note=f"Entry fee: {tournament.name} ({tournament.id})",
            db=db,
        )
        state.join_tournament(tournament)
        logger.info(f"User {user['uid']} joined {tournament.id}")
