"""Service layer for hosting tournaments."""

from __future__ import annotations

import json
import logging
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING, Any

from firebase_admin import firestore

from fantasypredictor.core.backend import BACKEND_ERRORS
from fantasypredictor.core.constants import PRIZE_SPLIT, TOURNAMENTS_COLLECTION
from fantasypredictor.errors import ExternalServiceError, ValidationError
from fantasypredictor.utils import CENTS, to_money

from .models import HostedTournament, MatchSelection, PrizeSplit

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

logger = logging.getLogger(__name__)


def prize_distribution(prize_pool: Any) -> PrizeSplit:
    """Split a prize pool 40/30/20 between the podium and 10% to the host.

    Shares are rounded down to the cent; any leftover cents go to first place
    so the shares always add up to the pool.
    """
    pool = to_money(prize_pool)
    shares = {
        place: (pool * share).quantize(CENTS, rounding=ROUND_DOWN)
        for place, share in PRIZE_SPLIT
    }
    shares["first"] += pool - sum(shares.values(), Decimal("0"))
    return PrizeSplit(**shares)


class TournamentService:
    """Handles validation and persistence of hosted tournaments."""

    @staticmethod
    def _validate(
        selection: MatchSelection, name: str | None, entry_fee: Any, max_participants: Any
    ) -> None:
        if len(selection) != selection.capacity:
            raise ValidationError(
                f"Select {selection.remaining} more matches."
            )
        if not name or not name.strip():
            raise ValidationError("Enter tournament name.")
        if entry_fee is None or entry_fee <= 0:
            raise ValidationError("Entry fee must be greater than zero.")
        if max_participants is None or max_participants <= 0:
            raise ValidationError("Max participants must be greater than zero.")

    @staticmethod
    def create_tournament(
        selection: MatchSelection,
        name: str | None,
        entry_fee: Any,
        max_participants: Any,
        host_uid: str,
        db: Client | None = None,
    ) -> str:
        """Store a new tournament and return its ID.

        Exactly one write is attempted. A backend failure surfaces as
        ExternalServiceError and is not retried.
        """
        TournamentService._validate(selection, name, entry_fee, max_participants)
        if db is None:
            db = firestore.client()

        payload: HostedTournament = {
            "host_id": host_uid,
            "name": name.strip(),
            "sport": selection.sport.value,
            "entry_fee": float(to_money(entry_fee)),
            "prize_pool": 0.0,
            "participants": 0,
            "max_participants": int(max_participants),
            "selected_matches": json.dumps([m.to_dict() for m in selection.matches]),
            "createdAt": firestore.SERVER_TIMESTAMP,
        }
        try:
            _, ref = db.collection(TOURNAMENTS_COLLECTION).add(payload)
        except BACKEND_ERRORS as e:
            logger.error(f"Error creating tournament for {host_uid}: {e}")
            raise ExternalServiceError(
                "Failed to create tournament. Please try again later."
            ) from e

        logger.info(f"Tournament {ref.id} created by {host_uid}")
        return str(ref.id)
