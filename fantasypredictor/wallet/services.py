"""Service layer for wallet balances and the ledger."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from firebase_admin import firestore

from fantasypredictor.core.backend import BACKEND_ERRORS
from fantasypredictor.core.constants import (
    LEDGER_COLLECTION,
    LEDGER_HISTORY_LIMIT,
    USERS_COLLECTION,
)
from fantasypredictor.errors import (
    ExternalServiceError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from fantasypredictor.utils import format_money, to_money

from .models import LedgerEntry, LedgerEntryType

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client
    from google.cloud.firestore_v1.document import DocumentReference
    from google.cloud.firestore_v1.transaction import Transaction

logger = logging.getLogger(__name__)


class WalletService:
    """Moves money in and out of a user's balance.

    Every movement runs inside a Firestore transaction that reads the
    balance, checks it and writes both the new balance and a ledger entry.
    """

    @staticmethod
    def _validate_amount(amount: Any) -> Decimal:
        value = to_money(amount)
        if value <= 0:
            raise ValidationError("Please enter a valid amount.")
        return value

    @staticmethod
    def _apply_movement(
        transaction: Transaction,
        user_ref: DocumentReference,
        amount: Decimal,
        entry_type: LedgerEntryType,
        note: str,
    ) -> Decimal:
        """Read, check and write one balance movement within a transaction."""
        snapshot = user_ref.get(transaction=transaction)
        if not snapshot.exists:
            raise NotFoundError("User not found.")
        balance = to_money((snapshot.to_dict() or {}).get("balance"))

        delta = amount if entry_type is LedgerEntryType.DEPOSIT else -amount
        new_balance = balance + delta
        if new_balance < 0:
            raise InsufficientFundsError(
                f"Insufficient balance: {format_money(balance)} available, "
                f"{format_money(amount)} needed."
            )

        transaction.update(user_ref, {"balance": float(new_balance)})
        transaction.set(
            user_ref.collection(LEDGER_COLLECTION).document(),
            {
                "type": entry_type.value,
                "amount": float(delta),
                "balanceAfter": float(new_balance),
                "note": note,
                "createdAt": firestore.SERVER_TIMESTAMP,
            },
        )
        return new_balance

    @staticmethod
    def _run(
        user_uid: str,
        amount: Decimal,
        entry_type: LedgerEntryType,
        note: str,
        db: Client | None,
    ) -> Decimal:
        if db is None:
            db = firestore.client()
        user_ref = db.collection(USERS_COLLECTION).document(user_uid)
        transaction = db.transaction()
        try:
            new_balance = firestore.transactional(WalletService._apply_movement)(
                transaction, user_ref, amount, entry_type, note
            )
        except BACKEND_ERRORS as e:
            logger.error(f"Ledger {entry_type.value} failed for {user_uid}: {e}")
            raise ExternalServiceError() from e
        logger.info(
            f"Ledger {entry_type.value} of {amount} for {user_uid}, "
            f"balance now {new_balance}"
        )
        return new_balance

    @staticmethod
    def deposit(user_uid: str, amount: Any, db: Client | None = None) -> Decimal:
        """Credit the balance and return the new total."""
        value = WalletService._validate_amount(amount)
        return WalletService._run(
            user_uid, value, LedgerEntryType.DEPOSIT, "Wallet deposit", db
        )

    @staticmethod
    def withdraw(user_uid: str, amount: Any, db: Client | None = None) -> Decimal:
        """Debit the balance for a withdrawal and return the new total."""
        value = WalletService._validate_amount(amount)
        return WalletService._run(
            user_uid, value, LedgerEntryType.WITHDRAW, "Wallet withdrawal", db
        )

    @staticmethod
    def debit(
        user_uid: str, amount: Any, note: str, db: Client | None = None
    ) -> Decimal:
        """Atomically take an entry fee. Fails without writing if funds are short."""
        value = WalletService._validate_amount(amount)
        return WalletService._run(
            user_uid, value, LedgerEntryType.ENTRY_FEE, note, db
        )

    @staticmethod
    def history(
        user_uid: str, db: Client | None = None, limit: int = LEDGER_HISTORY_LIMIT
    ) -> list[LedgerEntry]:
        """Most recent ledger entries, newest first."""
        if db is None:
            db = firestore.client()
        entries_ref = (
            db.collection(USERS_COLLECTION)
            .document(user_uid)
            .collection(LEDGER_COLLECTION)
        )
        try:
            docs = list(
                entries_ref.order_by(
                    "createdAt", direction=firestore.Query.DESCENDING
                )
                .limit(limit)
                .stream()
            )
        except BACKEND_ERRORS as e:
            logger.error(f"Could not load ledger for {user_uid}: {e}")
            raise ExternalServiceError() from e

        entries: list[LedgerEntry] = []
        for doc in docs:
            entries.append({**(doc.to_dict() or {}), "id": doc.id})
        return entries
