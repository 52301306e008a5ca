"""Data models for the wallet blueprint."""

from __future__ import annotations

import enum
from typing import Any, TypedDict


class LedgerEntryType(str, enum.Enum):
    """Kinds of balance movement."""

    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    ENTRY_FEE = "entry_fee"


class LedgerEntry(TypedDict, total=False):
    """A document in users/{uid}/ledger."""

    id: str
    type: str
    amount: float
    balanceAfter: float
    note: str
    createdAt: Any
