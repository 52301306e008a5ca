"""Data models for the auth blueprint."""

from __future__ import annotations

from typing import Any, TypedDict


class User(TypedDict, total=False):
    """A document in the users collection, plus the uid it is keyed by."""

    uid: str
    username: str
    email: str
    balance: float
    createdAt: Any
