"""Wallet blueprint."""

from flask import Blueprint

bp = Blueprint("wallet", __name__, url_prefix="/wallet")

from . import routes  # noqa: E402, F401
from .services import WalletService  # noqa: E402

__all__ = ["WalletService", "routes"]
