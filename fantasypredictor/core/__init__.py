"""Core module for the fantasypredictor application."""

from .types import APIResponse

__all__ = ["APIResponse"]
