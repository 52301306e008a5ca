"""Core data types for the fantasypredictor application."""

from typing import Any, Dict, Optional, TypedDict  # noqa: UP035


class APIResponse(TypedDict):
    """Generic API response structure."""

    success: bool
    message: str
    data: Optional[Dict[str, Any]]  # noqa: UP006
