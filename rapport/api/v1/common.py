"""Common helpers for API responses."""
from __future__ import annotations

from typing import TypeVar


T = TypeVar("T")

DELETED = {"deleted": True}


def data_response(payload: T) -> dict[str, T]:
    """Wrap a payload in the standard data envelope."""

    return {"data": payload}


def deleted_response() -> dict[str, dict[str, bool]]:
    """Envelope returned by every successful delete."""

    return data_response(dict(DELETED))
