"""Owner scoping applied at the data-access boundary.

Every repository, ledger and aggregation call receives the acting
:class:`Identity` explicitly. Reads are narrowed with :func:`owned`; writes
take ``owner_id`` from the identity and never from the payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy import Select

from rapport.core.errors import UnauthenticatedError

SelectT = TypeVar("SelectT", bound=Select[Any])


@dataclass(frozen=True)
class Identity:
    """The authenticated user on whose behalf a call is made."""

    user_id: str
    email: str | None = None


def require_identity(owner: Identity | None) -> Identity:
    """Return ``owner`` or fail when no usable identity is present."""

    if owner is None or not owner.user_id or not owner.user_id.strip():
        raise UnauthenticatedError()
    return owner


def owned(stmt: SelectT, model: Any, owner: Identity) -> SelectT:
    """Restrict ``stmt`` to rows of ``model`` belonging to ``owner``."""

    return stmt.where(model.owner_id == owner.user_id)
