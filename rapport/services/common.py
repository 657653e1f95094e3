"""Helpers shared by the repository, ledger and aggregation services."""
from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, ParamSpec, TypeVar

import pydantic
from pydantic import BaseModel
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.core.errors import StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
SchemaT = TypeVar("SchemaT", bound=BaseModel)


def coerce_payload(schema: type[SchemaT], payload: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate ``payload`` against ``schema``.

    Already-validated instances pass through untouched. Unknown keys (such
    as a client supplied ``owner_id``) are dropped by the schema.
    """

    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        message = "; ".join(str(error["msg"]) for error in errors) or "Validation error"
        raise ValidationError(message, errors=errors) from exc


def store_operation(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Translate infrastructure failures into :class:`StoreUnavailableError`.

    The wrapped coroutine must take the ``AsyncSession`` as its first
    argument; it is rolled back before the error propagates.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            session = args[0] if args else kwargs.get("session")
            if isinstance(session, AsyncSession):
                try:
                    await session.rollback()
                except (OperationalError, InterfaceError):
                    logger.warning("Rollback after store failure also failed")
            logger.exception("Store call failed", extra={"operation": func.__name__})
            raise StoreUnavailableError() from exc

    return wrapper
