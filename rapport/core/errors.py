"""Error taxonomy shared by the repository, ledger and aggregation layers."""
from __future__ import annotations

from fastapi import status


class RapportError(Exception):
    """Base class for failures surfaced to callers of the core services."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(RapportError):
    """No valid session accompanied the call."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"
    default_message = "Authentication required"


class NotFoundError(RapportError):
    """The row is absent or belongs to another owner.

    Both cases share one message so callers cannot probe for other users' ids.
    """

    status_code = status.HTTP_404_NOT_FOUND
    code = "RESOURCE_NOT_FOUND"
    default_message = "Resource not found"


class ValidationError(RapportError):
    """Malformed input such as blank required text or an unknown enum value."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "VALIDATION_ERROR"
    default_message = "Validation error"

    def __init__(self, message: str | None = None, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class StoreUnavailableError(RapportError):
    """The persistent store failed for infrastructure reasons."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "STORE_UNAVAILABLE"
    default_message = "Storage is temporarily unavailable"
