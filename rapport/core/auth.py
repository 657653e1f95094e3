"""Bearer token verification for the HTTP boundary.

Session tokens are issued by the external identity provider as signed JWTs.
This module only verifies them and turns the ``sub``/``email`` claims into an
:class:`~rapport.services.gate.Identity`.
"""
from __future__ import annotations

import logging
from typing import Any

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from rapport.core.config import Settings, get_settings
from rapport.core.errors import UnauthenticatedError
from rapport.services.gate import Identity

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """Validate ``token`` and return its claims.

    Raises:
        UnauthenticatedError: If verification is not configured or the token
            is expired, malformed or signed with another key.
    """

    if not settings.auth_jwt_secret:
        logger.warning("Rejected token because AUTH_JWT_SECRET is not configured")
        raise UnauthenticatedError("Authentication is not configured")

    options: dict[str, Any] = {"verify_exp": True, "require": ["sub"]}
    if not settings.auth_jwt_audience:
        options["verify_aud"] = False

    try:
        return jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=settings.auth_jwt_algorithms,
            audience=settings.auth_jwt_audience or None,
            options=options,
        )
    except jwt.ExpiredSignatureError as exc:
        logger.info("Rejected expired session token")
        raise UnauthenticatedError("Session has expired") from exc
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected invalid session token", extra={"reason": str(exc)})
        raise UnauthenticatedError("Invalid session token") from exc


def identity_from_claims(claims: dict[str, Any]) -> Identity:
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise UnauthenticatedError("Invalid session token")
    email = claims.get("email")
    return Identity(user_id=subject, email=email if isinstance(email, str) else None)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """FastAPI dependency resolving the acting identity from the request."""

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthenticatedError()
    claims = decode_token(credentials.credentials, settings)
    return identity_from_claims(claims)
