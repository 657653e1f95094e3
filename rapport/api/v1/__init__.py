"""Version 1 API routes for the relationship tracking service."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.api.v1.common import data_response
from rapport.api.v1.customers import router as customers_router
from rapport.api.v1.dashboard import router as dashboard_router
from rapport.api.v1.interactions import router as interactions_router
from rapport.core.auth import get_current_identity
from rapport.core.config import Settings, get_settings
from rapport.core.db import get_session
from rapport.schemas import MeRead
from rapport.services.gate import Identity
from rapport.services.profiles import describe_identity

router = APIRouter()
router.include_router(customers_router)
router.include_router(interactions_router)
router.include_router(dashboard_router)


@router.get("/health", tags=["health"])
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, dict[str, str]]:
    """Report the service health information."""
    return {"data": {"status": "ok", "version": settings.version}}


@router.get("/me", tags=["identity"])
async def read_me(
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, MeRead]:
    """Describe the signed-in user."""
    return data_response(await describe_identity(session, identity))
