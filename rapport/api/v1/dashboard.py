"""Dashboard API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.api.v1.common import data_response
from rapport.core.auth import get_current_identity
from rapport.core.config import Settings, get_settings
from rapport.core.db import get_session
from rapport.schemas import DashboardStats, UpcomingFollowUp
from rapport.services import dashboard as aggregation
from rapport.services.gate import Identity

MAX_FOLLOW_UP_LIMIT = 50

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats")
async def read_stats(
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, DashboardStats]:
    """Customer counts per status."""

    return data_response(await aggregation.dashboard_stats(session, identity))


@router.get("/follow-ups")
async def read_follow_ups(
    limit: int | None = Query(None, ge=1, le=MAX_FOLLOW_UP_LIMIT),
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
    settings: Settings = Depends(get_settings),
) -> dict[str, list[UpcomingFollowUp]]:
    """Follow-ups due from now on, soonest first."""

    feed_limit = limit if limit is not None else settings.follow_up_feed_limit
    follow_ups = await aggregation.upcoming_follow_ups(session, identity, limit=feed_limit)
    return data_response(follow_ups)
