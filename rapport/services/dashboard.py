"""Aggregation engine: read-only projections backing the dashboard.

Nothing here writes or caches; each call recomputes from the customer and
interaction tables.
"""
from __future__ import annotations

from datetime import datetime
from typing import cast

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.core.errors import ValidationError
from rapport.models import Customer, CustomerStatus, Interaction
from rapport.models.base import as_utc, utcnow
from rapport.schemas import DashboardStats, FollowUpCustomer, UpcomingFollowUp
from rapport.services.common import store_operation
from rapport.services.gate import Identity, owned, require_identity

DEFAULT_FOLLOW_UP_LIMIT = 5


@store_operation
async def dashboard_stats(session: AsyncSession, owner: Identity) -> DashboardStats:
    """Count the owner's customers per status."""

    owner = require_identity(owner)
    stmt = owned(
        select(Customer.status, func.count(Customer.id)), Customer, owner
    ).group_by(Customer.status)
    result = await session.execute(stmt)
    counts = {status: 0 for status in CustomerStatus}
    for status, count in result.all():
        counts[CustomerStatus(status)] = count

    leads = counts[CustomerStatus.LEAD]
    active = counts[CustomerStatus.ACTIVE]
    closed = counts[CustomerStatus.CLOSED]
    return DashboardStats(total=leads + active + closed, leads=leads, active=active, closed=closed)


@store_operation
async def upcoming_follow_ups(
    session: AsyncSession,
    owner: Identity,
    limit: int = DEFAULT_FOLLOW_UP_LIMIT,
    now: datetime | None = None,
) -> list[UpcomingFollowUp]:
    """Return pending follow-ups due at or after ``now``, soonest first."""

    owner = require_identity(owner)
    if limit < 0:
        raise ValidationError("limit must not be negative")
    if limit == 0:
        return []

    moment = as_utc(now) if now is not None else utcnow()
    stmt = (
        owned(select(Interaction, Customer), Interaction, owner)
        .outerjoin(
            Customer,
            and_(Customer.id == Interaction.customer_id, Customer.owner_id == owner.user_id),
        )
        .where(Interaction.follow_up_date.is_not(None))
        .where(Interaction.follow_up_date >= moment)
        .order_by(Interaction.follow_up_date.asc(), Interaction.id)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return [project_follow_up(interaction, customer) for interaction, customer in result.all()]


def project_follow_up(interaction: Interaction, customer: Customer | None) -> UpcomingFollowUp:
    """Shape a joined row; a missing customer becomes ``customer=None``."""

    return UpcomingFollowUp(
        interaction_id=interaction.id,
        type=interaction.type,
        follow_up_date=cast(datetime, interaction.follow_up_date),
        customer_id=interaction.customer_id,
        customer=FollowUpCustomer(id=customer.id, name=customer.name) if customer is not None else None,
    )
