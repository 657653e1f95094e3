"""Interaction ledger: append and delete events recorded against a customer."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.core.errors import NotFoundError
from rapport.models import Interaction
from rapport.models.base import utcnow
from rapport.schemas import InteractionCreate
from rapport.services.common import coerce_payload, store_operation
from rapport.services.customers import get_customer
from rapport.services.gate import Identity, owned, require_identity

logger = logging.getLogger(__name__)


@store_operation
async def customer_history(
    session: AsyncSession, owner: Identity, customer_id: str
) -> list[Interaction]:
    """Return a customer's interactions, most recent ``interaction_date`` first."""

    owner = require_identity(owner)
    customer = await get_customer(session, owner, customer_id)

    stmt = (
        owned(select(Interaction), Interaction, owner)
        .where(Interaction.customer_id == customer.id)
        .order_by(Interaction.interaction_date.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


@store_operation
async def log_interaction(
    session: AsyncSession,
    owner: Identity,
    customer_id: str,
    payload: InteractionCreate | Mapping[str, Any],
) -> Interaction:
    owner = require_identity(owner)
    data = coerce_payload(InteractionCreate, payload)
    customer = await get_customer(session, owner, customer_id)

    interaction = Interaction(
        customer_id=customer.id,
        owner_id=owner.user_id,
        type=data.type,
        notes=data.notes,
        interaction_date=data.interaction_date or utcnow(),
        follow_up_date=data.follow_up_date,
    )
    session.add(interaction)
    try:
        await session.commit()
    except IntegrityError as exc:
        # customer row went away between the lookup and the insert
        await session.rollback()
        raise NotFoundError("Customer not found") from exc
    await session.refresh(interaction)
    logger.info(
        "Interaction logged",
        extra={
            "interaction_id": interaction.id,
            "customer_id": customer.id,
            "owner_id": owner.user_id,
            "has_follow_up": interaction.follow_up_date is not None,
        },
    )
    return interaction


@store_operation
async def remove_interaction(session: AsyncSession, owner: Identity, interaction_id: str) -> None:
    """Delete a single interaction; the parent customer is not reloaded."""

    owner = require_identity(owner)
    stmt = owned(select(Interaction), Interaction, owner).where(Interaction.id == interaction_id)
    result = await session.execute(stmt)
    interaction = result.scalar_one_or_none()
    if interaction is None:
        raise NotFoundError("Interaction not found")

    await session.delete(interaction)
    await session.commit()
    logger.info(
        "Interaction removed",
        extra={"interaction_id": interaction_id, "owner_id": owner.user_id},
    )
