"""Interaction API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.api.v1.common import data_response, deleted_response
from rapport.core.auth import get_current_identity
from rapport.core.db import get_session
from rapport.schemas import InteractionCreate, InteractionRead
from rapport.services import interactions as ledger
from rapport.services.gate import Identity


router = APIRouter(tags=["interactions"])


@router.get("/customers/{customer_id}/interactions")
async def list_customer_interactions(
    customer_id: str,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, list[InteractionRead]]:
    """Return the customer's interaction history, newest first."""

    interactions = await ledger.customer_history(session, identity, customer_id)
    return data_response([InteractionRead.model_validate(item) for item in interactions])


@router.post("/customers/{customer_id}/interactions", status_code=status.HTTP_201_CREATED)
async def log_interaction(
    customer_id: str,
    payload: InteractionCreate,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, InteractionRead]:
    """Record a call, email or meeting against a customer."""

    interaction = await ledger.log_interaction(session, identity, customer_id, payload)
    return data_response(InteractionRead.model_validate(interaction))


@router.delete("/interactions/{interaction_id}")
async def delete_interaction(
    interaction_id: str,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, dict[str, bool]]:
    """Delete an interaction."""

    await ledger.remove_interaction(session, identity, interaction_id)
    return deleted_response()
