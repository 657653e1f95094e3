"""Customer API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.api.v1.common import data_response, deleted_response
from rapport.core.auth import get_current_identity
from rapport.core.db import get_session
from rapport.schemas import CustomerCreate, CustomerRead, CustomerUpdate
from rapport.services import customers as repository
from rapport.services.gate import Identity


router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: CustomerCreate,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, CustomerRead]:
    """Create a new customer owned by the caller."""

    customer = await repository.create_customer(session, identity, payload)
    return data_response(CustomerRead.model_validate(customer))


@router.get("")
async def list_customers(
    q: str | None = Query(None, max_length=255),
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, list[CustomerRead]]:
    """List the caller's customers, newest first, optionally filtered by ``q``."""

    if q:
        customers = await repository.search_customers(session, identity, q)
    else:
        customers = await repository.list_customers(session, identity)
    return data_response([CustomerRead.model_validate(customer) for customer in customers])


@router.get("/{customer_id}")
async def retrieve_customer(
    customer_id: str,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, CustomerRead]:
    """Retrieve a single customer by identifier."""

    customer = await repository.get_customer(session, identity, customer_id)
    return data_response(CustomerRead.model_validate(customer))


@router.put("/{customer_id}")
async def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, CustomerRead]:
    """Update the supplied fields of a customer."""

    customer = await repository.update_customer(session, identity, customer_id, payload)
    return data_response(CustomerRead.model_validate(customer))


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: str,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> dict[str, dict[str, bool]]:
    """Delete the customer and its interaction history."""

    await repository.delete_customer(session, identity, customer_id)
    return deleted_response()
