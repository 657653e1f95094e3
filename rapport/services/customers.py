"""Customer repository: owner-scoped CRUD and search over customer records."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rapport.core.errors import NotFoundError
from rapport.models import Customer
from rapport.schemas import CustomerCreate, CustomerUpdate
from rapport.services.common import coerce_payload, store_operation
from rapport.services.gate import Identity, owned, require_identity

logger = logging.getLogger(__name__)


@store_operation
async def list_customers(session: AsyncSession, owner: Identity) -> list[Customer]:
    """Return the owner's customers, newest first."""

    owner = require_identity(owner)
    stmt = owned(select(Customer), Customer, owner).order_by(Customer.created_at.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


@store_operation
async def get_customer(session: AsyncSession, owner: Identity, customer_id: str) -> Customer:
    """Load one customer or raise :class:`NotFoundError`.

    A row owned by somebody else is reported exactly like a missing row.
    """

    owner = require_identity(owner)
    stmt = owned(select(Customer), Customer, owner).where(Customer.id == customer_id)
    result = await session.execute(stmt)
    customer = result.scalar_one_or_none()
    if customer is None:
        raise NotFoundError("Customer not found")
    return customer


@store_operation
async def create_customer(
    session: AsyncSession,
    owner: Identity,
    payload: CustomerCreate | Mapping[str, Any],
) -> Customer:
    owner = require_identity(owner)
    data = coerce_payload(CustomerCreate, payload)

    customer = Customer(**data.model_dump(), owner_id=owner.user_id)
    session.add(customer)
    await session.commit()
    await session.refresh(customer)
    logger.info(
        "Customer created", extra={"customer_id": customer.id, "owner_id": owner.user_id}
    )
    return customer


@store_operation
async def update_customer(
    session: AsyncSession,
    owner: Identity,
    customer_id: str,
    payload: CustomerUpdate | Mapping[str, Any],
) -> Customer:
    """Apply a partial update; fields absent from ``payload`` are left alone."""

    owner = require_identity(owner)
    data = coerce_payload(CustomerUpdate, payload)
    customer = await get_customer(session, owner, customer_id)

    updates = data.model_dump(exclude_unset=True)
    if not updates:
        return customer

    for field, value in updates.items():
        setattr(customer, field, value)

    await session.commit()
    await session.refresh(customer)
    logger.info(
        "Customer updated",
        extra={"customer_id": customer.id, "owner_id": owner.user_id, "fields": sorted(updates)},
    )
    return customer


@store_operation
async def delete_customer(session: AsyncSession, owner: Identity, customer_id: str) -> None:
    """Delete a customer together with all of its interactions."""

    owner = require_identity(owner)
    customer = await get_customer(session, owner, customer_id)
    await session.delete(customer)
    await session.commit()
    logger.info("Customer deleted", extra={"customer_id": customer_id, "owner_id": owner.user_id})


async def search_customers(session: AsyncSession, owner: Identity, query: str) -> list[Customer]:
    """Case-insensitive substring match on name or email.

    Filtering runs over the already fetched owned list, so ordering is the
    same as :func:`list_customers`.
    """

    customers = await list_customers(session, owner)
    if not query:
        return customers
    needle = query.lower()
    return [customer for customer in customers if _matches(customer, needle)]


def _matches(customer: Customer, needle: str) -> bool:
    if needle in customer.name.lower():
        return True
    return customer.email is not None and needle in customer.email.lower()
