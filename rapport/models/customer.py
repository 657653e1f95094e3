"""Customer model definition."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rapport.models.base import Base, UTCDateTime, new_id, utcnow

if TYPE_CHECKING:
    from rapport.models.interaction import Interaction


class CustomerStatus(str, Enum):
    """Pipeline stage of a customer."""

    LEAD = "Lead"
    ACTIVE = "Active"
    CLOSED = "Closed"


class Customer(Base):
    """A customer record privately owned by one user."""

    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    owner_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(64))
    status: Mapped[CustomerStatus] = mapped_column(
        SQLEnum(CustomerStatus, name="customer_status", values_callable=lambda e: [m.value for m in e]),
        default=CustomerStatus.LEAD,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)

    interactions: Mapped[list["Interaction"]] = relationship(
        back_populates="customer", cascade="all, delete-orphan"
    )
