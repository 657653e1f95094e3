"""Interaction model definition."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rapport.models.base import Base, UTCDateTime, new_id, utcnow

if TYPE_CHECKING:
    from rapport.models.customer import Customer


class InteractionType(str, Enum):
    """Permitted interaction categories."""

    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"


class Interaction(Base):
    """A logged touch point with a customer. Never edited after creation."""

    __tablename__ = "interactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id", ondelete="CASCADE"), index=True, nullable=False
    )
    owner_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    type: Mapped[InteractionType] = mapped_column(
        SQLEnum(InteractionType, name="interaction_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    notes: Mapped[str] = mapped_column(Text(), nullable=False)
    interaction_date: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
    follow_up_date: Mapped[datetime | None] = mapped_column(UTCDateTime(), index=True)

    customer: Mapped["Customer"] = relationship(back_populates="interactions")
