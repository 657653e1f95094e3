"""Read-side projections for the dashboard."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, computed_field

from rapport.models.interaction import InteractionType


class DashboardStats(BaseModel):
    total: int
    leads: int
    active: int
    closed: int


class FollowUpCustomer(BaseModel):
    id: str
    name: str


class UpcomingFollowUp(BaseModel):
    """A pending follow-up joined to its customer.

    ``customer`` is ``None`` when the parent row no longer exists; the row is
    still listed so the reminder is not silently lost.
    """

    model_config = ConfigDict(frozen=True)

    interaction_id: str
    type: InteractionType
    follow_up_date: datetime
    customer_id: str
    customer: FollowUpCustomer | None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def customer_name(self) -> str | None:
        return self.customer.name if self.customer is not None else None
