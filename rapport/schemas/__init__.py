"""Pydantic schemas for the relationship tracking service."""

from .customer import CustomerCreate, CustomerRead, CustomerUpdate
from .dashboard import DashboardStats, FollowUpCustomer, UpcomingFollowUp
from .interaction import InteractionCreate, InteractionRead
from .profile import MeRead

__all__ = [
    "CustomerCreate",
    "CustomerRead",
    "CustomerUpdate",
    "DashboardStats",
    "FollowUpCustomer",
    "InteractionCreate",
    "InteractionRead",
    "MeRead",
    "UpcomingFollowUp",
]
