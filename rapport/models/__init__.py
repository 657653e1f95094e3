"""Database models package for the relationship tracking service."""

from .base import Base
from .customer import Customer, CustomerStatus
from .interaction import Interaction, InteractionType
from .profile import Profile

__all__ = [
    "Base",
    "Customer",
    "CustomerStatus",
    "Interaction",
    "InteractionType",
    "Profile",
]
