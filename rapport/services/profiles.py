"""Profile lookups used when describing the signed-in user."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from rapport.models import Profile
from rapport.schemas import MeRead
from rapport.services.common import store_operation
from rapport.services.gate import Identity, require_identity


@store_operation
async def describe_identity(session: AsyncSession, owner: Identity) -> MeRead:
    owner = require_identity(owner)
    profile = await session.get(Profile, owner.user_id)
    return MeRead(
        id=owner.user_id,
        email=owner.email,
        display_name=profile.display_name if profile is not None else None,
    )
