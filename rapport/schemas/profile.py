"""Pydantic schemas for the signed-in user."""
from __future__ import annotations

from pydantic import BaseModel


class MeRead(BaseModel):
    id: str
    email: str | None = None
    display_name: str | None = None
