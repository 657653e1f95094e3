"""Pydantic schemas for interaction resources."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from rapport.models.interaction import InteractionType


class InteractionCreate(BaseModel):
    type: InteractionType
    notes: str
    interaction_date: datetime | None = None
    follow_up_date: datetime | None = None

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            msg = "Notes must not be empty"
            raise ValueError(msg)
        return cleaned


class InteractionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    owner_id: str
    type: InteractionType
    notes: str
    interaction_date: datetime
    follow_up_date: datetime | None = None
