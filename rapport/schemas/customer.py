"""Pydantic schemas for customer resources."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rapport.models.customer import CustomerStatus

CustomerName = Annotated[str, Field(max_length=255)]


def _clean_name(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        msg = "Name must not be empty"
        raise ValueError(msg)
    return cleaned


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


class CustomerContact(BaseModel):
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)

    @field_validator("email", "phone")
    @classmethod
    def normalise_optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class CustomerCreate(CustomerContact):
    name: CustomerName
    status: CustomerStatus = CustomerStatus.LEAD

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _clean_name(value)


class CustomerUpdate(CustomerContact):
    """Partial update; only fields present in the request are applied."""

    name: CustomerName | None = None
    status: CustomerStatus | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        return _clean_name(value)

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "CustomerUpdate":
        for field in ("name", "status"):
            if field in self.model_fields_set and getattr(self, field) is None:
                msg = f"{field} cannot be null"
                raise ValueError(msg)
        return self


class CustomerRead(CustomerContact):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    status: CustomerStatus
    created_at: datetime
