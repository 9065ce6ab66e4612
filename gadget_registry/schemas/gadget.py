"""Gadget request/response schemas - REST API contract (camelCase on the wire)."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GadgetBase(BaseModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    price_per_day: float | None = Field(default=None, alias="pricePerDay")
    owner: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class GadgetCreate(GadgetBase):
    """All fields optional. Server-owned fields (id, timestamps, availability, rentedBy) are ignored."""

    model_config = ConfigDict(extra="ignore")


class RentRequest(BaseModel):
    renter: str = Field(..., min_length=1)


class GadgetResponse(GadgetBase):
    id: str
    availability: bool
    rented_by: str | None = Field(default=None, alias="rentedBy")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        """Timestamps are stored in UTC; backends without time zones (SQLite) return them naive."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
