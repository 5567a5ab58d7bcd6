"""Pydantic schemas for equipment API."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EquipmentWrite(BaseModel):
    """Payload for creating or updating equipment.

    Every field is optional here so that updates can be partial; required
    fields and lengths are checked by the equipment service. Unknown keys
    (including id and timestamps) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, examples=["Drill"])
    category: str | None = Field(default=None, examples=["Tools"])
    number: str | None = Field(default=None, examples=["T-001"])
    description: str | None = Field(default=None, examples=["Cordless"])


class EquipmentResponse(BaseModel):
    """Equipment in list/detail responses."""

    id: int
    name: str
    category: str | None = None
    number: str
    description: str = ""
    createdAt: datetime
    updatedAt: datetime | None = None


class ErrorResponse(BaseModel):
    """Error body for 400/404/500 responses."""

    error: str
