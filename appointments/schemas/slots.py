# appointments/schemas/slots.py
"""
Pydantic schemas for slots API.
"""

from datetime import date
from pydantic import BaseModel, Field


class SlotRead(BaseModel):
    """A bookable window."""
    start_time: str  # "HH:MM"
    end_time: str

    model_config = {"from_attributes": True}


class AvailableSlotsResponse(BaseModel):
    """Available slots of a service on a date."""
    date: date
    service_id: int
    duration_minutes: int
    slots: list[SlotRead]


class WorkingDaysResponse(BaseModel):
    days: list[int] = Field(description="Bookable weekdays, 0 = Sunday .. 6 = Saturday")
