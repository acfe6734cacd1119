# appointments/schemas/bookings.py

from datetime import date
from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from .common import ensure_end_after_start, time_of_day
from .services import ServiceRead

BookingStatus = Literal["pending", "confirmed", "cancelled"]


class BookingCreate(BaseModel):
    service_id: int
    client_email: EmailStr
    booking_date: date
    start_time: str = Field(description="Time in HH:MM format")
    end_time: str = Field(description="Time in HH:MM format")

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return time_of_day(v)

    @field_validator("booking_date")
    @classmethod
    def validate_booking_date(cls, v: date) -> date:
        if v < date.today():
            raise ValueError("The booking date must be today or later")
        return v

    @model_validator(mode="after")
    def validate_order(self):
        ensure_end_after_start(self.start_time, self.end_time)
        return self


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingRead(BaseModel):
    id: int
    service_id: int
    client_email: str
    booking_date: date
    start_time: str
    end_time: str
    status: BookingStatus

    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    service: Optional[ServiceRead] = None

    model_config = {"from_attributes": True}
