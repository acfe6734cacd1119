# appointments/schemas/working_hours.py

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .common import ensure_end_after_start, reject_null, time_of_day


class WorkingHourCreate(BaseModel):
    day_of_week: int = Field(ge=0, le=6, description="0 = Sunday .. 6 = Saturday")
    start_time: str
    end_time: str
    is_active: bool = True

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return time_of_day(v)

    @model_validator(mode="after")
    def validate_order(self):
        ensure_end_after_start(self.start_time, self.end_time)
        return self


class WorkingHourUpdate(BaseModel):
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_active: Optional[bool] = None

    reject_nulls = field_validator("start_time", "end_time", "is_active", mode="before")(reject_null)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return time_of_day(v) if v is not None else v

    @model_validator(mode="after")
    def validate_order(self):
        ensure_end_after_start(self.start_time, self.end_time)
        return self


class WorkingHourRead(BaseModel):
    id: int
    day_of_week: int
    start_time: str
    end_time: str
    is_active: bool

    model_config = {"from_attributes": True}


class WorkingHourNamed(WorkingHourRead):
    day_name: str
    day_name_short: str


class WorkingHoursResponse(BaseModel):
    locale: str
    working_hours: list[WorkingHourNamed]
