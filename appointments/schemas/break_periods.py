# appointments/schemas/break_periods.py

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .common import ensure_end_after_start, reject_null, time_of_day


class BreakPeriodCreate(BaseModel):
    start_time: str
    end_time: str
    name: Optional[str] = Field(None, max_length=255)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return time_of_day(v)

    @model_validator(mode="after")
    def validate_order(self):
        ensure_end_after_start(self.start_time, self.end_time)
        return self


class BreakPeriodUpdate(BaseModel):
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    name: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None

    # name may be cleared with null
    reject_nulls = field_validator("start_time", "end_time", "is_active", mode="before")(reject_null)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return time_of_day(v) if v is not None else v

    @model_validator(mode="after")
    def validate_order(self):
        ensure_end_after_start(self.start_time, self.end_time)
        return self


class BreakPeriodRead(BaseModel):
    id: int
    working_hour_id: int
    start_time: str
    end_time: str
    name: Optional[str] = None
    is_active: bool

    model_config = {"from_attributes": True}
