# appointments/schemas/services.py

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from .common import reject_null


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    duration_minutes: int = Field(ge=5, le=480)
    price: float = Field(ge=0)

    model_config = {"from_attributes": True}


class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    duration_minutes: Optional[int] = Field(None, ge=5, le=480)
    price: Optional[float] = Field(None, ge=0)
    is_active: Optional[bool] = None

    reject_nulls = field_validator("name", "duration_minutes", "price", "is_active", mode="before")(reject_null)

    model_config = {"from_attributes": True}


class ServiceRead(BaseModel):
    id: int
    name: str
    duration_minutes: int
    price: float
    is_active: bool

    model_config = {"from_attributes": True}
