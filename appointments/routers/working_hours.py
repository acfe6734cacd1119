# appointments/routers/working_hours.py
# API: one entry per weekday; DELETE = hard (break periods go with it)

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..schemas.working_hours import (
    WorkingHourCreate,
    WorkingHourRead,
    WorkingHoursResponse,
    WorkingHourUpdate,
)
from ..services import working_hours as service

router = APIRouter(prefix="/admin/working-hours", tags=["admin"])


@router.get("/", response_model=WorkingHoursResponse)
def list_working_hours(
    locale: Optional[str] = None,
    db: Session = Depends(get_db),
):
    locale = locale or settings.default_locale
    return WorkingHoursResponse(
        locale=locale,
        working_hours=service.list_with_day_names(db, locale),
    )


@router.post("/", response_model=WorkingHourRead, status_code=status.HTTP_201_CREATED)
def create_working_hour(
    data: WorkingHourCreate,
    db: Session = Depends(get_db),
):
    return service.create_working_hour(db, data.model_dump())


@router.patch("/{id}", response_model=WorkingHourRead)
def update_working_hour(
    id: int,
    data: WorkingHourUpdate,
    db: Session = Depends(get_db),
):
    return service.update_working_hour(db, id, data.model_dump(exclude_unset=True))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_working_hour(id: int, db: Session = Depends(get_db)):
    service.delete_working_hour(db, id)
