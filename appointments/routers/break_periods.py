# appointments/routers/break_periods.py
# API: nested under a working hour for list/create, flat for PATCH/DELETE

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.break_periods import (
    BreakPeriodCreate,
    BreakPeriodRead,
    BreakPeriodUpdate,
)
from ..services import break_periods as service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/working-hours/{working_hour_id}/break-periods", response_model=list[BreakPeriodRead])
def list_break_periods(working_hour_id: int, db: Session = Depends(get_db)):
    return service.list_for_working_hour(db, working_hour_id)


@router.post(
    "/working-hours/{working_hour_id}/break-periods",
    response_model=BreakPeriodRead,
    status_code=status.HTTP_201_CREATED,
)
def create_break_period(
    working_hour_id: int,
    data: BreakPeriodCreate,
    db: Session = Depends(get_db),
):
    return service.create_break_period(db, working_hour_id, data.model_dump())


@router.patch("/break-periods/{id}", response_model=BreakPeriodRead)
def update_break_period(
    id: int,
    data: BreakPeriodUpdate,
    db: Session = Depends(get_db),
):
    return service.update_break_period(db, id, data.model_dump(exclude_unset=True))


@router.delete("/break-periods/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_break_period(id: int, db: Session = Depends(get_db)):
    service.delete_break_period(db, id)
