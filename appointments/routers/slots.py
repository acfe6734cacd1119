# appointments/routers/slots.py
"""
Slots API endpoints.

GET /slots/available    - bookable slots of a service on a date
GET /slots/working-days - weekdays that have working hours
"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.slots import AvailableSlotsResponse, SlotRead, WorkingDaysResponse
from ..services.catalog import get_service
from ..services.slots import generate_available_slots, get_active_working_days


router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/available", response_model=AvailableSlotsResponse)
def get_available_slots(
    service_id: int,
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """Available time slots for a service on a specific day."""
    if target_date < date.today():
        raise HTTPException(status_code=400, detail="Date cannot be in the past")

    service = get_service(db, service_id)
    slots = generate_available_slots(db, target_date, service.id)

    return AvailableSlotsResponse(
        date=target_date,
        service_id=service.id,
        duration_minutes=service.duration_minutes,
        slots=[SlotRead(**slot.as_dict()) for slot in slots],
    )


@router.get("/working-days", response_model=WorkingDaysResponse)
def get_working_days(db: Session = Depends(get_db)):
    return WorkingDaysResponse(days=sorted(get_active_working_days(db)))
