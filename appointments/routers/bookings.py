# appointments/routers/bookings.py
# Public: create and browse bookings. Status changes live under /admin.

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.bookings import BookingCreate, BookingRead, BookingStatus
from ..services.bookings import admission, ledger

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/", response_model=list[BookingRead])
def list_bookings(
    date: Optional[date] = None,
    status: Optional[BookingStatus] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    db: Session = Depends(get_db),
):
    return ledger.list_bookings(
        db, date=date, status=status, date_from=date_from, date_to=date_to
    )


@router.get("/{id}", response_model=BookingRead)
def get_booking(id: int, db: Session = Depends(get_db)):
    obj = ledger.get_booking(db, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.post("/", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
):
    """
    Book a time window.

    409 when the window overlaps a live booking of the same date.
    """
    return admission.create_booking(
        db,
        service_id=data.service_id,
        client_email=data.client_email,
        booking_date=data.booking_date,
        start_time=data.start_time,
        end_time=data.end_time,
    )
