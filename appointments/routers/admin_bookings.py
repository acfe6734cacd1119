# appointments/routers/admin_bookings.py
# API: PATCH = status only, DELETE = hard

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.bookings import BookingRead, BookingStatus, BookingStatusUpdate
from ..services.bookings import admission, ledger

router = APIRouter(prefix="/admin/bookings", tags=["admin"])


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


@router.patch("/{id}", response_model=BookingRead)
def update_booking_status(
    id: int,
    data: BookingStatusUpdate,
    db: Session = Depends(get_db),
):
    # no overlap re-check here, see admission.update_booking_status
    return admission.update_booking_status(db, id, data.status)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(id: int, db: Session = Depends(get_db)):
    admission.delete_booking(db, id)
