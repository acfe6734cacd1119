# appointments/services/bookings/ledger.py
"""
Booking ledger: read access to stored bookings.

has_conflict() is evaluated with intervals.overlaps() over the same rows
the slot generator filters against, so a slot reported as free is exactly
a window that has_conflict() accepts.
"""

from datetime import date

from sqlalchemy.orm import Session, joinedload

from ...models import Bookings
from ..intervals import normalize_time, overlaps


def find_by_date(
    db: Session,
    booking_date: date,
    exclude_cancelled: bool = True,
    for_update: bool = False,
) -> list[Bookings]:
    """
    Bookings stored for a date, ordered by start time.

    for_update=True locks the returned rows (SELECT ... FOR UPDATE) on
    backends that support it; admission uses it inside its transaction.
    """
    query = db.query(Bookings).filter(Bookings.booking_date == booking_date.isoformat())
    if exclude_cancelled:
        query = query.filter(Bookings.status != "cancelled")
    query = query.order_by(Bookings.start_time)
    if for_update:
        query = query.with_for_update()
    return query.all()


def find_conflicts(
    db: Session,
    booking_date: date,
    start_time: str,
    end_time: str,
    for_update: bool = False,
) -> list[Bookings]:
    """Non-cancelled bookings on the date overlapping [start_time, end_time)."""
    start_time = normalize_time(start_time)
    end_time = normalize_time(end_time)
    return [
        booking
        for booking in find_by_date(db, booking_date, for_update=for_update)
        if overlaps(start_time, end_time, booking.start_time, booking.end_time)
    ]


def has_conflict(db: Session, booking_date: date, start_time: str, end_time: str) -> bool:
    """True if a non-cancelled booking on the date overlaps the window."""
    return bool(find_conflicts(db, booking_date, start_time, end_time))


def get_booking(db: Session, booking_id: int) -> Bookings | None:
    return (
        db.query(Bookings)
        .options(joinedload(Bookings.service))
        .filter(Bookings.id == booking_id)
        .first()
    )


def list_for_date(db: Session, booking_date: date) -> list[Bookings]:
    """All bookings of a date (any status), chronological, with their service."""
    return (
        db.query(Bookings)
        .options(joinedload(Bookings.service))
        .filter(Bookings.booking_date == booking_date.isoformat())
        .order_by(Bookings.start_time)
        .all()
    )


def list_bookings(
    db: Session,
    date: date | None = None,
    status: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[Bookings]:
    """Bookings matching the optional filters, ordered by date then start time."""
    query = db.query(Bookings).options(joinedload(Bookings.service))

    if date is not None:
        query = query.filter(Bookings.booking_date == date.isoformat())
    if status is not None:
        query = query.filter(Bookings.status == status)
    if date_from is not None:
        query = query.filter(Bookings.booking_date >= date_from.isoformat())
    if date_to is not None:
        query = query.filter(Bookings.booking_date <= date_to.isoformat())

    return query.order_by(Bookings.booking_date, Bookings.start_time).all()
