# appointments/services/bookings/admission.py
"""
Booking admission and administrative status changes.

create_booking() is the only write path for new bookings:

1. take the admission lock of the booking date
2. re-read live bookings of the date (row-locked) and check overlap
3. insert + commit, or raise ConflictError with nothing written

A slot listed as free earlier is never trusted here: time has passed and
other requests may have committed since.
"""

import logging
from datetime import date, datetime, timezone
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...errors import SLOT_TAKEN_MESSAGE, ConflictError, NotFoundError, ValidationError
from ...models import BOOKING_STATUSES, Bookings
from ...redis_client import redis_client
from ..catalog import get_service
from ..intervals import normalize_time, time_str_to_minutes
from ..slots.config import BookingConfig, get_booking_config
from .ledger import find_conflicts, get_booking
from .locks import AdmissionLocks

logger = logging.getLogger(__name__)


@lru_cache
def get_admission_locks() -> AdmissionLocks:
    """Process-wide lock registry (Redis-backed when REDIS_URL is set)."""
    return AdmissionLocks(redis_client, timeout=get_booking_config().lock_timeout_seconds)


def create_booking(
    db: Session,
    service_id: int,
    client_email: str,
    booking_date: date,
    start_time: str,
    end_time: str,
    locks: AdmissionLocks | None = None,
    config: BookingConfig | None = None,
) -> Bookings:
    """
    Admit a new booking.

    Raises:
        ValidationError: start_time is not before end_time
        NotFoundError: unknown service
        ConflictError: the window overlaps a live booking of the date
    """
    config = config or get_booking_config()
    locks = locks or get_admission_locks()

    times = {}
    for field, value in (("start_time", start_time), ("end_time", end_time)):
        try:
            times[field] = normalize_time(value)
        except ValueError as exc:
            raise ValidationError(str(exc), {field: [str(exc)]}) from exc
    start_time, end_time = times["start_time"], times["end_time"]

    if time_str_to_minutes(start_time) >= time_str_to_minutes(end_time):
        raise ValidationError(
            "End time must be after start time",
            {"end_time": ["The end time must be after the start time."]},
        )

    service = get_service(db, service_id)

    with locks.hold(booking_date):
        try:
            conflicts = find_conflicts(db, booking_date, start_time, end_time, for_update=True)
            if conflicts:
                db.rollback()
                logger.warning(
                    f"Booking rejected: date={booking_date}, time={start_time}-{end_time}, "
                    f"overlaps booking_id={conflicts[0].id}"
                )
                raise ConflictError(SLOT_TAKEN_MESSAGE)

            booking = Bookings(
                service_id=service.id,
                client_email=client_email,
                booking_date=booking_date.isoformat(),
                start_time=start_time,
                end_time=end_time,
                status=config.default_status,
            )
            db.add(booking)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning(
                f"Booking rejected by unique index: date={booking_date}, time={start_time}-{end_time}"
            )
            raise ConflictError(SLOT_TAKEN_MESSAGE) from exc

    db.refresh(booking)

    logger.info(
        f"Booking created: booking_id={booking.id}, service_id={service.id}, "
        f"date={booking.booking_date}, time={booking.start_time}-{booking.end_time}"
    )
    return booking


def update_booking_status(db: Session, booking_id: int, status: str) -> Bookings:
    """
    Overwrite a booking's status.

    No overlap re-check: reinstating a cancelled booking into a window that
    was booked meanwhile is accepted. Only the unique index on
    (booking_date, start_time) can still refuse it.
    """
    if status not in BOOKING_STATUSES:
        raise ValidationError(
            f"Invalid status: {status}",
            {"status": [f"Status must be one of: {', '.join(BOOKING_STATUSES)}."]},
        )

    booking = get_booking(db, booking_id)
    if not booking:
        raise NotFoundError(f"Booking {booking_id} not found")

    previous = booking.status
    booking.status = status
    booking.updated_at = _now_text()
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(SLOT_TAKEN_MESSAGE) from exc

    db.refresh(booking)
    logger.info(f"Booking status changed: booking_id={booking_id}, {previous} → {status}")
    return booking


def delete_booking(db: Session, booking_id: int) -> None:
    booking = db.get(Bookings, booking_id)
    if not booking:
        raise NotFoundError(f"Booking {booking_id} not found")

    db.delete(booking)
    db.commit()
    logger.info(f"Booking deleted: booking_id={booking_id}")


def _now_text() -> str:
    # same format as CURRENT_TIMESTAMP (UTC)
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
