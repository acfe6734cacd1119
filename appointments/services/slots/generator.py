# appointments/services/slots/generator.py
"""
Available slot generation for a (date, service) pair.

Takes into account:
✓ weekly working hours of the weekday
✓ active break periods
✓ "not in the past" for today
✓ existing non-cancelled bookings

Slots are fixed-length windows of the service duration, laid end to end
from the opening time. Nothing is cached: every call reads current
configuration and bookings, and takes no locks.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta

from sqlalchemy.orm import Session

from ..catalog import get_service
from ..bookings.ledger import find_by_date
from .calendar import get_active_breaks_for_working_hour, get_working_hours_for_day
from ..intervals import day_of_week, minutes_to_time_str, overlaps, time_str_to_minutes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    """Candidate booking window, "HH:MM" to "HH:MM"."""
    start_time: str
    end_time: str

    def as_dict(self) -> dict:
        return asdict(self)


def generate_available_slots(
    db: Session,
    target_date: date,
    service_id: int,
    now: datetime | None = None,
) -> list[Slot]:
    """
    Calculate bookable slots for a service on a date.

    Returns:
        Chronological list of Slot. Empty list = day closed or fully booked.

    Raises:
        NotFoundError: unknown or deleted service.
    """
    now = now or datetime.now()

    # Step 1: Service duration drives the grid
    service = get_service(db, service_id)
    duration = service.duration_minutes

    # Step 2: Working hours of the weekday (0 = Sunday)
    working_hour = get_working_hours_for_day(db, day_of_week(target_date))
    if not working_hour:
        return []

    # Step 3: Fixed-length candidates that fit before closing time
    slots = generate_candidate_slots(working_hour.start_time, working_hour.end_time, duration)

    # Step 4: Breaks
    breaks = get_active_breaks_for_working_hour(db, working_hour)
    slots = [
        slot for slot in slots
        if not any(overlaps(slot.start_time, slot.end_time, b.start_time, b.end_time) for b in breaks)
    ]

    # Step 5: Past times
    if target_date <= now.date():
        slots = filter_past_slots(slots, target_date, now)

    # Step 6: Existing bookings
    bookings = find_by_date(db, target_date, exclude_cancelled=True)
    slots = [
        slot for slot in slots
        if not any(overlaps(slot.start_time, slot.end_time, b.start_time, b.end_time) for b in bookings)
    ]

    logger.debug(
        f"{len(slots)} slots available: date={target_date}, service={service_id}, "
        f"duration={duration}, breaks={len(breaks)}, bookings={len(bookings)}"
    )
    return slots


def generate_candidate_slots(start_time: str, end_time: str, duration_minutes: int) -> list[Slot]:
    """
    Walk [start_time, end_time) in steps of duration_minutes.

    A trailing slot that would end after end_time is dropped.
    """
    if duration_minutes <= 0:
        raise ValueError(f"duration_minutes must be positive, got {duration_minutes}")

    start_min = time_str_to_minutes(start_time)
    end_min = time_str_to_minutes(end_time)

    slots: list[Slot] = []
    t = start_min
    while t + duration_minutes <= end_min:
        slots.append(Slot(minutes_to_time_str(t), minutes_to_time_str(t + duration_minutes)))
        t += duration_minutes

    return slots


def filter_past_slots(slots: list[Slot], target_date: date, now: datetime) -> list[Slot]:
    """Keep slots starting strictly after now; a slot starting exactly now is gone."""
    midnight = datetime.combine(target_date, datetime.min.time())
    return [
        slot for slot in slots
        if midnight + timedelta(minutes=time_str_to_minutes(slot.start_time)) > now
    ]
