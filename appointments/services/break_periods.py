# appointments/services/break_periods.py
"""
Break period administration.

A break must lie inside its working hours: [start, end) ⊆ [wh.start, wh.end).
Rejected writes raise ValidationError naming the offending field and
leave the configuration untouched.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import BreakPeriods, WorkingHours
from .intervals import time_str_to_minutes

logger = logging.getLogger(__name__)

OUTSIDE_MESSAGE = "Break period must be within working hours"
START_ERROR = "Break period must start after or at working hour start time"
END_ERROR = "Break period must end before or at working hour end time"
ORDER_ERROR = "Break period must end after it starts"


def get_working_hour(db: Session, working_hour_id: int) -> WorkingHours:
    working_hour = db.get(WorkingHours, working_hour_id)
    if not working_hour:
        raise NotFoundError(f"Working hour {working_hour_id} not found")
    return working_hour


def get_break_period(db: Session, break_period_id: int) -> BreakPeriods:
    break_period = db.get(BreakPeriods, break_period_id)
    if not break_period:
        raise NotFoundError(f"Break period {break_period_id} not found")
    return break_period


def list_for_working_hour(db: Session, working_hour_id: int) -> list[BreakPeriods]:
    """All break periods (active or not) of a working hour, by start time."""
    get_working_hour(db, working_hour_id)
    return (
        db.query(BreakPeriods)
        .filter(BreakPeriods.working_hour_id == working_hour_id)
        .order_by(BreakPeriods.start_time)
        .all()
    )


def validate_within_working_hours(
    start_time: str,
    end_time: str,
    working_hour: WorkingHours,
) -> None:
    """Raise ValidationError with per-field messages if the break does not fit."""
    start = time_str_to_minutes(start_time)
    end = time_str_to_minutes(end_time)
    if start >= end:
        raise ValidationError(ORDER_ERROR, {"end_time": [ORDER_ERROR]})

    open_min = time_str_to_minutes(working_hour.start_time)
    close_min = time_str_to_minutes(working_hour.end_time)

    errors: dict[str, list[str]] = {}
    if start < open_min or start >= close_min:
        errors["start_time"] = [START_ERROR]
    if end > close_min or end <= open_min:
        errors["end_time"] = [END_ERROR]

    if errors:
        raise ValidationError(OUTSIDE_MESSAGE, errors)


def create_break_period(db: Session, working_hour_id: int, data: dict) -> BreakPeriods:
    working_hour = get_working_hour(db, working_hour_id)
    validate_within_working_hours(data["start_time"], data["end_time"], working_hour)

    break_period = BreakPeriods(working_hour_id=working_hour.id, **data)
    db.add(break_period)
    _commit(db, working_hour.id, data)
    db.refresh(break_period)

    logger.info(
        f"Break period created: id={break_period.id}, working_hour_id={working_hour.id}, "
        f"time={break_period.start_time}-{break_period.end_time}"
    )
    return break_period


def update_break_period(db: Session, break_period_id: int, data: dict) -> BreakPeriods:
    """Partial update; a changed start or end is validated against stored values."""
    break_period = get_break_period(db, break_period_id)

    if "start_time" in data or "end_time" in data:
        validate_within_working_hours(
            data.get("start_time", break_period.start_time),
            data.get("end_time", break_period.end_time),
            break_period.working_hour,
        )

    for field, value in data.items():
        setattr(break_period, field, value)

    _commit(db, break_period.working_hour_id, data)
    db.refresh(break_period)
    return break_period


def delete_break_period(db: Session, break_period_id: int) -> None:
    break_period = get_break_period(db, break_period_id)
    db.delete(break_period)
    db.commit()
    logger.info(f"Break period deleted: id={break_period_id}")


def _commit(db: Session, working_hour_id: int, data: dict) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(
            f"Break period {data.get('start_time')}-{data.get('end_time')} "
            f"already exists for working hour {working_hour_id}"
        ) from exc
