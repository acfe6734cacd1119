# appointments/services/working_hours.py
"""
Working hour administration: one entry per weekday (0 = Sunday).
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import ConflictError, ValidationError
from ..models import WorkingHours
from .break_periods import get_working_hour
from .intervals import contains, time_str_to_minutes
from .weekdays import get_day_name, get_day_name_short

logger = logging.getLogger(__name__)


def list_with_day_names(db: Session, locale: str | None = None) -> list[dict]:
    """All working hours ordered by weekday, with localized day names."""
    working_hours = db.query(WorkingHours).order_by(WorkingHours.day_of_week).all()
    return [
        {
            "id": wh.id,
            "day_of_week": wh.day_of_week,
            "day_name": get_day_name(wh.day_of_week, locale),
            "day_name_short": get_day_name_short(wh.day_of_week, locale),
            "start_time": wh.start_time,
            "end_time": wh.end_time,
            "is_active": wh.is_active,
        }
        for wh in working_hours
    ]


def create_working_hour(db: Session, data: dict) -> WorkingHours:
    """
    Raises:
        ConflictError: the weekday already has working hours
    """
    day = data["day_of_week"]
    if db.query(WorkingHours).filter(WorkingHours.day_of_week == day).first():
        raise ConflictError(f"Working hours for day {day} already exist")

    _validate_order(data["start_time"], data["end_time"])

    working_hour = WorkingHours(**data)
    db.add(working_hour)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Working hours for day {day} already exist") from exc

    db.refresh(working_hour)
    logger.info(
        f"Working hour created: id={working_hour.id}, day={day}, "
        f"time={working_hour.start_time}-{working_hour.end_time}"
    )
    return working_hour


def update_working_hour(db: Session, working_hour_id: int, data: dict) -> WorkingHours:
    """
    Partial update of start/end/is_active.

    New hours must still contain every active break period.
    """
    working_hour = get_working_hour(db, working_hour_id)

    start_time = data.get("start_time", working_hour.start_time)
    end_time = data.get("end_time", working_hour.end_time)
    _validate_order(start_time, end_time)

    outside = [
        bp for bp in working_hour.break_periods
        if bp.is_active and not contains(start_time, end_time, bp.start_time, bp.end_time)
    ]
    if outside:
        names = ", ".join(f"{bp.start_time}-{bp.end_time}" for bp in outside)
        raise ValidationError(
            "Working hours must contain all active break periods",
            {
                "start_time": [f"Break periods outside the new hours: {names}"],
                "end_time": [f"Break periods outside the new hours: {names}"],
            },
        )

    for field, value in data.items():
        setattr(working_hour, field, value)

    db.commit()
    db.refresh(working_hour)
    return working_hour


def delete_working_hour(db: Session, working_hour_id: int) -> None:
    """Delete a working hour together with its break periods."""
    working_hour = get_working_hour(db, working_hour_id)
    db.delete(working_hour)
    db.commit()
    logger.info(f"Working hour deleted: id={working_hour_id}")


def _validate_order(start_time: str, end_time: str) -> None:
    if time_str_to_minutes(start_time) >= time_str_to_minutes(end_time):
        raise ValidationError(
            "End time must be after start time",
            {"end_time": ["The end time must be after the start time."]},
        )
