# appointments/services/slots/calendar.py
"""
Calendar configuration (read path).

Weekly working hours and their break periods, looked up per weekday
(0 = Sunday .. 6 = Saturday). Always read from the database, never
cached, so admin edits apply to the very next slot query.
"""

from sqlalchemy.orm import Session

from ...models import BreakPeriods, WorkingHours


def get_working_hours_for_day(db: Session, day_of_week: int) -> WorkingHours | None:
    """Active working hours for a weekday, or None if the day is closed."""
    return (
        db.query(WorkingHours)
        .filter(
            WorkingHours.day_of_week == day_of_week,
            WorkingHours.is_active.is_(True),
        )
        .first()
    )


def get_active_breaks_for_working_hour(
    db: Session,
    working_hour: WorkingHours,
) -> list[BreakPeriods]:
    """Active break periods of a working hour, ordered by start time."""
    return (
        db.query(BreakPeriods)
        .filter(
            BreakPeriods.working_hour_id == working_hour.id,
            BreakPeriods.is_active.is_(True),
        )
        .order_by(BreakPeriods.start_time)
        .all()
    )


def get_active_working_days(db: Session) -> set[int]:
    """Weekday indices that have active working hours."""
    rows = (
        db.query(WorkingHours.day_of_week)
        .filter(WorkingHours.is_active.is_(True))
        .all()
    )
    return {day for (day,) in rows}
