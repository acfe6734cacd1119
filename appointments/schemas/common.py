# appointments/schemas/common.py

from ..services.intervals import normalize_time, time_str_to_minutes


def time_of_day(v: str) -> str:
    """Validate "HH:MM" / "HH:MM:SS" and normalize to "HH:MM"."""
    try:
        return normalize_time(v)
    except ValueError:
        raise ValueError("Time must be in HH:MM format")


def ensure_end_after_start(start_time: str | None, end_time: str | None) -> None:
    if start_time and end_time and time_str_to_minutes(end_time) <= time_str_to_minutes(start_time):
        raise ValueError("The end time must be after the start time")


def reject_null(v):
    """PATCH fields may be omitted but not set to null."""
    if v is None:
        raise ValueError("Field may not be null")
    return v
