# appointments/services/intervals.py
"""
Time-of-day helpers shared by every scheduling component.

Times are naive, same-day, minute-resolution values. Internally they are
"HH:MM" strings (zero padded, so string order == clock order) or minutes
since midnight.

Weekday numbering is 0 = Sunday .. 6 = Saturday everywhere. Use
day_of_week() instead of date.weekday() / isoweekday().
"""

import re
from datetime import date, time
from enum import IntEnum

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

MINUTES_PER_DAY = 24 * 60


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


WEEKDAYS = tuple(Weekday)


def day_of_week(target_date: date) -> int:
    """Weekday index of a date, 0 = Sunday .. 6 = Saturday."""
    # date.weekday(): 0 = Monday .. 6 = Sunday
    return (target_date.weekday() + 1) % 7


def normalize_time(value: str | time) -> str:
    """
    Normalize a time of day to "HH:MM".

    Accepts "9:00", "09:00", "09:00:00" and datetime.time.
    Seconds are dropped. Raises ValueError on anything else.
    """
    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}"

    if not isinstance(value, str):
        raise ValueError(f"Invalid time value: {value!r}")

    match = _TIME_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time format: {value!r} (expected HH:MM)")

    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise ValueError(f"Time out of range: {value!r}")

    return f"{hour:02d}:{minute:02d}"


def time_str_to_minutes(value: str | time) -> int:
    """Convert a time of day to minutes since midnight."""
    hour, minute = normalize_time(value).split(":")
    return int(hour) * 60 + int(minute)


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes since midnight to "HH:MM"."""
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def overlaps(
    start_a: str | time,
    end_a: str | time,
    start_b: str | time,
    end_b: str | time,
) -> bool:
    """
    Half-open interval overlap: [start_a, end_a) vs [start_b, end_b).

    Touching intervals (10:00-11:00 and 11:00-12:00) do not overlap.
    """
    a0, a1 = time_str_to_minutes(start_a), time_str_to_minutes(end_a)
    b0, b1 = time_str_to_minutes(start_b), time_str_to_minutes(end_b)
    return a0 < b1 and a1 > b0


def contains(
    outer_start: str | time,
    outer_end: str | time,
    inner_start: str | time,
    inner_end: str | time,
) -> bool:
    """True if [inner_start, inner_end) lies inside [outer_start, outer_end)."""
    return (
        time_str_to_minutes(inner_start) >= time_str_to_minutes(outer_start)
        and time_str_to_minutes(inner_end) <= time_str_to_minutes(outer_end)
    )
