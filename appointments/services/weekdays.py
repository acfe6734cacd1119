# appointments/services/weekdays.py
"""
Localized weekday names for index 0 = Sunday .. 6 = Saturday.

Invalid indices fall back to 0, unknown locales to the default locale.
"""

from ..i18n import t
from .intervals import WEEKDAYS, Weekday


def is_valid_day_index(day_index: int) -> bool:
    return 0 <= day_index <= 6


def is_weekend(day_index: int) -> bool:
    return day_index in (Weekday.SUNDAY, Weekday.SATURDAY)


def get_day_name(day_index: int, locale: str | None = None) -> str:
    """Full day name, e.g. 1 → "Monday" / "Lunes" / "Lundi"."""
    if not is_valid_day_index(day_index):
        day_index = 0
    return t(f"days.weekdays.{day_index}", locale)


def get_day_name_short(day_index: int, locale: str | None = None) -> str:
    """Short day name, e.g. 1 → "Mon"."""
    if not is_valid_day_index(day_index):
        day_index = 0
    return t(f"days.weekdays_short.{day_index}", locale)


def get_all_day_names(locale: str | None = None) -> dict[int, str]:
    return {int(day): get_day_name(day, locale) for day in WEEKDAYS}


def get_all_day_names_short(locale: str | None = None) -> dict[int, str]:
    return {int(day): get_day_name_short(day, locale) for day in WEEKDAYS}
