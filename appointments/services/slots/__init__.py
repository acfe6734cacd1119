# appointments/services/slots/__init__.py
"""
Slots calculation module.

Calendar: weekly working hours and breaks (read path)
Generator: available slots for a service on a date
"""

from .config import BookingConfig, get_booking_config
from .calendar import (
    get_active_breaks_for_working_hour,
    get_active_working_days,
    get_working_hours_for_day,
)
from .generator import Slot, generate_available_slots
from ..intervals import day_of_week, normalize_time, overlaps

__all__ = [
    "BookingConfig",
    "get_booking_config",
    "get_active_breaks_for_working_hour",
    "get_active_working_days",
    "get_working_hours_for_day",
    "Slot",
    "generate_available_slots",
    "day_of_week",
    "normalize_time",
    "overlaps",
]
