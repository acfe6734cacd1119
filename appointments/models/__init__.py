from .tables import (
    ACTIVE_BOOKING_FILTER,
    BOOKING_STATUSES,
    Base,
    Bookings,
    BreakPeriods,
    Services,
    WorkingHours,
    metadata,
)

__all__ = [
    "ACTIVE_BOOKING_FILTER",
    "BOOKING_STATUSES",
    "Base",
    "Bookings",
    "BreakPeriods",
    "Services",
    "WorkingHours",
    "metadata",
]
