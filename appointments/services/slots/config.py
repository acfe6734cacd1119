# appointments/services/slots/config.py
"""
Booking configuration for slot generation and admission.
"""

from dataclasses import dataclass
from functools import lru_cache

from ...config import settings


@dataclass(frozen=True)
class BookingConfig:
    """
    Configuration for the booking engine.

    Attributes:
        default_status: Status given to newly admitted bookings
        lock_timeout_seconds: How long admission waits for the date lock
    """
    default_status: str = "pending"  # pending / confirmed
    lock_timeout_seconds: float = 10.0

    def __post_init__(self):
        """Validate configuration."""
        if self.default_status not in ("pending", "confirmed"):
            raise ValueError(
                f"default_status must be 'pending' or 'confirmed', got {self.default_status}"
            )


@lru_cache
def get_booking_config() -> BookingConfig:
    """Get booking configuration (singleton, built from settings)."""
    return BookingConfig(
        default_status=settings.default_booking_status,
        lock_timeout_seconds=settings.admission_lock_timeout,
    )
