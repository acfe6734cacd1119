"""
Scheduling error taxonomy.

Raised by the service layer, translated to HTTP responses by the
exception handlers registered in ``appointments.main``.
Storage failures are not wrapped; they propagate as they are.
"""

from typing import Optional

SLOT_TAKEN_MESSAGE = "This time slot is already booked."


class SchedulingError(Exception):
    """Base class for expected scheduling failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SchedulingError):
    """
    Input the core rejects on its own rules.

    ``errors`` maps field name → list of messages, e.g.
    {"start_time": ["Break period must start ..."]}.
    """

    def __init__(self, message: str, errors: Optional[dict[str, list[str]]] = None):
        super().__init__(message)
        self.errors = errors or {}


class NotFoundError(SchedulingError):
    """Referenced service / working hour / break period / booking is missing."""


class ConflictError(SchedulingError):
    """Overlapping booking or duplicate working-hour weekday."""
