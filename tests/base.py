"""
Shared fixtures: a throwaway SQLite file per test.

A file (not :memory:) so that every thread and every session sees the
same database, with foreign keys enabled by build_engine().
"""

import os
import tempfile
import unittest

from sqlalchemy.orm import sessionmaker

from appointments.database import build_engine
from appointments.models import Base, Bookings, BreakPeriods, Services, WorkingHours
from appointments.services.bookings.locks import AdmissionLocks
from appointments.services.slots.config import BookingConfig

# 2030-01-07 is a Monday (day_of_week == 1)
MONDAY = "2030-01-07"


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema for every test."""

    def setUp(self):
        fd, self.db_path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        self.engine = build_engine(f"sqlite:///{self.db_path}")
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db = self.SessionLocal()

        self.locks = AdmissionLocks(timeout=5.0)
        self.config = BookingConfig()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()
        os.remove(self.db_path)

    # ===== builders =====

    def add_service(self, name="Haircut", duration_minutes=30, price=25.0, is_active=True):
        service = Services(
            name=name,
            duration_minutes=duration_minutes,
            price=price,
            is_active=is_active,
        )
        self.db.add(service)
        self.db.commit()
        return service

    def add_working_hour(self, day_of_week=1, start_time="09:00", end_time="17:00", is_active=True):
        working_hour = WorkingHours(
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
            is_active=is_active,
        )
        self.db.add(working_hour)
        self.db.commit()
        return working_hour

    def add_break(self, working_hour, start_time="12:00", end_time="13:00", is_active=True):
        break_period = BreakPeriods(
            working_hour_id=working_hour.id,
            start_time=start_time,
            end_time=end_time,
            name="Lunch",
            is_active=is_active,
        )
        self.db.add(break_period)
        self.db.commit()
        return break_period

    def add_booking(self, service, start_time, end_time, booking_date=MONDAY, status="confirmed"):
        """Insert a booking directly, bypassing admission."""
        booking = Bookings(
            service_id=service.id,
            client_email="client@example.com",
            booking_date=booking_date,
            start_time=start_time,
            end_time=end_time,
            status=status,
        )
        self.db.add(booking)
        self.db.commit()
        return booking
