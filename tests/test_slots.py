"""
Tests for services/slots

Candidate grid, break exclusion, "not in the past" and booking exclusion.
"""

from datetime import date, datetime

from appointments.errors import NotFoundError
from appointments.services.bookings import admission
from appointments.services.slots import (
    generate_available_slots,
    get_active_working_days,
    get_working_hours_for_day,
)
from appointments.services.slots.generator import Slot, generate_candidate_slots

from .base import DatabaseTestCase

DAY = date(2030, 1, 7)  # Monday
BEFORE = datetime(2029, 12, 1, 8, 0)


def starts(slots):
    return [slot.start_time for slot in slots]


class TestCandidateSlots(DatabaseTestCase):
    """Tests for generate_candidate_slots()."""

    def test_even_division(self):
        slots = generate_candidate_slots("09:00", "11:00", 30)
        self.assertEqual(
            slots,
            [
                Slot("09:00", "09:30"),
                Slot("09:30", "10:00"),
                Slot("10:00", "10:30"),
                Slot("10:30", "11:00"),
            ],
        )

    def test_trailing_partial_slot_dropped(self):
        """09:00-10:00 with 45 minutes fits one slot only."""
        self.assertEqual(generate_candidate_slots("09:00", "10:00", 45), [Slot("09:00", "09:45")])

    def test_service_longer_than_day(self):
        self.assertEqual(generate_candidate_slots("09:00", "10:00", 90), [])

    def test_invalid_duration(self):
        with self.assertRaises(ValueError):
            generate_candidate_slots("09:00", "10:00", 0)


class TestGenerateAvailableSlots(DatabaseTestCase):
    """Tests for generate_available_slots()."""

    def setUp(self):
        super().setUp()
        self.service = self.add_service(duration_minutes=30)
        self.working_hour = self.add_working_hour(day_of_week=1)

    def test_full_day(self):
        """09:00-17:00 in 30 minute steps gives 16 slots."""
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(len(slots), 16)
        self.assertEqual(slots[0], Slot("09:00", "09:30"))
        self.assertEqual(slots[-1], Slot("16:30", "17:00"))

    def test_break_excluded(self):
        """A 12:00-13:00 break removes exactly the two slots inside it."""
        self.add_break(self.working_hour, "12:00", "13:00")

        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)

        self.assertEqual(len(slots), 14)
        self.assertNotIn("12:00", starts(slots))
        self.assertNotIn("12:30", starts(slots))
        self.assertIn("11:30", starts(slots))
        self.assertIn("13:00", starts(slots))

    def test_break_crossing_slot_boundary(self):
        """A 90 minute grid loses the slot straddling the break."""
        long_service = self.add_service(name="Hair Coloring", duration_minutes=90, price=75.0)
        self.add_break(self.working_hour, "12:00", "13:00")

        slots = generate_available_slots(self.db, DAY, long_service.id, now=BEFORE)

        self.assertEqual(starts(slots), ["09:00", "10:30", "13:30", "15:00"])

    def test_overlapping_breaks_checked_independently(self):
        """12:00-13:00 and 12:30-13:30 together block 12:00, 12:30 and 13:00."""
        self.add_break(self.working_hour, "12:00", "13:00")
        self.add_break(self.working_hour, "12:30", "13:30")

        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)

        self.assertEqual(
            starts(slots),
            [
                "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
                "13:30", "14:00", "14:30", "15:00", "15:30", "16:00", "16:30",
            ],
        )

    def test_disjoint_breaks(self):
        self.add_break(self.working_hour, "10:00", "10:30")
        self.add_break(self.working_hour, "15:00", "15:30")

        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)

        self.assertEqual(len(slots), 14)
        self.assertNotIn("10:00", starts(slots))
        self.assertNotIn("15:00", starts(slots))
        self.assertIn("09:30", starts(slots))
        self.assertIn("10:30", starts(slots))
        self.assertIn("14:30", starts(slots))
        self.assertIn("15:30", starts(slots))

    def test_hourly_service_around_lunch(self):
        """A 60 minute service keeps 11:00 and 13:00 and loses 12:00."""
        hourly = self.add_service(name="Massage", duration_minutes=60, price=50.0)
        self.add_break(self.working_hour, "12:00", "13:00")

        slots = generate_available_slots(self.db, DAY, hourly.id, now=BEFORE)

        self.assertEqual(
            starts(slots),
            ["09:00", "10:00", "11:00", "13:00", "14:00", "15:00", "16:00"],
        )
        self.assertEqual(slots[2], Slot("11:00", "12:00"))

    def test_inactive_break_ignored(self):
        self.add_break(self.working_hour, "12:00", "13:00", is_active=False)
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(len(slots), 16)

    def test_closed_day(self):
        """No working hours on Sunday → no slots."""
        sunday = date(2030, 1, 6)
        self.assertEqual(generate_available_slots(self.db, sunday, self.service.id, now=BEFORE), [])

    def test_inactive_working_hour(self):
        self.working_hour.is_active = False
        self.db.commit()
        self.assertEqual(generate_available_slots(self.db, DAY, self.service.id, now=BEFORE), [])

    def test_unknown_service(self):
        with self.assertRaises(NotFoundError):
            generate_available_slots(self.db, DAY, 999, now=BEFORE)

    def test_inactive_service(self):
        retired = self.add_service(name="Shave", is_active=False)
        with self.assertRaises(NotFoundError):
            generate_available_slots(self.db, DAY, retired.id, now=BEFORE)

    def test_today_drops_started_slots(self):
        """On the current day only slots starting strictly after now remain."""
        now = datetime(2030, 1, 7, 10, 15)
        slots = generate_available_slots(self.db, DAY, self.service.id, now=now)
        self.assertEqual(slots[0], Slot("10:30", "11:00"))

    def test_slot_starting_exactly_now_excluded(self):
        now = datetime(2030, 1, 7, 10, 0)
        slots = generate_available_slots(self.db, DAY, self.service.id, now=now)
        self.assertNotIn("10:00", starts(slots))
        self.assertEqual(slots[0].start_time, "10:30")

    def test_past_date_has_no_slots(self):
        now = datetime(2030, 1, 8, 8, 0)
        self.assertEqual(generate_available_slots(self.db, DAY, self.service.id, now=now), [])

    def test_bookings_excluded(self):
        """A 10:15-10:45 booking blocks both slots it touches."""
        self.add_booking(self.service, "10:15", "10:45")

        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)

        self.assertEqual(len(slots), 14)
        self.assertNotIn("10:00", starts(slots))
        self.assertNotIn("10:30", starts(slots))
        self.assertIn("09:30", starts(slots))
        self.assertIn("11:00", starts(slots))

    def test_adjacent_booking_keeps_neighbours(self):
        self.add_booking(self.service, "10:00", "10:30")
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertIn("09:30", starts(slots))
        self.assertIn("10:30", starts(slots))

    def test_cancelled_booking_ignored(self):
        self.add_booking(self.service, "10:00", "11:00", status="cancelled")
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(len(slots), 16)

    def test_other_date_booking_ignored(self):
        self.add_booking(self.service, "10:00", "11:00", booking_date="2030-01-14")
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(len(slots), 16)

    def test_idempotent(self):
        """Two calls with no intervening change agree."""
        self.add_break(self.working_hour, "12:00", "13:00")
        self.add_booking(self.service, "15:00", "15:30")

        first = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        second = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(first, second)

    def test_reported_slots_are_admissible(self):
        """Every reported slot is accepted by admission; once booked it disappears."""
        self.add_break(self.working_hour, "12:00", "13:00")
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)

        for slot in slots:
            admission.create_booking(
                self.db,
                self.service.id,
                "client@example.com",
                DAY,
                slot.start_time,
                slot.end_time,
                locks=self.locks,
                config=self.config,
            )
            remaining = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
            self.assertNotIn(slot, remaining)

        self.assertEqual(generate_available_slots(self.db, DAY, self.service.id, now=BEFORE), [])

    def test_admin_edit_applies_immediately(self):
        """Working hour changes show up on the very next query."""
        self.working_hour.end_time = "12:00"
        self.db.commit()
        slots = generate_available_slots(self.db, DAY, self.service.id, now=BEFORE)
        self.assertEqual(slots[-1], Slot("11:30", "12:00"))


class TestCalendar(DatabaseTestCase):
    """Tests for the calendar read path."""

    def test_working_days(self):
        self.add_working_hour(day_of_week=1)
        self.add_working_hour(day_of_week=3)
        self.add_working_hour(day_of_week=6, is_active=False)

        self.assertEqual(get_active_working_days(self.db), {1, 3})

    def test_working_hours_for_day(self):
        self.add_working_hour(day_of_week=2, start_time="10:00", end_time="14:00")
        self.assertEqual(get_working_hours_for_day(self.db, 2).start_time, "10:00")
        self.assertIsNone(get_working_hours_for_day(self.db, 4))
