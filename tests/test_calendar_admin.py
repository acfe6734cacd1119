"""
Tests for services/working_hours.py and services/break_periods.py
"""

from appointments.errors import ConflictError, NotFoundError, ValidationError
from appointments.models import BreakPeriods, WorkingHours
from appointments.services import break_periods, working_hours
from appointments.services.break_periods import END_ERROR, ORDER_ERROR, OUTSIDE_MESSAGE, START_ERROR

from .base import DatabaseTestCase


class TestBreakPeriods(DatabaseTestCase):
    """Breaks must lie inside their working hours (09:00-17:00 here)."""

    def setUp(self):
        super().setUp()
        self.working_hour = self.add_working_hour(day_of_week=1)

    def create(self, start, end, **extra):
        return break_periods.create_break_period(
            self.db,
            self.working_hour.id,
            {"start_time": start, "end_time": end, **extra},
        )

    def test_create(self):
        bp = self.create("12:00", "13:00", name="Lunch")
        self.assertEqual(bp.working_hour_id, self.working_hour.id)
        self.assertTrue(bp.is_active)

    def test_full_day_break_allowed(self):
        self.create("09:00", "17:00")

    def test_starts_before_opening(self):
        """Only start_time is reported when the end still fits."""
        with self.assertRaises(ValidationError) as ctx:
            self.create("08:00", "09:30")

        self.assertEqual(ctx.exception.message, OUTSIDE_MESSAGE)
        self.assertEqual(ctx.exception.errors, {"start_time": [START_ERROR]})

    def test_ends_after_closing(self):
        with self.assertRaises(ValidationError) as ctx:
            self.create("16:30", "17:30")
        self.assertEqual(ctx.exception.errors, {"end_time": [END_ERROR]})

    def test_entirely_before_opening(self):
        with self.assertRaises(ValidationError) as ctx:
            self.create("07:00", "08:00")
        self.assertEqual(set(ctx.exception.errors), {"start_time", "end_time"})

    def test_entirely_after_closing(self):
        with self.assertRaises(ValidationError) as ctx:
            self.create("17:00", "18:00")
        self.assertEqual(set(ctx.exception.errors), {"start_time", "end_time"})

    def test_reversed(self):
        with self.assertRaises(ValidationError) as ctx:
            self.create("13:00", "12:00")
        self.assertEqual(ctx.exception.errors, {"end_time": [ORDER_ERROR]})

    def test_rejected_write_leaves_nothing(self):
        with self.assertRaises(ValidationError):
            self.create("16:30", "17:30")
        self.assertEqual(self.db.query(BreakPeriods).count(), 0)

    def test_duplicate(self):
        self.create("12:00", "13:00")
        with self.assertRaises(ConflictError):
            self.create("12:00", "13:00")

    def test_unknown_working_hour(self):
        with self.assertRaises(NotFoundError):
            break_periods.create_break_period(self.db, 999, {"start_time": "12:00", "end_time": "13:00"})

    def test_partial_update_validated_against_stored_values(self):
        bp = self.create("12:00", "13:00")

        with self.assertRaises(ValidationError) as ctx:
            break_periods.update_break_period(self.db, bp.id, {"end_time": "18:00"})
        self.assertIn("end_time", ctx.exception.errors)

        self.db.expire_all()
        self.assertEqual(self.db.get(BreakPeriods, bp.id).end_time, "13:00")

        updated = break_periods.update_break_period(self.db, bp.id, {"start_time": "11:30"})
        self.assertEqual((updated.start_time, updated.end_time), ("11:30", "13:00"))

    def test_deactivate(self):
        bp = self.create("12:00", "13:00")
        updated = break_periods.update_break_period(self.db, bp.id, {"is_active": False})
        self.assertFalse(updated.is_active)

    def test_list_and_delete(self):
        late = self.create("15:00", "15:15")
        early = self.create("10:00", "10:15")

        listed = break_periods.list_for_working_hour(self.db, self.working_hour.id)
        self.assertEqual([bp.id for bp in listed], [early.id, late.id])

        break_periods.delete_break_period(self.db, early.id)
        with self.assertRaises(NotFoundError):
            break_periods.delete_break_period(self.db, early.id)


class TestWorkingHours(DatabaseTestCase):

    def test_create(self):
        wh = working_hours.create_working_hour(
            self.db, {"day_of_week": 2, "start_time": "10:00", "end_time": "18:00"}
        )
        self.assertEqual(wh.day_of_week, 2)
        self.assertTrue(wh.is_active)

    def test_duplicate_day(self):
        self.add_working_hour(day_of_week=1)
        with self.assertRaises(ConflictError):
            working_hours.create_working_hour(
                self.db, {"day_of_week": 1, "start_time": "10:00", "end_time": "12:00"}
            )

    def test_reversed_hours(self):
        with self.assertRaises(ValidationError):
            working_hours.create_working_hour(
                self.db, {"day_of_week": 1, "start_time": "17:00", "end_time": "09:00"}
            )

    def test_update_must_keep_active_breaks(self):
        wh = self.add_working_hour(day_of_week=1)
        self.add_break(wh, "12:00", "13:00")

        with self.assertRaises(ValidationError):
            working_hours.update_working_hour(self.db, wh.id, {"end_time": "12:30"})

        updated = working_hours.update_working_hour(self.db, wh.id, {"end_time": "15:00"})
        self.assertEqual(updated.end_time, "15:00")

    def test_update_ignores_inactive_breaks(self):
        wh = self.add_working_hour(day_of_week=1)
        self.add_break(wh, "16:00", "16:30", is_active=False)

        updated = working_hours.update_working_hour(self.db, wh.id, {"end_time": "12:00"})
        self.assertEqual(updated.end_time, "12:00")

    def test_delete_cascades_to_breaks(self):
        wh = self.add_working_hour(day_of_week=1)
        self.add_break(wh, "12:00", "13:00")
        self.add_break(wh, "15:00", "15:15")

        working_hours.delete_working_hour(self.db, wh.id)

        self.assertEqual(self.db.query(WorkingHours).count(), 0)
        self.assertEqual(self.db.query(BreakPeriods).count(), 0)

    def test_delete_missing(self):
        with self.assertRaises(NotFoundError):
            working_hours.delete_working_hour(self.db, 999)

    def test_list_with_day_names(self):
        self.add_working_hour(day_of_week=5)
        self.add_working_hour(day_of_week=1)

        rows = working_hours.list_with_day_names(self.db, "es")

        self.assertEqual([r["day_of_week"] for r in rows], [1, 5])
        self.assertEqual(rows[0]["day_name"], "Lunes")
        self.assertEqual(rows[1]["day_name_short"], "Vie")
