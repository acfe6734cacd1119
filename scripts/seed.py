"""
Seed a fresh database with demo services and a Mon-Fri schedule.

Run after `alembic upgrade head`. Safe to run repeatedly: existing
services (by name) and weekdays are left untouched.
"""

import logging

from sqlalchemy import inspect, select

from appointments.database import SessionLocal, engine
from appointments.models import Services, WorkingHours
from appointments.services.intervals import Weekday

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")


# ======================================================
# DATA
# ======================================================

SERVICES = [
    {"name": "Haircut", "duration_minutes": 30, "price": 25.00},
    {"name": "Hair Coloring", "duration_minutes": 90, "price": 75.00},
    {"name": "Beard Trim", "duration_minutes": 15, "price": 15.00},
]

WORKDAYS = [
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
]
OPEN_TIME = "09:00"
CLOSE_TIME = "17:00"


# ======================================================
# MAIN LOGIC
# ======================================================

def seed_services(db) -> int:
    existing = set(db.execute(select(Services.name)).scalars())
    created = 0
    for data in SERVICES:
        if data["name"] in existing:
            continue
        db.add(Services(**data))
        created += 1
    return created


def seed_working_hours(db) -> int:
    existing = set(db.execute(select(WorkingHours.day_of_week)).scalars())
    created = 0
    for day in WORKDAYS:
        if int(day) in existing:
            continue
        db.add(WorkingHours(day_of_week=int(day), start_time=OPEN_TIME, end_time=CLOSE_TIME))
        created += 1
    return created


def main():
    tables = set(inspect(engine).get_table_names())
    if not {"services", "working_hours"} <= tables:
        raise RuntimeError("Schema not found, run `alembic upgrade head` first")

    db = SessionLocal()
    try:
        services_created = seed_services(db)
        days_created = seed_working_hours(db)
        db.commit()
    finally:
        db.close()

    logger.info(f"[SEED] services created: {services_created}")
    logger.info(f"[SEED] working days created: {days_created}")


if __name__ == "__main__":
    main()
