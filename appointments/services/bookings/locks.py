# appointments/services/bookings/locks.py
"""
Date-scoped admission locks.

Key format: lock:bookings:{date}

With Redis every worker process shares the lock (redis-py Lock, SET NX +
expiry). Without Redis the lock is a threading.Lock per date, which only
serializes requests inside one process; the partial unique index on
(booking_date, start_time) still stops identical starts across processes.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator

from redis import Redis
from redis.exceptions import LockError

logger = logging.getLogger(__name__)


class LockTimeout(Exception):
    """The date lock could not be acquired in time."""


class AdmissionLocks:
    """Serializes booking admission per booking date."""

    KEY_PREFIX = "lock:bookings"

    def __init__(self, redis: Redis | None = None, timeout: float = 10.0):
        self.redis = redis
        self.timeout = timeout
        self._local: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _key(self, dt: date) -> str:
        return f"{self.KEY_PREFIX}:{dt.isoformat()}"

    @contextmanager
    def hold(self, dt: date) -> Iterator[None]:
        """Hold the admission lock for a date for the duration of the block."""
        if self.redis is not None:
            with self._hold_redis(dt):
                yield
        else:
            with self._hold_local(dt):
                yield

    @contextmanager
    def _hold_redis(self, dt: date) -> Iterator[None]:
        lock = self.redis.lock(
            self._key(dt),
            timeout=self.timeout,
            blocking_timeout=self.timeout,
        )
        if not lock.acquire():
            raise LockTimeout(f"Could not lock bookings for {dt.isoformat()}")
        try:
            yield
        finally:
            try:
                lock.release()
            except LockError:
                # expired while held; the unique index still guards the insert
                logger.warning(f"Admission lock for {dt.isoformat()} expired before release")

    @contextmanager
    def _hold_local(self, dt: date) -> Iterator[None]:
        key = self._key(dt)
        with self._guard:
            lock = self._local.setdefault(key, threading.Lock())

        if not lock.acquire(timeout=self.timeout):
            raise LockTimeout(f"Could not lock bookings for {dt.isoformat()}")
        try:
            yield
        finally:
            lock.release()
