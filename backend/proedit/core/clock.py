"""
Identifier and clock provider.

Every entity id and timestamp in the store comes from here so tests can
swap in deterministic sources.
"""

import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the form the SQL columns store)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Clock:
    """
    Strictly increasing timestamp source.

    Two calls never return the same value: if the wall clock has not moved
    (or went backwards) the previous reading is advanced by one microsecond.
    Ordering by created_at/updated_at therefore always matches call order.
    """

    _TICK = timedelta(microseconds=1)

    def __init__(self, source: Optional[Callable[[], datetime]] = None):
        self._source = source or utcnow
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source()
            if self._last is not None and current <= self._last:
                current = self._last + self._TICK
            self._last = current
            return current
