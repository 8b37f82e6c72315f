"""
Time sources used for certificate expiration math.

Expiration calculations take a ``Clock`` argument instead of reading the
wall clock directly, so tests pass a ``SimulatedClock`` pinned to a known
instant.
"""
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Union


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""


class SystemClock(Clock):
    """Clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def _to_utc(value: Union[datetime, int, float]) -> datetime:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if value.tzinfo is None:
        # Naive datetimes are taken to be UTC already.
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SimulatedClock(Clock):
    """Clock fixed at a settable instant.

    The instant only moves when ``set_system_time`` or ``advance`` is called.
    """

    def __init__(self, start: Union[datetime, int, float, None] = None):
        self._lock = threading.Lock()
        self._now = _to_utc(start) if start is not None else datetime.now(timezone.utc)

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def set_system_time(self, value: Union[datetime, int, float]) -> None:
        """Pin the clock to a datetime or a POSIX timestamp."""
        with self._lock:
            self._now = _to_utc(value)

    def advance(self, delta: timedelta) -> None:
        with self._lock:
            self._now = self._now + delta
