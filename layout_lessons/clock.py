"""Time sources: the wall clock and a fake one that only moves when told to."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._current = start if start is not None else datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._current

    def set(self, timestamp: datetime) -> None:
        self._current = timestamp

    def advance(self, duration: timedelta) -> None:
        self._current = self._current + duration
