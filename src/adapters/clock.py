"""
Clock adapters.

SystemClock reads the real time, FrozenClock returns a fixed time for
deterministic tests. Both provide today() for age calculations.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo


class SystemClock:
    """
    Wall clock in a configurable timezone.

    If tz_name is None the system local timezone is used.
    """

    def __init__(self, tz_name: str | None = None) -> None:
        self._tz = ZoneInfo(tz_name) if tz_name else None

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now().astimezone()
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()


class FrozenClock:
    """Clock that returns a fixed time. Useful for testing."""

    def __init__(self, frozen: datetime | date, tz_name: str | None = None) -> None:
        """
        Initialize with frozen time.

        Args:
            frozen: The time to return from now(). A plain date is frozen at
                midnight. Naive datetimes are assumed to be UTC.
            tz_name: IANA timezone name used to compute today()
        """
        if not isinstance(frozen, datetime):
            frozen = datetime(frozen.year, frozen.month, frozen.day)
        if frozen.tzinfo is None:
            frozen = frozen.replace(tzinfo=UTC)
        self._frozen = frozen
        self._tz = ZoneInfo(tz_name) if tz_name else None

    def now(self) -> datetime:
        if self._tz is None:
            return self._frozen
        return self._frozen.astimezone(self._tz)

    def today(self) -> date:
        return self.now().date()

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen = self._frozen + delta
