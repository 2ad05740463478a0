"""Wall clock used to decide what "today" and "now" are.

The solar calculations never read the time themselves; the CLI and the REST
API ask this clock, which can be pinned to a fixed instant for testing or
for answering "was it dark at ...?" questions.
"""
from datetime import date, datetime, timezone
from threading import RLock
from typing import Optional


class Clock:
    """System clock with an optional pinned time."""

    def __init__(self, fixed_time: Optional[datetime] = None):
        """Initialize clock.

        Args:
            fixed_time: Instant to report instead of the system time. Naive
                datetimes are taken to be UTC.
        """
        self._lock = RLock()
        self._fixed_time: Optional[datetime] = None
        if fixed_time is not None:
            self.set_time(fixed_time)

    def now(self) -> datetime:
        """Get the current time.

        Returns:
            Timezone-aware datetime in UTC
        """
        with self._lock:
            if self._fixed_time is not None:
                return self._fixed_time
        return datetime.now(timezone.utc)

    def today(self) -> date:
        """UTC calendar date of now()."""
        return self.now().date()

    def set_time(self, new_time: datetime) -> None:
        """Pin the clock to a specific instant.

        Args:
            new_time: The time to report from now on
        """
        if new_time.tzinfo is None:
            new_time = new_time.replace(tzinfo=timezone.utc)
        with self._lock:
            self._fixed_time = new_time.astimezone(timezone.utc)

    def release(self) -> None:
        """Go back to following the system time."""
        with self._lock:
            self._fixed_time = None

    def is_fixed(self) -> bool:
        """Check if clock is pinned."""
        with self._lock:
            return self._fixed_time is not None

    def __repr__(self) -> str:
        """String representation."""
        status = "fixed" if self.is_fixed() else "system"
        return f"Clock({self.now().isoformat()}, {status})"
