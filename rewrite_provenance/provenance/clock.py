"""Clock collaborator. Injected so one snapshot drives every derived timestamp."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current time (UTC, tz-aware)."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC, truncated to milliseconds."""

    def now(self) -> datetime:
        current = datetime.now(timezone.utc)
        return current.replace(microsecond=current.microsecond // 1000 * 1000)


class FixedClock:
    """Always returns the same instant. For tests and replays."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
