"""System clock implementation."""

from datetime import datetime, timezone

from application.interfaces import IClock


class SystemClock(IClock):
    """Wall clock returning naive UTC, matching the DateTime columns."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)
