from datetime import UTC, datetime


class SystemClock:
    """TimePort backed by the system clock."""

    def now_utc(self) -> datetime:
        return datetime.now(UTC)
