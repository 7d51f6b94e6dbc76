"""Injectable time source."""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
