"""Constants and helpers shared by the test modules"""
from datetime import datetime, timezone

# Wednesday
FROZEN_NOW = datetime(2023, 1, 4, 12, 0, 0, tzinfo=timezone.utc)
# Monday after the next Sunday, same time of day
EXPECTED_DEADLINE = int(datetime(2023, 1, 9, 12, 0, 0, tzinfo=timezone.utc).timestamp())


class FakeClock:
    """Settable clock for deterministic deadline and fallback checks"""

    def __init__(self, now: datetime = FROZEN_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now
