"""Clock — current instant in the restaurant's configured zone.

Invariants:
    - now() is always timezone-aware
    - The zone is a fixed UTC offset from settings; the host zone is never read
"""

from datetime import datetime, timedelta, timezone


def restaurant_timezone(offset_minutes: int) -> timezone:
    """Fixed-offset zone for the restaurant, e.g. 480 -> UTC+08:00."""
    return timezone(timedelta(minutes=offset_minutes))


class FixedOffsetClock:
    """Clock protocol implementation over the system time."""

    def __init__(self, tz: timezone):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)
