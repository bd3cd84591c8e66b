"""Schedule Evaluator — decides whether the restaurant is open at an instant.

Invariants:
    - is_open is PURE and TOTAL: no IO, no clock reads, never raises
    - The restaurant zone is always passed in explicitly; the host zone is never used
    - A special date fully replaces the weekly schedule for its date (no merging);
      the first matching entry wins
    - Ranges are half-open [open, close): the closing minute itself is closed
    - Any matching range opens the day (overlaps/duplicates are idempotent)
    - Malformed bounds make a range non-matching at evaluation time, but are
      rejected by validate_opening_hours at configuration-write time

Design Decisions:
    - Minute-of-day comparison over string comparison: identical result for
      well-formed "HH:MM" bounds, and malformed bounds are detectable
    - "24:00" accepted as a close bound only, meaning end of day
    - Overnight ranges (close <= open) are NOT supported: they never match and
      are rejected on write. Model a late shift as two ranges on adjacent days.
"""

import re
from datetime import date, datetime, tzinfo

from ordering_api.core.domain_types import Weekday
from ordering_api.core.errors import ScheduleValidationError
from ordering_api.core.opening_hours import DaySchedule, OpeningHours, TimeRange


END_OF_DAY_MINUTES: int = 24 * 60
_CLOCK_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")


def parse_clock(text: str, *, allow_end_of_day: bool = False) -> int | None:
    """Parse "HH:MM" into minutes since midnight, or None if malformed."""
    match = _CLOCK_PATTERN.fullmatch(text or "")
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if allow_end_of_day and hours == 24 and minutes == 0:
        return END_OF_DAY_MINUTES
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def to_local(instant: datetime, tz: tzinfo) -> datetime:
    """Express instant in the restaurant zone. Naive instants are taken as local."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def schedule_for(hours: OpeningHours, day: date) -> DaySchedule:
    """Effective schedule for a calendar date: special date first, else weekday."""
    day_key = day.isoformat()
    for special in hours.special_dates:
        if special.date == day_key:
            return special.schedule
    return hours.week_schedule[Weekday.from_index(day.weekday())]


def range_contains(time_range: TimeRange, minute_of_day: int) -> bool:
    """True when minute_of_day falls in [open, close). Malformed -> False."""
    open_at = parse_clock(time_range.open)
    close_at = parse_clock(time_range.close, allow_end_of_day=True)
    if open_at is None or close_at is None:
        return False
    return open_at <= minute_of_day < close_at


def is_open(hours: OpeningHours, instant: datetime, tz: tzinfo) -> bool:
    """Whether the restaurant is open at instant, evaluated in zone tz."""
    local = to_local(instant, tz)
    day_schedule = schedule_for(hours, local.date())
    minute_of_day = local.hour * 60 + local.minute
    return any(range_contains(r, minute_of_day) for r in day_schedule.ranges)


# ─── Configuration-write validation ─────────────────────────────

def validate_opening_hours(hours: OpeningHours) -> OpeningHours:
    """Reject schedules the evaluator would silently treat as closed.

    Raises ScheduleValidationError on the first problem found. Returns the
    value unchanged so it can be used inline.
    """
    for day in Weekday:
        _validate_day(hours.week_schedule[day], f"week_schedule.{day.value}")

    seen_dates: set[str] = set()
    for index, special in enumerate(hours.special_dates):
        location = f"special_dates[{index}]"
        try:
            parsed = date.fromisoformat(special.date)
        except ValueError:
            raise ScheduleValidationError(
                f"Invalid special date '{special.date}' (expected YYYY-MM-DD)",
                f"{location}.date",
            )
        if parsed.isoformat() != special.date:
            raise ScheduleValidationError(
                f"Invalid special date '{special.date}' (expected YYYY-MM-DD)",
                f"{location}.date",
            )
        if special.date in seen_dates:
            raise ScheduleValidationError(
                f"Special date {special.date} is configured more than once",
                f"{location}.date",
            )
        seen_dates.add(special.date)
        _validate_day(special.schedule, f"{location}.schedule")
    return hours


def _validate_day(day_schedule: DaySchedule, location: str) -> None:
    for index, time_range in enumerate(day_schedule.ranges):
        field = f"{location}.ranges[{index}]"
        open_at = parse_clock(time_range.open)
        if open_at is None:
            raise ScheduleValidationError(
                f"Invalid open time '{time_range.open}' (expected HH:MM)",
                f"{field}.open",
            )
        close_at = parse_clock(time_range.close, allow_end_of_day=True)
        if close_at is None:
            raise ScheduleValidationError(
                f"Invalid close time '{time_range.close}' (expected HH:MM or 24:00)",
                f"{field}.close",
            )
        if close_at <= open_at:
            raise ScheduleValidationError(
                f"Range {time_range.open}-{time_range.close} must close after it opens; "
                "split ranges that cross midnight across two days",
                field,
            )
