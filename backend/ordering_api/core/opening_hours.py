"""Opening Hours — immutable schedule value types and their persisted JSON form.

Invariants:
    - Values are frozen; a week schedule always holds all seven weekdays
    - from_dict never raises: malformed historical data loads as-is and
      simply never matches at evaluation time
    - from_dict(to_dict(x)) == x for every OpeningHours value
    - Bounds are kept as the raw "HH:MM" strings that were written

Design Decisions:
    - Dataclasses over Pydantic here: core stays free of validation frameworks;
      Pydantic validates at the API boundary (schemas/opening_hours.py)
    - Special dates keep their "YYYY-MM-DD" string, so an unparsable legacy
      date survives a read/write cycle instead of being dropped
"""

from dataclasses import dataclass, field
from typing import Any

from ordering_api.core.domain_types import Weekday


@dataclass(frozen=True)
class TimeRange:
    """One open interval of a day, [open, close) in local wall-clock time."""
    open: str
    close: str

    def to_dict(self) -> dict:
        return {"open": self.open, "close": self.close}


@dataclass(frozen=True)
class DaySchedule:
    """All ranges for one day. Empty means closed all day."""
    ranges: tuple[TimeRange, ...] = ()

    def to_dict(self) -> dict:
        return {"ranges": [r.to_dict() for r in self.ranges]}


@dataclass(frozen=True)
class SpecialDate:
    """Date-specific override that replaces the weekly schedule for that date."""
    date: str
    schedule: DaySchedule = field(default_factory=DaySchedule)

    def to_dict(self) -> dict:
        return {"date": self.date, "schedule": self.schedule.to_dict()}


@dataclass(frozen=True)
class OpeningHours:
    """Weekly schedule plus ordered special-date overrides."""
    week_schedule: dict[Weekday, DaySchedule] = field(default_factory=dict)
    special_dates: tuple[SpecialDate, ...] = ()
    holiday_closed: bool = False

    def __post_init__(self):
        full_week = {
            day: self.week_schedule.get(day, DaySchedule()) for day in Weekday
        }
        object.__setattr__(self, "week_schedule", full_week)
        object.__setattr__(self, "special_dates", tuple(self.special_dates))

    def to_dict(self) -> dict:
        """Persisted/wire form (see restaurant_info.opening_hours column)."""
        return {
            "week_schedule": {
                day.value: self.week_schedule[day].to_dict() for day in Weekday
            },
            "special_dates": [s.to_dict() for s in self.special_dates],
            "holiday_closed": self.holiday_closed,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "OpeningHours":
        """Tolerant decode of the persisted form. Never raises."""
        if not isinstance(data, dict):
            return cls()
        week_raw = data.get("week_schedule")
        week: dict[Weekday, DaySchedule] = {}
        if isinstance(week_raw, dict):
            for day in Weekday:
                week[day] = _day_schedule_from_dict(week_raw.get(day.value))
        specials_raw = data.get("special_dates")
        specials = []
        if isinstance(specials_raw, list):
            for entry in specials_raw:
                if not isinstance(entry, dict):
                    continue
                specials.append(SpecialDate(
                    date=_as_text(entry.get("date")),
                    schedule=_day_schedule_from_dict(entry.get("schedule")),
                ))
        return cls(
            week_schedule=week,
            special_dates=tuple(specials),
            holiday_closed=data.get("holiday_closed") is True,
        )


def _day_schedule_from_dict(data: Any) -> DaySchedule:
    if not isinstance(data, dict):
        return DaySchedule()
    ranges_raw = data.get("ranges")
    if not isinstance(ranges_raw, list):
        return DaySchedule()
    return DaySchedule(ranges=tuple(
        TimeRange(open=_as_text(r.get("open")), close=_as_text(r.get("close")))
        for r in ranges_raw
        if isinstance(r, dict)
    ))


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)
