"""Opening Hours Schemas — wire form of the OpeningHours value type.

Invariants:
    - Field names match the persisted JSON document (week_schedule, special_dates,
      holiday_closed; each day is {"ranges": [{"open", "close"}]})
    - Structure is checked here; bound/date semantics are checked by
      core.schedule.validate_opening_hours, the single source of truth
    - Length limits apply to request bodies only (the *Input classes); the
      response classes render any stored value, however malformed

Design Decisions:
    - Explicit to_domain/from_domain instead of from_attributes: the domain
      week schedule is keyed by Weekday, the wire form by field
    - Input classes subclass the response classes and only tighten fields,
      so to_domain is shared
"""

from pydantic import BaseModel, Field

from ordering_api.core.domain_types import Weekday
from ordering_api.core.opening_hours import (
    DaySchedule, OpeningHours, SpecialDate, TimeRange,
)


class TimeRangeSchema(BaseModel):
    open: str
    close: str


class DayScheduleSchema(BaseModel):
    ranges: list[TimeRangeSchema] = Field(default_factory=list)

    def to_domain(self) -> DaySchedule:
        return DaySchedule(ranges=tuple(
            TimeRange(open=r.open, close=r.close) for r in self.ranges
        ))


class WeekScheduleSchema(BaseModel):
    monday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    tuesday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    wednesday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    thursday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    friday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    saturday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)
    sunday: DayScheduleSchema = Field(default_factory=DayScheduleSchema)


class SpecialDateSchema(BaseModel):
    date: str = Field(description="YYYY-MM-DD")
    schedule: DayScheduleSchema = Field(default_factory=DayScheduleSchema)


class OpeningHoursSchema(BaseModel):
    """Opening hours as returned by the API."""
    week_schedule: WeekScheduleSchema = Field(default_factory=WeekScheduleSchema)
    special_dates: list[SpecialDateSchema] = Field(default_factory=list)
    holiday_closed: bool = False

    def to_domain(self) -> OpeningHours:
        return OpeningHours(
            week_schedule={
                day: getattr(self.week_schedule, day.value).to_domain()
                for day in Weekday
            },
            special_dates=tuple(
                SpecialDate(date=s.date, schedule=s.schedule.to_domain())
                for s in self.special_dates
            ),
            holiday_closed=self.holiday_closed,
        )

    @classmethod
    def from_domain(cls, hours: OpeningHours) -> "OpeningHoursSchema":
        return cls.model_validate(hours.to_dict())


# ─── Request bodies ─────────────────────────────────────────────

class TimeRangeInput(TimeRangeSchema):
    open: str = Field(max_length=5)
    close: str = Field(max_length=5)


class DayScheduleInput(DayScheduleSchema):
    ranges: list[TimeRangeInput] = Field(default_factory=list)


class WeekScheduleInput(WeekScheduleSchema):
    monday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    tuesday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    wednesday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    thursday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    friday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    saturday: DayScheduleInput = Field(default_factory=DayScheduleInput)
    sunday: DayScheduleInput = Field(default_factory=DayScheduleInput)


class SpecialDateInput(SpecialDateSchema):
    date: str = Field(max_length=10, description="YYYY-MM-DD")
    schedule: DayScheduleInput = Field(default_factory=DayScheduleInput)


class OpeningHoursInput(OpeningHoursSchema):
    """Opening hours as sent by an admin."""
    week_schedule: WeekScheduleInput = Field(default_factory=WeekScheduleInput)
    special_dates: list[SpecialDateInput] = Field(default_factory=list)


class OpenStatusResponse(BaseModel):
    """Result of evaluating the schedule at one instant."""
    is_open: bool
    checked_at: str
    today: DayScheduleSchema
