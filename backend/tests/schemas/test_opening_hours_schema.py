"""Opening Hours Schemas — verifies wire form ↔ domain conversion.

Tests:
    - Omitted weekdays default to closed
    - to_domain / from_domain preserve every field
    - Structural errors are rejected by Pydantic, bound semantics are not
    - Length limits bind request bodies only; stored values always render
"""

import pytest
from pydantic import ValidationError

from ordering_api.core.domain_types import Weekday
from ordering_api.core.opening_hours import DaySchedule, TimeRange
from ordering_api.schemas.opening_hours import OpeningHoursInput, OpeningHoursSchema


def test_omitted_days_are_closed():
    schema = OpeningHoursSchema.model_validate({
        "week_schedule": {"friday": {"ranges": [{"open": "10:00", "close": "22:00"}]}},
    })
    hours = schema.to_domain()
    assert hours.week_schedule[Weekday.FRIDAY] == DaySchedule(
        ranges=(TimeRange("10:00", "22:00"),),
    )
    assert hours.week_schedule[Weekday.MONDAY] == DaySchedule()


def test_domain_conversion_preserves_fields():
    data = {
        "week_schedule": {"monday": {"ranges": [{"open": "09:00", "close": "17:00"}]}},
        "special_dates": [
            {"date": "2024-12-25", "schedule": {"ranges": []}},
            {"date": "2024-12-31", "schedule": {"ranges": [{"open": "10:00", "close": "15:00"}]}},
        ],
        "holiday_closed": True,
    }
    hours = OpeningHoursSchema.model_validate(data).to_domain()
    again = OpeningHoursSchema.from_domain(hours)
    assert again.to_domain() == hours
    assert [s.date for s in again.special_dates] == ["2024-12-25", "2024-12-31"]
    assert again.holiday_closed is True


def test_missing_range_bound_is_a_structural_error():
    with pytest.raises(ValidationError):
        OpeningHoursSchema.model_validate({
            "week_schedule": {"monday": {"ranges": [{"open": "09:00"}]}},
        })


def test_bound_semantics_left_to_domain_validation():
    schema = OpeningHoursSchema.model_validate({
        "week_schedule": {"monday": {"ranges": [{"open": "22:00", "close": "02:00"}]}},
    })
    assert schema.week_schedule.monday.ranges[0].close == "02:00"


LEGACY = {
    "week_schedule": {"monday": {"ranges": [{"open": "09:00:00", "close": "17:00:00"}]}},
    "special_dates": [{"date": "2024-12-25T00:00:00", "schedule": {"ranges": []}}],
}


def test_input_rejects_overlong_bounds_and_dates():
    with pytest.raises(ValidationError):
        OpeningHoursInput.model_validate(LEGACY)


def test_response_form_renders_stored_legacy_values():
    hours = OpeningHoursSchema.model_validate(LEGACY).to_domain()
    again = OpeningHoursSchema.from_domain(hours)
    assert again.week_schedule.monday.ranges[0].open == "09:00:00"
    assert again.special_dates[0].date == "2024-12-25T00:00:00"
