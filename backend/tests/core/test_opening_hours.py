"""Opening Hours Value Type — verifies persisted form and tolerant decoding.

Tests:
    - Week schedule always holds all seven days
    - to_dict/from_dict preserve the value, including holiday_closed
    - from_dict never raises on malformed documents
    - Split shifts and unordered or overlapping ranges survive the round trip
"""

from ordering_api.core.domain_types import Weekday
from ordering_api.core.opening_hours import (
    DaySchedule, OpeningHours, SpecialDate, TimeRange,
)


def test_week_schedule_is_filled_to_seven_days():
    hours = OpeningHours(week_schedule={
        Weekday.FRIDAY: DaySchedule(ranges=(TimeRange("10:00", "22:00"),)),
    })
    assert set(hours.week_schedule) == set(Weekday)
    assert hours.week_schedule[Weekday.MONDAY] == DaySchedule()


def test_to_dict_matches_persisted_document_shape():
    hours = OpeningHours(
        week_schedule={Weekday.MONDAY: DaySchedule(ranges=(TimeRange("09:00", "17:00"),))},
        special_dates=(SpecialDate("2024-12-25"),),
        holiday_closed=True,
    )
    data = hours.to_dict()
    assert data["week_schedule"]["monday"] == {
        "ranges": [{"open": "09:00", "close": "17:00"}],
    }
    assert data["week_schedule"]["sunday"] == {"ranges": []}
    assert data["special_dates"] == [{"date": "2024-12-25", "schedule": {"ranges": []}}]
    assert data["holiday_closed"] is True


def test_from_dict_restores_the_value():
    hours = OpeningHours(
        week_schedule={Weekday.SATURDAY: DaySchedule(ranges=(TimeRange("11:00", "15:00"),))},
        special_dates=(SpecialDate("2025-01-01", DaySchedule(ranges=(TimeRange("12:00", "14:00"),))),),
        holiday_closed=True,
    )
    assert OpeningHours.from_dict(hours.to_dict()) == hours


def test_from_dict_accepts_non_dict_input():
    assert OpeningHours.from_dict(None) == OpeningHours()
    assert OpeningHours.from_dict("garbage") == OpeningHours()


def test_from_dict_skips_malformed_entries():
    data = {
        "week_schedule": {
            "monday": {"ranges": [{"open": "09:00", "close": "17:00"}, "oops"]},
            "tuesday": "closed",
        },
        "special_dates": ["oops", {"date": "not-a-date"}],
    }
    hours = OpeningHours.from_dict(data)
    assert hours.week_schedule[Weekday.MONDAY].ranges == (TimeRange("09:00", "17:00"),)
    assert hours.week_schedule[Weekday.TUESDAY] == DaySchedule()
    assert hours.special_dates == (SpecialDate("not-a-date"),)
    assert hours.holiday_closed is False


def test_from_dict_keeps_malformed_bounds_as_text():
    data = {"week_schedule": {"monday": {"ranges": [{"open": 9, "close": None}]}}}
    hours = OpeningHours.from_dict(data)
    assert hours.week_schedule[Weekday.MONDAY].ranges == (TimeRange("9", ""),)


SPLIT_SHIFTS = OpeningHours(
    week_schedule={
        Weekday.MONDAY: DaySchedule(ranges=(
            TimeRange("11:00", "14:00"), TimeRange("17:00", "22:00"),
        )),
        # Listed out of order, with an overlap: kept exactly as written
        Weekday.FRIDAY: DaySchedule(ranges=(
            TimeRange("18:00", "23:00"), TimeRange("11:00", "15:00"),
            TimeRange("14:00", "19:00"),
        )),
    },
    special_dates=(
        SpecialDate("2024-12-24", DaySchedule(ranges=(
            TimeRange("10:00", "13:00"), TimeRange("16:00", "18:00"),
        ))),
        SpecialDate("2024-12-25"),
    ),
)


def test_round_trip_keeps_multiple_ranges_in_order():
    restored = OpeningHours.from_dict(SPLIT_SHIFTS.to_dict())
    assert restored == SPLIT_SHIFTS
    assert [r.open for r in restored.week_schedule[Weekday.FRIDAY].ranges] == [
        "18:00", "11:00", "14:00",
    ]


def test_holiday_closed_requires_a_real_boolean():
    assert OpeningHours.from_dict({"holiday_closed": "false"}).holiday_closed is False
    assert OpeningHours.from_dict({"holiday_closed": 1}).holiday_closed is False
    assert OpeningHours.from_dict({"holiday_closed": True}).holiday_closed is True
