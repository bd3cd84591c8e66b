"""Clock — verifies the restaurant zone and aware timestamps."""

from datetime import timedelta

from ordering_api.infrastructure.clock import FixedOffsetClock, restaurant_timezone


def test_restaurant_timezone_from_minutes():
    assert restaurant_timezone(480).utcoffset(None) == timedelta(hours=8)
    assert restaurant_timezone(-330).utcoffset(None) == timedelta(hours=-5, minutes=-30)


def test_clock_returns_aware_instant_in_zone():
    now = FixedOffsetClock(restaurant_timezone(480)).now()
    assert now.utcoffset() == timedelta(hours=8)
