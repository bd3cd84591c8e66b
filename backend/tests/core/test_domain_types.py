"""Domain Types — verifies enum values and weekday ordering.

Tests:
    - Weekday.from_index follows datetime.weekday()
    - Enums have expected members and serialize to their string values
"""

from datetime import date

from ordering_api.core.domain_types import OrderStatus, UserRole, Weekday


def test_weekday_from_index_matches_datetime():
    assert Weekday.from_index(date(2024, 3, 11).weekday()) == Weekday.MONDAY
    assert Weekday.from_index(date(2024, 3, 17).weekday()) == Weekday.SUNDAY


def test_weekday_has_seven_days():
    assert len(Weekday) == 7


def test_order_status_has_five_states():
    assert {s.value for s in OrderStatus} == {
        "pending", "preparing", "served", "paid", "cancelled",
    }


def test_user_roles():
    assert {r.value for r in UserRole} == {"admin", "staff"}


def test_enums_compare_equal_to_their_values():
    assert OrderStatus.PAID == "paid"
    assert Weekday.FRIDAY.value == "friday"
