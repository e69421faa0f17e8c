from datetime import date, datetime, timezone, timedelta

from app.core.timezone_utils import (
    add_months, day_bounds, end_of_day, time_to_minutes, normalize_hhmm, hourly_slots
)


def test_add_months_leap_day_rolls_into_march():
    assert add_months(datetime(2024, 2, 29), 12) == datetime(2025, 3, 1)


def test_add_months_first_of_month():
    assert add_months(datetime(2024, 1, 1), 6) == datetime(2024, 7, 1)


def test_add_months_month_end_overflow_non_leap_year():
    # 31 de enero + 1 mes: febrero de 2023 tiene 28 días -> 3 de marzo
    assert add_months(datetime(2023, 1, 31), 1) == datetime(2023, 3, 3)


def test_add_months_crosses_year_and_keeps_time_and_tz():
    start = datetime(2024, 11, 15, 9, 30, tzinfo=timezone.utc)
    result = add_months(start, 3)
    assert result == datetime(2025, 2, 15, 9, 30, tzinfo=timezone.utc)
    assert result.tzinfo == timezone.utc


def test_add_months_accepts_dates():
    assert add_months(date(2024, 3, 31), 1) == date(2024, 5, 1)


def test_day_bounds_for_datetime_and_date():
    start, next_day = day_bounds(datetime(2025, 6, 10, 17, 45))
    assert start == datetime(2025, 6, 10)
    assert next_day == datetime(2025, 6, 11)

    start, next_day = day_bounds(date(2025, 6, 10))
    assert start == datetime(2025, 6, 10)
    assert next_day - start == timedelta(days=1)


def test_end_of_day_includes_last_microsecond():
    assert end_of_day(date(2025, 6, 10)) == datetime(2025, 6, 10, 23, 59, 59, 999999)


def test_time_helpers():
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("00:00") == 0
    assert normalize_hhmm("9:05") == "09:05"
    assert normalize_hhmm("18:00") == "18:00"


def test_hourly_slots_business_hours():
    slots = hourly_slots(9, 20)
    assert len(slots) == 12
    assert slots[0] == "09:00"
    assert slots[-1] == "20:00"
