from datetime import date, datetime

import pytest

from conftest import record
from salespivot.errors import InsufficientDataError, is_insufficient_data
from salespivot.logic.windows import covered_days, earliest_date, latest_date, validate_range
from salespivot.utils.dates import calendar_days, trailing_days


def test_latest_and_earliest_date():
    records = [record(3, "A", 1, hour=8), record(1, "A", 1, hour=23), record(3, "B", 1, hour=17)]
    assert latest_date(records) == datetime(2024, 3, 3, 17, 0)
    assert earliest_date(records) == datetime(2024, 3, 1, 23, 0)


def test_dates_of_empty_input_are_none():
    assert latest_date([]) is None
    assert earliest_date([]) is None


def test_covered_days_rounds_partial_first_day_up():
    assert covered_days(datetime(2024, 3, 1, 0, 0), datetime(2024, 3, 5, 8, 0)) == 5
    assert covered_days(datetime(2024, 3, 1, 18, 0), datetime(2024, 3, 7, 1, 0)) == 7
    assert covered_days(datetime(2024, 3, 1, 10, 0), datetime(2024, 3, 1, 11, 0)) == 1


def test_validate_range_rejects_short_coverage():
    with pytest.raises(InsufficientDataError) as excinfo:
        validate_range(datetime(2024, 3, 1, 0, 0), datetime(2024, 3, 5, 12, 0))
    err = excinfo.value
    assert err.days == 5
    assert err.earliest == datetime(2024, 3, 1, 0, 0)
    assert is_insufficient_data(err)
    assert "2024-03-01 to 2024-03-05 (5 days)" in str(err)


def test_validate_range_accepts_a_week():
    assert validate_range(datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 7, 9, 0)) == 7


def test_day_sequences():
    assert trailing_days(date(2024, 3, 2), 3) == [date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2)]
    assert calendar_days(date(2024, 3, 30), date(2024, 4, 1)) == [date(2024, 3, 30), date(2024, 3, 31), date(2024, 4, 1)]
    assert calendar_days(date(2024, 3, 2), date(2024, 3, 1)) == []


def test_validate_range_minimum_from_environment(monkeypatch):
    monkeypatch.setenv("MIN_RANGE_DAYS", "3")
    assert validate_range(datetime(2024, 3, 1, 0, 0), datetime(2024, 3, 5, 12, 0)) == 5
    monkeypatch.setenv("MIN_RANGE_DAYS", "30")
    with pytest.raises(InsufficientDataError) as excinfo:
        validate_range(datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 7, 9, 0))
    assert excinfo.value.minimum == 30
