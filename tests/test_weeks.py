# tests/test_weeks.py

from datetime import date, timedelta

import pytest

from mebcal.core.errors import RuleUnsatisfiable
from mebcal.engines.weeks import (
    FRIDAY,
    MONDAY,
    SUNDAY,
    last_day_of_month,
    last_week_of_month,
    monday_of_week,
    nth_week_of_month,
    nth_weekday_of_month,
    sunday_of_week,
    week_containing,
)


def test_second_monday_of_september_2025():
    assert nth_weekday_of_month(2025, 9, MONDAY, 2) == date(2025, 9, 8)

def test_fourth_monday_of_january_2025():
    assert nth_weekday_of_month(2025, 1, MONDAY, 4) == date(2025, 1, 27)

def test_second_friday_of_june_2024():
    assert nth_weekday_of_month(2024, 6, FRIDAY, 2) == date(2024, 6, 14)

def test_nth_weekday_properties():
    """Result has the weekday, lies in the month, and has exactly n-1 predecessors."""
    for year in range(2000, 2041):
        for month in range(1, 13):
            for wd in range(7):
                for n in range(1, 5):
                    d = nth_weekday_of_month(year, month, wd, n)
                    assert d.weekday() == wd
                    assert (d.year, d.month) == (year, month)
                    earlier = [
                        date(year, month, k) for k in range(1, d.day)
                        if date(year, month, k).weekday() == wd
                    ]
                    assert len(earlier) == n - 1

def test_fifth_occurrence_may_be_missing():
    # February 2021 starts on Monday and has exactly four of each weekday
    assert nth_weekday_of_month(2021, 2, SUNDAY, 4) == date(2021, 2, 28)
    with pytest.raises(RuleUnsatisfiable):
        nth_weekday_of_month(2021, 2, MONDAY, 5)

@pytest.mark.parametrize("n", [0, -1, 6])
def test_pathological_occurrences(n):
    with pytest.raises(RuleUnsatisfiable):
        nth_weekday_of_month(2024, 3, MONDAY, n)

def test_week_bounds():
    d = date(2024, 3, 1)  # Friday
    assert monday_of_week(d) == date(2024, 2, 26)
    assert sunday_of_week(d) == date(2024, 3, 3)
    assert week_containing(date(2024, 3, 4)) == (date(2024, 3, 4), date(2024, 3, 10))
    assert week_containing(date(2024, 3, 10)) == (date(2024, 3, 4), date(2024, 3, 10))

def test_nth_week_of_month():
    # January 2025 starts on Wednesday; first Monday is the 6th
    assert nth_week_of_month(2025, 1, 1) == (date(2025, 1, 6), date(2025, 1, 12))
    assert nth_week_of_month(2025, 1, 2) == (date(2025, 1, 13), date(2025, 1, 19))
    # September 2025 starts on Monday
    assert nth_week_of_month(2025, 9, 3) == (date(2025, 9, 15), date(2025, 9, 21))

def test_nth_week_always_monday_anchored():
    for year in range(1990, 2060):
        for month in range(1, 13):
            start, end = nth_week_of_month(year, month, 1)
            assert start.weekday() == MONDAY
            assert end == start + timedelta(days=6)
            assert 1 <= start.day <= 7

def test_nth_week_out_of_month():
    with pytest.raises(RuleUnsatisfiable):
        nth_week_of_month(2025, 2, 0)
    with pytest.raises(RuleUnsatisfiable):
        nth_week_of_month(2025, 2, 5)

def test_last_week_of_month():
    assert last_day_of_month(2024, 2) == date(2024, 2, 29)
    # 31 March 2024 is a Sunday
    assert last_week_of_month(2024, 3) == (date(2024, 3, 25), date(2024, 3, 31))
    # 31 March 2025 is a Monday; the week runs into April
    assert last_week_of_month(2025, 3) == (date(2025, 3, 31), date(2025, 4, 6))
