# tests/test_catalogue.py

import pytest

from mebcal.core.types import (
    Category,
    FixedGregorian,
    FixedRange,
    LunarAnchored,
    NthWeekOfMonth,
    NthWeekdayOfMonth,
    WeekContaining,
)
from mebcal.engines.catalogue import CATALOGUE, COMMEMORATIVE_RULES, OFFICIAL_RULES, SCHOOL_RULES


def test_group_order():
    assert [cat for cat, _ in CATALOGUE] == [Category.OFFICIAL, Category.SCHOOL, Category.COMMEMORATIVE]

def test_official_rules():
    fixed = [r for r in OFFICIAL_RULES if isinstance(r, FixedGregorian)]
    lunar = [r for r in OFFICIAL_RULES if isinstance(r, LunarAnchored)]
    assert len(fixed) == 7
    assert [(r.hijri_month, r.hijri_day, r.span_days) for r in lunar] == [(10, 1, 2), (12, 10, 3)]

def test_school_rules_are_weekday_rules():
    assert len(SCHOOL_RULES) == 5
    assert all(isinstance(r, NthWeekdayOfMonth) for r in SCHOOL_RULES)

def test_commemorative_mixes_variants():
    kinds = {type(r) for r in COMMEMORATIVE_RULES}
    assert {FixedGregorian, FixedRange, NthWeekOfMonth, WeekContaining} <= kinds
    assert 25 <= len(COMMEMORATIVE_RULES) <= 40

def test_names_unique_within_category():
    for _, rules in CATALOGUE:
        names = [r.name for r in rules]
        assert len(names) == len(set(names))

@pytest.mark.parametrize("make", [
    lambda: FixedGregorian("x", 13, 1),
    lambda: FixedRange("x", 3, 1, 0),
    lambda: FixedRange("x", 4, 31, 3),
    lambda: FixedGregorian("x", 2, 30),
    lambda: FixedGregorian("x", 5, 0),
    lambda: WeekContaining("x", 6, 31),
    lambda: NthWeekdayOfMonth("x", 1, 7, 1),
    lambda: WeekContaining("x", 0, 1),
    lambda: LunarAnchored("x", 10, 1, span_days=-1, eve_name="y"),
])
def test_malformed_rows_rejected(make):
    with pytest.raises(ValueError):
        make()

def test_leap_day_row_accepted():
    assert FixedGregorian("x", 2, 29).day == 29
