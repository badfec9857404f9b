"""
mebcal.engines.weeks
--------------------
Date-rule primitives. All weeks are Monday-start (ISO convention) and all
weekdays use date.weekday() numbering (Monday=0 .. Sunday=6).
"""

from __future__ import annotations

import calendar as pycal
from datetime import date, timedelta
from typing import Tuple

from ..core.errors import RuleUnsatisfiable

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

Week = Tuple[date, date]


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, pycal.monthrange(year, month)[1])


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    n-th occurrence (1-based) of `weekday` in the month, scanning from day 1.
    """
    if n < 1:
        raise RuleUnsatisfiable(f"occurrence must be >= 1, got {n}")
    count = 0
    d = date(year, month, 1)
    while d.month == month:
        if d.weekday() == weekday:
            count += 1
            if count == n:
                return d
        d += timedelta(days=1)
    raise RuleUnsatisfiable(
        f"{year}-{month:02d} has only {count} {WEEKDAY_NAMES[weekday]}s, requested #{n}"
    )


def monday_of_week(d: date) -> date:
    return d - timedelta(days=d.weekday())


def sunday_of_week(d: date) -> date:
    return d + timedelta(days=SUNDAY - d.weekday())


def week_containing(d: date) -> Week:
    return monday_of_week(d), sunday_of_week(d)


def nth_week_of_month(year: int, month: int, week_index: int) -> Week:
    """
    Week `week_index` (1-based) counted from the first Monday on or after
    the 1st. Monday-anchored unconditionally.
    """
    if week_index < 1:
        raise RuleUnsatisfiable(f"week_index must be >= 1, got {week_index}")
    first = date(year, month, 1)
    first_monday = first + timedelta(days=(MONDAY - first.weekday()) % 7)
    monday = first_monday + timedelta(weeks=week_index - 1)
    if monday.month != month:
        raise RuleUnsatisfiable(f"{year}-{month:02d} has no week #{week_index}")
    return monday, monday + timedelta(days=6)


def last_week_of_month(year: int, month: int) -> Week:
    return week_containing(last_day_of_month(year, month))
