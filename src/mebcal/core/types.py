from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Tuple, Union

class Category(str, Enum):
    OFFICIAL = "Official"
    SCHOOL = "School"
    COMMEMORATIVE = "Commemorative"

    @property
    def label(self) -> str:
        return _LABELS[self]

_LABELS = {
    Category.OFFICIAL: "Resmi Tatil",
    Category.SCHOOL: "Okul Tatili",
    Category.COMMEMORATIVE: "Belirli Gün ve Hafta",
}

@dataclass(frozen=True)
class Event:
    name: str
    category: Category
    start_date: date
    end_date: date
    year: int

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError(f"{self.name}: end_date {self.end_date} precedes start_date {self.start_date}")

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def as_row(self) -> Tuple[int, str, str, str, str]:
        return (self.year, self.category.value, self.name, self.start_date.isoformat(), self.end_date.isoformat())

@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int
    day: int

# ------------------------------------------------------------
# Rules: pure data, resolved by engines.evaluator.YearEvaluator
# ------------------------------------------------------------

def _check_month(name: str, month: int) -> None:
    if not (1 <= month <= 12):
        raise ValueError(f"{name}: month must be in 1..12, got {month}")

# February allows 29; a Feb 29 row is unsatisfiable in common years at resolve time.
_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

def _check_day(name: str, month: int, day: int) -> None:
    _check_month(name, month)
    if not (1 <= day <= _MAX_DAYS[month - 1]):
        raise ValueError(f"{name}: day must be in 1..{_MAX_DAYS[month - 1]} for month {month}, got {day}")

def _check_span(name: str, span: int) -> None:
    if span < 0:
        raise ValueError(f"{name}: span must be non-negative, got {span}")

@dataclass(frozen=True)
class FixedGregorian:
    name: str
    month: int
    day: int
    span_days: int = 0

    def __post_init__(self) -> None:
        _check_day(self.name, self.month, self.day)
        _check_span(self.name, self.span_days)

@dataclass(frozen=True)
class LunarAnchored:
    """
    Holiday pinned to a Hijri (month, day), preceded by an eve.

    Produces two events: the eve (eve_days days ending the day before the
    start) and the holiday itself (start .. start + span_days).
    """
    name: str
    hijri_month: int
    hijri_day: int
    span_days: int
    eve_name: str
    eve_days: int = 1

    def __post_init__(self) -> None:
        _check_month(self.name, self.hijri_month)
        _check_span(self.name, self.span_days)
        if self.eve_days < 1:
            raise ValueError(f"{self.name}: eve_days must be >= 1")

@dataclass(frozen=True)
class NthWeekdayOfMonth:
    name: str
    month: int
    weekday: int     # 0=Mon..6=Sun
    occurrence: int  # 1-based
    span_days: int = 0
    offset_days: int = 0

    def __post_init__(self) -> None:
        _check_month(self.name, self.month)
        _check_span(self.name, self.span_days)
        if not (0 <= self.weekday <= 6):
            raise ValueError(f"{self.name}: weekday must be in 0..6, got {self.weekday}")

@dataclass(frozen=True)
class NthWeekOfMonth:
    """Monday-anchored regardless of any weekday concept."""
    name: str
    month: int
    week_index: int
    span_days: int = 6

    def __post_init__(self) -> None:
        _check_month(self.name, self.month)
        _check_span(self.name, self.span_days)

@dataclass(frozen=True)
class WeekContaining:
    name: str
    month: int
    day: int
    span_days: int = 6

    def __post_init__(self) -> None:
        _check_day(self.name, self.month, self.day)
        _check_span(self.name, self.span_days)

@dataclass(frozen=True)
class FixedRange:
    name: str
    month: int
    day: int
    length_days: int

    def __post_init__(self) -> None:
        _check_day(self.name, self.month, self.day)
        if self.length_days < 1:
            raise ValueError(f"{self.name}: length_days must be >= 1")

@dataclass(frozen=True)
class LastWeekOfMonth:
    name: str
    month: int

    def __post_init__(self) -> None:
        _check_month(self.name, self.month)

HolidayRule = Union[
    FixedGregorian,
    LunarAnchored,
    NthWeekdayOfMonth,
    NthWeekOfMonth,
    WeekContaining,
    FixedRange,
    LastWeekOfMonth,
]
