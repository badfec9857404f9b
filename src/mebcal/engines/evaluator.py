"""
mebcal.engines.evaluator
------------------------
The interpreter. Resolves every catalogue row against a Gregorian year and
assembles the year's event list in catalogue order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Sequence, Set, Tuple

from ..core.errors import RuleUnsatisfiable
from ..core.time import from_jdn, midyear, to_jdn, year_bounds
from ..core.types import (
    Category,
    Event,
    FixedGregorian,
    FixedRange,
    HolidayRule,
    LastWeekOfMonth,
    LunarAnchored,
    NthWeekOfMonth,
    NthWeekdayOfMonth,
    WeekContaining,
)
from .catalogue import CATALOGUE
from .hijri import HijriCalendar
from .weeks import last_week_of_month, nth_week_of_month, nth_weekday_of_month, week_containing

logger = logging.getLogger(__name__)

Span = Tuple[str, date, date]


@dataclass(frozen=True)
class SkippedRule:
    name: str
    category: Category
    reason: str


@dataclass(frozen=True)
class Evaluation:
    year: int
    events: Tuple[Event, ...]
    skipped: Tuple[SkippedRule, ...] = ()


@dataclass
class _Collector:
    year: int
    events: List[Event] = field(default_factory=list)
    skipped: List[SkippedRule] = field(default_factory=list)

    def add(self, category: Category, spans: Sequence[Span]) -> None:
        for name, start, end in spans:
            self.events.append(Event(name, category, start, end, self.year))


class YearEvaluator:
    """
    Resolves a rule catalogue for a Gregorian year.

    Movable religious holidays are searched in the Hijri years around the
    one containing mid-June; a candidate is attributed to the year only if
    its eve and every holiday day fall inside it.
    """

    def __init__(
        self,
        catalogue: Sequence[Tuple[Category, Sequence[HolidayRule]]] = CATALOGUE,
        calendar: Optional[HijriCalendar] = None,
    ):
        self.catalogue = catalogue
        self.calendar = calendar if calendar is not None else HijriCalendar()

    # ---------------------------------------------------------
    # Direct (Gregorian) rules
    # ---------------------------------------------------------

    def _resolve_direct(self, rule: HolidayRule, year: int) -> Span:
        if isinstance(rule, FixedGregorian):
            start = _civil_date(year, rule.month, rule.day)
            return rule.name, start, start + timedelta(days=rule.span_days)
        if isinstance(rule, FixedRange):
            start = _civil_date(year, rule.month, rule.day)
            return rule.name, start, start + timedelta(days=rule.length_days - 1)
        if isinstance(rule, NthWeekdayOfMonth):
            hit = nth_weekday_of_month(year, rule.month, rule.weekday, rule.occurrence)
            start = hit + timedelta(days=rule.offset_days)
            return rule.name, start, start + timedelta(days=rule.span_days)
        if isinstance(rule, NthWeekOfMonth):
            monday, _ = nth_week_of_month(year, rule.month, rule.week_index)
            return rule.name, monday, monday + timedelta(days=rule.span_days)
        if isinstance(rule, WeekContaining):
            monday, _ = week_containing(_civil_date(year, rule.month, rule.day))
            return rule.name, monday, monday + timedelta(days=rule.span_days)
        if isinstance(rule, LastWeekOfMonth):
            monday, sunday = last_week_of_month(year, rule.month)
            return rule.name, monday, sunday
        raise TypeError(f"Unknown rule type: {type(rule)}")

    # ---------------------------------------------------------
    # Lunar-anchored rules
    # ---------------------------------------------------------

    def candidate_hijri_years(self, year: int) -> List[int]:
        anchor = self.calendar.year_of(midyear(year))
        return [anchor - 1, anchor, anchor + 1]

    def _resolve_lunar(self, rule: LunarAnchored, year: int) -> List[Span]:
        # Compared as JDNs: candidates near 1 AD / 9999 AD may lie outside datetime.date.
        first, last = (to_jdn(d) for d in year_bounds(year))
        out: List[Span] = []
        for hy in self.candidate_hijri_years(year):
            start = self.calendar.to_jdn(hy, rule.hijri_month, rule.hijri_day)
            eve_start = start - rule.eve_days
            end = start + rule.span_days
            if not (first <= eve_start and end <= last):
                logger.debug("%s: Hijri %d -> JDN %d..%d outside %d", rule.name, hy, eve_start, end, year)
                continue
            logger.debug("%s: Hijri %d kept for %d", rule.name, hy, year)
            out.append((rule.eve_name, from_jdn(eve_start), from_jdn(start - 1)))
            out.append((rule.name, from_jdn(start), from_jdn(end)))
        return out

    # ---------------------------------------------------------
    # Public
    # ---------------------------------------------------------

    def resolve(self, rule: HolidayRule, year: int) -> List[Span]:
        if isinstance(rule, LunarAnchored):
            return self._resolve_lunar(rule, year)
        return [self._resolve_direct(rule, year)]

    def report(self, year: int) -> Evaluation:
        col = _Collector(year)
        for category, rules in self.catalogue:
            direct: List[Span] = []
            lunar: List[Span] = []
            for rule in rules:
                try:
                    spans = self.resolve(rule, year)
                except RuleUnsatisfiable as e:
                    logger.warning("Skipping '%s' for %d: %s", rule.name, year, e)
                    col.skipped.append(SkippedRule(rule.name, category, str(e)))
                    continue
                (lunar if isinstance(rule, LunarAnchored) else direct).extend(spans)
            col.add(category, direct)
            col.add(category, _dedupe(lunar))
        return Evaluation(year, tuple(col.events), tuple(col.skipped))

    def evaluate(self, year: int) -> List[Event]:
        return list(self.report(year).events)


def _civil_date(year: int, month: int, day: int) -> date:
    # Rows are validated against the longest month, so Feb 29 fails only here.
    try:
        return date(year, month, day)
    except ValueError as e:
        raise RuleUnsatisfiable(f"{year}-{month:02d}-{day:02d} does not exist") from e


def _dedupe(spans: Sequence[Span]) -> List[Span]:
    """Collapse identical (name, start) pairs, first occurrence wins."""
    seen: Set[Tuple[str, date]] = set()
    out: List[Span] = []
    for span in spans:
        key = (span[0], span[1])
        if key in seen:
            continue
        seen.add(key)
        out.append(span)
    return out
