from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from .core.types import Event, HijriDate
from .engines.evaluator import Evaluation, YearEvaluator
from .engines.hijri import HijriCalendar, get_calendar
from .storage import EventStore

logger = logging.getLogger(__name__)

_default_calendar = HijriCalendar()
_default_evaluator = YearEvaluator(calendar=_default_calendar)


def _evaluator(calendar: Optional[str]) -> YearEvaluator:
    if calendar is None:
        return _default_evaluator
    return YearEvaluator(calendar=get_calendar(calendar))

def _cal(calendar: Optional[str]) -> HijriCalendar:
    return _default_calendar if calendar is None else get_calendar(calendar)

# ============================================================
# Core
# ============================================================

def evaluate(year: int, *, calendar: Optional[str] = None) -> List[Event]:
    """All events of `year`: Official, then School, then Commemorative."""
    return _evaluator(calendar).evaluate(year)

def evaluate_report(year: int, *, calendar: Optional[str] = None) -> Evaluation:
    """Like evaluate(), also listing rules skipped as unsatisfiable."""
    return _evaluator(calendar).report(year)

# ============================================================
# Calendar conversion
# ============================================================

def hijri_year_of(d: date, *, calendar: Optional[str] = None) -> int:
    return _cal(calendar).year_of(d)

def hijri_to_gregorian(year: int, month: int, day: int, *, calendar: Optional[str] = None) -> date:
    return _cal(calendar).to_gregorian(year, month, day)

def gregorian_to_hijri(d: date, *, calendar: Optional[str] = None) -> HijriDate:
    return _cal(calendar).from_gregorian(d)

# ============================================================
# Storage round-trip
# ============================================================

def settle(
    year: int,
    store: EventStore,
    *,
    recompute: bool = False,
    calendar: Optional[str] = None,
) -> Tuple[List[Event], bool]:
    """
    Return the stored events of `year`, computing and storing them first if
    the year is absent. The flag is True when the year was computed now.
    """
    exists = store.year_exists(year)
    if exists and not recompute:
        logger.info("%d already stored, reading events", year)
        return store.events_by_year(year), False

    # The store is untouched until evaluation succeeds.
    logger.info("Computing %d", year)
    events = evaluate(year, calendar=calendar)
    if exists:
        store.replace_year(year, events)
    else:
        store.insert_events(events)
    return store.events_by_year(year), True
