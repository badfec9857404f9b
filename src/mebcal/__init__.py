"""mebcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    evaluate,
    evaluate_report,
    hijri_year_of,
    hijri_to_gregorian,
    gregorian_to_hijri,
    settle,
)
from .core.types import Category, Event, HijriDate

__all__ = [
    "evaluate",
    "evaluate_report",
    "hijri_year_of",
    "hijri_to_gregorian",
    "gregorian_to_hijri",
    "settle",
    "Category",
    "Event",
    "HijriDate",
]
