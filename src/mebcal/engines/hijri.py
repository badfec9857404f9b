"""
mebcal.engines.hijri
--------------------
Arithmetic (tabular) Hijri calendar. Lunar (year, month, day) labels are
mapped to Julian Day Numbers by a fixed 30-year cycle; no observation or
moon-sighting correction is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict

from ..core.errors import InvalidHijriDate
from ..core.time import to_jdn, from_jdn
from ..core.types import HijriDate

# 1 Muharram 1 AH, Friday 16 July 622 (Julian) / astronomical Thursday epoch.
EPOCH_CIVIL = 1948440
EPOCH_ASTRONOMICAL = 1948439

CYCLE_YEARS = 30
CYCLE_DAYS = 10631  # 30 * 354 + 11 leap days


@dataclass(frozen=True)
class HijriCalendarParams:
    """
    epoch_jdn:   JDN of 1 Muharram 1 AH.
    leap_offset: year Y is leap iff (leap_offset + 11*Y) mod 30 < 11.
                 14 gives the common leap set {2,5,7,10,13,16,18,21,24,26,29}.
    """
    epoch_jdn: int = EPOCH_CIVIL
    leap_offset: int = 14

    def __post_init__(self) -> None:
        if not (0 <= self.leap_offset < CYCLE_YEARS):
            raise ValueError("leap_offset must be in 0..29")


HIJRI_CALENDARS: Dict[str, HijriCalendarParams] = {
    "civil": HijriCalendarParams(epoch_jdn=EPOCH_CIVIL),
    "astronomical": HijriCalendarParams(epoch_jdn=EPOCH_ASTRONOMICAL),
}


class HijriCalendar:
    """Gregorian <-> Hijri conversion through JDN."""

    def __init__(self, params: HijriCalendarParams = HijriCalendarParams()):
        self.p = params

    # ---------------------------------------------------------
    # Year / month structure
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return (self.p.leap_offset + 11 * year) % CYCLE_YEARS < 11

    def month_length(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise InvalidHijriDate(f"Hijri month must be in 1..12, got {month}")
        if month % 2 == 1:
            return 30
        if month == 12 and self.is_leap_year(year):
            return 30
        return 29

    def validate(self, year: int, month: int, day: int) -> None:
        n = self.month_length(year, month)
        if not (1 <= day <= n):
            raise InvalidHijriDate(f"Hijri day must be in 1..{n} for {year}-{month:02d}, got {day}")

    def _leap_days_before(self, year: int) -> int:
        """Leap days in years 1..year-1."""
        return (self.p.leap_offset - 11 + 11 * year) // CYCLE_YEARS

    # ---------------------------------------------------------
    # Forward: Hijri label -> JDN
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return (
            self.p.epoch_jdn - 1
            + (year - 1) * 354
            + self._leap_days_before(year)
            + 29 * (month - 1) + month // 2
            + day
        )

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        return from_jdn(self.to_jdn(year, month, day))

    # ---------------------------------------------------------
    # Inverse: JDN -> Hijri label
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> HijriDate:
        # Estimate by mean year length, then correct against exact year starts.
        year = (CYCLE_YEARS * (jdn - self.p.epoch_jdn) + CYCLE_DAYS - 1) // CYCLE_DAYS
        while jdn < self.to_jdn(year, 1, 1):
            year -= 1
        while jdn >= self.to_jdn(year + 1, 1, 1):
            year += 1

        prior = jdn - self.to_jdn(year, 1, 1)
        month = min(12, (11 * prior + 330) // 325)
        while month > 1 and jdn < self.to_jdn(year, month, 1):
            month -= 1
        day = jdn - self.to_jdn(year, month, 1) + 1
        return HijriDate(year, month, day)

    def from_gregorian(self, d: date) -> HijriDate:
        return self.from_jdn(to_jdn(d))

    def year_of(self, d: date) -> int:
        return self.from_gregorian(d).year

    def info(self) -> Dict[str, int]:
        return {"epoch_jdn": self.p.epoch_jdn, "leap_offset": self.p.leap_offset}


def get_calendar(name: str = "civil") -> HijriCalendar:
    if name not in HIJRI_CALENDARS:
        raise KeyError(f"Unknown Hijri calendar '{name}'. Available: {sorted(HIJRI_CALENDARS)}")
    return HijriCalendar(HIJRI_CALENDARS[name])
