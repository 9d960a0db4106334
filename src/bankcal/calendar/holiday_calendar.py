"""Named holiday calendars with a thread-safe per-year memo.

Three calendars are built once at import and shared read-only by every
CalendarTime:

    BUSINESS_CALENDAR  general business closures, on their actual dates
    BANKING_CALENDAR   Federal Reserve closures, Sunday holidays on Monday
    PUBLIC_CALENDAR    every US holiday under the federal Saturday->Friday /
                       Sunday->Monday convention, for holiday reporting

The per-year memo is the only mutable state. Holidays for a year are computed
outside the lock and published with dict.setdefault under it, so concurrent
first lookups never see a partial entry and all receive the same tuple.
"""

from __future__ import annotations

import logging
import threading
from datetime import MAXYEAR, MINYEAR, date
from typing import Iterable, Optional

from bankcal.calendar.holidays import (
    BANKING_RULES,
    BUSINESS_RULES,
    US_HOLIDAY_RULES,
    HolidayRule,
    Observance,
    ObservedHoliday,
)

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """An ordered set of holiday rules observed under one weekend policy.

    Usage:
        cal = HolidayCalendar("banking", BANKING_RULES, Observance.SUNDAY_TO_MONDAY)
        cal.observed_holidays(2021)              # tuple of ObservedHoliday
        cal.is_observed_holiday(date(2021, 7, 5))  # True
    """

    def __init__(
        self,
        name: str,
        rules: Iterable[HolidayRule],
        observance: Observance,
    ) -> None:
        self._name = name
        self._rules: tuple[HolidayRule, ...] = tuple(rules)
        self._observance = observance
        self._memo: dict[int, tuple[ObservedHoliday, ...]] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules(self) -> tuple[HolidayRule, ...]:
        return self._rules

    @property
    def observance(self) -> Observance:
        return self._observance

    def observed_holidays(self, year: int) -> tuple[ObservedHoliday, ...]:
        """Return the year's holidays, one per active rule, sorted by observed date."""
        cached = self._memo.get(year)
        if cached is not None:
            return cached

        computed = tuple(
            sorted(
                (
                    rule.observe(year, self._observance)
                    for rule in self._rules
                    if rule.active_in(year)
                ),
                key=lambda h: (h.observed_date, h.actual_date),
            )
        )
        with self._lock:
            published = self._memo.setdefault(year, computed)
        if published is computed:
            logger.debug(
                f"{self._name}: computed {len(computed)} observed holidays for {year}"
            )
        return published

    def holiday_named(self, d: date) -> Optional[ObservedHoliday]:
        """Return the holiday observed on ``d``, or None.

        Neighbouring years are consulted because an observed date can cross a
        year boundary (New Year's Day on a Saturday observed on Dec 31).
        """
        for year in _years_around(d.year, d.year):
            for holiday in self.observed_holidays(year):
                if holiday.observed_date == d:
                    return holiday
        return None

    def is_observed_holiday(self, d: date) -> bool:
        return self.holiday_named(d) is not None

    def holidays_in_range(self, start: date, end: date) -> list[ObservedHoliday]:
        """Return holidays observed in [start, end] inclusive, sorted by date."""
        if end < start:
            return []
        return sorted(
            (
                h
                for year in _years_around(start.year, end.year)
                for h in self.observed_holidays(year)
                if start <= h.observed_date <= end
            ),
            key=lambda h: h.observed_date,
        )

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(name={self._name!r}, "
            f"rules={len(self._rules)}, "
            f"observance={self._observance.value})"
        )


def _years_around(first: int, last: int) -> list[int]:
    """Years first..last plus one either side, clamped to the date range."""
    years = list(range(max(first - 1, MINYEAR), min(last + 1, MAXYEAR) + 1))
    # The date's own year first, so it wins over a neighbour
    years.sort(key=lambda y: (y < first or y > last, y))
    return years


BUSINESS_CALENDAR = HolidayCalendar("business", BUSINESS_RULES, Observance.ACTUAL)
BANKING_CALENDAR = HolidayCalendar("banking", BANKING_RULES, Observance.SUNDAY_TO_MONDAY)
PUBLIC_CALENDAR = HolidayCalendar("public", US_HOLIDAY_RULES, Observance.NEAREST_WEEKDAY)
