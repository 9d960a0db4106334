"""US holiday rules and weekend observance policies.

Design Principles:
    - A HolidayRule is a pure function of a year to the holiday's actual date.
    - The set of rule kinds is closed (fixed date, Nth weekday, last weekday),
      so it is modelled as an Enum with one computation branch per kind.
    - Observance (moving a weekend holiday onto a weekday) is a separate step,
      chosen per calendar, and never changes the actual date.
    - All dates are Python date objects (not datetime). Time-of-day and
      timezone are handled by CalendarTime.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Optional

# Weekday constants (Monday=0 ... Sunday=6)
MONDAY = 0
THURSDAY = 3
SATURDAY = 5
SUNDAY = 6


class RuleKind(Enum):
    """How a holiday's actual date is derived from a year."""
    FIXED = "FIXED"                  # same month/day every year
    NTH_WEEKDAY = "NTH_WEEKDAY"      # e.g. 3rd Monday of January
    LAST_WEEKDAY = "LAST_WEEKDAY"    # e.g. last Monday of May


class Observance(Enum):
    """Weekend shift policy applied to an actual holiday date.

    ACTUAL:            no shift; the holiday is closed on its actual date.
    SUNDAY_TO_MONDAY:  Federal Reserve rule. A Sunday holiday is observed the
                       following Monday. A Saturday holiday stays on Saturday
                       (no Friday shift).
    NEAREST_WEEKDAY:   Federal public-holiday convention. Saturday moves back
                       to Friday, Sunday moves forward to Monday.
    """
    ACTUAL = "ACTUAL"
    SUNDAY_TO_MONDAY = "SUNDAY_TO_MONDAY"
    NEAREST_WEEKDAY = "NEAREST_WEEKDAY"

    def shift(self, actual: date) -> date:
        """Return the observed date for a holiday falling on ``actual``."""
        weekday = actual.weekday()
        if self is Observance.ACTUAL:
            return actual
        if weekday == SUNDAY:
            return actual + timedelta(days=1)
        if weekday == SATURDAY and self is Observance.NEAREST_WEEKDAY:
            return actual - timedelta(days=1)
        return actual


@dataclass(frozen=True)
class ObservedHoliday:
    """One holiday for one year: where it falls and where it is observed."""
    name: str
    actual_date: date
    observed_date: date

    @property
    def shifted(self) -> bool:
        return self.actual_date != self.observed_date


@dataclass(frozen=True)
class HolidayRule:
    """A named rule producing a holiday's actual date for any year.

    Fields used per kind:
        FIXED:         month, day
        NTH_WEEKDAY:   month, weekday, nth (1-based)
        LAST_WEEKDAY:  month, weekday

    ``business`` and ``banking`` tag which calendar(s) the rule belongs to.
    ``start_year`` is the first year the holiday is observed (None: always).

    Usage:
        mlk = HolidayRule.nth_weekday("Martin Luther King Jr. Day", 1, MONDAY, 3)
        mlk.actual_date(2018)  # date(2018, 1, 15)
    """
    name: str
    kind: RuleKind
    month: int
    day: int = 0
    weekday: int = 0
    nth: int = 0
    business: bool = False
    banking: bool = False
    start_year: Optional[int] = None

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"HolidayRule.month must be 1-12, got {self.month}")
        if self.kind is RuleKind.FIXED:
            # A non-leap year, so the rule has a date in every year
            try:
                date(2001, self.month, self.day)
            except ValueError as e:
                raise ValueError(
                    f"HolidayRule.day {self.day} is not valid for month {self.month} "
                    f"in every year: {e}"
                ) from e
        else:
            if not 0 <= self.weekday <= 6:
                raise ValueError(f"HolidayRule.weekday must be 0-6, got {self.weekday}")
            if self.kind is RuleKind.NTH_WEEKDAY and not 1 <= self.nth <= 4:
                raise ValueError(f"HolidayRule.nth must be 1-4, got {self.nth}")

    # --- Constructors ---

    @classmethod
    def fixed(cls, name: str, month: int, day: int, **tags: Any) -> HolidayRule:
        return cls(name, RuleKind.FIXED, month, day=day, **tags)

    @classmethod
    def nth_weekday(
        cls, name: str, month: int, weekday: int, nth: int, **tags: Any
    ) -> HolidayRule:
        return cls(name, RuleKind.NTH_WEEKDAY, month, weekday=weekday, nth=nth, **tags)

    @classmethod
    def last_weekday(cls, name: str, month: int, weekday: int, **tags: Any) -> HolidayRule:
        return cls(name, RuleKind.LAST_WEEKDAY, month, weekday=weekday, **tags)

    # --- Computation ---

    def active_in(self, year: int) -> bool:
        return self.start_year is None or year >= self.start_year

    def actual_date(self, year: int) -> date:
        """Compute the holiday's calendar date in ``year`` (before observance)."""
        if self.kind is RuleKind.FIXED:
            return date(year, self.month, self.day)
        if self.kind is RuleKind.NTH_WEEKDAY:
            first = date(year, self.month, 1)
            offset = (self.weekday - first.weekday()) % 7
            return first + timedelta(days=offset + 7 * (self.nth - 1))
        return _last_weekday_of_month(year, self.month, self.weekday)

    def observe(self, year: int, observance: Observance) -> ObservedHoliday:
        actual = self.actual_date(year)
        return ObservedHoliday(self.name, actual, observance.shift(actual))


def _last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Find the last occurrence of a weekday in a given month."""
    if month == 12:
        last_day = date(year, 12, 31)
    else:
        last_day = date(year, month + 1, 1) - timedelta(days=1)

    # Walk backwards from last day of month to find the target weekday
    offset = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=offset)


# --- Rule Table ---
# Business closures are the seven general US business holidays. The Federal
# Reserve banking calendar adds Presidents' Day, Juneteenth, Columbus Day and
# Veterans Day. Juneteenth is observed from 2021.
US_HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    HolidayRule.fixed("New Year's Day", 1, 1, business=True, banking=True),
    HolidayRule.nth_weekday(
        "Martin Luther King Jr. Day", 1, MONDAY, 3, business=True, banking=True
    ),
    HolidayRule.nth_weekday("Presidents' Day", 2, MONDAY, 3, banking=True),
    HolidayRule.last_weekday("Memorial Day", 5, MONDAY, business=True, banking=True),
    HolidayRule.fixed("Juneteenth", 6, 19, banking=True, start_year=2021),
    HolidayRule.fixed("Independence Day", 7, 4, business=True, banking=True),
    HolidayRule.nth_weekday("Labor Day", 9, MONDAY, 1, business=True, banking=True),
    HolidayRule.nth_weekday("Columbus Day", 10, MONDAY, 2, banking=True),
    HolidayRule.fixed("Veterans Day", 11, 11, banking=True),
    HolidayRule.nth_weekday(
        "Thanksgiving Day", 11, THURSDAY, 4, business=True, banking=True
    ),
    HolidayRule.fixed("Christmas Day", 12, 25, business=True, banking=True),
)

BUSINESS_RULES: tuple[HolidayRule, ...] = tuple(r for r in US_HOLIDAY_RULES if r.business)
BANKING_RULES: tuple[HolidayRule, ...] = tuple(r for r in US_HOLIDAY_RULES if r.banking)
