"""CalendarTime: an absolute instant with US business/banking day awareness.

A CalendarTime wraps a timezone-aware datetime. Every calendar question
(weekend, holiday, business day, banking day) is asked of the instant's LOCAL
date in its own timezone, so the same instant can answer differently after
in_timezone():

    pst = ZoneInfo("America/Los_Angeles")
    t = new_time(datetime(2018, 12, 24, 23, 0, tzinfo=pst))
    t.is_holiday()                                    # False (Dec 24)
    t.in_timezone("America/New_York").is_holiday()    # True  (Dec 25)

Design Principles:
    - Immutable: every operation returns a new CalendarTime (or self).
    - Total: no calendar operation raises. Day counts outside
      (0, MAX_DAY_STEPS] leave the time unchanged.
    - Day stepping preserves wall-clock time of day and timezone.
    - Stepping that would pass datetime.max leaves the time unchanged.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Callable, Optional, Union
from zoneinfo import ZoneInfo

from bankcal.calendar.holiday_calendar import (
    BANKING_CALENDAR,
    BUSINESS_CALENDAR,
    PUBLIC_CALENDAR,
)
from bankcal.calendar.holidays import SATURDAY, ObservedHoliday

# --- Constants ---
# Upper bound on add_business_day / add_banking_day. Larger (and non-positive)
# counts are a no-op, which keeps every stepping loop finite.
MAX_DAY_STEPS: int = 500

ZERO_TIME: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)

TimezoneLike = Union[tzinfo, str]


class TimeParseError(ValueError):
    """Raised when text cannot be read as an ISO 8601 time."""
    pass


def _as_tzinfo(tz: TimezoneLike) -> tzinfo:
    return ZoneInfo(tz) if isinstance(tz, str) else tz


@dataclass(frozen=True, order=True)
class CalendarTime:
    """An aware datetime plus US business and banking day rules.

    Equality, ordering and hashing compare absolute instants, so the same
    moment expressed in two timezones is equal.
    """
    time: datetime = field(default=ZERO_TIME)

    def __post_init__(self) -> None:
        if self.time.tzinfo is None:
            object.__setattr__(self, "time", self.time.replace(tzinfo=timezone.utc))

    # --- Calendar predicates ---

    def is_weekend(self) -> bool:
        return self.time.weekday() >= SATURDAY

    def is_holiday(self) -> bool:
        """True if the local date is a holiday in any US holiday calendar."""
        return self.get_holiday() is not None

    def get_holiday(self) -> Optional[ObservedHoliday]:
        """Return the holiday observed on the local date, or None.

        Calendars are checked business first, then banking, then the federal
        public-holiday calendar.
        """
        d = self.time.date()
        for cal in (BUSINESS_CALENDAR, BANKING_CALENDAR, PUBLIC_CALENDAR):
            holiday = cal.holiday_named(d)
            if holiday is not None:
                return holiday
        return None

    def is_business_day(self) -> bool:
        """A weekday that is not a business holiday."""
        if self.is_weekend():
            return False
        return not BUSINESS_CALENDAR.is_observed_holiday(self.time.date())

    def is_banking_day(self) -> bool:
        """A weekday on which the Federal Reserve Banks are open."""
        if self.is_weekend():
            return False
        return not BANKING_CALENDAR.is_observed_holiday(self.time.date())

    # --- Day stepping ---

    def add_business_day(self, days: int) -> CalendarTime:
        """Move forward ``days`` business days; no-op unless 0 < days <= 500."""
        return self._add_days(days, CalendarTime.is_business_day)

    def add_banking_day(self, days: int) -> CalendarTime:
        """Move forward ``days`` banking days; no-op unless 0 < days <= 500."""
        return self._add_days(days, CalendarTime.is_banking_day)

    def _add_days(
        self, days: int, counts: Callable[[CalendarTime], bool]
    ) -> CalendarTime:
        if not 0 < days <= MAX_DAY_STEPS:
            return self

        current = self
        counted = 0
        while counted < days:
            # Aware arithmetic within one tzinfo is wall-clock arithmetic
            try:
                current = CalendarTime(current.time + timedelta(days=1))
            except OverflowError:
                # No room left before datetime.max
                return self
            if counts(current):
                counted += 1
        return current

    # --- Timezones ---

    def in_timezone(self, tz: TimezoneLike) -> CalendarTime:
        """Express the same instant in another timezone.

        An instant whose local time in ``tz`` falls outside the datetime range
        (the zero time west of UTC, for one) is returned unchanged.
        """
        try:
            return CalendarTime(self.time.astimezone(_as_tzinfo(tz)))
        except OverflowError:
            return self

    # --- Plain time accessors (not calendar-aware) ---

    def equal(self, other: CalendarTime) -> bool:
        return self.time == other.time

    def sub(self, other: Union[CalendarTime, datetime]) -> timedelta:
        other_time = other.time if isinstance(other, CalendarTime) else other
        return self.time - other_time

    def is_zero(self) -> bool:
        return self.time == ZERO_TIME

    def date(self) -> date:
        return self.time.date()

    @property
    def year(self) -> int:
        return self.time.year

    @property
    def month(self) -> int:
        return self.time.month

    @property
    def day(self) -> int:
        return self.time.day

    @property
    def weekday(self) -> int:
        """Local weekday, Monday=0 ... Sunday=6."""
        return self.time.weekday()

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        return self.time.tzinfo

    def format(self, fmt: str) -> str:
        return self.time.strftime(fmt)

    def isoformat(self) -> str:
        return self.time.isoformat()

    def __str__(self) -> str:
        return str(self.time)

    # --- JSON ---

    def to_json(self) -> str:
        """Serialize as a JSON string holding the ISO 8601 / RFC 3339 text."""
        return json.dumps(self.isoformat())

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> CalendarTime:
        """Deserialize a JSON string value. ``""`` yields the zero time."""
        try:
            value = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TimeParseError(f"cannot parse {data!r} as a JSON time value: {e}") from e
        if not isinstance(value, str):
            raise TimeParseError(f"cannot parse {data!r} as a JSON time value: not a string")
        return parse(value)


class CalendarTimeEncoder(json.JSONEncoder):
    """json.dumps(..., cls=CalendarTimeEncoder) for documents holding CalendarTime."""

    def default(self, o: Any) -> Any:
        if isinstance(o, CalendarTime):
            return o.isoformat()
        return super().default(o)


# --- Construction ---

def new_time(t: datetime) -> CalendarTime:
    """Lift a datetime into a CalendarTime. Naive datetimes are taken as UTC."""
    return CalendarTime(t)


def now(tz: TimezoneLike = timezone.utc) -> CalendarTime:
    """The current instant, expressed in ``tz``."""
    return CalendarTime(datetime.now(_as_tzinfo(tz)))


def parse(text: str) -> CalendarTime:
    """Parse ISO 8601 text (RFC 3339, fractional seconds, ``Z`` suffix).

    The empty string parses to the zero time. Text without an offset is
    taken as UTC.

    Raises:
        TimeParseError: If the text is not an ISO 8601 time.
    """
    if text == "":
        return CalendarTime(ZERO_TIME)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise TimeParseError(f"cannot parse {text!r} as an ISO 8601 time: {e}") from e
    return CalendarTime(parsed)
