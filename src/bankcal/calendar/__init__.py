"""bankcal calendar: US business day and Federal Reserve banking day utilities.

This package is the sole source of truth for holiday and business/banking day
determination in bankcal.
"""
from bankcal.calendar.calendar_time import (
    MAX_DAY_STEPS,
    ZERO_TIME,
    CalendarTime,
    CalendarTimeEncoder,
    TimeParseError,
    new_time,
    now,
    parse,
)
from bankcal.calendar.holiday_calendar import (
    BANKING_CALENDAR,
    BUSINESS_CALENDAR,
    PUBLIC_CALENDAR,
    HolidayCalendar,
)
from bankcal.calendar.holidays import (
    HolidayRule,
    Observance,
    ObservedHoliday,
    RuleKind,
)

__all__ = [
    "BANKING_CALENDAR",
    "BUSINESS_CALENDAR",
    "PUBLIC_CALENDAR",
    "MAX_DAY_STEPS",
    "ZERO_TIME",
    "CalendarTime",
    "CalendarTimeEncoder",
    "HolidayCalendar",
    "HolidayRule",
    "Observance",
    "ObservedHoliday",
    "RuleKind",
    "TimeParseError",
    "new_time",
    "now",
    "parse",
]
