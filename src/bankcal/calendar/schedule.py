"""Holiday schedule export for reporting.

Builds one row per (calendar, year, holiday) so settlement and reporting
jobs can publish the closures they plan around.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from bankcal.calendar.holiday_calendar import (
    BANKING_CALENDAR,
    BUSINESS_CALENDAR,
    HolidayCalendar,
)

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    "calendar",
    "year",
    "name",
    "actual_date",
    "observed_date",
    "observed_weekday",
    "shifted",
]


def holiday_schedule(
    years: Iterable[int],
    calendars: Optional[Iterable[HolidayCalendar]] = None,
) -> pd.DataFrame:
    """Return the observed holidays of ``calendars`` for ``years``.

    Args:
        years: Calendar years to include.
        calendars: Defaults to the business and banking calendars.

    Returns:
        DataFrame with SCHEDULE_COLUMNS, ordered by calendar (in the order
        given), then observed date.
    """
    if calendars is None:
        calendars = (BUSINESS_CALENDAR, BANKING_CALENDAR)
    calendars = list(calendars)
    years = sorted(set(years))

    rows = []
    for cal in calendars:
        for year in years:
            for h in cal.observed_holidays(year):
                rows.append({
                    "calendar": cal.name,
                    "year": year,
                    "name": h.name,
                    "actual_date": h.actual_date,
                    "observed_date": h.observed_date,
                    "observed_weekday": h.observed_date.strftime("%A"),
                    "shifted": h.shifted,
                })

    df = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    logger.info(
        f"Built holiday schedule: {len(df)} rows across "
        f"{len(calendars)} calendars and {len(years)} years"
    )
    return df
