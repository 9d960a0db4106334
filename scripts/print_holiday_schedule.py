"""Print the business and banking holiday schedule for one or more years.

Run: python scripts/print_holiday_schedule.py 2025 2026
"""

import logging
import sys
from datetime import date

from bankcal.calendar.schedule import holiday_schedule

logger = logging.getLogger("bankcal.scripts.schedule")


def main(argv: list[str]) -> int:
    try:
        years = [int(a) for a in argv] if argv else [date.today().year]
    except ValueError as e:
        logger.error(f"Years must be integers: {e}")
        return 2

    df = holiday_schedule(years)
    for (calendar, year), group in df.groupby(["calendar", "year"], sort=False):
        print(f"\n{'='*60}")
        print(f"{calendar} calendar -- {year} ({len(group)} holidays)")
        print(f"{'='*60}")
        print(group.drop(columns=["calendar", "year"]).to_string(index=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(main(sys.argv[1:]))
