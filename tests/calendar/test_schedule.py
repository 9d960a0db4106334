"""Tests for the holiday schedule DataFrame export."""

from datetime import date

from bankcal.calendar.holiday_calendar import PUBLIC_CALENDAR
from bankcal.calendar.schedule import SCHEDULE_COLUMNS, holiday_schedule


class TestHolidaySchedule:

    def test_default_calendars(self) -> None:
        df = holiday_schedule([2018])
        assert list(df.columns) == SCHEDULE_COLUMNS
        assert len(df) == 7 + 10  # Juneteenth is not a 2018 holiday
        assert list(df["calendar"].unique()) == ["business", "banking"]

    def test_sunday_shift_recorded(self) -> None:
        df = holiday_schedule([2021])
        row = df[(df["calendar"] == "banking") & (df["name"] == "Independence Day")].iloc[0]
        assert row["actual_date"] == date(2021, 7, 4)
        assert row["observed_date"] == date(2021, 7, 5)
        assert row["observed_weekday"] == "Monday"
        assert bool(row["shifted"]) is True

    def test_years_deduplicated_and_sorted(self) -> None:
        df = holiday_schedule([2022, 2021, 2022], calendars=[PUBLIC_CALENDAR])
        assert len(df) == 2 * 11
        assert list(df["year"].unique()) == [2021, 2022]

    def test_observed_dates_sorted_within_year(self) -> None:
        df = holiday_schedule([2026], calendars=[PUBLIC_CALENDAR])
        observed = list(df["observed_date"])
        assert observed == sorted(observed)

    def test_no_years(self) -> None:
        df = holiday_schedule([])
        assert df.empty
        assert list(df.columns) == SCHEDULE_COLUMNS
