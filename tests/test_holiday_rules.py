"""
Tests for the local Colombian holiday rules.
"""

from datetime import date

import pytest

from workingdays.domain.holiday_rules import (
    easter_sunday,
    local_holiday_records,
    local_holidays_for_year,
    next_monday,
)


class TestEasterSunday:
    """Tests for the Gregorian Easter computation."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2000, date(2000, 4, 23)),
            (2019, date(2019, 4, 21)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
            (2026, date(2026, 4, 5)),
            (2038, date(2038, 4, 25)),  # latest possible date
            (2285, date(2285, 3, 22)),  # earliest possible date
        ],
    )
    def test_known_easter_dates(self, year, expected):
        """Test Easter against published dates."""
        assert easter_sunday(year) == expected

    def test_easter_is_always_sunday(self):
        """Test that every computed Easter falls on a Sunday."""
        for year in range(1900, 2100):
            assert easter_sunday(year).weekday() == 6


class TestNextMonday:
    """Tests for the Monday transposition rule."""

    def test_monday_stays(self):
        assert next_monday(date(2025, 1, 6)) == date(2025, 1, 6)

    def test_sunday_moves_one_day(self):
        assert next_monday(date(2025, 6, 29)) == date(2025, 6, 30)

    def test_tuesday_moves_six_days(self):
        assert next_monday(date(2025, 11, 11)) == date(2025, 11, 17)


class TestLocalHolidays:
    """Tests for the full yearly holiday computation."""

    def test_colombia_2025(self):
        """Test the 2025 calendar, where San Pedro and Sagrado Corazón share June 30."""
        assert local_holidays_for_year(2025) == (
            date(2025, 1, 1),
            date(2025, 1, 6),
            date(2025, 3, 24),
            date(2025, 4, 17),
            date(2025, 4, 18),
            date(2025, 5, 1),
            date(2025, 6, 2),
            date(2025, 6, 23),
            date(2025, 6, 30),
            date(2025, 7, 20),
            date(2025, 8, 7),
            date(2025, 8, 18),
            date(2025, 10, 13),
            date(2025, 11, 3),
            date(2025, 11, 17),
            date(2025, 12, 8),
            date(2025, 12, 25),
        )

    def test_colombia_2026(self):
        """Test the 2026 calendar."""
        assert local_holidays_for_year(2026) == (
            date(2026, 1, 1),
            date(2026, 1, 12),
            date(2026, 3, 23),
            date(2026, 4, 2),
            date(2026, 4, 3),
            date(2026, 5, 1),
            date(2026, 5, 18),
            date(2026, 6, 8),
            date(2026, 6, 15),
            date(2026, 6, 29),
            date(2026, 7, 20),
            date(2026, 8, 7),
            date(2026, 8, 17),
            date(2026, 10, 12),
            date(2026, 11, 2),
            date(2026, 11, 16),
            date(2026, 12, 8),
            date(2026, 12, 25),
        )

    def test_holy_week_is_never_moved(self):
        """Holy Thursday and Good Friday stay on their literal dates."""
        for year in range(2000, 2050):
            easter = easter_sunday(year)
            records = {r.name: r.civil_date for r in local_holiday_records(year)}
            assert records["Jueves Santo"].weekday() == 3
            assert records["Viernes Santo"].weekday() == 4
            assert (easter - records["Viernes Santo"]).days == 2

    def test_easter_moved_feasts_land_on_monday(self):
        """Ascension, Corpus Christi and Sacred Heart always fall on a Monday."""
        for year in range(2000, 2050):
            by_date = local_holidays_for_year(year)
            easter = easter_sunday(year)
            for offset in (43, 64, 71):
                observed = date.fromordinal(easter.toordinal() + offset)
                assert observed.weekday() == 0
                assert observed in by_date

    def test_fixed_holidays_are_not_moved(self):
        """Independence Day stays on July 20 even on a Sunday."""
        assert date(2025, 7, 20).weekday() == 6
        assert date(2025, 7, 20) in local_holidays_for_year(2025)

    def test_result_is_sorted_and_unique(self):
        for year in range(1990, 2060):
            dates = local_holidays_for_year(year)
            assert list(dates) == sorted(set(dates))
            assert all(d.year == year for d in dates)

    def test_shared_date_keeps_first_rule_name(self):
        """June 30 2025 is named after San Pedro, the Monday-moved fixed rule."""
        records = {r.civil_date: r.name for r in local_holiday_records(2025)}
        assert records[date(2025, 6, 30)] == "San Pedro y San Pablo"
