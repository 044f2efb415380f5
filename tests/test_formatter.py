"""Tests for the separator/day-line formatter."""

from datetime import date

import pytest

from daylines.calendar_utils import is_weekend, month_full_name, weekday_of
from daylines.date_range import expand
from daylines.domain import CalendarConfig, Weekday
from daylines.formatter import format_day_line, format_lines, separators_for


class TestFormatDayLine:
    def test_padded_to_exact_width(self, config):
        line = format_day_line(date(2023, 11, 14), config)
        assert line == "14.11.2023 Tuesday".ljust(35)
        assert len(line) == 35

    def test_truncated_when_narrower_than_text(self):
        cfg = CalendarConfig.build(12, "-", "=", "#")
        assert format_day_line(date(2023, 11, 15), cfg) == "15.11.2023 W"

    def test_year_below_1000_keeps_four_digits(self, config):
        line = format_day_line(date(999, 1, 1), config)
        assert line == "01.01.0999 Tuesday".ljust(35)

    def test_year_below_1000_through_the_pipeline(self, config):
        res = format_lines(expand("0999-01-01", "0999-01-02", config), config)
        assert res.lines[1].startswith("01.01.0999 Tuesday")
        assert res.lines[3].startswith("02.01.0999 Wednesday")
        assert len(res.lines[1]) == 35


class TestSeparatorsFor:
    def test_plain_day(self, config):
        assert separators_for(date(2023, 11, 14), config) == ("-" * 35, "=" * 35)

    @pytest.mark.parametrize("d, month", [(date(2023, 12, 1), "December"), (date(2024, 1, 1), "January")])
    def test_first_of_month_suffixes_both(self, config, d, month):
        day_sep, week_sep = separators_for(d, config)
        assert day_sep == "-" * 35 + month
        assert week_sep == "=" * 35 + month


class TestFormatLines:
    def test_two_lines_per_day(self, config):
        res = format_lines(expand("2023-11-14", "2023-11-16", config), config)
        assert res.lines == (
            "-" * 35,
            "14.11.2023 Tuesday".ljust(35),
            "-" * 35,
            "15.11.2023 Wednesday".ljust(35),
            "-" * 35,
            "16.11.2023 Thursday".ljust(35),
        )

    def test_weekend_gets_marker_and_week_separator(self, config):
        res = format_lines(expand("2023-11-25", "2023-11-27", config), config)
        assert res.lines == (
            "=" * 35,
            "25.11.2023 Saturday".ljust(35) + "####",
            "=" * 35,
            "26.11.2023 Sunday".ljust(35) + "####",
            "=" * 35,
            "27.11.2023 Monday".ljust(35),
        )

    def test_month_boundary_on_weekday(self, config):
        res = format_lines(expand("2023-11-30", "2023-12-01", config), config)
        assert res.lines[2] == "-" * 35 + "December"
        assert res.lines[3] == "01.12.2023 Friday".ljust(35)

    def test_month_boundary_on_monday_uses_week_separator(self, config):
        res = format_lines(expand("2024-01-01", "2024-01-01", config), config)
        assert res.lines == ("=" * 35 + "January", "01.01.2024 Monday".ljust(35))

    def test_week_boundary_follows_rendered_text(self):
        # Too narrow to show the whole weekday name: no week separator,
        # but the weekend marker is still appended.
        cfg = CalendarConfig.build(12, "-", "=", "#")
        res = format_lines(expand("2023-11-11", "2023-11-11", cfg), cfg)
        assert res.lines == ("-" * 12, "11.11.2023 S####")

    @pytest.mark.parametrize("width, sep", [(16, "-"), (17, "=")])
    def test_week_boundary_needs_the_full_name(self, width, sep):
        # "13.11.2023 Monday" is exactly 17 characters.
        cfg = CalendarConfig.build(width, "-", "=", "#")
        res = format_lines(expand("2023-11-13", "2023-11-13", cfg), cfg)
        assert res.lines[0] == sep * width


class TestReferenceListing:
    """Width 35, '-', '=', '#' over 2023-11-11..2024-01-01."""

    @pytest.fixture
    def listing(self, config):
        dr = expand("2023-11-11", "2024-01-01", config)
        return dr, format_lines(dr, config)

    def test_line_count(self, listing):
        dr, res = listing
        assert len(dr) == 52
        assert len(res) == 2 * 52

    def test_every_line_pair(self, listing, config):
        dr, res = listing
        for i, d in enumerate(dr):
            sep, day_line = res.lines[2 * i], res.lines[2 * i + 1]

            if weekday_of(d) in (Weekday.MON, Weekday.SAT, Weekday.SUN):
                assert sep.startswith(config.week_line_sep)
            else:
                assert sep.startswith(config.day_line_sep)

            if d.day == 1:
                assert sep.endswith(month_full_name(d))
            else:
                assert len(sep) == 35

            if is_weekend(d):
                assert day_line.endswith("####")
                assert len(day_line) == 39
            else:
                assert "#" not in day_line
                assert len(day_line) == 35
            assert day_line.startswith(d.strftime("%d.%m.%Y"))

    def test_text_ends_with_new_year(self, listing):
        _, res = listing
        assert res.text().endswith("=" * 35 + "January\n" + "01.01.2024 Monday".ljust(35))
