#!/usr/bin/env python3
"""Tests for DD/MM/YYYY parsing and formatting."""

import pytest
from datetime import date, datetime

from wof import InvalidDateError, format_date, parse_date, try_parse_date


class TestParseDate:
    """Tests for parse_date."""

    def test_parses_valid_date(self):
        assert parse_date("15/03/2026") == date(2026, 3, 15)

    def test_accepts_unpadded_fields(self):
        assert parse_date("5/3/2026") == date(2026, 3, 5)

    def test_strips_surrounding_whitespace(self):
        assert parse_date("  15/03/2026 ") == date(2026, 3, 15)

    def test_leap_day_in_leap_year(self):
        assert parse_date("29/02/2024") == date(2024, 2, 29)

    def test_year_bounds(self):
        assert parse_date("01/01/1900") == date(1900, 1, 1)
        assert parse_date("31/12/2100") == date(2100, 12, 31)

    @pytest.mark.parametrize(
        "text",
        [
            "31/02/2024",
            "29/02/2025",
            "31/04/2026",
            "00/01/2024",
            "12/13/2024",
            "32/01/2024",
            "01/00/2024",
            "01/01/1899",
            "01/01/2101",
            "abc",
            "",
            "   ",
            "15/03",
            "15/03/2026/1",
            "15-03-2026",
            "aa/03/2026",
            "15/3x/2026",
            "-1/03/2026",
            "+1/03/2026",
        ],
    )
    def test_rejects_invalid(self, text):
        with pytest.raises(InvalidDateError):
            parse_date(text)

    def test_error_carries_message_and_text(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date("31/02/2024")
        assert exc_info.value.message == "Invalid date format. Use DD/MM/YYYY"
        assert exc_info.value.text == "31/02/2024"

    def test_empty_input_asks_for_a_date(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date("")
        assert exc_info.value.message == "Expiry date is required"

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_date("abc")


class TestTryParseDate:
    """Tests for try_parse_date."""

    def test_valid(self):
        assert try_parse_date("01/12/2026") == date(2026, 12, 1)

    def test_invalid_returns_none(self):
        assert try_parse_date("31/02/2024") is None
        assert try_parse_date("") is None


class TestFormatDate:
    """Tests for format_date."""

    def test_zero_pads(self):
        assert format_date(date(2026, 3, 5)) == "05/03/2026"

    def test_datetime(self):
        assert format_date(datetime(2026, 12, 25, 18, 30)) == "25/12/2026"

    @pytest.mark.parametrize(
        "text", ["01/01/1900", "29/02/2024", "15/03/2026", "30/11/2099", "31/12/2100"]
    )
    def test_round_trip(self, text):
        assert format_date(parse_date(text)) == text
