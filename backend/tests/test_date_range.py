"""Preset resolution and month arithmetic for the date-range resolver."""

from datetime import date

import pytest

from tasktracker.errors import MalformedDateError
from tasktracker.services.date_range import (
    DateRange,
    canonical_preset,
    effective_preset,
    parse_day,
    resolve_date_range,
    subtract_months,
    truncate_day,
)

TODAY = date(2024, 5, 15)


@pytest.mark.parametrize(
    "preset, expected",
    [
        ("Today", DateRange(date(2024, 5, 15), date(2024, 5, 15))),
        ("Yesterday", DateRange(date(2024, 5, 14), date(2024, 5, 14))),
        ("Last 7 Days", DateRange(date(2024, 5, 9), date(2024, 5, 15))),
        ("Last 1 Month", DateRange(date(2024, 4, 15), date(2024, 5, 15))),
        ("Last 3 Months", DateRange(date(2024, 2, 15), date(2024, 5, 15))),
        ("Last 6 Months", DateRange(date(2023, 11, 15), date(2024, 5, 15))),
        ("Last 9 Months", DateRange(date(2023, 8, 15), date(2024, 5, 15))),
        ("Last 1 Year", DateRange(date(2023, 5, 15), date(2024, 5, 15))),
    ],
)
def test_presets_resolve_relative_to_today(preset, expected):
    assert resolve_date_range(preset, today=TODAY) == expected


def test_all_and_unknown_presets_are_unrestricted():
    assert resolve_date_range("All", today=TODAY) is None
    assert resolve_date_range("Next Fortnight", today=TODAY) is None
    assert resolve_date_range(None, today=TODAY) is None


def test_last_month_from_march_31_clamps_into_february():
    start, end = resolve_date_range("Last 1 Month", today=date(2024, 3, 31))
    assert start == date(2024, 2, 29)
    assert end == date(2024, 3, 31)

    start, _ = resolve_date_range("Last 1 Month", today=date(2023, 3, 31))
    assert start == date(2023, 2, 28)


def test_subtract_months_crosses_year_boundary():
    assert subtract_months(date(2024, 1, 31), 1) == date(2023, 12, 31)
    assert subtract_months(date(2024, 2, 29), 12) == date(2023, 2, 28)
    assert subtract_months(date(2024, 8, 31), 6) == date(2024, 2, 29)


def test_specific_date_uses_custom_day():
    assert resolve_date_range("Specific Date", "2024-01-10", today=TODAY) == DateRange(
        date(2024, 1, 10), date(2024, 1, 10)
    )


def test_specific_date_falls_back_to_today():
    assert resolve_date_range("Specific Date", today=TODAY) == DateRange(TODAY, TODAY)
    assert resolve_date_range("Specific Date", "not-a-date", today=TODAY) == DateRange(TODAY, TODAY)


def test_custom_date_only_applies_to_specific_date():
    assert resolve_date_range("Last 7 Days", "2024-01-10T08:00:00Z", today=TODAY) == DateRange(
        date(2024, 5, 9), date(2024, 5, 15)
    )
    assert resolve_date_range("Today", "2024-01-10", today=TODAY) == DateRange(TODAY, TODAY)
    assert resolve_date_range("All", "2024-01-10", today=TODAY) is None


def test_legacy_keys_and_case_are_accepted():
    assert canonical_preset("week") == "Last 7 Days"
    assert canonical_preset("  last 3 months ") == "Last 3 Months"
    assert canonical_preset("TODAY") == "Today"


def test_truncate_and_parse_day():
    assert truncate_day("2024-01-10T23:59:59+05:30") == "2024-01-10"
    assert truncate_day("2024-01-10 10:00") == "2024-01-10"
    assert truncate_day(None) is None
    assert parse_day("2024-01-10T00:00:00.000Z") == date(2024, 1, 10)
    with pytest.raises(MalformedDateError):
        parse_day("10/01/2024")
    with pytest.raises(MalformedDateError):
        parse_day("")
    with pytest.raises(MalformedDateError):
        parse_day("2024-01-105")
    assert truncate_day("2024-01-105") == "2024-01-105"


def test_effective_preset_prefers_picked_day_over_default():
    assert effective_preset("Today", "2024-01-10") == "Today"
    assert effective_preset(None, "2024-01-10") == "Specific Date"
    assert effective_preset(None) == "All"
