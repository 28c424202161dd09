"""Unit tests for DateNormalizer input handling."""

from datetime import date, datetime, timedelta, timezone

import pandas as pd  # type: ignore
import pytest  # type: ignore
import pytz  # type: ignore

from src.market_calendar.date_normalizer import DateNormalizer


@pytest.mark.parametrize(
    "value",
    [
        date(2024, 1, 2),
        datetime(2024, 1, 2, 12, 0),
        datetime(2024, 1, 2, 0, 0, tzinfo=timezone.utc),
        pd.Timestamp("2024-01-02"),
        "2024-01-02",
        " 2024-01-02 ",
        "2024-01-02T00:00:00Z",
        "2024-01-02T23:59:59",
    ],
)
def test_same_calendar_day_inputs_agree(value):
    """Every representation of Jan 2, 2024 normalizes to the same date."""
    result = DateNormalizer.to_date(value)
    if result != date(2024, 1, 2):
        pytest.fail(f"{value!r} normalized to {result}")


def test_aware_values_are_truncated_in_utc():
    """A New York evening timestamp belongs to the next UTC day."""
    new_york = pytz.timezone("America/New_York")
    evening = new_york.localize(datetime(2024, 1, 1, 21, 0))
    if DateNormalizer.to_date(evening) != date(2024, 1, 2):
        raise AssertionError("Aware datetimes must be converted to UTC first")
    offset = datetime(2024, 1, 2, 1, 0, tzinfo=timezone(timedelta(hours=5)))
    if DateNormalizer.to_date(offset) != date(2024, 1, 1):
        raise AssertionError("Positive offsets must roll back to the UTC date")


@pytest.mark.parametrize("value", ["", "   ", "not-a-date", "2024-13-45"])
def test_invalid_strings_raise_value_error(value):
    """Unparseable strings raise ValueError."""
    with pytest.raises(ValueError):
        DateNormalizer.to_date(value)


def test_unsupported_type_raises_type_error():
    """Non-date inputs are rejected with TypeError."""
    with pytest.raises(TypeError, match="Expected date"):
        DateNormalizer.to_date(20240102)  # type: ignore[arg-type]


def test_nat_timestamp_raises_value_error():
    """NaT carries no calendar day."""
    with pytest.raises(ValueError):
        DateNormalizer.to_date(pd.NaT)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["today", "now", "Today", " now ", "tomorrow", "Jan 2 2024"])
def test_clock_relative_and_free_form_strings_rejected(value):
    """Only ISO calendar dates are accepted, so results never depend on the clock."""
    with pytest.raises(ValueError, match="Invalid date string"):
        DateNormalizer.to_date(value)
