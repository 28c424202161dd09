"""Unit tests for HolidayCalendar range generation, validation and caching."""

# pylint: disable=redefined-outer-name

from datetime import date

import pytest  # type: ignore

from src.market_calendar.errors import (CalendarError, InvalidYearRangeError,
                                        UnrepresentableYearError,
                                        YearOutOfRangeError)
from src.market_calendar.holidays.holiday_calendar import (HolidayCache,
                                                           HolidayCalendar)
from src.market_calendar.holidays.special_closures import (SPECIAL_CLOSURES,
                                                           closures_for_year)


@pytest.fixture
def calendar():
    """Fresh calendar with an empty cache."""
    return HolidayCalendar(HolidayCache())


def test_earliest_supported_year():
    """The epoch is 2000."""
    if HolidayCalendar.earliest_supported_year() != 2000:
        raise AssertionError("Earliest supported year must be 2000")


def test_generate_holidays_single_year(calendar):
    """A single-year range lists the year's holidays as sorted ISO strings."""
    holidays = calendar.generate_holidays(2024, 2024)
    expected = [
        "2024-01-01",
        "2024-01-15",
        "2024-02-19",
        "2024-03-29",
        "2024-05-27",
        "2024-06-19",
        "2024-07-04",
        "2024-09-02",
        "2024-11-28",
        "2024-12-25",
    ]
    if holidays != expected:
        pytest.fail(f"Unexpected holidays: {holidays}")


def test_generate_holidays_weekend_observances(calendar):
    """Weekend holidays show up on their observed weekday."""
    if "2022-12-26" not in calendar.generate_holidays(2022, 2022):
        raise AssertionError("Christmas 2022 must be observed on 2022-12-26")
    holidays_2021 = calendar.generate_holidays(2021, 2021)
    for observed in ("2021-07-05", "2021-06-18"):
        if observed not in holidays_2021:
            pytest.fail(f"Missing observed holiday {observed}")


def test_saturday_new_year_lands_in_rule_year(calendar):
    """The Dec 31, 2021 observance belongs to the 2022 holiday set only."""
    if "2021-12-31" not in calendar.generate_holidays(2022, 2022):
        raise AssertionError("Observed New Year's Day 2022 missing from 2022")
    if "2021-12-31" in calendar.generate_holidays(2021, 2021):
        raise AssertionError("Dec 31, 2021 must not be in the 2021 holiday set")


@pytest.mark.parametrize(
    "year, observed, present",
    [
        (2019, "2019-06-19", False),
        (2020, "2020-06-19", False),
        (2021, "2021-06-18", True),
        (2030, "2030-06-19", True),
    ],
)
def test_juneteenth_only_from_2021(calendar, year, observed, present):
    """Juneteenth appears in the holiday set iff the year is 2021 or later."""
    found = observed in calendar.generate_holidays(year, year)
    if found is not present:
        pytest.fail(f"Juneteenth presence for {year}: expected {present}, got {found}")


@pytest.mark.parametrize(
    "day", ["2001-09-11", "2001-09-12", "2001-09-13", "2001-09-14", "2012-10-29", "2012-10-30", "2018-12-05"]
)
def test_special_closures_included(calendar, day):
    """Historical one-off closures are unioned into their year."""
    year = int(day[:4])
    if day not in calendar.generate_holidays(year, year):
        pytest.fail(f"Special closure {day} missing")


def test_special_closures_only_in_their_year():
    """closures_for_year filters the table by year."""
    if set(closures_for_year(2012)) != {date(2012, 10, 29), date(2012, 10, 30)}:
        raise AssertionError("Unexpected 2012 closures")
    if closures_for_year(2013):
        raise AssertionError("There are no special closures in 2013")
    if len(SPECIAL_CLOSURES) != 7:
        raise AssertionError("Special closure table must hold seven dates")


def test_generate_holidays_multi_year_is_sorted_and_unique(calendar):
    """Multi-year output is the sorted union of each year."""
    holidays = calendar.generate_holidays(2000, 2024)
    if holidays != sorted(set(holidays)):
        raise AssertionError("Holidays must be sorted and de-duplicated")
    expected_count = sum(len(calendar.holidays_for_year(y)) for y in range(2000, 2025))
    if len(holidays) != expected_count:
        pytest.fail(f"Expected {expected_count} holidays, got {len(holidays)}")


def test_generate_holidays_rejects_years_before_2000(calendar):
    """Ranges starting before the epoch raise the out-of-range error."""
    with pytest.raises(YearOutOfRangeError, match="Holiday data is only available from 2000 onwards"):
        calendar.generate_holidays(1999, 2000)


def test_generate_holidays_rejects_inverted_range(calendar):
    """A start year after the end year raises the invalid-range error."""
    with pytest.raises(InvalidYearRangeError) as exc_info:
        calendar.generate_holidays(2025, 2024)
    if (exc_info.value.start_year, exc_info.value.end_year) != (2025, 2024):
        raise AssertionError("Error must carry both years")
    if isinstance(exc_info.value, YearOutOfRangeError):
        raise AssertionError("Invalid range must be distinct from out-of-range")


def test_errors_are_value_errors():
    """Both error kinds share CalendarError and ValueError as bases."""
    for error in (YearOutOfRangeError(1999), InvalidYearRangeError(2001, 2000)):
        if not isinstance(error, CalendarError) or not isinstance(error, ValueError):
            pytest.fail(f"{type(error).__name__} must derive from CalendarError")


def test_generate_holidays_far_future(calendar):
    """Arbitrarily large end years are accepted."""
    holidays = calendar.generate_holidays(2000, 2100)
    if holidays[-1] != "2100-12-24":
        pytest.fail(f"Unexpected last holiday: {holidays[-1]}")


def test_cache_is_used_and_results_are_identical(calendar):
    """Repeated calls hit the cache and return identical output."""
    first = calendar.generate_holidays(2020, 2021)
    if calendar.cache.misses != 2 or len(calendar.cache) != 2:
        pytest.fail("Each year must be computed once")
    second = calendar.generate_holidays(2020, 2021)
    if calendar.cache.hits != 2:
        pytest.fail(f"Expected 2 cache hits, got {calendar.cache.hits}")
    if first != second:
        raise AssertionError("Results must be identical across calls")


def test_cached_sets_are_immutable(calendar):
    """Per-year sets are frozen so callers cannot corrupt the cache."""
    holidays = calendar.holidays_for_year(2024)
    if not isinstance(holidays, frozenset):
        raise AssertionError("Cached holiday sets must be frozensets")


def test_cache_clear():
    """Clearing the cache drops entries and counters."""
    cache = HolidayCache()
    cache.put(2024, frozenset({date(2024, 1, 1)}))
    cache.get(2024)
    cache.clear()
    if len(cache) != 0 or cache.hits != 0 or 2024 in cache:
        raise AssertionError("Cache must be empty after clear()")


def test_holiday_names_include_special_closures(calendar):
    """holiday_names merges rule names with special closure reasons, sorted by date."""
    names = calendar.holiday_names(2012)
    if names.get(date(2012, 10, 29)) != "Hurricane Sandy":
        raise AssertionError("Hurricane Sandy closure must be named")
    if list(names) != sorted(names):
        raise AssertionError("Named holidays must be sorted by date")


def test_last_representable_year_is_accepted(calendar):
    """Year 9999 still yields a full holiday set."""
    holidays = calendar.holidays_for_year(9999)
    if len(holidays) != 10 or not {date(9999, 7, 5), date(9999, 12, 24)} <= holidays:
        pytest.fail(f"Unexpected 9999 holidays: {sorted(holidays)}")


@pytest.mark.parametrize("start_year, end_year", [(2000, 10000), (10000, 10000)])
def test_years_past_9999_raise_calendar_error(calendar, start_year, end_year):
    """Years no calendar date can hold fail with a named calendar error."""
    with pytest.raises(UnrepresentableYearError, match="last supported year is 9999") as exc_info:
        calendar.generate_holidays(start_year, end_year)
    if not isinstance(exc_info.value, CalendarError) or exc_info.value.year != 10000:
        raise AssertionError("Error must be a CalendarError carrying the year")
