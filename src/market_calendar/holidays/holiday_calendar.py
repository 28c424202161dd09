"""Year-range holiday generation backed by an explicit per-year cache.

:class:`HolidayCalendar` is the single source of truth for market closures:
the trading-day predicates and the expiration calculator always go through it.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, FrozenSet, List, Optional, Set

from src.market_calendar.errors import (EARLIEST_SUPPORTED_YEAR,
                                        LATEST_REPRESENTABLE_YEAR,
                                        InvalidYearRangeError,
                                        UnrepresentableYearError,
                                        YearOutOfRangeError)
from src.market_calendar.holidays.holiday_rules import (describe_rules,
                                                        evaluate_rules)
from src.market_calendar.holidays.special_closures import closures_for_year
from src.utils.io.logger import Logger


class HolidayCache:
    """Memo of computed holiday sets keyed by year.

    A year's holiday set never changes for the lifetime of the process, so
    entries are never invalidated.
    """

    __slots__ = ("_sets", "hits", "misses")

    def __init__(self) -> None:
        self._sets: Dict[int, FrozenSet[date]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, year: int) -> Optional[FrozenSet[date]]:
        """Return the cached set for *year*, or ``None`` on a miss."""
        found = self._sets.get(year)
        if found is None:
            self.misses += 1
        else:
            self.hits += 1
        return found

    def put(self, year: int, holidays: FrozenSet[date]) -> None:
        """Store the holiday set computed for *year*."""
        self._sets[year] = holidays

    def clear(self) -> None:
        """Drop every cached year and reset the counters."""
        self._sets.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._sets)

    def __contains__(self, year: object) -> bool:
        return year in self._sets


class HolidayCalendar:
    """Generates observed U.S. market holidays for any range of years from 2000."""

    def __init__(self, cache: Optional[HolidayCache] = None) -> None:
        self._cache = cache if cache is not None else HolidayCache()

    @property
    def cache(self) -> HolidayCache:
        """Return the cache holding per-year holiday sets."""
        return self._cache

    @staticmethod
    def earliest_supported_year() -> int:
        """Return the first year with holiday data."""
        return EARLIEST_SUPPORTED_YEAR

    @staticmethod
    def validate_year(year: int) -> None:
        """Raise :class:`YearOutOfRangeError` if *year* precedes the epoch.

        Years after 9999 raise :class:`UnrepresentableYearError`, since no
        ``datetime.date`` exists for them.
        """
        if year < EARLIEST_SUPPORTED_YEAR:
            raise YearOutOfRangeError(year)
        if year > LATEST_REPRESENTABLE_YEAR:
            raise UnrepresentableYearError(year)

    @staticmethod
    def validate_range(start_year: int, end_year: int) -> None:
        """Validate a closed ``[start_year, end_year]`` range."""
        HolidayCalendar.validate_year(start_year)
        if start_year > end_year:
            raise InvalidYearRangeError(start_year, end_year)
        if end_year > LATEST_REPRESENTABLE_YEAR:
            raise UnrepresentableYearError(end_year)

    def holidays_for_year(self, year: int) -> FrozenSet[date]:
        """Return the holiday set of *year*: observed rule dates plus special closures."""
        HolidayCalendar.validate_year(year)
        cached = self._cache.get(year)
        if cached is not None:
            return cached
        holidays: Set[date] = evaluate_rules(year)
        holidays.update(closures_for_year(year))
        frozen = frozenset(holidays)
        self._cache.put(year, frozen)
        Logger.debug(f"Computed {len(frozen)} market holidays for {year}")
        return frozen

    def holiday_names(self, year: int) -> Dict[date, str]:
        """Return the holidays of *year* mapped to their names, sorted by date."""
        HolidayCalendar.validate_year(year)
        named = describe_rules(year)
        named.update(closures_for_year(year))
        return dict(sorted(named.items()))

    def generate_holidays(self, start_year: int, end_year: int) -> List[str]:
        """Return the sorted ISO dates of every holiday between both years inclusive."""
        HolidayCalendar.validate_range(start_year, end_year)
        merged: Set[date] = set()
        for year in range(start_year, end_year + 1):
            merged.update(self.holidays_for_year(year))
        return [d.isoformat() for d in sorted(merged)]

    def is_holiday(self, day: date) -> bool:
        """Return ``True`` if *day* is in the holiday set of its own year."""
        return day in self.holidays_for_year(day.year)
