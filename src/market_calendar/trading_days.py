"""Trading-day and market-holiday predicates for the U.S. equity market."""

from datetime import date, timedelta
from typing import Optional

from src.market_calendar.date_normalizer import DateLike, DateNormalizer
from src.market_calendar.holidays.holiday_calendar import HolidayCalendar

_SATURDAY = 5


class TradingDays:
    """Answers whether a given day is a trading day, a weekend or a holiday."""

    def __init__(self, calendar: Optional[HolidayCalendar] = None) -> None:
        self._calendar = calendar if calendar is not None else HolidayCalendar()

    @property
    def calendar(self) -> HolidayCalendar:
        """Return the holiday calendar consulted by the predicates."""
        return self._calendar

    @staticmethod
    def is_weekend(day: date) -> bool:
        """Return ``True`` on Saturdays and Sundays."""
        return day.weekday() >= _SATURDAY

    def is_market_holiday(self, value: DateLike) -> bool:
        """Return ``True`` only when the market is closed for a holiday on *value*.

        Weekends that are not holidays return ``False``.
        """
        return self._calendar.is_holiday(DateNormalizer.to_date(value))

    def is_trading_day(self, value: DateLike) -> bool:
        """Return ``True`` when the market is open on *value*.

        Raises:
            YearOutOfRangeError: If *value* falls before 2000.
            ValueError: If *value* is a string that cannot be parsed as a date.
        """
        day = DateNormalizer.to_date(value)
        self._calendar.validate_year(day.year)
        if TradingDays.is_weekend(day):
            return False
        return not self._calendar.is_holiday(day)

    def previous_trading_day(self, day: date) -> date:
        """Return the closest trading day on or before *day*."""
        candidate = day
        while not self.is_trading_day(candidate):
            candidate -= timedelta(days=1)
        return candidate
