"""Public entry points of the monthly options calendar.

All functions share one module-level :class:`HolidayCalendar`, so per-year
holiday sets are computed once per process.
"""

from datetime import date
from typing import List

from src.market_calendar.date_normalizer import DateLike
from src.market_calendar.errors import (CalendarError, InvalidYearRangeError,
                                        UnrepresentableYearError,
                                        YearOutOfRangeError)
from src.market_calendar.expirations import ExpirationCalculator
from src.market_calendar.holidays.holiday_calendar import HolidayCalendar
from src.market_calendar.trading_days import TradingDays

__all__ = [
    "CalendarError",
    "InvalidYearRangeError",
    "UnrepresentableYearError",
    "YearOutOfRangeError",
    "generate_holidays",
    "get_earliest_supported_year",
    "get_monthly_option_expiration_dates",
    "is_market_holiday",
    "is_trading_day",
]

_CALENDAR = HolidayCalendar()
_TRADING_DAYS = TradingDays(_CALENDAR)
_EXPIRATIONS = ExpirationCalculator(_TRADING_DAYS)


def get_earliest_supported_year() -> int:
    """Return the first year for which holiday data is available (2000)."""
    return HolidayCalendar.earliest_supported_year()


def generate_holidays(start_year: int, end_year: int) -> List[str]:
    """Return every observed market holiday between both years as sorted ISO strings."""
    return _CALENDAR.generate_holidays(start_year, end_year)


def is_market_holiday(value: DateLike) -> bool:
    """Return ``True`` if the market is closed for a holiday on *value*."""
    return _TRADING_DAYS.is_market_holiday(value)


def is_trading_day(value: DateLike) -> bool:
    """Return ``True`` if *value* is neither a weekend nor a market holiday."""
    return _TRADING_DAYS.is_trading_day(value)


def get_monthly_option_expiration_dates(start_year: int, end_year: int) -> List[str]:
    """Return the monthly option expiration dates of every month in the range."""
    return _EXPIRATIONS.monthly_expiration_dates(start_year, end_year)


def get_monthly_expiration(year: int, month: int) -> date:
    """Return the expiration date for a single month."""
    return _EXPIRATIONS.monthly_expiration(year, month)
