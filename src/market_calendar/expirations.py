"""Monthly equity option expiration dates.

Standard monthly options expire on the third Friday of the month. When that
Friday is a market holiday the expiration moves back to the preceding trading
day (e.g. Juneteenth 2021 was observed on Friday June 18, so June 2021 options
expired on Thursday June 17).
"""

from datetime import date, timedelta
from typing import List, Optional

from src.market_calendar.holidays.holiday_calendar import HolidayCalendar
from src.market_calendar.trading_days import TradingDays

_FRIDAY = 4
_MONTHS = range(1, 13)


class ExpirationCalculator:
    """Computes monthly option expiration dates over a range of years."""

    def __init__(self, trading_days: Optional[TradingDays] = None) -> None:
        self._trading_days = trading_days if trading_days is not None else TradingDays()

    @staticmethod
    def third_friday(year: int, month: int) -> date:
        """Return the third Friday of *month* in *year*."""
        first = date(year, month, 1)
        first_friday = first + timedelta(days=(_FRIDAY - first.weekday()) % 7)
        return first_friday + timedelta(weeks=2)

    def monthly_expiration(self, year: int, month: int) -> date:
        """Return the expiration date of the monthly series for *year*/*month*."""
        HolidayCalendar.validate_year(year)
        nominal = ExpirationCalculator.third_friday(year, month)
        if not self._trading_days.is_market_holiday(nominal):
            return nominal
        return self._trading_days.previous_trading_day(nominal - timedelta(days=1))

    def monthly_expirations(self, start_year: int, end_year: int) -> List[date]:
        """Return one expiration per month between both years inclusive, ascending."""
        HolidayCalendar.validate_range(start_year, end_year)
        return [
            self.monthly_expiration(year, month)
            for year in range(start_year, end_year + 1)
            for month in _MONTHS
        ]

    def monthly_expiration_dates(self, start_year: int, end_year: int) -> List[str]:
        """Return :meth:`monthly_expirations` as ISO ``YYYY-MM-DD`` strings."""
        return [d.isoformat() for d in self.monthly_expirations(start_year, end_year)]
