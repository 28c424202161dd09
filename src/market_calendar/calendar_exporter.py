"""Export of the holiday and monthly expiration calendar to JSON.

The module can be imported as a library (exposing :class:`CalendarExporter`) or
executed directly (``python -m src.market_calendar.calendar_exporter``), in which
case it writes the configured year range to ``calendar_export_filepath``.
"""

from typing import Any, Dict, List, Optional

from src.market_calendar.errors import CalendarError
from src.market_calendar.expirations import ExpirationCalculator
from src.market_calendar.holidays.holiday_calendar import HolidayCalendar
from src.market_calendar.trading_days import TradingDays
from src.utils.config.parameters import ParameterLoader
from src.utils.io.json_manager import JsonManager
from src.utils.io.logger import Logger


class CalendarExporter:
    """Builds a serializable snapshot of holidays and expirations for a year range."""

    def __init__(self, calendar: Optional[HolidayCalendar] = None) -> None:
        self._calendar = calendar if calendar is not None else HolidayCalendar()
        self._expirations = ExpirationCalculator(TradingDays(self._calendar))

    def build(self, start_year: int, end_year: int) -> Dict[str, Any]:
        """Return holidays (with names) and expirations between both years."""
        HolidayCalendar.validate_range(start_year, end_year)
        holidays: List[Dict[str, str]] = []
        for year in range(start_year, end_year + 1):
            for day, name in self._calendar.holiday_names(year).items():
                holidays.append({"date": day.isoformat(), "name": name})
        return {
            "start_year": start_year,
            "end_year": end_year,
            "holidays": holidays,
            "expirations": self._expirations.monthly_expiration_dates(
                start_year, end_year
            ),
        }

    def export(self, start_year: int, end_year: int, filepath: str) -> bool:
        """Write :meth:`build` output to *filepath*; return ``True`` on success."""
        Logger.info(f"Exporting market calendar {start_year}-{end_year} to {filepath}")
        snapshot = self.build(start_year, end_year)
        saved = JsonManager.save(snapshot, filepath)
        if saved:
            Logger.success(
                f"Exported {len(snapshot['holidays'])} holidays and "
                f"{len(snapshot['expirations'])} expirations to {filepath}"
            )
        return saved


if __name__ == "__main__":
    _PARAMS = ParameterLoader()
    Logger.separator()
    try:
        CalendarExporter().export(
            _PARAMS.get("export_start_year"),
            _PARAMS.get("export_end_year"),
            _PARAMS.get("calendar_export_filepath"),
        )
    except CalendarError as error:
        Logger.error(f"Calendar export failed: {error}")
    Logger.separator()
