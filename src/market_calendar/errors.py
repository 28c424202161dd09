"""Error types raised by the market calendar for invalid year requests.

Every error derives from :class:`ValueError` so existing ``except ValueError``
handlers keep working, while callers that care about the cause can branch on
the concrete type.
"""

from datetime import MAXYEAR
from typing import Optional

EARLIEST_SUPPORTED_YEAR: int = 2000
LATEST_REPRESENTABLE_YEAR: int = MAXYEAR


class CalendarError(ValueError):
    """Base class for every calendar input error."""


class YearOutOfRangeError(CalendarError):
    """Raised when a requested year is earlier than the supported epoch."""

    MESSAGE = f"Holiday data is only available from {EARLIEST_SUPPORTED_YEAR} onwards"

    def __init__(self, year: Optional[int] = None) -> None:
        super().__init__(YearOutOfRangeError.MESSAGE)
        self.year = year


class InvalidYearRangeError(CalendarError):
    """Raised when a range starts after it ends."""

    def __init__(self, start_year: int, end_year: int) -> None:
        super().__init__(
            f"Invalid year range: start year {start_year} is after end year {end_year}"
        )
        self.start_year = start_year
        self.end_year = end_year


class UnrepresentableYearError(CalendarError):
    """Raised when a year lies beyond the last year a calendar date can hold."""

    def __init__(self, year: int) -> None:
        super().__init__(
            f"Year {year} cannot be represented; the last supported year is "
            f"{LATEST_REPRESENTABLE_YEAR}"
        )
        self.year = year
