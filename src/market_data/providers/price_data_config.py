"""Request options for historical data downloads from Yahoo Finance."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional


# pylint: disable=too-many-instance-attributes
@dataclass
class PriceDataConfig:
    """Configuration object for retrieving historical market data from provider.

    ``end`` is inclusive; :meth:`provider_end` returns the exclusive bound the
    provider expects.
    """

    symbol: str
    start: date
    end: date
    interval: str = "1d"
    auto_adjust: bool = False
    actions: bool = True
    proxy: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or len(self.symbol.strip()) == 0:
            raise ValueError("`symbol` must be a non-empty string")
        self.symbol = self.symbol.strip().upper()
        if self.start > self.end:
            raise ValueError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    def provider_end(self) -> date:
        """Return the day after ``end`` so the last requested day is included."""
        return self.end + timedelta(days=1)
