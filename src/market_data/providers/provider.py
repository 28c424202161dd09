"""Historical prices, dividends and stock splits from Yahoo Finance.

This module is independent of the calendar engine: it only fetches provider
data, renames its fields into typed records and sorts them by date.
"""

from __future__ import annotations

import os
import time
from datetime import date
from fractions import Fraction
from typing import Any, Callable, List, Optional, TypeVar, Union

import pandas as pd  # type: ignore
import pytz  # type: ignore
import yfinance as yf  # type: ignore

from src.market_data.providers.price_data_config import PriceDataConfig
from src.market_data.providers.records import Dividend, PriceBar, StockSplit
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger
from src.utils.io.output_suppressor import OutputSuppressor

DateInput = Union[date, str, pd.Timestamp]
_Record = TypeVar("_Record")


class Provider:
    """Market data provider using Yahoo Finance as backend."""

    _PARAMS = ParameterLoader()
    _MARKET_TZ = _PARAMS.get("market_tz")
    _INTERVAL = _PARAMS.get("price_interval")
    _AUTO_ADJUST = _PARAMS.get("auto_adjust")
    _PROXY = _PARAMS.get("proxy")

    def __init__(
        self, retries: Optional[int] = None, sleep_seconds: Optional[float] = None
    ):
        """Initialize the provider with retry settings (defaults from parameters)."""
        self.retries = max(
            1, retries if retries is not None else Provider._PARAMS.get("download_retries")
        )
        self.sleep_seconds = (
            sleep_seconds
            if sleep_seconds is not None
            else Provider._PARAMS.get("retry_sleep_seconds")
        )

    @staticmethod
    def _to_date(value: Any) -> date:
        timestamp = pd.Timestamp(value)
        if pd.isna(timestamp):
            raise ValueError(f"Invalid date: {value}")
        if timestamp.tzinfo is not None:
            timestamp = timestamp.tz_convert(pytz.timezone(Provider._MARKET_TZ))
        return timestamp.date()

    @staticmethod
    def build_config(
        symbol: str, start_date: DateInput, end_date: DateInput
    ) -> PriceDataConfig:
        """Build the request configuration for *symbol* between both dates inclusive."""
        return PriceDataConfig(
            symbol=symbol,
            start=Provider._to_date(start_date),
            end=Provider._to_date(end_date),
            interval=Provider._INTERVAL,
            auto_adjust=Provider._AUTO_ADJUST,
            proxy=Provider._PROXY,
        )

    def _download_once(self, config: PriceDataConfig) -> pd.DataFrame:
        if config.proxy:
            os.environ["HTTP_PROXY"] = config.proxy
            os.environ["HTTPS_PROXY"] = config.proxy
        with OutputSuppressor.suppress(capture=True) as (_out_buf, err_buf):
            result = yf.Ticker(config.symbol).history(
                start=config.start.isoformat(),
                end=config.provider_end().isoformat(),
                interval=config.interval,
                auto_adjust=config.auto_adjust,
                actions=config.actions,
            )
        stderr_text = err_buf.getvalue().strip() if err_buf is not None else ""
        if len(stderr_text) > 0:
            raise ValueError(stderr_text)
        if result is None:
            return pd.DataFrame()
        return result

    def download(self, config: PriceDataConfig) -> pd.DataFrame:
        """Download the raw provider frame, retrying on failure."""
        last_error: Optional[Exception] = None
        for attempt in range(1, self.retries + 1):
            try:
                return self._download_once(config)
            except Exception as e:  # pylint: disable=broad-exception-caught
                last_error = e
                Logger.warning(
                    f"Download of {config.symbol} failed "
                    f"(attempt {attempt}/{self.retries}): {e}"
                )
                if attempt < self.retries and self.sleep_seconds > 0:
                    time.sleep(self.sleep_seconds)
        raise ValueError(
            f"Unable to download {config.symbol} after {self.retries} attempts: {last_error}"
        )

    def _collect(
        self,
        symbol: str,
        start_date: DateInput,
        end_date: DateInput,
        build: Callable[[date, pd.Series], Optional[_Record]],
    ) -> List[_Record]:
        config = Provider.build_config(symbol, start_date, end_date)
        frame = self.download(config)
        records: List[Any] = []
        if frame.empty:
            Logger.warning(f"No data returned for {config.symbol}")
            return records
        for index, row in frame.iterrows():
            day = Provider._to_date(index)
            if day < config.start or day > config.end:
                continue
            record = build(day, row)
            if record is not None:
                records.append(record)
        return sorted(records, key=lambda r: r.date)

    @staticmethod
    def _price_bar(day: date, row: pd.Series) -> Optional[PriceBar]:
        if pd.isna(row.get("Close")):
            return None
        close = float(row["Close"])
        adj_close = row.get("Adj Close")
        return PriceBar(
            date=day,
            open=float(row["Open"]),
            high=float(row["High"]),
            low=float(row["Low"]),
            close=close,
            volume=int(row["Volume"]) if not pd.isna(row.get("Volume")) else 0,
            adj_close=close if adj_close is None or pd.isna(adj_close) else float(adj_close),
        )

    @staticmethod
    def _dividend(day: date, row: pd.Series) -> Optional[Dividend]:
        amount = row.get("Dividends")
        if amount is None or pd.isna(amount) or float(amount) <= 0:
            return None
        return Dividend(date=day, amount=float(amount))

    @staticmethod
    def split_ratio(factor: float) -> str:
        """Format a provider split factor (e.g. ``4.0`` or ``0.5``) as ``"new:old"``."""
        ratio = Fraction(factor).limit_denominator(1000)
        return f"{ratio.numerator}:{ratio.denominator}"

    @staticmethod
    def _split(day: date, row: pd.Series) -> Optional[StockSplit]:
        factor = row.get("Stock Splits")
        if factor is None or pd.isna(factor) or float(factor) <= 0:
            return None
        return StockSplit(date=day, split_ratio=Provider.split_ratio(float(factor)))

    def get_historical_prices(
        self, symbol: str, start_date: DateInput, end_date: DateInput
    ) -> List[PriceBar]:
        """Return daily price bars for *symbol*, sorted by date ascending."""
        return self._collect(symbol, start_date, end_date, Provider._price_bar)

    def get_dividends(
        self, symbol: str, start_date: DateInput, end_date: DateInput
    ) -> List[Dividend]:
        """Return dividends paid by *symbol*, sorted by date ascending."""
        return self._collect(symbol, start_date, end_date, Provider._dividend)

    def get_stock_splits(
        self, symbol: str, start_date: DateInput, end_date: DateInput
    ) -> List[StockSplit]:
        """Return stock splits of *symbol*, sorted by date ascending."""
        return self._collect(symbol, start_date, end_date, Provider._split)
