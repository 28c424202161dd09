"""Typed records returned by the market-data provider."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PriceBar:
    """Daily OHLCV bar, including the dividend/split adjusted close."""

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int
    adj_close: float


@dataclass(frozen=True)
class Dividend:
    """Cash dividend paid per share on its ex-date."""

    date: date
    amount: float


@dataclass(frozen=True)
class StockSplit:
    """Share split; ``split_ratio`` reads as ``"new:old"`` (e.g. ``"4:1"``)."""

    date: date
    split_ratio: str
