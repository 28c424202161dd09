"""Normalization of heterogeneous date inputs to a plain calendar date.

Naive values keep their own calendar date. Timezone-aware values are first
converted to UTC and then truncated, so ``2024-01-02T00:00:00Z`` and the naive
``2024-01-02`` both resolve to ``date(2024, 1, 2)``.
"""

import re
from datetime import date, datetime
from typing import Union

import pandas as pd  # type: ignore
import pytz  # type: ignore

from src.utils.io.logger import Logger

DateLike = Union[date, datetime, pd.Timestamp, str]

# Calendar date first; pandas keywords such as "today" or "now" never match.
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


# pylint: disable=too-few-public-methods
class DateNormalizer:
    """Static helpers turning dates, datetimes, timestamps and ISO strings into ``date``."""

    @staticmethod
    def _from_datetime(value: datetime) -> date:
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(pytz.UTC)
        return value.date()

    @staticmethod
    def _from_string(value: str) -> date:
        text = value.strip()
        if len(text) == 0:
            raise ValueError("Date string is empty")
        if _ISO_DATE.match(text) is None:
            raise ValueError(f"Invalid date string: '{value}'. Expected an ISO date")
        try:
            timestamp = pd.Timestamp(text)
        except (ValueError, TypeError) as exc:
            Logger.error(f"Invalid date string: '{value}'. Exception: {exc}")
            raise ValueError(f"Invalid date string: '{value}'") from exc
        if pd.isna(timestamp):
            raise ValueError(f"Invalid date string: '{value}'")
        return DateNormalizer._from_datetime(timestamp.to_pydatetime())

    @staticmethod
    def to_date(value: DateLike) -> date:
        """Return the calendar date represented by *value*."""
        if value is pd.NaT:
            raise ValueError("Timestamp is NaT")
        if isinstance(value, str):
            return DateNormalizer._from_string(value)
        if isinstance(value, pd.Timestamp):
            return DateNormalizer._from_datetime(value.to_pydatetime())
        if isinstance(value, datetime):
            return DateNormalizer._from_datetime(value)
        if isinstance(value, date):
            return value
        raise TypeError(
            f"Expected date, datetime, Timestamp or ISO string, got {type(value).__name__}"
        )
