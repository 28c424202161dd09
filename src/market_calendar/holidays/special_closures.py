"""Unscheduled full-day NYSE closures that no recurring rule can derive.

The dates are absolute: they are never moved by the weekend observance shift.
"""

from datetime import date
from types import MappingProxyType
from typing import Dict, Mapping

SPECIAL_CLOSURES: Mapping[date, str] = MappingProxyType(
    {
        date(2001, 9, 11): "September 11 attacks",
        date(2001, 9, 12): "September 11 attacks",
        date(2001, 9, 13): "September 11 attacks",
        date(2001, 9, 14): "September 11 attacks",
        date(2012, 10, 29): "Hurricane Sandy",
        date(2012, 10, 30): "Hurricane Sandy",
        date(2018, 12, 5): "National Day of Mourning for George H. W. Bush",
    }
)


def closures_for_year(year: int) -> Dict[date, str]:
    """Return the special closures that fall inside *year*."""
    return {day: reason for day, reason in SPECIAL_CLOSURES.items() if day.year == year}
