"""Recurring U.S. equity market holiday rules.

Every rule maps a calendar year to at most one *nominal* date. The nominal date
is then moved to its *observed* date with :func:`observed_date` (Saturday holidays
close the market on the preceding Friday, Sunday holidays on the following
Monday). The rule table is immutable and evaluated on demand, so the holiday set
of any year from the epoch up to 9999 (the last year ``datetime.date`` can
hold) can be derived without a lookup file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Optional, Set, Tuple

from dateutil.easter import EASTER_WESTERN, easter  # type: ignore
from dateutil.relativedelta import MO, TH, relativedelta  # type: ignore
from dateutil.relativedelta import weekday as RelativeWeekday  # type: ignore

_SATURDAY = 5
_SUNDAY = 6


def observed_date(nominal: date) -> date:
    """Return the day the market actually closes for a holiday on *nominal*."""
    if nominal.weekday() == _SATURDAY:
        return nominal - timedelta(days=1)
    if nominal.weekday() == _SUNDAY:
        return nominal + timedelta(days=1)
    return nominal


@dataclass(frozen=True)
class HolidayRule(ABC):
    """Base rule: a named holiday that applies from ``first_year`` onwards."""

    name: str
    first_year: Optional[int] = None

    def applies_to(self, year: int) -> bool:
        """Return ``True`` if the rule is in force during *year*."""
        return self.first_year is None or year >= self.first_year

    def nominal_date(self, year: int) -> Optional[date]:
        """Return the unshifted holiday date for *year*, or ``None`` if not in force."""
        if not self.applies_to(year):
            return None
        return self._compute(year)

    @abstractmethod
    def _compute(self, year: int) -> date:
        """Return the nominal date of the holiday in *year*."""


@dataclass(frozen=True)
class FixedDateRule(HolidayRule):
    """Holiday falling on the same month/day every year (e.g. July 4)."""

    month: int = 1
    day: int = 1

    def _compute(self, year: int) -> date:
        return date(year, self.month, self.day)


@dataclass(frozen=True)
class NthWeekdayRule(HolidayRule):
    """Holiday on the n-th occurrence of a weekday in a month.

    A negative ``nth`` counts from the end of the month, so ``nth=-1`` with
    ``MO`` is the last Monday.
    """

    month: int = 1
    weekday: RelativeWeekday = MO
    nth: int = 1

    def _compute(self, year: int) -> date:
        first = date(year, self.month, 1)
        if self.nth > 0:
            return first + relativedelta(weekday=self.weekday(self.nth))
        return first + relativedelta(day=31, weekday=self.weekday(self.nth))


@dataclass(frozen=True)
class EasterOffsetRule(HolidayRule):
    """Holiday a fixed number of days away from Western Easter Sunday."""

    days_from_easter: int = 0

    def _compute(self, year: int) -> date:
        return easter(year, EASTER_WESTERN) + timedelta(days=self.days_from_easter)


HOLIDAY_RULES: Tuple[HolidayRule, ...] = (
    FixedDateRule("New Year's Day", month=1, day=1),
    NthWeekdayRule("Martin Luther King Jr. Day", month=1, weekday=MO, nth=3),
    NthWeekdayRule("Presidents Day", month=2, weekday=MO, nth=3),
    EasterOffsetRule("Good Friday", days_from_easter=-2),
    NthWeekdayRule("Memorial Day", month=5, weekday=MO, nth=-1),
    FixedDateRule("Juneteenth", first_year=2021, month=6, day=19),
    FixedDateRule("Independence Day", month=7, day=4),
    NthWeekdayRule("Labor Day", month=9, weekday=MO, nth=1),
    NthWeekdayRule("Thanksgiving Day", month=11, weekday=TH, nth=4),
    FixedDateRule("Christmas Day", month=12, day=25),
)


def describe_rules(year: int) -> Dict[date, str]:
    """Return every observed rule-based holiday of *year* mapped to its name."""
    described: Dict[date, str] = {}
    for rule in HOLIDAY_RULES:
        nominal = rule.nominal_date(year)
        if nominal is None:
            continue
        described[observed_date(nominal)] = rule.name
    return described


def evaluate_rules(year: int) -> Set[date]:
    """Return the observed dates of all recurring holidays in force during *year*."""
    return set(describe_rules(year))
