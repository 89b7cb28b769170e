"""
Built-in rules over FuzzyDate candidates.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Any, ClassVar

from fuzzy_dates.errors import OutOfRangeError, ValidationError
from .base import BaseRule, EntityKind, register_rule

# Year used to size February when the year is unknown, so that 29 FEB passes
_LEAP_YEAR_STANDIN = 2000


def days_in_month(year: Any, month: Any) -> int:
    """
    Number of days in a month, tolerating an unknown year or month.

    Args:
        year: Year or None. An unknown year is treated as a leap year.
        month: Month 1-12 or None. An unknown month allows 31 days.

    Returns:
        int: The largest valid day number.
    """
    if month is None or not 1 <= month <= 12:
        return 31
    if month == 2:
        return 29 if calendar.isleap(_LEAP_YEAR_STANDIN if year is None else year) else 28
    return calendar.mdays[month]


@register_rule
@dataclass(frozen=True)
class MonthMustBeInRange(BaseRule):
    """Month, when present, must lie in 1-12."""
    rule_id: str = "month_in_range"
    target: ClassVar[EntityKind] = EntityKind.DATE

    def validate(self, candidate: Any) -> None:
        month = candidate.month
        if month is not None and not 1 <= month <= 12:
            raise OutOfRangeError("month", month, 1, 12, rule_id=self.rule_id)


@register_rule
@dataclass(frozen=True)
class DayMustBeInRange(BaseRule):
    """Day, when present, must exist in its month (and year, for February)."""
    rule_id: str = "day_in_range"
    target: ClassVar[EntityKind] = EntityKind.DATE

    def validate(self, candidate: Any) -> None:
        day = candidate.day
        if day is None:
            return
        last = days_in_month(candidate.year, candidate.month)
        if not 1 <= day <= last:
            raise OutOfRangeError("day", day, 1, last, rule_id=self.rule_id)


@register_rule
@dataclass(frozen=True)
class YearMustBeInRange(BaseRule):
    """Year, when present, must lie within [year_min, year_max]."""
    rule_id: str = "year_in_range"
    target: ClassVar[EntityKind] = EntityKind.DATE
    enabled_by_default: ClassVar[bool] = False
    year_min: int = 1
    year_max: int = 9999

    def validate(self, candidate: Any) -> None:
        year = candidate.year
        if year is not None and not self.year_min <= year <= self.year_max:
            raise OutOfRangeError("year", year, self.year_min, self.year_max, rule_id=self.rule_id)


@register_rule
@dataclass(frozen=True)
class MonthRequiresYear(BaseRule):
    rule_id: str = "month_requires_year"
    target: ClassVar[EntityKind] = EntityKind.DATE
    enabled_by_default: ClassVar[bool] = False

    def validate(self, candidate: Any) -> None:
        if candidate.month is not None and candidate.year is None:
            raise ValidationError(
                f"month {candidate.month} given without a year",
                rule_id=self.rule_id,
                value=candidate.month,
            )


@register_rule
@dataclass(frozen=True)
class DayRequiresMonth(BaseRule):
    rule_id: str = "day_requires_month"
    target: ClassVar[EntityKind] = EntityKind.DATE
    enabled_by_default: ClassVar[bool] = False

    def validate(self, candidate: Any) -> None:
        if candidate.day is not None and candidate.month is None:
            raise ValidationError(
                f"day {candidate.day} given without a month",
                rule_id=self.rule_id,
                value=candidate.day,
            )
