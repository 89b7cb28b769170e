"""
fuzzy_date.py - A calendar date whose year, month and/or day may be unknown.

Provides the FuzzyDate value type:
    - Validated construction through the rules runner the instance holds
    - Total ordering where an absent component sorts before a present one
    - Strict fixed-width parsing of "YYYY", "YYYY/MM" and "YYYY/MM/DD"
    - Calendar arithmetic that derives new instances
    - Field-by-field serialization (Year, Month, Day)

Last updated: 2026-10-16
"""
from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass, field
from datetime import date as _date, timedelta
from functools import total_ordering
from typing import Any, ClassVar, Dict, Mapping, MutableMapping, Optional

from fuzzy_dates.errors import FormatError, NullArgumentError, OutOfRangeError
from fuzzy_dates.rules import EntityKind, RulesRunner, get_default_runner

logger = logging.getLogger(__name__)

# Year bounds of datetime.date, used when materializing a fuzzy date
MIN_YEAR = _date.min.year
MAX_YEAR = _date.max.year

# Years that fit the four character year field of the canonical form
CANONICAL_MIN_YEAR = -999
CANONICAL_MAX_YEAR = 9999

# Integer text as int.Parse accepts it: optional sign, surrounding whitespace
_INT_RE = re.compile(r'^\s*[+-]?\d+\s*$')


def _parse_component(text: str, name: str, source: str) -> int:
    if not _INT_RE.match(text):
        raise FormatError(f"Invalid {name} '{text}' in date string '{source}'", text=source)
    return int(text)


def _compare_component(a: Optional[int], b: Optional[int]) -> int:
    """Compare one component: absent sorts before present, then numerically."""
    if a is None and b is None:
        return 0
    if b is None:
        return 1
    if a is None:
        return -1
    return (a > b) - (a < b)


def _check_component(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or None, not {type(value).__name__}")


@total_ordering
@dataclass(frozen=True)
class FuzzyDate:
    """
    A partially known calendar date.

    Every construction path, including the factories and the add_* methods,
    runs the instance through its rules runner before it is returned, so a
    FuzzyDate that exists always satisfies those rules.

    Attributes:
        year: Year, or None when unknown.
        month: Month 1-12, or None when unknown.
        day: Day of month, or None when unknown.
        rules: The RulesRunner this value was validated with. Not part of
            equality, hashing or ordering. Defaults to get_default_runner().
    """
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    rules: Optional[RulesRunner] = field(default=None, compare=False, hash=False, repr=False)

    entity_kind: ClassVar[EntityKind] = EntityKind.DATE

    def __post_init__(self):
        _check_component("year", self.year)
        _check_component("month", self.month)
        _check_component("day", self.day)
        if self.rules is None:
            object.__setattr__(self, 'rules', get_default_runner())
        self.rules.run_rules(self)

    # Factories

    @classmethod
    def unknown(cls, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        """A date with no known components."""
        return cls(rules=rules)

    @classmethod
    def today(cls, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        """Today's local calendar date."""
        return cls.from_date(_date.today(), rules=rules)

    @classmethod
    def from_calendar_date(cls, year: int, month: int, day: int, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        return cls(year, month, day, rules=rules)

    @classmethod
    def from_year_month(cls, year: int, month: int, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        return cls(year, month, rules=rules)

    @classmethod
    def from_year(cls, year: int, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        return cls(year, rules=rules)

    @classmethod
    def from_date(cls, value: _date, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        """
        Build a fully specified FuzzyDate from a datetime.date or datetime.datetime.

        Raises:
            NullArgumentError: If value is None.
        """
        if value is None:
            raise NullArgumentError("value")
        return cls(value.year, value.month, value.day, rules=rules)

    @classmethod
    def parse(cls, text: str, rules: Optional[RulesRunner] = None) -> FuzzyDate:
        """
        Parse the fixed-width forms "YYYY", "YYYY/MM" or "YYYY/MM/DD".

        Fields are sliced by position and the separators are not inspected.
        Text shorter than 4 characters gives an unknown date; the day is only
        read when the text is exactly 10 characters long.

        Args:
            text: The date string.
            rules: Optional runner to validate with.

        Returns:
            FuzzyDate: The parsed date.

        Raises:
            NullArgumentError: If text is None.
            FormatError: If a sliced field is not an integer.
            ValidationError: If the parsed components break a rule.
        """
        if text is None:
            raise NullArgumentError("text")
        year = month = day = None
        if len(text) >= 4:
            year = _parse_component(text[0:4], "year", text)
            if len(text) >= 7:
                month = _parse_component(text[5:7], "month", text)
                if len(text) == 10:
                    day = _parse_component(text[8:10], "day", text)
        return cls(year, month, day, rules=rules)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], rules: Optional[RulesRunner] = None) -> FuzzyDate:
        """Inverse of to_dict(). Missing keys are treated as unknown components."""
        if data is None:
            raise NullArgumentError("data")
        return cls(data.get("Year"), data.get("Month"), data.get("Day"), rules=rules)

    # Queries

    @property
    def is_unknown(self) -> bool:
        return self.year is None and self.month is None and self.day is None

    @property
    def specificity(self) -> int:
        """Number of leading components (year, then month, then day) that are known."""
        count = 0
        for value in (self.year, self.month, self.day):
            if value is None:
                break
            count += 1
        return count

    def is_leap_year(self) -> bool:
        """True if the year is known and is a Gregorian leap year."""
        if self.year is None:
            return False
        return calendar.isleap(self.year)

    def compare_to(self, other: FuzzyDate) -> int:
        """
        Compare with another FuzzyDate.

        Year, then month, then day. At each level an absent component sorts
        before a present one and two present components compare numerically.
        When both are absent the comparison moves on to the next level.

        Returns:
            int: -1, 0 or 1.
        """
        if other is None:
            raise NullArgumentError("other")
        if not isinstance(other, FuzzyDate):
            raise TypeError(f"Cannot compare FuzzyDate with {type(other).__name__}")
        for mine, theirs in ((self.year, other.year), (self.month, other.month), (self.day, other.day)):
            result = _compare_component(mine, theirs)
            if result:
                return result
        return 0

    def __lt__(self, other):
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self.compare_to(other) < 0

    # Conversion

    def to_date(self) -> _date:
        """
        Materialize as a datetime.date, using 1 for every unknown component.

        The year is floored at 1 and the day is clamped to the length of the
        resulting month, so 29 FEB with an unknown or non-positive year
        becomes 28 FEB 0001. This conversion is lossy: "2019" and
        "2019/01/01" give the same date.

        Raises:
            OutOfRangeError: If the year is above what datetime.date supports,
                or the month or day cannot exist (possible only with rules
                disabled).
        """
        year = max(self.year, MIN_YEAR) if self.year is not None else MIN_YEAR
        if year > MAX_YEAR:
            raise OutOfRangeError("year", year, MIN_YEAR, MAX_YEAR)
        month = self.month if self.month is not None else 1
        if not 1 <= month <= 12:
            raise OutOfRangeError("month", month, 1, 12)
        last = calendar.monthrange(year, month)[1]
        day = self.day if self.day is not None else 1
        if day < 1:
            raise OutOfRangeError("day", day, 1, last)
        return _date(year, month, min(day, last))

    def to_canonical(self) -> str:
        """
        Fixed-width form accepted by parse(); stops at the first unknown component.

        Raises:
            FormatError: If the year does not fit in four characters
                (below -999 or above 9999).
        """
        if self.year is None:
            return ""
        if not CANONICAL_MIN_YEAR <= self.year <= CANONICAL_MAX_YEAR:
            raise FormatError(f"Year {self.year} has no four character canonical form")
        text = f"{self.year:04d}"
        if self.month is None:
            return text
        text += f"/{self.month:02d}"
        if self.day is None:
            return text
        return text + f"/{self.day:02d}"

    def write_fields(self, sink: MutableMapping[str, Any]) -> None:
        """Write the Year, Month and Day fields into sink."""
        if sink is None:
            raise NullArgumentError("sink")
        sink["Year"] = self.year
        sink["Month"] = self.month
        sink["Day"] = self.day

    def to_dict(self) -> Dict[str, Optional[int]]:
        data: Dict[str, Optional[int]] = {}
        self.write_fields(data)
        return data

    # Derived instances

    def _derive(self, year: Optional[int], month: Optional[int], day: Optional[int]) -> FuzzyDate:
        return FuzzyDate(year, month, day, rules=self.rules)

    def add_years(self, value: int) -> FuzzyDate:
        """Shift the year by value; an unknown year stays unknown."""
        year = self.year + value if self.year is not None else None
        return self._derive(year, self.month, self.day)

    def add_months(self, value: int) -> FuzzyDate:
        """
        Add calendar months when the month is known.

        The date is materialized with to_date() first, so an unknown year or
        day comes back as 1. The day is clamped to the length of the target
        month. Without a known month an equal copy is returned.

        Raises:
            OutOfRangeError: If the result leaves the supported year range.
        """
        if self.month is None:
            return self._derive(self.year, self.month, self.day)
        if self.year is None or self.day is None:
            logger.debug(f"add_months: filling unknown components of {self!r} with 1")
        current = self.to_date()
        index = current.year * 12 + (current.month - 1) + value
        year, month = divmod(index, 12)
        month += 1
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise OutOfRangeError("year", year, MIN_YEAR, MAX_YEAR)
        day = min(current.day, calendar.monthrange(year, month)[1])
        return self._derive(year, month, day)

    def add_days(self, value: int) -> FuzzyDate:
        """
        Add days when the day is known.

        Like add_months(), an unknown year or month comes back as 1. Without
        a known day an equal copy is returned.

        Raises:
            OutOfRangeError: If the result leaves the supported year range.
        """
        if self.day is None:
            return self._derive(self.year, self.month, self.day)
        if self.year is None or self.month is None:
            logger.debug(f"add_days: filling unknown components of {self!r} with 1")
        current = self.to_date()
        try:
            shifted = current + timedelta(days=value)
        except OverflowError:
            raise OutOfRangeError(
                "year", None, MIN_YEAR, MAX_YEAR,
                message=f"Adding {value} days to {self!r} leaves the supported year range",
            )
        return self._derive(shifted.year, shifted.month, shifted.day)

    def __str__(self) -> str:
        # Diagnostic rendering only; no locale handling
        if self.year is None:
            return "unknown date"
        if self.month is None:
            return str(self.year)
        if not 1 <= self.month <= 12:
            return repr(self)
        month_name = calendar.month_name[self.month]
        if self.day is None:
            return f"{month_name} {self.year}"
        try:
            weekday = calendar.day_name[_date(self.year, self.month, self.day).weekday()]
        except ValueError:
            return f"{month_name} {self.day}, {self.year}"
        return f"{weekday}, {month_name} {self.day}, {self.year}"
