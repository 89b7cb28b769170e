"""
fuzzy_date_range.py - An interval between two fuzzy dates.

Last updated: 2026-10-16
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from functools import total_ordering
from typing import Any, ClassVar, Dict, Mapping, MutableMapping, Optional

from fuzzy_dates.errors import NullArgumentError
from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.rules import EntityKind, RulesRunner, get_default_runner


@total_ordering
@dataclass(frozen=True)
class FuzzyDateRange:
    """
    A range between two FuzzyDate endpoints.

    Either endpoint may be given as None, which is stored as an unknown date.
    The range is validated by the range rules of its runner when built.

    Attributes:
        from_date: Start of the range.
        to_date: End of the range.
        rules: The RulesRunner this range was validated with.
    """
    from_date: Optional[FuzzyDate] = None
    to_date: Optional[FuzzyDate] = None
    rules: Optional[RulesRunner] = field(default=None, compare=False, hash=False, repr=False)

    entity_kind: ClassVar[EntityKind] = EntityKind.RANGE

    def __post_init__(self):
        if self.rules is None:
            object.__setattr__(self, 'rules', get_default_runner())
        for name in ('from_date', 'to_date'):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, FuzzyDate.unknown(rules=self.rules))
            elif not isinstance(value, FuzzyDate):
                raise TypeError(f"{name} must be a FuzzyDate or None, not {type(value).__name__}")
        self.rules.run_rules(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], rules: Optional[RulesRunner] = None) -> FuzzyDateRange:
        """Inverse of to_dict()."""
        if data is None:
            raise NullArgumentError("data")
        endpoints = []
        for key in ("From", "To"):
            value = data.get(key)
            endpoints.append(FuzzyDate.from_dict(value, rules=rules) if value is not None else None)
        return cls(endpoints[0], endpoints[1], rules=rules)

    @property
    def is_unknown(self) -> bool:
        return self.from_date.is_unknown and self.to_date.is_unknown

    def to_duration(self) -> timedelta:
        """
        Signed difference to_date - from_date of the materialized endpoints.

        Unknown components count as 1 (see FuzzyDate.to_date()), so the
        duration of a partially known range is an approximation.
        """
        return self.to_date.to_date() - self.from_date.to_date()

    def contains(self, value: FuzzyDate) -> bool:
        """True if from_date <= value <= to_date under FuzzyDate ordering."""
        if value is None:
            raise NullArgumentError("value")
        return self.from_date <= value <= self.to_date

    def compare_to(self, other: FuzzyDateRange) -> int:
        """Compare by from_date, then by to_date."""
        if other is None:
            raise NullArgumentError("other")
        if not isinstance(other, FuzzyDateRange):
            raise TypeError(f"Cannot compare FuzzyDateRange with {type(other).__name__}")
        result = self.from_date.compare_to(other.from_date)
        if result:
            return result
        return self.to_date.compare_to(other.to_date)

    def __lt__(self, other):
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self.compare_to(other) < 0

    def write_fields(self, sink: MutableMapping[str, Any]) -> None:
        """Write the From and To fields into sink, each as a Year/Month/Day mapping."""
        if sink is None:
            raise NullArgumentError("sink")
        sink["From"] = self.from_date.to_dict()
        sink["To"] = self.to_date.to_dict()

    def to_dict(self) -> Dict[str, Dict[str, Optional[int]]]:
        data: Dict[str, Dict[str, Optional[int]]] = {}
        self.write_fields(data)
        return data

    def __str__(self) -> str:
        return f"{self.from_date}-{self.to_date}"
