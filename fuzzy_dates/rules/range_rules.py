"""
Built-in rules over FuzzyDateRange candidates.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from fuzzy_dates.errors import ValidationError
from .base import BaseRule, EntityKind, register_rule


@register_rule
@dataclass(frozen=True)
class RangeMustNotBeInverted(BaseRule):
    """
    Once both endpoints are fully specified, "to" must not precede "from".

    Partially known endpoints are never rejected: "2019" to "March 2018" may
    still describe a real interval once the missing parts are known.
    """
    rule_id: str = "range_not_inverted"
    target: ClassVar[EntityKind] = EntityKind.RANGE

    def validate(self, candidate: Any) -> None:
        start, end = candidate.from_date, candidate.to_date
        if start.specificity < 3 or end.specificity < 3:
            return
        if end.compare_to(start) < 0:
            raise ValidationError(
                f"range ends ({end!r}) before it starts ({start!r})",
                rule_id=self.rule_id,
                value=(start, end),
            )
