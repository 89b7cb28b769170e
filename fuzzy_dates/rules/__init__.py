"""Validation rules: constraints checked whenever a fuzzy date or range is built.

Built-in rules:
    - MonthMustBeInRange: month, when present, lies in 1-12
    - DayMustBeInRange: day, when present, exists in its month
    - YearMustBeInRange: year within configured bounds (off by default)
    - MonthRequiresYear / DayRequiresMonth: hierarchy rules (off by default)
    - RangeMustNotBeInverted: a fully specified range does not end before it starts

Extensibility:
    Create custom rules by:
        1. Subclass BaseRule and set rule_id and target
        2. Implement validate(candidate), raising ValidationError to reject
        3. Use @register_rule so RulesRunner.from_config picks it up, or
           add an instance to a runner with RulesRunner.with_rules

Example:
    >>> from fuzzy_dates.rules import BaseRule, EntityKind, register_rule
    >>> @register_rule
    ... @dataclass(frozen=True)
    ... class NoFutureYears(BaseRule):
    ...     rule_id: str = "no_future_years"
    ...     target: ClassVar[EntityKind] = EntityKind.DATE
    ...     def validate(self, candidate):
    ...         ...
"""

from .base import EntityKind
from .base import ValidationRule
from .base import BaseRule
from .base import register_rule
from .base import get_rule_registry
from .date_rules import MonthMustBeInRange
from .date_rules import DayMustBeInRange
from .date_rules import YearMustBeInRange
from .date_rules import MonthRequiresYear
from .date_rules import DayRequiresMonth
from .date_rules import days_in_month
from .range_rules import RangeMustNotBeInverted
from .config import RulesConfig
from .runner import RulesRunner
from .runner import get_default_runner

__all__ = [
    'EntityKind',
    'ValidationRule',
    'BaseRule',
    'register_rule',
    'get_rule_registry',
    'MonthMustBeInRange',
    'DayMustBeInRange',
    'YearMustBeInRange',
    'MonthRequiresYear',
    'DayRequiresMonth',
    'days_in_month',
    'RangeMustNotBeInverted',
    'RulesConfig',
    'RulesRunner',
    'get_default_runner',
]
