"""
RulesRunner: executes the registered validation rules against new values.

A runner is an explicit validation context. Every FuzzyDate and
FuzzyDateRange holds the runner it was validated with, and values derived
from it (add_years, ranges built from it, ...) reuse that runner. The
default runner is built once from the packaged config.yaml.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Tuple

from fuzzy_dates.errors import NullArgumentError, ValidationError
from .base import EntityKind, ValidationRule, get_rule_registry
from .config import RulesConfig

logger = logging.getLogger(__name__)

# Rule parameter mapping: maps rule constructor parameters to config fields
RULE_PARAM_MAP: Dict[str, Dict[str, str]] = {
    'year_in_range': {
        'year_min': 'year_min',
        'year_max': 'year_max',
    },
}


@dataclass(frozen=True)
class RulesRunner:
    """
    Ordered, immutable collection of validation rules.

    Attributes:
        rules: Rules in execution order.
    """
    rules: Tuple[ValidationRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'rules', tuple(self.rules))

    def rules_for(self, kind: EntityKind) -> Tuple[ValidationRule, ...]:
        """Return the rules targeting the given entity kind, in order."""
        return tuple(rule for rule in self.rules if rule.target is kind)

    def run_rules(self, candidate: Any) -> None:
        """
        Run every applicable rule against candidate.

        Stops at the first rule that rejects the candidate.

        Args:
            candidate: A FuzzyDate or FuzzyDateRange under construction.

        Raises:
            NullArgumentError: If candidate is None.
            ValidationError: From the first rule that rejects the candidate.
        """
        if candidate is None:
            raise NullArgumentError("candidate")
        for rule in self.rules_for(candidate.entity_kind):
            try:
                rule.validate(candidate)
            except ValidationError as e:
                logger.debug(f"Rule {rule.rule_id} rejected {candidate!r}: {e}")
                raise

    def with_rules(self, *rules: ValidationRule) -> RulesRunner:
        """Return a new runner with rules appended."""
        return RulesRunner(self.rules + tuple(rules))

    def without_rules(self, *rule_ids: str) -> RulesRunner:
        """Return a new runner without the rules whose ids are given."""
        return RulesRunner(tuple(rule for rule in self.rules if rule.rule_id not in rule_ids))

    @classmethod
    def from_config(cls, config: RulesConfig) -> RulesRunner:
        """
        Build a runner from the rule registry using config.

        Every registered rule that config enables is instantiated with the
        parameters RULE_PARAM_MAP maps from config.

        Args:
            config: RulesConfig instance with rule toggles and parameters.

        Returns:
            RulesRunner: Runner holding the enabled rules in registration order.

        Raises:
            ValueError: If config toggles a rule that is not registered.
        """
        registry = get_rule_registry()
        unknown = sorted(set(config.rules_enabled) - set(registry))
        if unknown:
            raise ValueError(f"Unknown rule ids in configuration: {', '.join(unknown)}")

        rules = []
        for rule_id, rule_class in registry.items():
            if not config.rule_enabled(rule_id, rule_class.enabled_by_default):
                continue
            kwargs = {
                param_name: getattr(config, config_key)
                for param_name, config_key in RULE_PARAM_MAP.get(rule_id, {}).items()
            }
            rules.append(rule_class(**kwargs))
        logger.debug(f"Built rules runner with rules: {[rule.rule_id for rule in rules]}")
        return cls(tuple(rules))


@lru_cache(maxsize=None)
def get_default_runner() -> RulesRunner:
    """Return the process-wide default runner, built on first use."""
    return RulesRunner.from_config(RulesConfig.default())
