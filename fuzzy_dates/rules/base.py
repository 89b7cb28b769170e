"""
Base classes and registry for validation rules.
"""
from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Protocol, Type

logger = logging.getLogger(__name__)


class EntityKind(Enum):
    """The kind of value a rule validates."""
    DATE = "date"
    RANGE = "range"


class ValidationRule(Protocol):
    """Anything the runner can execute against a candidate."""
    rule_id: str
    target: EntityKind

    def validate(self, candidate: Any) -> None:
        ...


# Rule Registry
_RULE_REGISTRY: Dict[str, Type['BaseRule']] = {}
_REGISTRY_LOCK = threading.Lock()


def register_rule(cls: Type['BaseRule']) -> Type['BaseRule']:
    """
    Decorator to register a rule class in the global registry.

    Rules are kept in registration order, which is the order the runner
    executes them in.

    Usage:
        @register_rule
        @dataclass
        class MyRule(BaseRule):
            rule_id: str = "my_rule"
            target: ClassVar[EntityKind] = EntityKind.DATE
            ...
    """
    rule_id = getattr(cls, 'rule_id', None)
    if not rule_id:
        logger.warning(f"Rule {cls.__name__} missing 'rule_id' attribute, not registered")
        return cls
    with _REGISTRY_LOCK:
        if rule_id in _RULE_REGISTRY and _RULE_REGISTRY[rule_id] is not cls:
            logger.warning(f"Replacing rule {rule_id}: {_RULE_REGISTRY[rule_id].__name__} -> {cls.__name__}")
        _RULE_REGISTRY[rule_id] = cls
    logger.debug(f"Registered validation rule: {rule_id}")
    return cls


def get_rule_registry() -> Dict[str, Type['BaseRule']]:
    """Get a copy of the global rule registry."""
    with _REGISTRY_LOCK:
        return _RULE_REGISTRY.copy()


@dataclass(frozen=True)
class BaseRule(ABC):
    """
    Base class for validation rules.

    A rule inspects the public state of a freshly built FuzzyDate or
    FuzzyDateRange and raises a ValidationError to reject it. Rules must not
    keep state between calls.

    Attributes:
        rule_id: Unique identifier, also the key used in configuration.
        target: The entity kind this rule validates.
        enabled_by_default: Whether the rule runs when configuration does not
            mention it.
    """
    rule_id: str = ""
    target: ClassVar[EntityKind] = EntityKind.DATE
    enabled_by_default: ClassVar[bool] = True

    def __post_init__(self):
        if not self.rule_id:
            raise ValueError(f"{self.__class__.__name__} must define rule_id")

    @abstractmethod
    def validate(self, candidate: Any) -> None:
        """
        Validate a candidate value.

        Args:
            candidate: The FuzzyDate or FuzzyDateRange being constructed.

        Raises:
            ValidationError: If the candidate breaks this rule.
        """
        pass
