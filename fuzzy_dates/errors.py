"""
errors.py - Exception types raised while building or reading fuzzy dates.

All errors are raised synchronously to the caller. Validation errors come
from the rules runner during construction, so an instance that failed
validation is never observable.

Last updated: 2026-10-16
"""
from __future__ import annotations

from typing import Any, Optional


class FuzzyDateError(Exception):
    """Base class for all fuzzy date errors."""


class ValidationError(FuzzyDateError, ValueError):
    """
    A candidate value was rejected.

    Attributes:
        rule_id: Identifier of the rule that rejected the value, or None when
            the rejection did not come from a registered rule.
        value: The offending value.
    """

    def __init__(self, message: str, rule_id: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.rule_id = rule_id
        self.value = value


class OutOfRangeError(ValidationError):
    """A date component lies outside its permitted bounds."""

    def __init__(
        self,
        component: str,
        value: Any,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        rule_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"{component} {value} is out of range [{minimum}, {maximum}]"
        super().__init__(message, rule_id=rule_id, value=value)
        self.component = component
        self.minimum = minimum
        self.maximum = maximum


class FormatError(FuzzyDateError, ValueError):
    """Text could not be read as a fuzzy date."""

    def __init__(self, message: str, text: Any = None) -> None:
        super().__init__(message)
        self.text = text


class NullArgumentError(FuzzyDateError, TypeError):
    """A required argument was None."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument
