"""fuzzy_dates package: partially known calendar dates, their ranges and validation rules."""

from fuzzy_dates.errors import (
    FormatError,
    FuzzyDateError,
    NullArgumentError,
    OutOfRangeError,
    ValidationError,
)
from fuzzy_dates.rules import EntityKind, RulesConfig, RulesRunner, get_default_runner
from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.fuzzy_date_range import FuzzyDateRange
from fuzzy_dates.gedcom_date import from_gedcom, to_gedcom

__all__ = [
    "EntityKind",
    "FormatError",
    "FuzzyDate",
    "FuzzyDateError",
    "FuzzyDateRange",
    "NullArgumentError",
    "OutOfRangeError",
    "RulesConfig",
    "RulesRunner",
    "ValidationError",
    "from_gedcom",
    "get_default_runner",
    "to_gedcom",
]
