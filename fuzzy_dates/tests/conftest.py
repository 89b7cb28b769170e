"""
Pytest fixtures for fuzzy date tests.
"""
from __future__ import annotations

import pytest

from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.rules import base
from fuzzy_dates.rules import DayRequiresMonth, MonthRequiresYear, RulesRunner, get_default_runner


@pytest.fixture
def permissive_runner():
    """A runner with no rules at all."""
    return RulesRunner()


@pytest.fixture
def hierarchy_runner():
    """Default rules plus the opt-in day -> month -> year hierarchy rules."""
    return get_default_runner().with_rules(MonthRequiresYear(), DayRequiresMonth())


@pytest.fixture
def rule_registry(monkeypatch):
    """Isolate the global rule registry so tests can register throwaway rules."""
    monkeypatch.setattr(base, "_RULE_REGISTRY", dict(base._RULE_REGISTRY))
    return base._RULE_REGISTRY


@pytest.fixture
def sample_dates():
    """Dates of every specificity, in no particular order."""
    return [
        FuzzyDate.from_calendar_date(2000, 1, 1),
        FuzzyDate.unknown(),
        FuzzyDate.from_year(2000),
        FuzzyDate.from_year_month(1999, 12),
        FuzzyDate.from_year_month(2000, 1),
        FuzzyDate.from_year(1999),
        FuzzyDate(month=6),
        FuzzyDate(day=15),
        FuzzyDate.from_calendar_date(1999, 12, 31),
        FuzzyDate(2000, None, 5),
    ]
