"""
Tests for the FuzzyDateRange value type.
"""
from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from fuzzy_dates.errors import NullArgumentError, ValidationError
from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.fuzzy_date_range import FuzzyDateRange


def _range(start, end):
    return FuzzyDateRange(FuzzyDate.parse(start), FuzzyDate.parse(end))


class TestConstruction:
    """Tests for building ranges."""

    def test_none_endpoints(self):
        """Test that None endpoints become unknown dates."""
        r = FuzzyDateRange(None, None)
        assert r.from_date == FuzzyDate.unknown()
        assert r.to_date == FuzzyDate.unknown()
        assert r.is_unknown

    def test_default_arguments(self):
        assert FuzzyDateRange() == FuzzyDateRange(None, None)

    def test_one_open_end(self):
        r = FuzzyDateRange(FuzzyDate(2019), None)
        assert r.from_date == FuzzyDate(2019)
        assert r.to_date.is_unknown
        assert not r.is_unknown

    def test_rejects_non_fuzzy_dates(self):
        with pytest.raises(TypeError):
            FuzzyDateRange("2019", "2020")

    def test_inverted_full_range_rejected(self):
        """Test that a fully specified range may not end before it starts."""
        with pytest.raises(ValidationError) as exc_info:
            _range("2020/01/02", "2020/01/01")
        assert exc_info.value.rule_id == "range_not_inverted"

    def test_inverted_range_beyond_canonical_years(self):
        """Test that the inversion error is raised for years with no canonical form."""
        with pytest.raises(ValidationError):
            FuzzyDateRange(FuzzyDate(12346, 1, 1), FuzzyDate(12345, 1, 1))

    def test_single_day_range(self):
        r = _range("2020/01/01", "2020/01/01")
        assert r.to_duration() == timedelta(0)

    def test_inverted_partial_range_allowed(self):
        """Test that partially known endpoints are never rejected as inverted."""
        r = _range("2019", "2018/03")
        assert r.from_date.year == 2019

    def test_permissive_runner(self, permissive_runner):
        r = FuzzyDateRange(
            FuzzyDate(2020, 1, 2, rules=permissive_runner),
            FuzzyDate(2020, 1, 1, rules=permissive_runner),
            rules=permissive_runner,
        )
        assert r.to_duration() == timedelta(days=-1)

    def test_immutable(self):
        r = _range("2019", "2020")
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.from_date = FuzzyDate(2018)


class TestDuration:
    """Tests for to_duration."""

    def test_leap_year(self):
        """Test the span of 2020, a leap year."""
        r = FuzzyDateRange(FuzzyDate.from_calendar_date(2020, 1, 1), FuzzyDate.from_calendar_date(2020, 12, 31))
        assert r.to_duration() == timedelta(days=365)

    def test_common_year(self):
        assert _range("2019/01/01", "2019/12/31").to_duration() == timedelta(days=364)

    def test_partial_endpoints_materialize_as_first(self):
        """Test that unknown components count as 1."""
        assert _range("2019", "2020").to_duration() == timedelta(days=365)
        assert _range("2020/02", "2020/03").to_duration() == timedelta(days=29)

    def test_yearless_leap_day_endpoint(self):
        """Test that a yearless 29 FEB endpoint materializes as 28 FEB 0001."""
        r = FuzzyDateRange(FuzzyDate(month=2, day=29), None)
        assert r.to_duration() == timedelta(days=-58)

    def test_unknown_range(self):
        assert FuzzyDateRange().to_duration() == timedelta(0)


class TestOrdering:
    """Tests for range comparison."""

    def test_from_date_first(self):
        assert _range("2018", "2030") < _range("2019", "2020")

    def test_to_date_breaks_ties(self):
        assert _range("2019", "2020") < _range("2019", "2021")
        assert _range("2019", "2020").compare_to(_range("2019", "2020")) == 0

    def test_follows_fuzzy_date_order(self):
        """Test that unknown endpoints sort first."""
        assert FuzzyDateRange(None, FuzzyDate(2020)) < FuzzyDateRange(FuzzyDate(1900), None)
        assert FuzzyDateRange(FuzzyDate(1900), None) < FuzzyDateRange(FuzzyDate(1900), FuzzyDate(1901))

    def test_sorted(self):
        ranges = [_range("2019", "2021"), _range("2018", "2019"), _range("2019", "2020")]
        assert sorted(ranges) == [_range("2018", "2019"), _range("2019", "2020"), _range("2019", "2021")]

    def test_compare_to_none(self):
        with pytest.raises(NullArgumentError):
            _range("2019", "2020").compare_to(None)


class TestContains:
    """Tests for contains."""

    def test_contains(self):
        r = _range("2019/03", "2019/06")
        assert r.contains(FuzzyDate(2019, 4, 10))
        assert r.contains(FuzzyDate(2019, 3))
        assert not r.contains(FuzzyDate(2019, 7))
        assert not r.contains(FuzzyDate(2019))

    def test_contains_none(self):
        with pytest.raises(NullArgumentError):
            _range("2019", "2020").contains(None)


class TestSerializationAndDisplay:
    """Tests for to_dict, from_dict and str."""

    def test_to_dict(self):
        assert _range("2019/03", "2020").to_dict() == {
            "From": {"Year": 2019, "Month": 3, "Day": None},
            "To": {"Year": 2020, "Month": None, "Day": None},
        }

    def test_from_dict(self):
        r = _range("2019/03/05", "2020")
        assert FuzzyDateRange.from_dict(r.to_dict()) == r

    def test_from_dict_missing_endpoint(self):
        r = FuzzyDateRange.from_dict({"From": {"Year": 2019}})
        assert r == FuzzyDateRange(FuzzyDate(2019), None)

    def test_write_fields_none(self):
        with pytest.raises(NullArgumentError):
            FuzzyDateRange().write_fields(None)

    def test_str(self):
        assert str(_range("2019", "2020/03")) == "2019-March 2020"
        assert str(FuzzyDateRange()) == "unknown date-unknown date"
