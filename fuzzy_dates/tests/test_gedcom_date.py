import pytest
from ged4py.calendar import GregorianDate
from ged4py.date import DateValue

from fuzzy_dates.errors import FormatError, NullArgumentError
from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.fuzzy_date_range import FuzzyDateRange
from fuzzy_dates.gedcom_date import from_gedcom, from_gregorian, to_gedcom, to_gregorian


@pytest.mark.parametrize("date_str,year,month,day", [
    ("1900", 1900, None, None),
    ("JUL 1913", 1913, 7, None),
    ("15 JUL 1913", 1913, 7, 15),
    ("4 DEC 2025", 2025, 12, 4),
    ("29 FEB 2020", 2020, 2, 29),
])
def test_simple_dates(date_str, year, month, day):
    """Test reading simple GEDCOM dates."""
    result = from_gedcom(date_str)
    assert isinstance(result, FuzzyDate)
    assert (result.year, result.month, result.day) == (year, month, day)


@pytest.mark.parametrize("date_str,expected", [
    ("ABT 1762", FuzzyDate(1762)),
    ("BEF 1951", FuzzyDate(1951)),
    ("AFT MAR 1832", FuzzyDate(1832, 3)),
    ("EST 1800", FuzzyDate(1800)),
    ("CAL 5 JUN 1700", FuzzyDate(1700, 6, 5)),
])
def test_qualified_dates(date_str, expected):
    """Test that qualifiers are dropped and the inner date kept."""
    assert from_gedcom(date_str) == expected


def test_range():
    """Test that BET ... AND ... becomes a FuzzyDateRange."""
    result = from_gedcom("BET JUL 1913 AND SEP 1913")
    assert isinstance(result, FuzzyDateRange)
    assert result.from_date == FuzzyDate(1913, 7)
    assert result.to_date == FuzzyDate(1913, 9)


def test_period():
    result = from_gedcom("FROM 1900 TO 1910")
    assert result == FuzzyDateRange(FuzzyDate(1900), FuzzyDate(1910))


def test_date_value():
    assert from_gedcom(DateValue.parse("5 MAR 2019")) == FuzzyDate(2019, 3, 5)


def test_empty_date():
    assert from_gedcom("") == FuzzyDate.unknown()
    assert from_gedcom("   ") == FuzzyDate.unknown()


@pytest.mark.parametrize("date_str", [
    "nonsense date string",
    "(sometime in spring)",
    "@#DJULIAN@ 5 MAR 1700",
])
def test_unreadable_dates(date_str):
    """Test that phrases and other calendars raise FormatError."""
    with pytest.raises(FormatError):
        from_gedcom(date_str)


def test_invalid_inputs():
    with pytest.raises(NullArgumentError):
        from_gedcom(None)
    with pytest.raises(TypeError):
        from_gedcom(2019)


def test_from_gregorian():
    assert from_gregorian(GregorianDate(1913, "JUL", 15)) == FuzzyDate(1913, 7, 15)
    assert from_gregorian(GregorianDate(1913)) == FuzzyDate(1913)


def test_from_gregorian_bc():
    with pytest.raises(FormatError):
        from_gregorian(GregorianDate(100, bc=True))


def test_to_gregorian():
    result = to_gregorian(FuzzyDate(2019, 3, 5))
    assert isinstance(result, GregorianDate)
    assert (result.year, result.month, result.day) == (2019, "MAR", 5)


@pytest.mark.parametrize("value,expected", [
    (FuzzyDate(2019, 3, 5), "5 MAR 2019"),
    (FuzzyDate(2019, 3), "MAR 2019"),
    (FuzzyDate(2019), "2019"),
    (FuzzyDate(), ""),
    (FuzzyDateRange(FuzzyDate(2019), FuzzyDate(2020)), "BET 2019 AND 2020"),
    (FuzzyDateRange(FuzzyDate(2019, 1), None), "AFT JAN 2019"),
    (FuzzyDateRange(None, FuzzyDate(2020)), "BEF 2020"),
    (FuzzyDateRange(), ""),
])
def test_to_gedcom(value, expected):
    assert to_gedcom(value) == expected


@pytest.mark.parametrize("value", [FuzzyDate(month=3), FuzzyDate(2019, None, 5)])
def test_to_gedcom_inexpressible(value):
    """Test that shapes GEDCOM has no syntax for raise FormatError."""
    with pytest.raises(FormatError):
        to_gedcom(value)


@pytest.mark.parametrize("value", [
    FuzzyDate(2019, 3, 5),
    FuzzyDate(1913, 7),
    FuzzyDate(1759),
    FuzzyDateRange(FuzzyDate(1900, 1), FuzzyDate(1910, 12, 31)),
])
def test_round_trip(value):
    assert from_gedcom(to_gedcom(value)) == value
