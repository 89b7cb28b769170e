"""
gedcom_date.py - Conversion between fuzzy dates and GEDCOM date values.

Uses ged4py to read GEDCOM date strings. Supports:
    - Simple dates ("5 MAR 2019", "MAR 2019", "2019") as FuzzyDate
    - Qualified dates (ABT, BEF, AFT, CAL, EST, INT, FROM, TO) as the FuzzyDate
      of the inner date, dropping the qualifier
    - Ranges and periods ("BET ... AND ...", "FROM ... TO ...") as FuzzyDateRange
    - Writing FuzzyDate and FuzzyDateRange back as GEDCOM strings

Date phrases, non-Gregorian calendars and BC dates cannot be expressed as a
fuzzy date and raise FormatError.

Last updated: 2026-10-16
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from ged4py.calendar import GregorianDate
from ged4py.date import DateValue

from fuzzy_dates.errors import FormatError, NullArgumentError
from fuzzy_dates.fuzzy_date import FuzzyDate
from fuzzy_dates.fuzzy_date_range import FuzzyDateRange
from fuzzy_dates.rules import RulesRunner

logger = logging.getLogger(__name__)

_MONTH_ABBR_TO_NUM = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}
_NUM_TO_MONTH_ABBR = {v: k for k, v in _MONTH_ABBR_TO_NUM.items()}

# DateValue kinds holding two dates in date1/date2
_TWO_DATE_KINDS = ("RANGE", "PERIOD")


def from_gregorian(date: GregorianDate, rules: Optional[RulesRunner] = None) -> FuzzyDate:
    """
    Convert a ged4py GregorianDate to a FuzzyDate.

    Args:
        date: The GEDCOM calendar date.
        rules: Optional runner to validate with.

    Returns:
        FuzzyDate: Date with the same known components.

    Raises:
        NullArgumentError: If date is None.
        FormatError: If date is not Gregorian, is BC, or has an unknown month name.
    """
    if date is None:
        raise NullArgumentError("date")
    if not isinstance(date, GregorianDate):
        raise FormatError(f"Only Gregorian dates are supported, got {type(date).__name__}", text=str(date))
    if getattr(date, 'bc', False):
        raise FormatError("BC dates are not supported", text=str(date))
    month = None
    if date.month is not None:
        month = _MONTH_ABBR_TO_NUM.get(str(date.month).upper())
        if month is None:
            raise FormatError(f"Unknown GEDCOM month '{date.month}'", text=str(date))
    return FuzzyDate(date.year, month, date.day, rules=rules)


def from_gedcom(value: Union[str, DateValue], rules: Optional[RulesRunner] = None) -> Union[FuzzyDate, FuzzyDateRange]:
    """
    Convert a GEDCOM date string or ged4py DateValue.

    An empty string gives an unknown FuzzyDate.

    Args:
        value: GEDCOM date string or DateValue.
        rules: Optional runner to validate with.

    Returns:
        FuzzyDate for single dates, FuzzyDateRange for ranges and periods.

    Raises:
        NullArgumentError: If value is None.
        FormatError: If the value is a phrase or cannot be represented.
    """
    if value is None:
        raise NullArgumentError("value")
    if isinstance(value, str):
        if not value.strip():
            return FuzzyDate.unknown(rules=rules)
        value = DateValue.parse(value)
    elif not isinstance(value, DateValue):
        raise TypeError(f"Unsupported date type: {type(value)}")

    kind = value.kind.name
    if kind in _TWO_DATE_KINDS:
        return FuzzyDateRange(
            from_gregorian(value.date1, rules=rules),
            from_gregorian(value.date2, rules=rules),
            rules=rules,
        )
    if kind == "PHRASE":
        raise FormatError(f"GEDCOM date phrase cannot be read as a date: {value}", text=str(value))
    if kind != "SIMPLE":
        logger.info(f"Dropping GEDCOM qualifier {kind} from {value}")
    return from_gregorian(value.date, rules=rules)


def to_gregorian(value: FuzzyDate) -> GregorianDate:
    """
    Convert a FuzzyDate to a ged4py GregorianDate.

    Raises:
        NullArgumentError: If value is None.
        FormatError: If the year is unknown or the day is known without the month.
    """
    if value is None:
        raise NullArgumentError("value")
    if value.year is None:
        raise FormatError(f"GEDCOM dates need a year: {value!r}", text=repr(value))
    if value.day is not None and value.month is None:
        raise FormatError(f"GEDCOM dates cannot have a day without a month: {value!r}", text=repr(value))
    month = _NUM_TO_MONTH_ABBR[value.month] if value.month is not None else None
    return GregorianDate(value.year, month, value.day)


def _format_date(value: FuzzyDate) -> str:
    date = to_gregorian(value)
    parts = []
    if date.day is not None:
        parts.append(str(date.day))
    if date.month is not None:
        parts.append(date.month)
    parts.append(str(date.year))
    return " ".join(parts)


def to_gedcom(value: Union[FuzzyDate, FuzzyDateRange]) -> str:
    """
    Format a FuzzyDate or FuzzyDateRange as a GEDCOM date string.

    Unknown values give "". A range with both ends known gives
    "BET ... AND ..."; a range with only one end known gives "AFT ..." or
    "BEF ...".

    Raises:
        NullArgumentError: If value is None.
        FormatError: If a date cannot be expressed in GEDCOM.
    """
    if value is None:
        raise NullArgumentError("value")
    if isinstance(value, FuzzyDateRange):
        if value.is_unknown:
            return ""
        if value.to_date.is_unknown:
            return f"AFT {_format_date(value.from_date)}"
        if value.from_date.is_unknown:
            return f"BEF {_format_date(value.to_date)}"
        return f"BET {_format_date(value.from_date)} AND {_format_date(value.to_date)}"
    if isinstance(value, FuzzyDate):
        if value.is_unknown:
            return ""
        return _format_date(value)
    raise TypeError(f"Unsupported date type: {type(value)}")
