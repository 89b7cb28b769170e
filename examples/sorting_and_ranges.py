"""
Example: Sorting partially known dates and building ranges.

This example demonstrates how to:
1. Parse fuzzy dates from canonical strings and GEDCOM values
2. Sort them (unknown components sort first)
3. Build ranges and measure them
4. Validate with a custom rules runner
"""

from fuzzy_dates import FuzzyDate, FuzzyDateRange, ValidationError, from_gedcom
from fuzzy_dates.rules import MonthRequiresYear, get_default_runner


def example_sorting():
    """Parse and sort dates of mixed precision."""
    dates = [
        FuzzyDate.parse("2019/03/05"),
        FuzzyDate.parse("2019"),
        FuzzyDate.unknown(),
        FuzzyDate.parse("2019/03"),
        from_gedcom("ABT 1913"),
    ]
    for date in sorted(dates):
        print(f"{date.to_canonical() or '-':>10}  {date}")


def example_ranges():
    """Build a range and measure it."""
    year_2020 = FuzzyDateRange(
        FuzzyDate.from_calendar_date(2020, 1, 1),
        FuzzyDate.from_calendar_date(2020, 12, 31),
    )
    print(f"{year_2020} lasts {year_2020.to_duration().days} days")
    print(f"Contains March 2020: {year_2020.contains(FuzzyDate.from_year_month(2020, 3))}")


def example_custom_rules():
    """Validate with a runner that also requires a year whenever a month is given."""
    strict = get_default_runner().with_rules(MonthRequiresYear())
    try:
        FuzzyDate(month=3, rules=strict)
    except ValidationError as e:
        print(f"Rejected by {e.rule_id}: {e}")


if __name__ == "__main__":
    example_sorting()
    print()
    example_ranges()
    print()
    example_custom_rules()
