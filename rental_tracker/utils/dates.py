"""
Calendar helpers for rental dates.

Dates are kept as fixed-width 'YYYY-MM-DD' strings. The day count below
numbers days from the start of year 1 (day-of-month plus every whole
year and month before it), which is what stored history and costs were
computed with, so it is not swapped for datetime arithmetic.
"""

from __future__ import annotations

from string import digits

from .constants import DATE_LEN

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in `month` (1-12) of `year`; 0 for an out-of-range month."""
    if month < 1 or month > 12:
        return 0
    days = _MONTH_DAYS[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def split_date(value: str) -> tuple[int, int, int]:
    """Split a 'YYYY-MM-DD' string into (year, month, day) without validating it."""
    return int(value[0:4]), int(value[5:7]), int(value[8:10])


def is_valid_date(value: str) -> bool:
    """
    Check the fixed 'YYYY-MM-DD' form:
      - exactly 10 characters with '-' at positions 4 and 7
      - every other character an ASCII digit
      - month in 1..12 and day within that month (leap years included)
    """
    if not isinstance(value, str) or len(value) != DATE_LEN:
        return False
    if value[4] != "-" or value[7] != "-":
        return False
    for i, ch in enumerate(value):
        if i in (4, 7):
            continue
        if ch not in digits:
            return False

    year, month, day = split_date(value)
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def count_total_days(value: str) -> int:
    """Ordinal day number of a valid date, counting whole years from year 1."""
    year, month, day = split_date(value)
    total = day
    for y in range(1, year):
        total += 366 if is_leap_year(y) else 365
    for m in range(1, month):
        total += days_in_month(m, year)
    return total


def days_between(start: str, end: str) -> int:
    """Billable days between two valid dates, never less than 1."""
    days = count_total_days(end) - count_total_days(start)
    return days if days >= 1 else 1
