"""
Date and time string validation.

Dates are ``yyyyMMdd`` and times ``HHmm``. Strings are accepted or rejected
as given; they are never reformatted.
"""

from __future__ import annotations

import calendar

from .errors import InvalidDateFormat, InvalidTimeFormat

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _is_digits(value: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return value.isascii() and value.isdigit()


def validate_date(value: str) -> None:
    """
    Check that ``value`` is a real calendar date in ``yyyyMMdd`` form.

    Raises:
        InvalidDateFormat: On wrong length, non-digits, or an impossible
            month or day (February 29th only in leap years).
    """
    if len(value) != 8:
        raise InvalidDateFormat(value, "expected 8 characters in yyyyMMdd form")
    if not _is_digits(value):
        raise InvalidDateFormat(value, "only digits are allowed")

    year, month, day = int(value[0:4]), int(value[4:6]), int(value[6:8])
    if not 1 <= month <= 12:
        raise InvalidDateFormat(value, f"month {month} is not in 1-12")

    max_day = days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise InvalidDateFormat(value, f"day {day} is not in 1-{max_day}")


def validate_time(value: str) -> None:
    """
    Check that ``value`` is a real clock time in ``HHmm`` form.

    Raises:
        InvalidTimeFormat: On wrong length, non-digits, hour outside 0-23
            or minute outside 0-59.
    """
    if len(value) != 4:
        raise InvalidTimeFormat(value, "expected 4 characters in HHmm form")
    if not _is_digits(value):
        raise InvalidTimeFormat(value, "only digits are allowed")

    hour, minute = int(value[0:2]), int(value[2:4])
    if not 0 <= hour <= 23:
        raise InvalidTimeFormat(value, f"hour {hour} is not in 0-23")
    if not 0 <= minute <= 59:
        raise InvalidTimeFormat(value, f"minute {minute} is not in 0-59")
