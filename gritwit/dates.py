"""Validation of the workout dates sent with a log."""

from __future__ import annotations

import datetime as _dt


class InvalidDateError(ValueError):
    """Raised when a workout date is missing or not in YYYY-MM-DD form."""


def validate_date(date: str) -> _dt.date:
    """Check a workout date and return it parsed.

    The date must be present and written as ``YYYY-MM-DD``.
    """
    if not date:
        raise InvalidDateError("Date is required")
    try:
        return _dt.datetime.strptime(date, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDateError("Invalid date format") from None