"""Formatting and parsing of the dates shown in the tables."""

from __future__ import annotations

import datetime as _dt
import re

_DATE_PATTERN = re.compile(r"(\d{4})年(\d{2})月(\d{2})日")


def format_date(day: _dt.date | None) -> str:
    """Format a date as shown in the tables; a missing date gives an empty string."""
    if day is None:
        return ""
    return f"{day.year:04d}年{day.month:02d}月{day.day:02d}日"


def parse_date(text: str | None) -> _dt.date | None:
    """Parse a date in the table format, returning None when it is not valid."""
    if not text:
        return None
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return _dt.date(year, month, day)
    except ValueError:
        return None


def editor_date(value: object, today: _dt.date) -> _dt.date:
    """Return the date a date editor starts at for a cell value.

    Text is parsed in the table format and dates are used as they are;
    anything that yields no valid date falls back to ``today``.
    """
    if isinstance(value, str):
        parsed = parse_date(value)
    elif isinstance(value, _dt.datetime):
        parsed = value.date()
    elif isinstance(value, _dt.date):
        parsed = value
    else:
        parsed = None
    return parsed if parsed is not None else today