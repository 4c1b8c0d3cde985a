"""Date helpers for timecard rows."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from timecard.utils.helpers.exceptions import DateParseError

# Order matters: several layouts overlap on ambiguous strings ("01/02/2006",
# "01-02-03"), and the first layout that parses wins.
DATE_FORMATS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("%Y-%m-%d", re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)),
    ("%y-%m-%d", re.compile(r"\d{2}-\d{2}-\d{2}", re.ASCII)),
    ("%Y/%m/%d", re.compile(r"\d{4}/\d{2}/\d{2}", re.ASCII)),
    ("%m/%d/%Y", re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)),
    ("%d-%m-%Y", re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)),
    ("%d/%m/%Y", re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)),
)


def parse_timecard_date(value: str) -> date:
    """Parse a timecard date across the accepted formats.

    Each candidate requires exact digit widths before ``strptime`` checks the
    calendar, so ``"1/2/2006"`` and ``" 2006-01-02"`` are rejected rather than
    guessed at.

    Raises:
        DateParseError: if no format matches; ``.text`` is the original value.
    """
    if not isinstance(value, str):
        raise DateParseError(str(value))

    for fmt, shape in DATE_FORMATS:
        if not shape.fullmatch(value):
            continue
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise DateParseError(value)


def try_parse_timecard_date(value: str) -> Optional[date]:
    """Return the parsed date, or None when the value is not a usable date."""
    try:
        return parse_timecard_date(value)
    except DateParseError:
        return None


def week_start(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    # isoweekday(): Monday=1 .. Sunday=7, so Sunday maps to 0.
    return day - timedelta(days=day.isoweekday() % 7)
