"""Timezone utilities. All stored timestamps are UTC."""

from datetime import datetime

import pytz
from dateutil import parser as date_parser

UTC = pytz.UTC


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # SQLite drops tzinfo; naive values were written as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_datetime_utc(value: str) -> datetime:
    """
    Parse a datetime string and return it in UTC.

    Accepts ISO 8601 as well as RFC 2822 style values
    ("Fri, 27 Mar 2020 00:00:01 +0000"). Naive values are assumed UTC.
    """
    return to_utc(date_parser.parse(value))
