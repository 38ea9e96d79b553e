"""
Time Utilities

The historical endpoint takes its `date` query parameter as a plain
calendar date (YYYY-MM-DD). The helpers in this module turn the date-like
values accepted by HistoricalRequest into that wire format.
"""

from datetime import date, datetime
from typing import Optional, Union


ZERO_DATE = date.min
API_DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[datetime, date]


def format_api_date(value: Optional[DateLike]) -> str:
    """
    Format a date for the `date` query parameter.

    Args:
        value: A date or datetime. None means "unset".

    Returns:
        str: The value as YYYY-MM-DD. An unset value formats as the
        zero date, "0001-01-01".

    Examples:
        >>> format_api_date(date(2022, 1, 1))
        '2022-01-01'

        >>> format_api_date(None)
        '0001-01-01'

    Notes:
        - A datetime is formatted by its own calendar date; no timezone
          conversion happens
        - strftime is avoided because it does not zero-pad years < 1000
          on every platform
    """
    if value is None:
        value = ZERO_DATE

    if isinstance(value, datetime):
        value = value.date()

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_api_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD string, as used in historical response keys.

    Args:
        value: Date string (e.g., "2022-01-01")

    Returns:
        date: The parsed calendar date

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    return datetime.strptime(value, API_DATE_FORMAT).date()
