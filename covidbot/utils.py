"""Common utility functions for the bot."""

import json
import logging
import math
from datetime import datetime
from typing import Optional, Union

import pytz

Number = Union[int, float]


def to_number(value) -> Number:
    """Coerce an upstream value to a number.

    None, booleans, non-numeric strings and NaN/inf all become 0 so they are
    never rendered as 'None' or 'nan'.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0
    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            return 0
        if number.is_integer():
            return int(number)
    return number


def format_number(value) -> str:
    """Format a value with thousands separators (e.g., 125000000 -> '125,000,000')."""
    number = to_number(value)
    if isinstance(number, float):
        # Up to three fraction digits, trailing zeros dropped
        return f"{number:,.3f}".rstrip('0').rstrip('.')
    return f"{number:,}"


def current_time(timezone: Optional[str] = None) -> datetime:
    """Current time in the given pytz zone, or server local time if None."""
    if timezone:
        return datetime.now(pytz.timezone(timezone))
    return datetime.now()


def current_hour(timezone: Optional[str] = None) -> int:
    """Current hour of day (0-23)."""
    return current_time(timezone).hour


def log_diagnostic(logger: logging.Logger, verbose: bool, label: str, payload) -> None:
    """Write a raw payload to the diagnostic log when running in verbose mode."""
    if not verbose:
        return
    try:
        rendered = json.dumps(payload, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        rendered = repr(payload)
    logger.info(f"{label}: {rendered}")
