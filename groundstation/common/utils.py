import json
import math
import re
from datetime import datetime

import pytz

from groundstation.base.errors import ParseError

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2}", re.ASCII)
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, datetime):
            # Format datetime objects as ISO-8601 UTC strings
            return utc_isoformat(obj)
        # Let the base class default method raise the TypeError
        return json.JSONEncoder.default(self, obj)


def utc_isoformat(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = pytz.UTC.localize(dt)
    return dt.astimezone(pytz.UTC).isoformat().replace("+00:00", "Z")


def parse_user_datetime(date_str: str, time_str: str) -> datetime:
    """Combine a `YYYY-MM-DD` date and an `HH:MM` or `HH:MM:SS` time into a UTC datetime.

    A time with exactly one colon gets `:00` seconds appended before parsing. The
    wall-clock value is taken as UTC directly, with no local time conversion.
    """
    date_str = date_str.strip()
    time_str = time_str.strip()

    if not DATE_PATTERN.fullmatch(date_str):
        raise ParseError("date", date_str, "expected YYYY-MM-DD")
    try:
        date = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError("date", date_str, str(e)) from e

    if time_str.count(":") == 1:
        time_str = f"{time_str}:00"
    if not TIME_PATTERN.fullmatch(time_str):
        raise ParseError("time", time_str, "expected HH:MM or HH:MM:SS")
    try:
        time = datetime.strptime(time_str, "%H:%M:%S").time()
    except ValueError as e:
        raise ParseError("time", time_str, str(e)) from e

    return pytz.UTC.localize(datetime.combine(date, time))


def parse_frequency(value: str, field: str = "frequency") -> float:
    """Parse a frequency in Hz. Only plain decimal notation is accepted, there is no range check."""
    text = value.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise ParseError(field, value, "expected a decimal number")
    frequency = float(text)
    if math.isinf(frequency):
        raise ParseError(field, value, "number out of range")
    return frequency
