"""
Normalization helpers for backend payloads

The backend serializes dates either as ISO strings or as [year, month, day]
tuples, money either as numbers or numeric strings, and lists either bare or
wrapped in a pagination envelope.
"""
import re
from datetime import date, datetime, timedelta

_ISO_DATE = re.compile(r'^\s*(\d{4})-(\d{1,2})-(\d{1,2})')
_FLOAT_PREFIX = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def _to_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')):
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return None
    return None


def date_from_parts(year, month, day):
    """Build a date with JavaScript ``new Date(y, m - 1, d)`` rollover

    Months outside 1..12 roll into neighbouring years and days outside the
    month roll into neighbouring months. Returns None when the result is not
    representable. Years 0..99 mean 1900..1999, as in JavaScript.
    """
    if 0 <= year <= 99:
        year += 1900
    total_months = year * 12 + (month - 1)
    year, month_index = divmod(total_months, 12)
    try:
        return date(year, month_index + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def parse_date(value):
    """Normalize a backend date value to a ``date`` (or None)"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (list, tuple)):
        if len(value) < 3:
            return None
        parts = [_to_int(part) for part in value[:3]]
        if any(part is None for part in parts):
            return None
        return date_from_parts(*parts)
    if isinstance(value, str):
        match = _ISO_DATE.match(value)
        if not match:
            return None
        year, month, day = (int(group) for group in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None
    return None


def format_date(value):
    """Format a backend date value as YYYY-MM-DD ('' when unusable)"""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else ''


def parse_amount(value):
    """Parse a monetary value the way JavaScript ``parseFloat`` would

    Thousands separators are dropped first; anything unparsable is 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if number == number else 0.0
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.strip().replace(',', ''))
        if match:
            return float(match.group(0))
    return 0.0


def unwrap_list(body):
    """Extract the item list from a backend list response"""
    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        for key in ('content', 'data'):
            if isinstance(body.get(key), list):
                return body[key]
    return []


def format_work_hours(hours):
    """Human readable duration for a fractional number of hours"""
    total_minutes = round(parse_amount(hours) * 60)
    if total_minutes <= 0:
        return '0 mins'

    hrs, mins = divmod(total_minutes, 60)
    if hrs == 0:
        return f'{mins} mins'
    label = f"{hrs} hour{'s' if hrs > 1 else ''}"
    if mins == 0:
        return label
    return f'{label} {mins} mins'
