"""
Calendar-day helpers.

Every booking is keyed by a canonical day string (``YYYY-MM-DD``) in the
venue's local calendar (``settings.TIME_ZONE``). Duplicate checks, the
public availability list and the retention sweep all go through
``normalize_day`` so they agree on what day a value means.
"""
import re
from datetime import date, datetime
from typing import Union

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from apps.core.exceptions import InvalidDate

CANONICAL_DAY_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# Loose formats accepted from browsers and hand-written clients
_FALLBACK_FORMATS = (
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M',
    '%Y/%m/%d %H:%M:%S',
    '%d %B %Y',
    '%d %b %Y',
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %d %Y',
    '%b %d %Y',
    '%a %b %d %Y',
    '%a %b %d %Y %H:%M:%S',
    '%a, %d %b %Y %H:%M:%S %Z',
)

DateInput = Union[str, date, datetime, None]


def _parse_date_string(value: str) -> datetime:
    try:
        parsed = parse_datetime(value)
    except ValueError:
        # Well-formed but out of range, e.g. month 13
        raise InvalidDate()
    if parsed is not None:
        return parsed

    # JavaScript Date.toString(): "Mon Mar 10 2025 00:00:00 GMT+0530 (India Standard Time)"
    js_match = re.match(r'^(\w{3} \w{3} \d{1,2} \d{4} \d{2}:\d{2}:\d{2}) GMT([+-]\d{4})', value)
    if js_match:
        try:
            return datetime.strptime(
                f"{js_match.group(1)} {js_match.group(2)}", '%a %b %d %Y %H:%M:%S %z'
            )
        except ValueError:
            raise InvalidDate()

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    raise InvalidDate()


def normalize_day(value: DateInput) -> str:
    """
    Canonicalize a date-like value to a ``YYYY-MM-DD`` string.

    Accepts a canonical day string (returned as-is, never re-parsed), any
    other parseable date/time string, or a ``date``/``datetime`` instance.
    Aware datetimes resolve to the local calendar day of the instant.

    Raises:
        InvalidDate: value is absent, unparseable or not a real calendar day
    """
    if value is None:
        raise InvalidDate()

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidDate()
        if CANONICAL_DAY_RE.match(value):
            # Reject impossible days like 2025-02-30 without any tz conversion
            try:
                date.fromisoformat(value)
            except ValueError:
                raise InvalidDate()
            return value
        parsed = _parse_date_string(value)
    elif isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value.isoformat()
    else:
        raise InvalidDate()

    if timezone.is_aware(parsed):
        parsed = timezone.localtime(parsed)
    return parsed.date().isoformat()


def today_day() -> str:
    """Canonical day string for today in the venue's calendar."""
    return normalize_day(timezone.now())
