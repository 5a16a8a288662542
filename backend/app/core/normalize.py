"""Input Normalization — pure coercion of raw request values into canonical ones.

Invariants:
    - No IO, no framework imports: every function takes raw values, returns plain values
    - Integers use leading-integer semantics ("30min" -> 30, "2.5" -> 2, "abc" -> invalid)
    - Unparseable dates are None, never an error; callers decide on a fallback
    - format_date is the only renderer of outgoing dates ("Sun Jan 15 2023")

Design Decisions:
    - Fixed English weekday/month tables over strftime: output must not vary with the
      process locale
    - Explicit format list, then RFC 2822 via email.utils for timestamped strings
      (HTTP dates, JS Date.toString()): every accepted shape is enumerated and tested
    - Numbers are epoch milliseconds (UTC), the way JS clients serialize dates
"""

import re
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

from app.core.errors import InvalidInputError

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# JS Date.toString() tail: "GMT+0000 (Coordinated Universal Time)"
_ZONE_NAME = re.compile(r"\s*\([^)]*\)\s*$")
_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)([+-]\d{4})\b")

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Tried in order after ISO-8601
_DATE_FORMATS = (
    "%a %b %d %Y",      # Sun Jan 15 2023 (our own output)
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%a, %d %b %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def _as_text(raw: Any) -> str | None:
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    return text or None


def parse_int_prefix(raw: Any) -> int | None:
    """Parse the leading base-10 integer of raw, or None."""
    text = _as_text(raw)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_duration(raw: Any) -> int:
    """Duration in whole units. Raises InvalidInputError if not numeric."""
    value = parse_int_prefix(raw)
    if value is None:
        raise InvalidInputError(
            "description and duration required (duration must be a number)",
            field="duration",
        )
    return value


def parse_limit(raw: Any) -> int | None:
    """Positive result cap, or None for no cap."""
    value = parse_int_prefix(raw)
    if value is None or value <= 0:
        return None
    return value


def require_text(raw: Any, field: str) -> str:
    """Trimmed non-empty string, or InvalidInputError naming the field."""
    text = _as_text(raw) if isinstance(raw, str) else None
    if text is None:
        raise InvalidInputError(f"{field} required", field=field)
    return text


def _parse_iso(text: str) -> date | None:
    try:
        parsed = datetime.fromisoformat(text.replace("z", "Z"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def _parse_epoch_ms(value: int | float) -> date | None:
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError):
        return None


def _parse_rfc2822(text: str) -> date | None:
    cleaned = _GMT_OFFSET.sub(r"\1", _ZONE_NAME.sub("", text))
    try:
        parsed = parsedate_to_datetime(cleaned)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def parse_date(raw: Any) -> date | None:
    """Calendar date from raw input, or None when absent or unparseable."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return _parse_epoch_ms(raw)
    text = _as_text(raw)
    if text is None:
        return None

    parsed = _parse_iso(text)
    if parsed is not None:
        return parsed
    normalized = " ".join(text.split())
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(normalized, fmt).date()
        except ValueError:
            continue
    return _parse_rfc2822(normalized)


def parse_date_or_default(raw: Any, today: date) -> date:
    """Parsed date, falling back to today for missing/invalid input."""
    parsed = parse_date(raw)
    return parsed if parsed is not None else today


def today() -> date:
    """Current calendar date (UTC)."""
    return datetime.now(timezone.utc).date()


def format_date(value: date) -> str:
    """Render as "<Weekday> <Mon> <DD> <YYYY>", e.g. "Mon Jan 01 2024"."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )
