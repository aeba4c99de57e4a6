"""
modules/calendar/day_enumerator.py
-----------------------------------
Expands a trip's inclusive [start, end] bounds into calendar days.

Day keys are ISO "YYYY-MM-DD" strings; that is the value stored in
Event.date. Trips shown by length of stay address days with 1-based
"day-N" tokens instead, which resolve against the trip start.
"""

from __future__ import annotations
import logging
import re
from datetime import date, timedelta
from typing import Optional

from itinerary_engine.schemas.itinerary import DateLike, as_date

logger = logging.getLogger(__name__)

_DAY_TOKEN_RE = re.compile(r"^day-(\d+)$", re.IGNORECASE)


def enumerate_days(start: DateLike, end: DateLike) -> list[date]:
    """
    Every calendar day from ``start`` to ``end`` inclusive, ascending.
    An inverted range yields an empty list.
    """
    start_d, end_d = as_date(start), as_date(end)
    if start_d is None or end_d is None:
        return []
    if start_d > end_d:
        logger.warning("Trip range is inverted (%s > %s); no days produced", start_d, end_d)
        return []
    return [start_d + timedelta(days=i) for i in range((end_d - start_d).days + 1)]


def trip_length(start: DateLike, end: DateLike) -> int:
    """Number of days in the inclusive range (0 when inverted)."""
    return len(enumerate_days(start, end))


def day_key(day: DateLike) -> str:
    return as_date(day).isoformat()


def parse_day_key(value: str) -> Optional[date]:
    """Strict ``YYYY-MM-DD`` parse; None when malformed."""
    if not isinstance(value, str) or not re.fullmatch(r"\d{4}-\d{2}-\d{2}", value.strip()):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def is_day_token(value: str) -> bool:
    return isinstance(value, str) and _DAY_TOKEN_RE.match(value.strip()) is not None


def resolve_day_token(token: str, trip_start: Optional[DateLike]) -> Optional[date]:
    """``day-1`` is the trip start. None for a malformed token, ``day-0`` or no start."""
    m = _DAY_TOKEN_RE.match(token.strip()) if isinstance(token, str) else None
    start_d = as_date(trip_start)
    if m is None or start_d is None:
        return None
    n = int(m.group(1))
    if n < 1:
        return None
    return start_d + timedelta(days=n - 1)


def resolve_target(value: str, trip_start: Optional[DateLike] = None) -> Optional[date]:
    """A target date given either as a day key or as a day token."""
    if is_day_token(value):
        return resolve_day_token(value, trip_start)
    return parse_day_key(value)


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def day_label(day: DateLike, index: int, use_length_of_stay: bool = False) -> str:
    """
    Heading for a calendar day. ``index`` is 0-based within the trip.

        use_length_of_stay=False → "Day 2 - Sunday, June 2nd"
        use_length_of_stay=True  → "Day 2"
    """
    if use_length_of_stay:
        return f"Day {index + 1}"
    d = as_date(day)
    return f"Day {index + 1} - {d.strftime('%A, %B')} {_ordinal(d.day)}"


def toggle_collapsed(collapsed: frozenset[str], key: str) -> frozenset[str]:
    """Return the caller's collapsed-day set with ``key`` flipped."""
    return collapsed - {key} if key in collapsed else collapsed | {key}
