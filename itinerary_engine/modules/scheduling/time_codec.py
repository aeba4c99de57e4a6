"""
modules/scheduling/time_codec.py
---------------------------------
Conversions between the human-entered event time and a sortable key.

Accepted stored forms:
  "15:00" / "9:05"        → 24-hour
  "3:00 PM" / "03:00pm"   → 12-hour with AM/PM (case-insensitive)
  "All day"               → sentinel, sorts before every timed event

Sort keys are zero-padded "HH:MM" strings, so plain string comparison
matches wall-clock order.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Optional

from itinerary_engine import config

logger = logging.getLogger(__name__)

# "-" < "0", so the sentinel key precedes "00:00"
ALL_DAY_SORT_KEY: str = "--:--"
# Unreadable stored values go after every timed event
UNKNOWN_SORT_KEY: str = "99:99"

AM, PM = "AM", "PM"

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])?$")


@dataclass(frozen=True)
class TimeFields:
    """Hour/minute/period as selected in the picker. ``period`` is None in 24-hour form."""
    hour: int
    minute: int
    period: Optional[str] = None

    @property
    def is_24h(self) -> bool:
        return self.period is None


def is_all_day(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() == config.ALL_DAY_LABEL.lower()


def parse_time(value: Optional[str]) -> Optional[TimeFields]:
    """
    Parse a stored time into fields. Returns None for the sentinel, for empty
    input and for anything that is not a valid 12- or 24-hour time.
    """
    if not value or is_all_day(value):
        return None
    m = _TIME_RE.match(value.strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    period = m.group(3).upper() if m.group(3) else None
    if minute > 59:
        return None
    if period is None:
        return TimeFields(hour, minute) if hour <= 23 else None
    return TimeFields(hour, minute, period) if 1 <= hour <= 12 else None


def is_valid_time(value: Optional[str]) -> bool:
    """True for the sentinel or any parseable 12/24-hour time."""
    return is_all_day(value) or parse_time(value) is not None


def _to_24(hour: int, period: str) -> int:
    if period == AM:
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


def _to_12(hour: int) -> tuple[int, str]:
    period = AM if hour < 12 else PM
    hour12 = hour % 12
    return (12 if hour12 == 0 else hour12), period


def to_sort_key(value: Optional[str]) -> str:
    """
    Map a stored time to its "HH:MM" ordering key.

    "12:30 PM" → "12:30", "12:30 AM" → "00:30", "3:00 PM" → "15:00",
    "All day" → ALL_DAY_SORT_KEY. Never raises: unreadable values get
    UNKNOWN_SORT_KEY.
    """
    if is_all_day(value):
        return ALL_DAY_SORT_KEY
    fields = parse_time(value)
    if fields is None:
        logger.debug("Unparseable event time %r; ordering it last", value)
        return UNKNOWN_SORT_KEY
    hour = fields.hour if fields.is_24h else _to_24(fields.hour, fields.period)
    return f"{hour:02d}:{fields.minute:02d}"


def toggle_hour_format(
    hour: int,
    minute: int,
    period: Optional[str],
    to_twenty_four: bool,
) -> TimeFields:
    """
    Re-express the selected hour in the other format without moving the moment.

    3 PM ↔ 15, 12 AM ↔ 0, 12 PM ↔ 12. Converting to the format the fields are
    already in is a no-op. Raises ValueError for out-of-range input.
    """
    if not 0 <= minute <= 59:
        raise ValueError(f"minute={minute} is outside [0, 59]")

    if period is None:
        if not 0 <= hour <= 23:
            raise ValueError(f"hour={hour} is outside [0, 23] for 24-hour input")
        if to_twenty_four:
            return TimeFields(hour, minute)
        hour12, new_period = _to_12(hour)
        return TimeFields(hour12, minute, new_period)

    period = period.upper()
    if period not in (AM, PM):
        raise ValueError(f"period={period!r} must be AM or PM")
    if not 1 <= hour <= 12:
        raise ValueError(f"hour={hour} is outside [1, 12] for 12-hour input")
    if to_twenty_four:
        return TimeFields(_to_24(hour, period), minute)
    return TimeFields(hour, minute, period)


def compose(hour: int, minute: int, period: Optional[str], is_24h: bool) -> str:
    """Build the stored string: "HH:MM" (24-hour) or "HH:MM AM|PM" (12-hour)."""
    if is_24h:
        return f"{hour:02d}:{minute:02d}"
    return f"{hour:02d}:{minute:02d} {(period or AM).upper()}"
