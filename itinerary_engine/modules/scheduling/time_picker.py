"""
modules/scheduling/time_picker.py
----------------------------------
State machine behind the event time picker.

    Closed ──open()──▶ Open(all_day, hour, minute, period, is_24h)
    Open   ──toggle_all_day()──▶ Closed   time = "All day"
    Open   ──clear()──────────▶ Closed    time = ""
    Open   ──set()────────────▶ Closed    time = compose(fields)
    Open   ──toggle_hour_format()──▶ Open (same moment, other format)

Every transition leaves ``time`` consistent with the selected fields.
Rejected transitions (wrong state, out-of-range field) return False and
change nothing.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

from itinerary_engine import config
from itinerary_engine.modules.scheduling import time_codec
from itinerary_engine.modules.scheduling.time_codec import AM, PM

logger = logging.getLogger(__name__)


class PickerState(Enum):
    CLOSED = "closed"
    OPEN   = "open"


class TimePicker:

    def __init__(self, time: str = "", is_24h: Optional[bool] = None) -> None:
        self.time: str = time
        self.state: PickerState = PickerState.CLOSED
        self.is_24h: bool = config.DEFAULT_TIME_FORMAT_24H if is_24h is None else is_24h
        self.all_day: bool = time_codec.is_all_day(time)
        self.hour: int = 12
        self.minute: int = 0
        self.period: Optional[str] = None if self.is_24h else PM

    @property
    def is_open(self) -> bool:
        return self.state is PickerState.OPEN

    # ── transitions ───────────────────────────────────────────────────────

    def open(self) -> None:
        """Load the fields from the current time (12:00 PM / 12:00 when empty)."""
        self.all_day = time_codec.is_all_day(self.time)
        fields = time_codec.parse_time(self.time)
        if fields is not None:
            # Stored format wins over the configured default
            self.is_24h = fields.is_24h
            self.hour, self.minute, self.period = fields.hour, fields.minute, fields.period
        else:
            self.hour, self.minute = 12, 0
            self.period = None if self.is_24h else PM
        self.state = PickerState.OPEN

    def toggle_all_day(self) -> bool:
        if not self.is_open:
            return False
        self.all_day = True
        self.time = config.ALL_DAY_LABEL
        self.state = PickerState.CLOSED
        return True

    def toggle_hour_format(self) -> bool:
        if not self.is_open:
            return False
        fields = time_codec.toggle_hour_format(
            self.hour, self.minute, self.period, to_twenty_four=not self.is_24h
        )
        self.hour, self.minute, self.period = fields.hour, fields.minute, fields.period
        self.is_24h = fields.is_24h
        return True

    def select_hour(self, hour: int) -> bool:
        if not self.is_open:
            return False
        low, high = (0, 23) if self.is_24h else (1, 12)
        if not low <= hour <= high:
            logger.debug("Rejected hour %s in %s-hour mode", hour, 24 if self.is_24h else 12)
            return False
        self.hour = hour
        return True

    def select_minute(self, minute: int) -> bool:
        if not self.is_open or not 0 <= minute <= 59:
            return False
        self.minute = minute
        return True

    def select_period(self, period: str) -> bool:
        if not self.is_open or self.is_24h:
            return False
        period = period.upper()
        if period not in (AM, PM):
            return False
        self.period = period
        return True

    def clear(self) -> bool:
        if not self.is_open:
            return False
        self.time = ""
        self.all_day = False
        self.state = PickerState.CLOSED
        return True

    def set(self) -> bool:
        if not self.is_open:
            return False
        self.time = time_codec.compose(self.hour, self.minute, self.period, self.is_24h)
        self.all_day = False
        self.state = PickerState.CLOSED
        return True
