"""
modules/resolution/segment_resolver.py
---------------------------------------
Which city segment and which hotel stay are active on a given day.

City (multi-city trips only):
  First location whose [start_date, end_date] (both inclusive) contains the
  day. Overlaps resolve by list order, so callers keep locations sorted.

Hotel precedence:
  1. Exactly one hotel and it has no dates  → active every day.
  2. First ranged hotel with check_in <= day < check_out.
  3. No ranged match and exactly one hotel  → that hotel anyway.
  4. Otherwise None.

Rule 3 keeps single-hotel trips showing their hotel even outside the booked
nights; see DESIGN.md before relying on it.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from itinerary_engine.modules.calendar import day_enumerator
from itinerary_engine.modules.scheduling.event_scheduler import events_for_day
from itinerary_engine.schemas.itinerary import (
    DateLike, Event, HotelBooking, Itinerary, Location, as_date,
)

logger = logging.getLogger(__name__)


def resolve_city(
    day: DateLike,
    locations: list[Location],
    is_multi_city: bool,
) -> Optional[str]:
    """Name of the city segment active on ``day``, or None."""
    if not is_multi_city or not locations:
        return None
    d = as_date(day)
    for loc in locations:
        if not loc.is_date_scoped:
            continue
        if loc.start_date <= d <= loc.end_date:
            return loc.name
    return None


def resolve_hotel(day: DateLike, hotels: list[HotelBooking]) -> Optional[HotelBooking]:
    """Hotel stay active on ``day`` under the precedence rules above."""
    if not hotels:
        return None

    # Rule 1: whole-trip hotel
    if len(hotels) == 1 and hotels[0].is_undated:
        return hotels[0]

    # Rule 2: checkout-exclusive stays
    d = as_date(day)
    for booking in hotels:
        if booking.is_ranged and booking.check_in <= d < booking.check_out:
            return booking

    # Rule 3: single hotel outside its own range
    if len(hotels) == 1:
        logger.debug(
            "No stay covers %s; falling back to the only hotel %r", d, hotels[0].hotel.name
        )
        return hotels[0]

    return None


def stay_nights(booking: HotelBooking) -> int:
    """Nights booked; 0 when either date is missing or the range is inverted."""
    if not booking.is_ranged:
        return 0
    return max(0, (booking.check_out - booking.check_in).days)


# ── Per-day summary ────────────────────────────────────────────────────────────

@dataclass
class DayView:
    """Everything the calendar shows for one day."""
    date: date
    key: str
    index: int
    label: str
    city: Optional[str] = None
    hotel: Optional[HotelBooking] = None
    events: list[Event] = field(default_factory=list)

    @property
    def summary(self) -> str:
        n = len(self.events)
        if n == 0:
            return "No events planned"
        return f"{n} {'event' if n == 1 else 'events'} planned"


def resolve_day(day: DateLike, itinerary: Itinerary, index: int) -> DayView:
    d = as_date(day)
    return DayView(
        date=d,
        key=day_enumerator.day_key(d),
        index=index,
        label=day_enumerator.day_label(d, index, itinerary.use_length_of_stay),
        city=resolve_city(d, itinerary.locations, itinerary.is_multi_city),
        hotel=resolve_hotel(d, itinerary.hotels),
        events=events_for_day(d, itinerary.events),
    )


def build_calendar(itinerary: Itinerary) -> list[DayView]:
    """One DayView per trip day, in order."""
    days = day_enumerator.enumerate_days(itinerary.start_date, itinerary.end_date)
    return [resolve_day(d, itinerary, i) for i, d in enumerate(days)]
