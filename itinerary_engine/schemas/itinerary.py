"""
schemas/itinerary.py
--------------------
Dataclass definitions for the trip snapshot consumed by the engine.

Dates are ``datetime.date`` values; constructors also accept ISO-8601
``YYYY-MM-DD`` strings so snapshots coming straight from JSON work unchanged.

Event is frozen: the scheduler only ever hands back new Event instances.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

DateLike = Union[date, str]


def as_date(value: Optional[DateLike]) -> Optional[date]:
    """Coerce a date or ISO string to ``date``; ``None``/empty stays ``None``."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # drop a time-of-day suffix ("2024-06-01T10:00", "2024-06-01 10:00")
    text = text.partition("T")[0].partition(" ")[0]
    return date.fromisoformat(text)


# ── Event type taxonomy ───────────────────────────────────────────────────────

class EventType(str, Enum):
    RESTAURANT    = "restaurant"
    HOTEL         = "hotel"
    ATTRACTION    = "attraction"
    MUSEUM        = "museum"
    PARK          = "park"
    MONUMENT      = "monument"
    SHOPPING      = "shopping"
    ENTERTAINMENT = "entertainment"
    OTHER         = "other"

    @property
    def is_attraction_like(self) -> bool:
        """True for the types that carry an ``attraction_data`` payload."""
        return self in _ATTRACTION_LIKE


_ATTRACTION_LIKE = frozenset({
    EventType.ATTRACTION,
    EventType.MUSEUM,
    EventType.PARK,
    EventType.MONUMENT,
    EventType.SHOPPING,
    EventType.ENTERTAINMENT,
})


# ── Place payloads ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlaceSuggestion:
    """
    Narrow view of a place-search result.

    Search providers return very different shapes; only the two fields the
    engine reads are kept so provider specifics never leak past this point.
    """
    name: str
    formatted_address: str = ""

    @classmethod
    def from_provider(cls, payload: dict[str, Any]) -> "PlaceSuggestion":
        address = (
            payload.get("formatted_address")
            or payload.get("formattedAddress")
            or payload.get("vicinity")
            or payload.get("address")
            or ""
        )
        return cls(name=str(payload.get("name", "")).strip(), formatted_address=str(address).strip())

    @property
    def label(self) -> str:
        """Opaque location string stored on "other" events."""
        if self.name and self.formatted_address and self.formatted_address != self.name:
            return f"{self.name}, {self.formatted_address}"
        return self.name or self.formatted_address


@dataclass(frozen=True)
class RestaurantData:
    name: str
    address: str = ""
    place_id: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_suggestion(cls, suggestion: PlaceSuggestion, **extra: Any) -> "RestaurantData":
        return cls(name=suggestion.name, address=suggestion.formatted_address, **extra)


@dataclass(frozen=True)
class AttractionData:
    name: str
    address: str = ""
    category: Optional[str] = None
    place_id: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_suggestion(cls, suggestion: PlaceSuggestion, **extra: Any) -> "AttractionData":
        return cls(name=suggestion.name, address=suggestion.formatted_address, **extra)


# ── Events ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EventTemplate:
    """User-entered event body, reusable across one or more target dates."""
    title: str
    time: str
    type: EventType = EventType.OTHER
    description: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None
    restaurant_data: Optional[RestaurantData] = None
    attraction_data: Optional[AttractionData] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", EventType(self.type))


@dataclass(frozen=True)
class Event:
    """A single dated itinerary entry."""
    id: str
    title: str
    time: str
    date: str                              # YYYY-MM-DD day key
    type: EventType = EventType.OTHER
    description: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None         # free text, "other" events only
    restaurant_data: Optional[RestaurantData] = None
    attraction_data: Optional[AttractionData] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", EventType(self.type))


# ── City segments and hotel stays ─────────────────────────────────────────────

@dataclass
class Location:
    """A city segment. Only date-scoped segments are ever matched by day."""
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    country: str = ""

    def __post_init__(self) -> None:
        self.start_date = as_date(self.start_date)
        self.end_date = as_date(self.end_date)

    @property
    def is_date_scoped(self) -> bool:
        return self.start_date is not None and self.end_date is not None


@dataclass
class HotelInfo:
    name: str
    address: str = ""
    rating: Optional[float] = None
    website: Optional[str] = None


@dataclass
class HotelBooking:
    """
    A hotel stay. With both dates set the stay covers ``[check_in, check_out)``:
    the checkout day itself belongs to the next stay.
    """
    hotel: HotelInfo
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    location: Optional[str] = None
    id: str = ""

    def __post_init__(self) -> None:
        self.check_in = as_date(self.check_in)
        self.check_out = as_date(self.check_out)

    @property
    def is_ranged(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    @property
    def is_undated(self) -> bool:
        return self.check_in is None and self.check_out is None


# ── Trip ──────────────────────────────────────────────────────────────────────

@dataclass
class Itinerary:
    """
    Snapshot of a trip handed to the engine per call.

    use_length_of_stay only switches day labels to "Day N"; it never changes
    which city, hotel or events resolve for a day.
    """
    start_date: date
    end_date: date
    locations: list[Location] = field(default_factory=list)
    hotels: list[HotelBooking] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    use_length_of_stay: bool = False
    is_multi_city: bool = False
    title: str = ""

    def __post_init__(self) -> None:
        self.start_date = as_date(self.start_date)
        self.end_date = as_date(self.end_date)
