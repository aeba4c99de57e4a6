"""schemas/: trip snapshot dataclasses shared by every engine module."""

from itinerary_engine.schemas.itinerary import (
    AttractionData,
    Event,
    EventTemplate,
    EventType,
    HotelBooking,
    HotelInfo,
    Itinerary,
    Location,
    PlaceSuggestion,
    RestaurantData,
)

__all__ = [
    "AttractionData",
    "Event",
    "EventTemplate",
    "EventType",
    "HotelBooking",
    "HotelInfo",
    "Itinerary",
    "Location",
    "PlaceSuggestion",
    "RestaurantData",
]
