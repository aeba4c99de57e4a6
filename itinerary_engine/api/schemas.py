"""
api/schemas.py
--------------
Pydantic request/response models for the HTTP adapter, plus the converters
between them and the engine's dataclasses.

Dates travel as ISO-8601 "YYYY-MM-DD" strings.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from itinerary_engine.modules.resolution import DayView
from itinerary_engine.schemas.itinerary import (
    AttractionData,
    Event,
    EventTemplate,
    EventType,
    HotelBooking,
    HotelInfo,
    Itinerary,
    Location,
    RestaurantData,
)


class RestaurantModel(BaseModel):
    name: str
    address: str = ""
    place_id: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class AttractionModel(BaseModel):
    name: str
    address: str = ""
    category: Optional[str] = None
    place_id: Optional[str] = None
    website: Optional[str] = None


class TemplateModel(BaseModel):
    title: str = ""
    time: str = ""
    type: EventType = EventType.OTHER
    description: Optional[str] = None
    price: Optional[str] = None
    location: Optional[str] = None
    restaurant_data: Optional[RestaurantModel] = None
    attraction_data: Optional[AttractionModel] = None


class EventModel(TemplateModel):
    id: str
    date: str = Field(..., description="ISO-8601 date YYYY-MM-DD")


class LocationModel(BaseModel):
    name: str
    start_date: Optional[str] = None
    end_date:   Optional[str] = None
    country:    str = ""


class HotelModel(BaseModel):
    name: str
    address: str = ""
    rating: Optional[float] = None
    website: Optional[str] = None


class HotelBookingModel(BaseModel):
    id: str = ""
    hotel: HotelModel
    check_in:  Optional[str] = None
    check_out: Optional[str] = None
    location:  Optional[str] = None


class ItineraryModel(BaseModel):
    title: str = ""
    start_date: str = Field(..., description="ISO-8601 date YYYY-MM-DD")
    end_date:   str = Field(..., description="ISO-8601 date YYYY-MM-DD")
    locations: list[LocationModel] = Field(default_factory=list)
    hotels:    list[HotelBookingModel] = Field(default_factory=list)
    events:    list[EventModel] = Field(default_factory=list)
    use_length_of_stay: bool = False
    is_multi_city: bool = False


# ── Model → dataclass ─────────────────────────────────────────────────────────

def to_template(m: TemplateModel) -> EventTemplate:
    return EventTemplate(
        title=m.title,
        time=m.time,
        type=m.type,
        description=m.description,
        price=m.price,
        location=m.location,
        restaurant_data=RestaurantData(**m.restaurant_data.model_dump()) if m.restaurant_data else None,
        attraction_data=AttractionData(**m.attraction_data.model_dump()) if m.attraction_data else None,
    )


def to_event(m: EventModel) -> Event:
    t = to_template(m)
    return Event(
        id=m.id,
        date=m.date,
        title=t.title,
        time=t.time,
        type=t.type,
        description=t.description,
        price=t.price,
        location=t.location,
        restaurant_data=t.restaurant_data,
        attraction_data=t.attraction_data,
    )


def to_itinerary(m: ItineraryModel) -> Itinerary:
    return Itinerary(
        title=m.title,
        start_date=m.start_date,
        end_date=m.end_date,
        locations=[Location(**loc.model_dump()) for loc in m.locations],
        hotels=[
            HotelBooking(
                id=b.id,
                hotel=HotelInfo(**b.hotel.model_dump()),
                check_in=b.check_in,
                check_out=b.check_out,
                location=b.location,
            )
            for b in m.hotels
        ],
        events=[to_event(e) for e in m.events],
        use_length_of_stay=m.use_length_of_stay,
        is_multi_city=m.is_multi_city,
    )


# ── Serialisers ────────────────────────────────────────────────────────────────

def ser_event(e: Event) -> dict:
    return {
        "id":          e.id,
        "title":       e.title,
        "time":        e.time,
        "date":        e.date,
        "type":        e.type.value,
        "description": e.description,
        "price":       e.price,
        "location":    e.location,
        "restaurant_data": vars(e.restaurant_data).copy() if e.restaurant_data else None,
        "attraction_data": vars(e.attraction_data).copy() if e.attraction_data else None,
    }


def ser_hotel(b: Optional[HotelBooking]) -> Optional[dict]:
    if b is None:
        return None
    return {
        "id":        b.id,
        "name":      b.hotel.name,
        "address":   b.hotel.address,
        "check_in":  b.check_in.isoformat() if b.check_in else None,
        "check_out": b.check_out.isoformat() if b.check_out else None,
    }


def ser_day(v: DayView) -> dict:
    return {
        "date":    v.key,
        "index":   v.index,
        "label":   v.label,
        "summary": v.summary,
        "city":    v.city,
        "hotel":   ser_hotel(v.hotel),
        "events":  [ser_event(e) for e in v.events],
    }
