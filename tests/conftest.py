"""Shared fixtures: a deterministic scheduler and a three-day sample trip."""

from __future__ import annotations

import itertools

import pytest

from itinerary_engine.modules.scheduling.event_scheduler import EventScheduler
from itinerary_engine.schemas.itinerary import (
    Event, EventType, HotelBooking, HotelInfo, Itinerary, Location,
)


@pytest.fixture
def scheduler() -> EventScheduler:
    counter = itertools.count(1)
    return EventScheduler(id_factory=lambda: f"evt-{next(counter)}")


@pytest.fixture
def sample_events() -> list[Event]:
    return [
        Event(id="a", title="Lunch", time="2:00 PM", date="2024-06-01", type=EventType.RESTAURANT),
        Event(id="b", title="Louvre", time="9:00 AM", date="2024-06-01", type=EventType.MUSEUM),
        Event(id="c", title="Walk", time="All day", date="2024-06-01"),
        Event(id="d", title="Train", time="08:15", date="2024-06-02"),
    ]


@pytest.fixture
def sample_trip(sample_events) -> Itinerary:
    return Itinerary(
        title="Paris & Lyon",
        start_date="2024-06-01",
        end_date="2024-06-03",
        locations=[
            Location("Paris", "2024-06-01", "2024-06-02"),
            Location("Lyon", "2024-06-03", "2024-06-03"),
        ],
        hotels=[
            HotelBooking(HotelInfo("Hotel Paris"), "2024-06-01", "2024-06-03", id="h1"),
            HotelBooking(HotelInfo("Hotel Lyon"), "2024-06-03", "2024-06-04", id="h2"),
        ],
        events=sample_events,
        is_multi_city=True,
    )
