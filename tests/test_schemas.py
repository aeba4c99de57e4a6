"""Snapshot types: date coercion and place-search payloads."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from itinerary_engine.schemas.itinerary import (
    AttractionData, EventTemplate, EventType, HotelBooking, HotelInfo,
    PlaceSuggestion, RestaurantData, as_date,
)


def test_as_date_accepts_the_usual_shapes():
    assert as_date("2024-06-01") == date(2024, 6, 1)
    assert as_date(" 2024-06-01T10:00:00 ") == date(2024, 6, 1)
    assert as_date(datetime(2024, 6, 1, 10, 30)) == date(2024, 6, 1)
    assert as_date(None) is None
    assert as_date("") is None
    with pytest.raises(ValueError):
        as_date("June 1st")


def test_booking_dates_are_coerced():
    booking = HotelBooking(HotelInfo("Ritz"), "2024-06-01", "2024-06-03")
    assert booking.check_in == date(2024, 6, 1)
    assert booking.is_ranged and not booking.is_undated


@pytest.mark.parametrize("payload, expected", [
    ({"name": "Louvre", "formatted_address": "Rue de Rivoli, Paris"}, "Rue de Rivoli, Paris"),
    ({"name": "Louvre", "formattedAddress": "Rue de Rivoli"}, "Rue de Rivoli"),
    ({"name": "Louvre", "vicinity": "1er arr."}, "1er arr."),
    ({"name": "Louvre"}, ""),
])
def test_provider_address_spellings(payload, expected):
    assert PlaceSuggestion.from_provider(payload).formatted_address == expected


def test_suggestion_label_and_payloads():
    place = PlaceSuggestion.from_provider({"name": " Chez Nous ", "address": "1 Rue"})
    assert place.label == "Chez Nous, 1 Rue"
    assert PlaceSuggestion("Paris", "Paris").label == "Paris"

    restaurant = RestaurantData.from_suggestion(place, phone="+33 1")
    assert (restaurant.name, restaurant.address, restaurant.phone) == ("Chez Nous", "1 Rue", "+33 1")
    assert AttractionData.from_suggestion(place, category="museum").category == "museum"


def test_template_type_accepts_strings():
    assert EventTemplate(title="x", time="10:00", type="museum").type is EventType.MUSEUM
    assert EventType.PARK.is_attraction_like
    assert not EventType.RESTAURANT.is_attraction_like
    with pytest.raises(ValueError):
        EventTemplate(title="x", time="10:00", type="spaceship")


@pytest.mark.parametrize("text", ["2024-06-011", "2024-06-01x", "2024-06-01/02"])
def test_as_date_rejects_trailing_garbage(text):
    with pytest.raises(ValueError):
        as_date(text)


def test_as_date_drops_time_of_day():
    assert as_date("2024-06-01T23:59:00Z") == date(2024, 6, 1)
    assert as_date("2024-06-01 10:30") == date(2024, 6, 1)
