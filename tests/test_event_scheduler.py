"""EventScheduler: day ordering, fan-out creation, edit, move, delete."""

from __future__ import annotations

import pytest

from itinerary_engine.modules.scheduling.event_scheduler import default_time_for, events_for_day
from itinerary_engine.schemas.itinerary import (
    AttractionData, Event, EventTemplate, EventType, RestaurantData,
)


# ── Ordering ──────────────────────────────────────────────────────────────────

def test_day_order_puts_all_day_first(sample_events):
    ordered = events_for_day("2024-06-01", sample_events)
    assert [e.time for e in ordered] == ["All day", "9:00 AM", "2:00 PM"]


def test_equal_times_keep_insertion_order():
    events = [
        Event(id=str(i), title=f"e{i}", time=t, date="2024-06-01")
        for i, t in enumerate(["10:00", "10:00 AM", "9:00", "10:00"])
    ]
    assert [e.id for e in events_for_day("2024-06-01", events)] == ["2", "0", "1", "3"]


def test_day_filter_is_permissive_on_read():
    events = [
        Event(id="x", title="Old", time="whenever", date="2023-01-01"),
        Event(id="y", title="Timed", time="08:00", date="2023-01-01"),
    ]
    assert [e.id for e in events_for_day("2023-01-01", events)] == ["y", "x"]
    assert events_for_day("2024-06-01", events) == []


# ── Create ────────────────────────────────────────────────────────────────────

def test_multi_day_fan_out(scheduler):
    template = EventTemplate(title="Museum", time="10:00 AM", type=EventType.ATTRACTION)
    result = scheduler.create_event(template, ["2024-06-01", "2024-06-02"])
    assert result.ok
    assert [e.date for e in result.events] == ["2024-06-01", "2024-06-02"]
    assert {(e.title, e.time, e.type) for e in result.events} == {
        ("Museum", "10:00 AM", EventType.ATTRACTION)
    }
    assert len({e.id for e in result.events}) == 2


def test_default_ids_are_unique():
    from itinerary_engine.modules.scheduling.event_scheduler import EventScheduler
    template = EventTemplate(title="Walk", time="All day")
    result = EventScheduler().create_event(template, ["2024-06-01", "2024-06-02", "2024-06-03"])
    assert len({e.id for e in result.events}) == 3


def test_empty_target_set_creates_nothing(scheduler):
    template = EventTemplate(title="Museum", time="10:00 AM")
    result = scheduler.create_event(template, [])
    assert not result
    assert result.events == []
    assert "at least one target date is required" in result.errors


@pytest.mark.parametrize("title, time, expected", [
    ("", "10:00", "title must not be empty"),
    ("   ", "10:00", "title must not be empty"),
    ("Museum", "", "time must not be empty"),
    ("Museum", "lunchtime", "is not 'All day' or a valid 12/24-hour time"),
])
def test_invalid_template_is_rejected(scheduler, title, time, expected):
    result = scheduler.create_event(EventTemplate(title=title, time=time), ["2024-06-01"])
    assert not result
    assert result.events == []
    assert any(expected in err for err in result.errors)


def test_day_tokens_and_duplicates(scheduler):
    template = EventTemplate(title="Breakfast", time="8:00 AM")
    result = scheduler.create_event(
        template, ["day-1", "2024-06-01", "day-3"], trip_start="2024-06-01", trip_end="2024-06-03",
    )
    assert [e.date for e in result.events] == ["2024-06-01", "2024-06-03"]


def test_day_token_without_trip_start_is_rejected(scheduler):
    result = scheduler.create_event(EventTemplate(title="Breakfast", time="8:00 AM"), ["day-2"])
    assert not result
    assert "trip start is unknown" in result.errors[0]


def test_targets_outside_trip_create_nothing(scheduler):
    template = EventTemplate(title="Museum", time="10:00")
    result = scheduler.create_event(
        template, ["2024-06-02", "2024-06-09"], trip_start="2024-06-01", trip_end="2024-06-03",
    )
    assert not result
    assert result.events == []
    assert "after the trip end" in result.errors[0]


def test_malformed_target_is_rejected(scheduler):
    result = scheduler.create_event(EventTemplate(title="Museum", time="10:00"), ["06/01/2024"])
    assert not result
    assert "not a YYYY-MM-DD date" in result.errors[0]


def test_template_is_normalised_per_type(scheduler):
    restaurant = RestaurantData(name="Chez Nous", address="1 Rue")
    attraction = AttractionData(name="Louvre")
    template = EventTemplate(
        title="  Dinner ",
        time=" 7:30 PM ",
        type="restaurant",
        description="   ",
        location="ignored for restaurants",
        restaurant_data=restaurant,
        attraction_data=attraction,
    )
    event = scheduler.create_event(template, ["2024-06-01"]).events[0]
    assert event.title == "Dinner"
    assert event.time == "7:30 PM"
    assert event.description is None
    assert event.location is None
    assert event.restaurant_data == restaurant
    assert event.attraction_data is None

    other = scheduler.create_event(
        EventTemplate(title="Market", time="All day", location=" Old Town ", attraction_data=attraction),
        ["2024-06-01"],
    ).events[0]
    assert other.location == "Old Town"
    assert other.attraction_data is None


def test_save_single_day_and_multi_day(scheduler, sample_events):
    template = EventTemplate(title="Boat", time="16:00")
    single = scheduler.save(template, sample_events, date="2024-06-02")
    assert single.ok
    assert single.events[:-1] == sample_events
    assert single.events[-1].date == "2024-06-02"

    multi = scheduler.save(template, sample_events, selected_dates=["2024-06-01", "2024-06-03"])
    assert [e.date for e in multi.affected] == ["2024-06-01", "2024-06-03"]
    assert len(multi.events) == len(sample_events) + 2


def test_save_with_empty_selection_changes_nothing(scheduler, sample_events):
    result = scheduler.save(
        EventTemplate(title="Boat", time="16:00"), sample_events, selected_dates=[], date="2024-06-02",
    )
    assert not result
    assert result.events == sample_events
    assert result.events is not sample_events


def test_hotel_default_time():
    assert default_time_for(EventType.HOTEL) == "15:00"
    assert default_time_for("museum") == ""


# ── Edit ──────────────────────────────────────────────────────────────────────

def test_edit_touches_exactly_one_event(scheduler):
    created = scheduler.create_event(
        EventTemplate(title="Museum", time="10:00 AM", type="museum"), ["2024-06-01", "2024-06-02"],
    ).events
    result = scheduler.edit_event(created[0].id, {"title": "Orsay", "time": "11:00 AM"}, created)
    assert result.ok
    assert result.event.title == "Orsay"
    assert result.events[0].date == "2024-06-01"
    assert result.events[1] == created[1]
    assert created[0].title == "Museum"


@pytest.mark.parametrize("patch, expected", [
    ({"title": ""}, "title must not be empty"),
    ({"time": "25:00"}, "valid 12/24-hour time"),
    ({"date": "2024-06-03"}, "cannot be edited"),
    ({"id": "other"}, "cannot be edited"),
    ({"type": "spaceship"}, "invalid value"),
])
def test_invalid_edits_leave_events_untouched(scheduler, sample_events, patch, expected):
    result = scheduler.edit_event("a", patch, sample_events)
    assert not result
    assert result.events == sample_events
    assert any(expected in err for err in result.errors)


def test_edit_unknown_id(scheduler, sample_events):
    result = scheduler.edit_event("nope", {"title": "X"}, sample_events)
    assert not result
    assert "no event with id" in result.errors[0]


def test_edit_type_change_drops_foreign_payload(scheduler):
    event = Event(
        id="r", title="Dinner", time="19:00", date="2024-06-01",
        type=EventType.RESTAURANT, restaurant_data=RestaurantData(name="Chez Nous"),
    )
    result = scheduler.edit_event("r", {"type": "other"}, [event])
    assert result.event.type is EventType.OTHER
    assert result.event.restaurant_data is None


# ── Move ──────────────────────────────────────────────────────────────────────

def test_move_changes_only_the_target(scheduler, sample_events):
    result = scheduler.move_event("b", "2024-06-03", sample_events)
    assert result.ok
    assert result.event.date == "2024-06-03"
    assert [e.date for e in result.events] == ["2024-06-01", "2024-06-03", "2024-06-01", "2024-06-02"]
    assert sample_events[1].date == "2024-06-01"


@pytest.mark.parametrize("event_id, new_date, expected", [
    ("b", "2024-06-01", "already on"),
    ("nope", "2024-06-02", "no event with id"),
    ("b", "June 3", "not a YYYY-MM-DD date"),
])
def test_invalid_moves_are_reported(scheduler, sample_events, event_id, new_date, expected):
    result = scheduler.move_event(event_id, new_date, sample_events)
    assert not result
    assert result.events == sample_events
    assert expected in result.errors[0]


# ── Delete / prune ────────────────────────────────────────────────────────────

def test_delete(scheduler, sample_events):
    result = scheduler.delete_event("c", sample_events)
    assert [e.id for e in result.events] == ["a", "b", "d"]
    assert result.event.id == "c"
    assert len(sample_events) == 4

    missing = scheduler.delete_event("zzz", sample_events)
    assert not missing
    assert missing.events == sample_events


def test_prune_to_new_range(scheduler, sample_events):
    result = scheduler.prune_to_range(sample_events, "2024-06-02", "2024-06-05")
    assert [e.id for e in result.events] == ["d"]
    assert [e.id for e in result.affected] == ["a", "b", "c"]
    assert not scheduler.prune_to_range(sample_events, "2024-06-05", "2024-06-02")


def test_prune_with_malformed_bounds_is_reported(scheduler, sample_events):
    result = scheduler.prune_to_range(sample_events, "2024-06-xx", "2024-06-03")
    assert not result
    assert result.events == sample_events
    assert "not valid ISO-8601 dates" in result.errors[0]


def test_day_filter_with_a_non_date_matches_nothing(sample_events):
    assert events_for_day("not-a-day", sample_events) == []
