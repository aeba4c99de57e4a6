"""
modules/scheduling/event_scheduler.py
--------------------------------------
Orders a day's events and applies user actions to an event collection.

Every operation takes an immutable snapshot (a list of frozen Events) and
returns a ScheduleResult holding a brand-new list. On a validation error the
result carries the errors and an unchanged copy of the input; nothing is
ever partially applied.

Lifecycle:
    scheduler = EventScheduler()

    result = scheduler.create_event(template, ["2024-06-01", "2024-06-02"])
    if not result:
        show(result.errors)

    events = scheduler.save(template, events, selected_dates=["day-2"],
                            trip_start=start, trip_end=end).events
    events = scheduler.move_event(event_id, "2024-06-03", events).events
    ordered = events_for_day("2024-06-03", events)
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Optional

from itinerary_engine import config
from itinerary_engine.modules.calendar import day_enumerator
from itinerary_engine.modules.scheduling.time_codec import to_sort_key
from itinerary_engine.modules.validation import (
    resolve_target_dates,
    validate_event_fields,
)
from itinerary_engine.schemas.itinerary import (
    DateLike, Event, EventTemplate, EventType, as_date,
)

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(EventTemplate))


# ─────────────────────────────────────────────────────────────────────────────
# Result
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ScheduleResult:
    """
    Output of every scheduler operation.

    events:   the resulting collection (new list; the input copy on error)
    errors:   validation failures, empty on success
    affected: events created / edited / moved / removed by the operation
    """
    events: list[Event] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    affected: list[Event] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def event(self) -> Optional[Event]:
        """The single affected event for edit / move / delete."""
        return self.affected[0] if len(self.affected) == 1 else None

    def __bool__(self) -> bool:
        return self.ok


def _rejected(events: list[Event], errors: list[str], action: str) -> ScheduleResult:
    logger.info("%s rejected: %s", action, "; ".join(errors))
    return ScheduleResult(events=list(events), errors=errors)


# ─────────────────────────────────────────────────────────────────────────────
# Read side
# ─────────────────────────────────────────────────────────────────────────────

def events_for_day(day: DateLike, events: list[Event]) -> list[Event]:
    """
    Events dated ``day``, ordered by time: "All day" first, then wall-clock
    order. ``sorted`` is stable, so equal times keep insertion order. A day
    that is not a date matches nothing.
    """
    try:
        key = day_enumerator.day_key(day)
    except ValueError:
        logger.debug("events_for_day: %r is not a date", day)
        return []
    return sorted((e for e in events if e.date == key), key=lambda e: to_sort_key(e.time))


def default_time_for(event_type: EventType | str) -> str:
    """Pre-filled time when the user picks a type; hotels default to check-in."""
    if EventType(event_type) is EventType.HOTEL:
        return config.DEFAULT_HOTEL_CHECKIN_TIME
    return ""


def _normalised_fields(template: EventTemplate) -> dict[str, Any]:
    """
    Event body as stored: text trimmed, empty optionals dropped, and each
    structured payload kept only for the types that use it.
    """
    kind = template.type
    return {
        "title":           str(template.title).strip(),
        "time":            str(template.time).strip(),
        "type":            kind,
        "description":     (template.description or "").strip() or None,
        "price":           (str(template.price).strip() or None) if template.price is not None else None,
        "location":        ((template.location or "").strip() or None) if kind is EventType.OTHER else None,
        "restaurant_data": template.restaurant_data if kind is EventType.RESTAURANT else None,
        "attraction_data": template.attraction_data if kind.is_attraction_like else None,
    }


def _template_of(event: Event) -> EventTemplate:
    return EventTemplate(**{name: getattr(event, name) for name in _EDITABLE_FIELDS})


def _find(events: list[Event], event_id: str) -> int:
    for i, e in enumerate(events):
        if e.id == event_id:
            return i
    return -1


# ─────────────────────────────────────────────────────────────────────────────
# EventScheduler
# ─────────────────────────────────────────────────────────────────────────────

class EventScheduler:
    """
    Applies create / edit / move / delete actions to event snapshots.

    ``id_factory`` supplies fresh unique ids (uuid4 strings by default);
    tests inject a deterministic one.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._new_id: Callable[[], str] = id_factory or (lambda: str(uuid.uuid4()))

    events_for_day = staticmethod(events_for_day)

    # ── create ────────────────────────────────────────────────────────────

    def create_event(
        self,
        template: EventTemplate,
        target_dates: list[str],
        trip_start: Optional[DateLike] = None,
        trip_end: Optional[DateLike] = None,
    ) -> ScheduleResult:
        """
        Fan a template out to one Event per target date.

        Targets are YYYY-MM-DD keys or day-N tokens (resolved against
        ``trip_start``). When trip bounds are given, targets outside them are
        rejected. ``result.events`` holds only the new events.
        """
        errors = validate_event_fields({"title": template.title, "time": template.time}).errors
        dates, target_check = resolve_target_dates(target_dates, trip_start, trip_end)
        errors = errors + target_check.errors
        if errors:
            return _rejected([], errors, "create_event")

        body = _normalised_fields(template)
        created = [
            Event(id=self._new_id(), date=day_enumerator.day_key(d), **body)
            for d in dates
        ]
        logger.debug(
            "Created %d event(s) %r on %s",
            len(created), body["title"], ", ".join(e.date for e in created),
        )
        return ScheduleResult(events=created, affected=list(created))

    def save(
        self,
        template: EventTemplate,
        events: list[Event],
        selected_dates: Optional[list[str]] = None,
        date: Optional[str] = None,
        trip_start: Optional[DateLike] = None,
        trip_end: Optional[DateLike] = None,
    ) -> ScheduleResult:
        """
        One user confirmation of the add-event dialog.

        ``selected_dates`` is only passed for multi-day creation and must then
        be non-empty; otherwise the single ``date`` the dialog was opened on
        is used. New events are appended to ``events``.
        """
        if selected_dates is None:
            targets = [date] if date else []
        else:
            targets = list(selected_dates)

        result = self.create_event(template, targets, trip_start, trip_end)
        if not result:
            return ScheduleResult(events=list(events), errors=result.errors)
        return ScheduleResult(events=[*events, *result.events], affected=result.affected)

    # ── edit ──────────────────────────────────────────────────────────────

    def edit_event(
        self,
        existing_id: str,
        patch: dict[str, Any],
        events: list[Event],
    ) -> ScheduleResult:
        """
        Patch exactly one event. Never fans out, even for an event that was
        created across several dates. ``id`` and ``date`` are not patchable;
        use move_event to change the day.
        """
        index = _find(events, existing_id)
        if index < 0:
            return _rejected(events, [f"no event with id={existing_id!r}"], "edit_event")

        unknown = sorted(set(patch) - _EDITABLE_FIELDS)
        if unknown:
            return _rejected(
                events, [f"field(s) {', '.join(unknown)} cannot be edited"], "edit_event"
            )

        current = events[index]
        try:
            template = replace(_template_of(current), **patch)
        except ValueError as exc:
            return _rejected(events, [f"invalid value: {exc}"], "edit_event")

        check = validate_event_fields({"title": template.title, "time": template.time})
        if not check:
            return _rejected(events, check.errors, "edit_event")

        updated = Event(id=current.id, date=current.date, **_normalised_fields(template))
        new_events = list(events)
        new_events[index] = updated
        return ScheduleResult(events=new_events, affected=[updated])

    # ── move ──────────────────────────────────────────────────────────────

    def move_event(self, event_id: str, new_date: str, events: list[Event]) -> ScheduleResult:
        """Re-date one event; every other event is left as is."""
        index = _find(events, event_id)
        if index < 0:
            return _rejected(events, [f"no event with id={event_id!r}"], "move_event")

        target = day_enumerator.parse_day_key(new_date)
        if target is None:
            return _rejected(events, [f"new_date={new_date!r} is not a YYYY-MM-DD date"], "move_event")

        current = events[index]
        key = day_enumerator.day_key(target)
        if key == current.date:
            return _rejected(events, [f"event {event_id!r} is already on {key}"], "move_event")

        moved = replace(current, date=key)
        new_events = list(events)
        new_events[index] = moved
        logger.debug("Moved event %r from %s to %s", event_id, current.date, key)
        return ScheduleResult(events=new_events, affected=[moved])

    # ── delete ────────────────────────────────────────────────────────────

    def delete_event(self, event_id: str, events: list[Event]) -> ScheduleResult:
        index = _find(events, event_id)
        if index < 0:
            return _rejected(events, [f"no event with id={event_id!r}"], "delete_event")
        removed = events[index]
        return ScheduleResult(
            events=[e for e in events if e.id != event_id],
            affected=[removed],
        )

    # ── trip range changes ────────────────────────────────────────────────

    def prune_to_range(
        self,
        events: list[Event],
        start: DateLike,
        end: DateLike,
    ) -> ScheduleResult:
        """
        Drop events dated outside a new [start, end] trip range; used when the
        trip bounds are edited. ``affected`` lists the dropped events.
        """
        try:
            start_d, end_d = as_date(start), as_date(end)
        except ValueError:
            return _rejected(
                events, [f"trip range {start!r}..{end!r} is not valid ISO-8601 dates"], "prune_to_range",
            )
        if start_d is None or end_d is None or start_d > end_d:
            return _rejected(events, [f"invalid trip range {start!r}..{end!r}"], "prune_to_range")

        low, high = start_d.isoformat(), end_d.isoformat()
        kept = [e for e in events if low <= e.date <= high]
        dropped = [e for e in events if not low <= e.date <= high]
        if dropped:
            logger.info("Dropped %d event(s) outside %s..%s", len(dropped), low, high)
        return ScheduleResult(events=kept, affected=dropped)


__all__ = [
    "EventScheduler",
    "ScheduleResult",
    "default_time_for",
    "events_for_day",
]
