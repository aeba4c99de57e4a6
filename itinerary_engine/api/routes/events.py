"""
api/routes/events.py
--------------------
POST /v1/events/create  : add-event dialog confirmation (single or multi-day)
POST /v1/events/edit    : patch one event
POST /v1/events/move    : re-date one event
POST /v1/events/delete  : remove one event

Each request carries the caller's current event list and gets the new list
back; the host persists it. Validation failures return 422 with
``{"detail": {"errors": [...]}}`` and no change.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from itinerary_engine.api.schemas import (
    EventModel, TemplateModel, ser_event, to_event, to_template,
)
from itinerary_engine.modules.observability.logger import ActionLogger
from itinerary_engine.modules.scheduling.event_scheduler import EventScheduler, ScheduleResult
from itinerary_engine.schemas.itinerary import AttractionData, RestaurantData

router = APIRouter()

_scheduler = EventScheduler()
_audit = ActionLogger()


# ── Request schemas ────────────────────────────────────────────────────────────

class _EventsRequest(BaseModel):
    trip_id: str = Field("anonymous", description="Used only to name the audit file")
    events: list[EventModel] = Field(default_factory=list)


class CreateRequest(_EventsRequest):
    template: TemplateModel
    date: Optional[str] = Field(None, description="Day the dialog was opened on")
    selected_dates: Optional[list[str]] = Field(
        None, description="Multi-day targets: YYYY-MM-DD keys or day-N tokens"
    )
    trip_start: Optional[str] = None
    trip_end:   Optional[str] = None


class EditRequest(_EventsRequest):
    event_id: str
    patch: dict[str, Any]


class MoveRequest(_EventsRequest):
    event_id: str
    new_date: str


class DeleteRequest(_EventsRequest):
    event_id: str


# ── Helpers ────────────────────────────────────────────────────────────────────

def _respond(trip_id: str, action: str, result: ScheduleResult) -> dict:
    if not result:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    _audit.log(trip_id, action, {"affected": [e.id for e in result.affected]})
    return {
        "events":   [ser_event(e) for e in result.events],
        "affected": [ser_event(e) for e in result.affected],
    }


def _coerce_patch(patch: dict[str, Any]) -> dict[str, Any]:
    """Structured payloads arrive as plain dicts; rebuild them as the engine types."""
    coerced = dict(patch)
    try:
        if isinstance(coerced.get("restaurant_data"), dict):
            coerced["restaurant_data"] = RestaurantData(**coerced["restaurant_data"])
        if isinstance(coerced.get("attraction_data"), dict):
            coerced["attraction_data"] = AttractionData(**coerced["attraction_data"])
    except TypeError as exc:
        raise HTTPException(status_code=422, detail={"errors": [f"invalid payload: {exc}"]}) from exc
    return coerced


def _events_of(req: _EventsRequest) -> list:
    try:
        return [to_event(e) for e in req.events]
    except ValueError as exc:
        raise HTTPException(status_code=422, detail={"errors": [str(exc)]}) from exc


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post("/create", summary="Create an event on one day or fan it out over several")
def create(req: CreateRequest) -> dict:
    result = _scheduler.save(
        to_template(req.template),
        _events_of(req),
        selected_dates=req.selected_dates,
        date=req.date,
        trip_start=req.trip_start,
        trip_end=req.trip_end,
    )
    return _respond(req.trip_id, "event_created", result)


@router.post("/edit", summary="Edit a single event")
def edit(req: EditRequest) -> dict:
    result = _scheduler.edit_event(req.event_id, _coerce_patch(req.patch), _events_of(req))
    return _respond(req.trip_id, "event_edited", result)


@router.post("/move", summary="Move an event to another day")
def move(req: MoveRequest) -> dict:
    result = _scheduler.move_event(req.event_id, req.new_date, _events_of(req))
    return _respond(req.trip_id, "event_moved", result)


@router.post("/delete", summary="Delete an event")
def delete(req: DeleteRequest) -> dict:
    result = _scheduler.delete_event(req.event_id, _events_of(req))
    return _respond(req.trip_id, "event_deleted", result)
