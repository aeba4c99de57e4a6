"""
api/routes/itinerary.py
------------------------
POST /v1/itinerary/calendar

Resolves a trip snapshot into one entry per day: label, active city,
active hotel and the day's ordered events. Nothing is stored.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from itinerary_engine.api.schemas import ItineraryModel, ser_day, to_itinerary
from itinerary_engine.modules.resolution import build_calendar
from itinerary_engine.modules.validation import validate_trip_range

router = APIRouter()


@router.post("/calendar", summary="Resolve every trip day to city, hotel and events")
def calendar(req: ItineraryModel) -> dict:
    check = validate_trip_range(req.start_date, req.end_date)
    if not check:
        raise HTTPException(status_code=422, detail={"errors": check.errors})

    try:
        itinerary = to_itinerary(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail={"errors": [f"Invalid date format: {exc}"]}) from exc

    days = build_calendar(itinerary)
    return {
        "title": itinerary.title,
        "trip_length": len(days),
        "days": [ser_day(d) for d in days],
    }
