"""
modules/resolution: active city segment and hotel stay per trip day.
"""
from itinerary_engine.modules.resolution.segment_resolver import (
    DayView,
    build_calendar,
    resolve_city,
    resolve_day,
    resolve_hotel,
    stay_nights,
)

__all__ = [
    "DayView",
    "build_calendar",
    "resolve_city",
    "resolve_day",
    "resolve_hotel",
    "stay_nights",
]
