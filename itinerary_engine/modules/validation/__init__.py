"""
modules/validation package: write-side guards before any event is created or changed.
"""
from itinerary_engine.modules.validation.event_validator import (
    ValidationResult,
    resolve_target_dates,
    validate_event_fields,
    validate_hotel_stay,
    validate_trip_range,
)

__all__ = [
    "ValidationResult",
    "resolve_target_dates",
    "validate_event_fields",
    "validate_hotel_stay",
    "validate_trip_range",
]
