"""
modules/validation/event_validator.py
--------------------------------------
Write-side guards applied before the scheduler creates or changes events.

  Event template:
    ✓ Non-empty title
    ✓ Time is "All day" or a valid 12/24-hour time

  Target dates (multi-day creation):
    ✓ At least one target
    ✓ Each target is a YYYY-MM-DD key or a day-N token
    ✓ day-N tokens need the trip start
    ✓ Inside the trip bounds, when bounds are supplied

  Hotel stay:
    ✓ Both check-in and check-out present
    ✓ check_out > check_in

Usage:
    from itinerary_engine.modules.validation import validate_event_fields

    result = validate_event_fields({"title": "Museum", "time": "10:00 AM"})
    if not result:
        print(result.errors)

Reading is never validated: stored data is displayed as-is.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from itinerary_engine.modules.calendar import day_enumerator
from itinerary_engine.modules.scheduling.time_codec import is_valid_time
from itinerary_engine.schemas.itinerary import DateLike, HotelBooking, as_date

logger = logging.getLogger(__name__)


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of failure reasons.
        record: The input record (for logging purposes).
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    record: dict = field(default_factory=dict, repr=False)

    def __bool__(self) -> bool:
        return self.valid


# ── Event fields ───────────────────────────────────────────────────────────────

def validate_event_fields(record: dict[str, Any]) -> ValidationResult:
    """
    Validate the user-entered body of an event (template or patched event).

    Checks:
      - title: non-empty after trimming
      - time:  non-empty, "All day" or a parseable 12/24-hour value
    """
    errors: list[str] = []

    title = record.get("title")
    if not title or not str(title).strip():
        errors.append("title must not be empty")

    time_value = record.get("time")
    if not time_value or not str(time_value).strip():
        errors.append("time must not be empty")
    elif not is_valid_time(str(time_value)):
        errors.append(f"time={time_value!r} is not 'All day' or a valid 12/24-hour time")

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)


# ── Target dates ───────────────────────────────────────────────────────────────

def resolve_target_dates(
    targets: list[str],
    trip_start: Optional[DateLike] = None,
    trip_end: Optional[DateLike] = None,
) -> tuple[list[date], ValidationResult]:
    """
    Resolve day keys / day-N tokens to dates, de-duplicated in input order.

    Returns the resolved dates (empty when invalid) and the validation outcome.
    """
    errors: list[str] = []
    resolved: list[date] = []
    record = {"targets": list(targets)}

    if not targets:
        errors.append("at least one target date is required")
        return [], ValidationResult(valid=False, errors=errors, record=record)

    try:
        start_d, end_d = as_date(trip_start), as_date(trip_end)
    except ValueError:
        errors.append(f"trip bounds {trip_start!r}..{trip_end!r} are not valid ISO-8601 dates")
        return [], ValidationResult(valid=False, errors=errors, record=record)

    for target in targets:
        if day_enumerator.is_day_token(target) and start_d is None:
            errors.append(f"target={target!r} is a day number but the trip start is unknown")
            continue
        d = day_enumerator.resolve_target(target, start_d)
        if d is None:
            errors.append(f"target={target!r} is not a YYYY-MM-DD date or a day-N token")
            continue
        if start_d is not None and d < start_d:
            errors.append(f"target={target!r} is before the trip start {start_d}")
            continue
        if end_d is not None and d > end_d:
            errors.append(f"target={target!r} is after the trip end {end_d}")
            continue
        if d not in resolved:
            resolved.append(d)

    if errors:
        return [], ValidationResult(valid=False, errors=errors, record=record)
    return resolved, ValidationResult(valid=True, record=record)


# ── Hotel stay ─────────────────────────────────────────────────────────────────

def validate_hotel_stay(booking: HotelBooking) -> ValidationResult:
    """Check-in and check-out both required; check-out strictly after check-in."""
    errors: list[str] = []
    record = {"hotel": booking.hotel.name, "check_in": booking.check_in, "check_out": booking.check_out}

    if booking.check_in is None or booking.check_out is None:
        errors.append("check_in and check_out must both be set")
    elif booking.check_out <= booking.check_in:
        errors.append(
            f"check_out={booking.check_out} must be after check_in={booking.check_in}"
        )

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)


# ── Trip range ─────────────────────────────────────────────────────────────────

def validate_trip_range(start: Optional[DateLike], end: Optional[DateLike]) -> ValidationResult:
    """Trip bounds present, ISO-8601, and start <= end."""
    errors: list[str] = []
    record = {"start_date": start, "end_date": end}
    try:
        start_d, end_d = as_date(start), as_date(end)
    except ValueError:
        errors.append(f"start_date={start!r} or end_date={end!r} is not a valid ISO-8601 date")
        return ValidationResult(valid=False, errors=errors, record=record)

    if start_d is None or end_d is None:
        errors.append("start_date and end_date must both be set")
    elif end_d < start_d:
        errors.append(f"end_date={end_d} is before start_date={start_d}")

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)

