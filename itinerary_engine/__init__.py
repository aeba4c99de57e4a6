"""
itinerary_engine
----------------
Trip day-resolution and event-scheduling engine.

Pure functions over trip snapshots: which city and hotel are active on a day,
how a day's events are ordered, and how events are created, edited, moved and
deleted. The optional FastAPI adapter lives in ``itinerary_engine.api``.
"""

__version__ = "1.0.0"
