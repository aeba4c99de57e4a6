"""modules/: engine components (calendar, resolution, scheduling, notes, validation, observability)."""
