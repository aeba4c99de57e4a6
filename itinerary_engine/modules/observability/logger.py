"""
modules/observability/logger.py
-------------------------------
Audit trail of applied event actions, one JSONL file per trip.

Usage:
    from itinerary_engine.modules.observability.logger import ActionLogger

    audit = ActionLogger()
    audit.log("trip_123", "event_moved", {"affected": ["e1"]})
    audit.entries("trip_123")   # -> [{"timestamp": ..., "action": "event_moved", ...}]

Records go to  <ACTION_LOG_DIR>/<trip_id>.jsonl  and only when
ACTION_LOG_ENABLED is set; otherwise ``log`` is a no-op. Trip ids come from
API callers, so each append opens and closes its file.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from datetime import datetime, timezone
from pathlib import Path

from itinerary_engine import config

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class ActionLogger:
    """Appends one record per applied create/edit/move/delete action."""

    def __init__(self, logs_dir: Path | str | None = None, enabled: bool | None = None) -> None:
        self.logs_dir = Path(logs_dir) if logs_dir else Path(config.ACTION_LOG_DIR)
        self.enabled = config.ACTION_LOG_ENABLED if enabled is None else enabled
        self._lock = threading.Lock()

    def path_for(self, trip_id: str) -> Path:
        return self.logs_dir / f"{_UNSAFE_CHARS.sub('_', trip_id) or 'trip'}.jsonl"

    def log(self, trip_id: str, action: str, payload: dict) -> None:
        if not self.enabled:
            return
        line = json.dumps(
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "trip_id": trip_id,
                "action": action,
                "payload": payload,
            },
            default=str,
            ensure_ascii=False,
        )
        with self._lock:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path_for(trip_id), "a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        logger.debug("Audited %s for trip %r", action, trip_id)

    def entries(self, trip_id: str) -> list[dict]:
        """Records written for ``trip_id``, oldest first; [] when none."""
        path = self.path_for(trip_id)
        if not path.exists():
            return []
        with open(path, encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]
