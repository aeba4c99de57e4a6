"""
config.py
---------
Central configuration for the itinerary engine.
Every knob is read from environment variables; nothing is hard-coded per deployment.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the package directory (if it exists) so values in that file
# are picked up by os.getenv() below.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=True)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Append-only JSONL trail of applied event actions (one file per trip id).
# Off by default: the engine itself never writes anything.
ACTION_LOG_ENABLED: bool = _flag("ACTION_LOG_ENABLED", "false")
ACTION_LOG_DIR: str      = os.getenv("ACTION_LOG_DIR", "logs")

# ── Time picker ──────────────────────────────────────────────────────────────
# Initial hour format when the picker opens on an empty time.
DEFAULT_TIME_FORMAT_24H: bool = _flag("DEFAULT_TIME_FORMAT_24H", "false")

# ── Events ───────────────────────────────────────────────────────────────────
# Standard check-in time pre-filled for hotel events.
DEFAULT_HOTEL_CHECKIN_TIME: str = os.getenv("DEFAULT_HOTEL_CHECKIN_TIME", "15:00")

# Sentinel stored in Event.time for untimed events.
ALL_DAY_LABEL: str = "All day"

# ── HTTP adapter ─────────────────────────────────────────────────────────────
API_CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("API_CORS_ORIGINS", "*").split(",") if o.strip()
]
