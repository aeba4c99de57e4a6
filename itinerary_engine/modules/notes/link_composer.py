"""
modules/notes/link_composer.py
-------------------------------
Stores reference links inside an event's free-text description.

Stored layout (one string):

    <note, possibly several lines>
    https://first.example/link
    https://second.example/link

Any line that is an absolute http(s) URL on its own is a link; everything
else belongs to the note. Links are only appended after passing
``is_valid_link``, and bare domains are stored with an ``https://`` prefix
so they decode back as links.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from urllib.parse import urlparse

from itinerary_engine.modules.validation import ValidationResult

logger = logging.getLogger(__name__)

_URL_LINE_RE = re.compile(r"^https?://\S+$", re.IGNORECASE)
_DOMAIN_RE = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,}(?:[/?#]\S*)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DecodedNote:
    note: str = ""
    links: list[str] = field(default_factory=list)


def encode(note: str, links: list[str]) -> str:
    """Join the trimmed note and each trimmed link with newlines, skipping empties."""
    parts = [(note or "").strip()] + [(link or "").strip() for link in links]
    return "\n".join(p for p in parts if p)


def decode(stored: str) -> DecodedNote:
    """Split a stored description back into (note, links)."""
    note_lines: list[str] = []
    links: list[str] = []
    for line in (stored or "").splitlines():
        if _URL_LINE_RE.match(line.strip()):
            links.append(line.strip())
        else:
            note_lines.append(line)
    return DecodedNote(note="\n".join(note_lines).strip(), links=links)


def is_valid_link(candidate: str) -> bool:
    """Absolute http(s) URL with a host, or a conservative bare domain."""
    value = (candidate or "").strip()
    if not value or any(c.isspace() for c in value):
        return False
    if value.lower().startswith(("http://", "https://")):
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.hostname)
    return _DOMAIN_RE.match(value) is not None


def normalize_link(candidate: str) -> str:
    """Prefix bare domains with ``https://``; absolute URLs are returned trimmed."""
    value = candidate.strip()
    if value.lower().startswith(("http://", "https://")):
        return value
    return f"https://{value}"


def append_link(links: list[str], candidate: str) -> tuple[list[str], ValidationResult]:
    """
    Gate a user-entered link before it reaches ``encode``.

    Returns the new link list (input untouched) and the validation outcome.
    Duplicates are rejected so the stored list stays order-stable.
    """
    errors: list[str] = []
    if not is_valid_link(candidate):
        errors.append(f"link={candidate!r} is not a valid URL or domain")
    else:
        link = normalize_link(candidate)
        if link in links:
            errors.append(f"link={link!r} is already attached")
        else:
            return [*links, link], ValidationResult(valid=True, record={"link": link})

    logger.debug("Rejected link %r: %s", candidate, "; ".join(errors))
    return list(links), ValidationResult(valid=False, errors=errors, record={"link": candidate})
