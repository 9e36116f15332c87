"""Run naming — filesystem-safe run timestamps and artifact filenames."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_UNSAFE_TIMESTAMP_CHARS = re.compile(r"[:.]")

REPORT_PREFIX = "comparison-report"
MANIFEST_PREFIX = "comparison-manifest"


def run_timestamp(now: datetime | None = None) -> str:
    """Return a filesystem-safe timestamp like ``2026-10-19T14-05-33``.

    Derived from the UTC ISO-8601 form with colons and periods replaced,
    truncated to second resolution.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    iso = now.isoformat(timespec="milliseconds")
    return _UNSAFE_TIMESTAMP_CHARS.sub("-", iso)[:19]


def artifact_filename(
    role: str, viewport_class: str, extent: str, timestamp: str, ext: str = "png",
) -> str:
    """Build ``{role}-{viewport_class}-{extent}-{timestamp}.{ext}``."""
    return f"{role}-{viewport_class}-{extent}-{timestamp}.{ext}"


def report_filename(timestamp: str) -> str:
    return f"{REPORT_PREFIX}-{timestamp}.md"


def manifest_filename(timestamp: str) -> str:
    return f"{MANIFEST_PREFIX}-{timestamp}.json"
