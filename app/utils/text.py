"""Text and timestamp helpers.

- ``count_words(content)``: whitespace token count of trimmed text.
- ``utc_now_iso()``: current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

_WHITESPACE = re.compile(r"\s+")


def count_words(content: str) -> int:
    """Count whitespace-delimited tokens after trimming.

    Splitting an empty string still yields one (empty) token, so
    whitespace-only content counts as 1.
    """
    return len(_WHITESPACE.split(content.strip()))


def utc_now_iso() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
