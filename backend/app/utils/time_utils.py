"""Timestamp helpers."""

import time
from datetime import datetime, timezone


def get_timestamp_ms() -> int:
    """Current Unix timestamp in milliseconds."""
    return int(time.time() * 1000)


def get_rfc3339_now() -> str:
    """Current UTC time in the RFC 3339 form Drive uses for createdTime."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
