"""Timestamp formatting shared by records and the JSON presenter."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Format as ``YYYY-MM-DDThh:mm:ss.sssZ`` in UTC with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"
