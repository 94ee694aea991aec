# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for DiscoverMe.

All timestamps handled by the service are timezone-aware UTC datetimes.
Session models normalize every timestamp through ensure_utc(); pydantic
handles the ISO 8601 text on the wire and on disk.

Usage:
------
    from discoverme.utils.datetime import utc_now

    started_at = utc_now()
    duration = elapsed_seconds(started_at, utc_now())
"""

import math
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo
        datetime.timezone.utc
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware and in UTC.

    Naive datetimes are assumed to already be UTC.

    Args:
        dt: Datetime to normalize.

    Returns:
        Timezone-aware UTC datetime or None.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def elapsed_seconds(start: datetime, end: datetime) -> int:
    """Whole seconds between two instants, floored and never negative.

    Args:
        start: Start instant.
        end: End instant.

    Returns:
        Non-negative integer number of seconds.
    """
    delta = (ensure_utc(end) - ensure_utc(start)).total_seconds()
    return max(0, math.floor(delta))


def seconds_to_human(seconds: int) -> str:
    """Convert seconds to the caregiver dashboard's duration format.

    Args:
        seconds: Duration in seconds.

    Returns:
        "2h 30m" when at least an hour, otherwise "45m".
    """
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
