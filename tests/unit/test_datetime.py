# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for datetime utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from discoverme.utils.datetime import (
    elapsed_seconds,
    ensure_utc,
    seconds_to_human,
    utc_now,
)


def test_utc_now_is_aware() -> None:
    """Test utc_now returns an aware UTC datetime."""
    assert utc_now().tzinfo == timezone.utc


def test_ensure_utc_converts_offsets() -> None:
    """Test offset datetimes are converted to UTC."""
    dt = datetime(2025, 1, 6, 11, 0, tzinfo=timezone(timedelta(hours=2)))

    assert ensure_utc(dt) == datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)
    assert ensure_utc(datetime(2025, 1, 6, 9, 0)).tzinfo == timezone.utc
    assert ensure_utc(None) is None


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.999, 0), (1.0, 1), (59.9, 59), (-5.0, 0)],
)
def test_elapsed_seconds_floors(seconds: float, expected: int) -> None:
    """Test elapsed time is floored and clamped at zero."""
    start = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)

    assert elapsed_seconds(start, start + timedelta(seconds=seconds)) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0m"), (59, "0m"), (2700, "45m"), (3600, "1h 0m"), (9000, "2h 30m")],
)
def test_seconds_to_human(seconds: int, expected: str) -> None:
    """Test the dashboard duration format."""
    assert seconds_to_human(seconds) == expected
