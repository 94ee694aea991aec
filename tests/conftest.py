# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from itertools import count
from pathlib import Path

import pytest

from discoverme.core.config import clear_settings_cache
from discoverme.domains.tracking import SessionRecord
from discoverme.infrastructure.storage import JSONSessionStore


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Make sure every test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Session Fixtures
# =============================================================================


BASE_TIME = datetime(2025, 1, 6, 9, 0, 0, tzinfo=timezone.utc)

SessionFactory = Callable[..., SessionRecord]


@pytest.fixture
def make_session() -> SessionFactory:
    """Factory for session records.

    Each call starts one hour after the previous one unless a start time
    is given, so creation order is also chronological order.
    """
    counter = count()

    def _make(
        module_id: str = "art-pad",
        duration: int = 120,
        interactions: int = 15,
        start: datetime | None = None,
        tags: tuple[str, ...] = (),
        session_id: str | None = None,
    ) -> SessionRecord:
        index = next(counter)
        started = start or BASE_TIME + timedelta(hours=index)
        return SessionRecord(
            session_id=session_id or f"session_{index}",
            module_id=module_id,
            start_timestamp=started,
            end_timestamp=started + timedelta(seconds=duration),
            duration=duration,
            interactions=interactions,
            tags=tags,
        )

    return _make


@pytest.fixture
def sessions_path(tmp_path: Path) -> Path:
    """Location of a fresh session log."""
    return tmp_path / "data" / "sessions.json"


@pytest.fixture
def store(sessions_path: Path) -> JSONSessionStore:
    """JSON session store backed by a temporary file."""
    return JSONSessionStore(sessions_path)
