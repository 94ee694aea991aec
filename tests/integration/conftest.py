# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixtures for API integration tests."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from discoverme.api import create_app
from discoverme.api.dependencies import get_session_store
from discoverme.api.middleware import limiter
from discoverme.domains.tracking import SessionRecord
from discoverme.infrastructure.storage import (
    JSONSessionStore,
    SessionStore,
    SessionStoreReadError,
    SessionStoreWriteError,
)


class FailingStore(SessionStore):
    """Store whose every operation fails."""

    async def append(self, session: SessionRecord) -> None:
        raise SessionStoreWriteError("Failed to write session log", {"error": "disk full"})

    async def read_all(self) -> list[SessionRecord]:
        raise SessionStoreReadError("Session log is not valid JSON")


@pytest.fixture(autouse=True)
def reset_rate_limits() -> Generator[None, None, None]:
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def app(store: JSONSessionStore) -> Generator[FastAPI, None, None]:
    """Create the application wired to a temporary session log."""
    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def failing_client(app: FastAPI) -> TestClient:
    """Create a test client whose session store always fails."""
    app.dependency_overrides[get_session_store] = FailingStore
    return TestClient(app)


@pytest.fixture
def session_payload() -> dict:
    """A session as submitted by the browser client."""
    return {
        "sessionId": "session_1736154000000_k3j9x0a1b",
        "moduleId": "art-pad",
        "startTimestamp": "2025-01-06T09:00:00.000Z",
        "endTimestamp": "2025-01-06T09:05:00.000Z",
        "duration": 300,
        "interactions": 42,
        "tags": ["completed"],
        "metadata": {
            "events": [
                {
                    "type": "click",
                    "timestamp": "2025-01-06T09:01:00.000Z",
                    "element": "canvas",
                    "data": {"tool": "brush"},
                },
            ],
            "eventCount": 1,
        },
    }
