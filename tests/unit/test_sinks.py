# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for session persistence sinks."""

import json

import httpx
import pytest

from discoverme.core.config import Settings
from discoverme.domains.tracking import HttpSessionSink, StoreSink, TrackingSession
from discoverme.infrastructure.storage import JSONSessionStore


class TestStoreSink:
    """Tests for StoreSink."""

    @pytest.mark.asyncio
    async def test_appends_to_store(self, store: JSONSessionStore, make_session) -> None:
        """Test the record lands in the store."""
        record = make_session()

        await StoreSink(store)(record)

        assert await store.read_all() == [record]

    @pytest.mark.asyncio
    async def test_tracking_session_end_to_end(self, store: JSONSessionStore) -> None:
        """Test a tracked session is persisted once pending work completes."""
        tracking = TrackingSession(sink=StoreSink(store))

        await tracking.start("music-maker")
        tracking.track_click("drum", {"note": "C"})
        record = await tracking.end()
        await tracking.wait_pending()

        stored = await store.read_all()
        assert stored == [record]


class TestHttpSessionSink:
    """Tests for HttpSessionSink."""

    @pytest.mark.asyncio
    async def test_posts_camel_case_json(self, make_session) -> None:
        """Test the record is POSTed in wire format."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"success": True})

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        sink = HttpSessionSink("http://api.test/api/v1/tracking/sessions", client=client)
        record = make_session(module_id="puzzle-play")

        await sink(record)
        await client.aclose()

        assert len(requests) == 1
        assert requests[0].method == "POST"
        body = json.loads(requests[0].content)
        assert body["sessionId"] == record.session_id
        assert body["moduleId"] == "puzzle-play"
        assert body["startTimestamp"].startswith("2025-01-06T")

    @pytest.mark.asyncio
    async def test_server_error_raises(self, make_session) -> None:
        """Test a rejected submission raises."""
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(500))
        )
        sink = HttpSessionSink("http://api.test/sessions", client=client)

        with pytest.raises(httpx.HTTPStatusError):
            await sink(make_session())

        await client.aclose()

    @pytest.mark.asyncio
    async def test_does_not_close_borrowed_client(self) -> None:
        """Test aclose leaves a caller-owned client open."""
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(201))
        )
        sink = HttpSessionSink("http://api.test/sessions", client=client)

        await sink.aclose()

        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_from_settings(self) -> None:
        """Test the URL is taken from tracking settings."""
        settings = Settings()
        settings.tracking.api_base_url = "http://tracking.test"

        sink = HttpSessionSink.from_settings(settings)

        assert sink.url == "http://tracking.test/api/v1/tracking/sessions"
        await sink.aclose()
