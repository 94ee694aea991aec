# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Persistence sinks for finished sessions.

A sink is any coroutine function taking a SessionRecord. Two are provided:
- StoreSink: appends directly to a SessionStore in the same process
- HttpSessionSink: POSTs the record to the ingestion endpoint

Example:
    sink = HttpSessionSink.from_settings(get_settings())
    tracking = TrackingSession(sink=sink)
    ...
    await tracking.wait_pending()
    await sink.aclose()
"""

import logging
from typing import TYPE_CHECKING

import httpx

from discoverme.domains.tracking.models import SessionRecord

if TYPE_CHECKING:
    from discoverme.core.config.settings import Settings
    from discoverme.infrastructure.storage import SessionStore

logger = logging.getLogger(__name__)


class StoreSink:
    """Sink that appends records to a SessionStore."""

    def __init__(self, store: "SessionStore") -> None:
        self._store = store

    async def __call__(self, record: SessionRecord) -> None:
        await self._store.append(record)


class HttpSessionSink:
    """Sink that submits records to the session ingestion endpoint.

    Attributes:
        url: Absolute URL of the ingestion endpoint.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            url: Absolute URL of the ingestion endpoint.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (owned by the caller).
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "HttpSessionSink":
        """Build a sink from the tracking settings."""
        return cls(
            url=settings.tracking.ingest_url,
            timeout=settings.tracking.timeout,
        )

    async def __call__(self, record: SessionRecord) -> None:
        """POST the record.

        Raises:
            httpx.HTTPError: If the request fails or the server rejects it.
        """
        response = await self._client.post(
            self.url,
            json=record.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()

        logger.debug(
            "Session submitted: session=%s, status=%d",
            record.session_id,
            response.status_code,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this sink created it."""
        if self._owns_client:
            await self._client.aclose()
