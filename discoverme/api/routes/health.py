# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides the health endpoint for the API.
"""

import logging
import time
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from discoverme import __version__
from discoverme.api.dependencies import get_session_store
from discoverme.core.config import get_settings
from discoverme.infrastructure.storage import SessionStore, SessionStoreError
from discoverme.utils.datetime import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


class ComponentHealth(BaseModel):
    """Individual component health status."""
    status: str = Field(description="Component status")
    latency_ms: float | None = Field(None, description="Response latency in ms")
    message: str | None = Field(None, description="Additional status message")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    storage: ComponentHealth = Field(description="Session log status")


async def check_storage(store: SessionStore) -> ComponentHealth:
    """Check that the session log can be read."""
    start = time.time()
    try:
        sessions = await store.read_all()
    except SessionStoreError as e:
        logger.error("Storage health check failed: %s", str(e))
        return ComponentHealth(status="unhealthy", message=str(e))

    latency = (time.time() - start) * 1000
    return ComponentHealth(
        status="healthy",
        latency_ms=round(latency, 2),
        message=f"{len(sessions)} sessions stored",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: SessionStore = Depends(get_session_store),
) -> HealthResponse:
    """Report service and storage health."""
    settings = get_settings()
    storage = await check_storage(store)

    return HealthResponse(
        status="healthy" if storage.status == "healthy" else "degraded",
        timestamp=utc_now(),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
        storage=storage,
    )
