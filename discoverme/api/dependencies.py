# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

Example:
    @router.get("/dashboard")
    async def get_dashboard(
        service: AnalyticsService = Depends(get_analytics_service),
    ):
        ...

Tests swap the store with app.dependency_overrides[get_session_store].
"""

import logging
from functools import lru_cache

from fastapi import Depends

from discoverme.core.config import get_settings
from discoverme.domains.analytics import AnalyticsService
from discoverme.infrastructure.storage import JSONSessionStore, SessionStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    path = get_settings().storage.sessions_path
    logger.info("Using session log at %s", path)
    return JSONSessionStore(path)


def get_analytics_service(
    store: SessionStore = Depends(get_session_store),
) -> AnalyticsService:
    """Get an analytics service bound to the session store."""
    return AnalyticsService(store)
