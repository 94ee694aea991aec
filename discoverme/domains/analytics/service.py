# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics service: dashboard and feedback read models.

Every call reads the full session log and recomputes all derived data;
nothing is cached, so two calls with no write in between return identical
results.

Usage:
    from discoverme.domains.analytics import AnalyticsService

    service = AnalyticsService(store)
    dashboard = await service.get_dashboard()
    insights = await service.get_feedback()
"""

import logging
from collections.abc import Sequence

from discoverme.domains.analytics.aggregator import (
    aggregate_engagement,
    mean_duration,
    top_interests,
    total_duration,
)
from discoverme.domains.analytics.feedback import generate_feedback
from discoverme.domains.analytics.schemas import DashboardData, FeedbackInsight
from discoverme.domains.tracking.models import SessionRecord
from discoverme.infrastructure.storage import SessionStore
from discoverme.utils.datetime import seconds_to_human

logger = logging.getLogger(__name__)

TOP_INTERESTS_LIMIT = 3


def build_dashboard(sessions: Sequence[SessionRecord]) -> DashboardData:
    """Assemble the dashboard read model from a session snapshot.

    Args:
        sessions: Every stored session.

    Returns:
        DashboardData with sessions, per-module engagement, top interests,
        feedback insights and totals.
    """
    snapshot = list(sessions)
    return DashboardData(
        sessions=snapshot,
        module_engagements=aggregate_engagement(snapshot),
        top_interests=top_interests(snapshot, limit=TOP_INTERESTS_LIMIT),
        feedback=generate_feedback(snapshot),
        total_sessions=len(snapshot),
        total_time=total_duration(snapshot),
        average_session_time=mean_duration(snapshot),
    )


class AnalyticsService:
    """Read-side service over the session store.

    Attributes:
        store: Source of session records.
    """

    def __init__(self, store: SessionStore) -> None:
        """Initialize the analytics service.

        Args:
            store: Session store to read from.
        """
        self.store = store

    async def get_sessions(self) -> list[SessionRecord]:
        """Return every stored session."""
        return await self.store.read_all()

    async def get_dashboard(self) -> DashboardData:
        """Build the caregiver dashboard.

        Raises:
            SessionStoreError: If the session log cannot be read.
        """
        sessions = await self.store.read_all()
        dashboard = build_dashboard(sessions)

        logger.info(
            "Dashboard assembled: sessions=%d, modules=%d, total_time=%s, insights=%d",
            dashboard.total_sessions,
            len(dashboard.module_engagements),
            seconds_to_human(dashboard.total_time),
            len(dashboard.feedback),
        )
        return dashboard

    async def get_feedback(self) -> list[FeedbackInsight]:
        """Generate feedback insights for the current session log.

        Raises:
            SessionStoreError: If the session log cannot be read.
        """
        sessions = await self.store.read_all()
        return generate_feedback(sessions)
