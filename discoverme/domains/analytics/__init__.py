# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics domain services.

This module provides the read side of the activity suite:
- Engagement aggregation per module
- Rule-based feedback insights
- Dashboard assembly

All results are pure functions of the stored session collection.

Usage:
    from discoverme.domains.analytics import AnalyticsService

    service = AnalyticsService(store)
    dashboard = await service.get_dashboard()
"""

from discoverme.domains.analytics.aggregator import (
    aggregate_engagement,
    mean_duration,
    top_interests,
    total_duration,
)
from discoverme.domains.analytics.feedback import (
    FEEDBACK_RULES,
    FeedbackContext,
    FeedbackRule,
    generate_feedback,
    welcome_insight,
)
from discoverme.domains.analytics.schemas import (
    DashboardData,
    FeedbackInsight,
    InsightType,
    ModuleEngagement,
)
from discoverme.domains.analytics.service import AnalyticsService, build_dashboard

__all__ = [
    # Aggregation
    "aggregate_engagement",
    "top_interests",
    "total_duration",
    "mean_duration",
    # Feedback
    "generate_feedback",
    "welcome_insight",
    "FeedbackRule",
    "FeedbackContext",
    "FEEDBACK_RULES",
    # Service
    "AnalyticsService",
    "build_dashboard",
    # Schemas
    "DashboardData",
    "FeedbackInsight",
    "InsightType",
    "ModuleEngagement",
]
