# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Derived analytics models.

None of these are persisted; every one is recomputed from the full session
collection on each request.
"""

from enum import Enum
from typing import Any

from pydantic import Field

from discoverme.domains.tracking.models import SessionRecord, WireModel


class InsightType(str, Enum):
    """Category of a feedback insight."""

    ENGAGEMENT = "engagement"
    PREFERENCE = "preference"
    DEVELOPMENT = "development"
    RECOMMENDATION = "recommendation"


class ModuleEngagement(WireModel):
    """Aggregate statistics for one module across all sessions."""

    session_count: int = Field(ge=0)
    total_time: int = Field(ge=0, description="Total time in seconds")
    total_interactions: int = Field(ge=0)
    average_duration: float = Field(ge=0, description="Mean duration in seconds")
    average_interactions: float = Field(ge=0)


class FeedbackInsight(WireModel):
    """One heuristic observation for caregivers."""

    type: InsightType
    title: str
    description: str
    confidence: float = Field(ge=0.0, le=1.0)
    data: dict[str, Any] | None = None


class DashboardData(WireModel):
    """Caregiver dashboard read model."""

    sessions: list[SessionRecord]
    module_engagements: dict[str, ModuleEngagement]
    top_interests: list[str]
    feedback: list[FeedbackInsight]
    total_sessions: int
    total_time: int = Field(description="Sum of all session durations in seconds")
    average_session_time: float = Field(description="Mean session duration in seconds")
