# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics API endpoints.

This module provides the caregiver-facing read models:
- GET /dashboard - Sessions, engagement, interests, insights and totals
- GET /feedback - Feedback insights only

Example:
    GET /api/v1/analytics/dashboard
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from discoverme.api.dependencies import get_analytics_service
from discoverme.domains.analytics import AnalyticsService, DashboardData, FeedbackInsight
from discoverme.infrastructure.storage import SessionStoreError

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Response Models
# ============================================================================


class FeedbackResponse(BaseModel):
    """Feedback insights for the current session log."""

    feedback: list[FeedbackInsight] = Field(description="Insights in rule order")


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/dashboard",
    response_model=DashboardData,
    summary="Get dashboard",
    description="Assemble the caregiver dashboard from every stored session.",
)
async def get_dashboard(
    service: AnalyticsService = Depends(get_analytics_service),
) -> DashboardData:
    """Get the caregiver dashboard.

    Raises:
        HTTPException: 500 if the session log could not be read.
    """
    try:
        return await service.get_dashboard()
    except SessionStoreError as e:
        logger.error("Failed to generate dashboard data: %s", str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate dashboard data",
        ) from e


@router.get(
    "/feedback",
    response_model=FeedbackResponse,
    summary="Get feedback",
    description="Generate feedback insights from every stored session.",
)
async def get_feedback(
    service: AnalyticsService = Depends(get_analytics_service),
) -> FeedbackResponse:
    """Get feedback insights.

    Raises:
        HTTPException: 500 if the session log could not be read.
    """
    try:
        insights = await service.get_feedback()
    except SessionStoreError as e:
        logger.error("Failed to generate feedback: %s", str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate feedback",
        ) from e

    return FeedbackResponse(feedback=insights)
