# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Modules:
    tracking: Session ingestion and retrieval.
    analytics: Caregiver dashboard and feedback insights.
    modules: Activity module catalog.
"""

from fastapi import APIRouter

from discoverme.api.v1 import analytics, modules, tracking

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(tracking.router, prefix="/tracking", tags=["Tracking"])
router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
router.include_router(modules.router, prefix="/modules", tags=["Modules"])

__all__ = ["router"]
