# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session tracking API endpoints.

This module provides endpoints for the session log:
- POST /sessions - Persist one finished session
- GET /sessions - Return every persisted session

Example:
    POST /api/v1/tracking/sessions
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from discoverme.api.dependencies import get_session_store
from discoverme.api.middleware.rate_limit import ingest_rate_limit, limiter
from discoverme.domains.tracking import SessionRecord
from discoverme.infrastructure.storage import SessionStore, SessionStoreError

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Response Models
# ============================================================================


class IngestResponse(BaseModel):
    """Result of a session submission."""

    success: bool = Field(description="Whether the session was stored")


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/sessions",
    response_model=IngestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit session",
    description="Persist one finished activity session.",
)
@limiter.limit(ingest_rate_limit)
async def ingest_session(
    request: Request,
    session: SessionRecord,
    store: SessionStore = Depends(get_session_store),
) -> IngestResponse:
    """Append a session record to the log.

    Args:
        request: HTTP request (used for rate limiting).
        session: Finalized session record.
        store: Session store.

    Returns:
        IngestResponse with success flag.

    Raises:
        HTTPException: 500 if the record could not be written.
    """
    try:
        await store.append(session)
    except SessionStoreError as e:
        logger.error(
            "Failed to save session %s: %s",
            session.session_id,
            str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save session",
        ) from e

    logger.info(
        "Session stored: session=%s, module=%s, duration=%ds",
        session.session_id,
        session.module_id,
        session.duration,
    )
    return IngestResponse(success=True)


@router.get(
    "/sessions",
    response_model=list[SessionRecord],
    summary="List sessions",
    description="Return every persisted activity session.",
)
async def list_sessions(
    store: SessionStore = Depends(get_session_store),
) -> list[SessionRecord]:
    """Return the full session log.

    Raises:
        HTTPException: 500 if the log could not be read.
    """
    try:
        return await store.read_all()
    except SessionStoreError as e:
        logger.error("Failed to fetch sessions: %s", str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch sessions",
        ) from e
