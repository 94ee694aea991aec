# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rate limiting using slowapi.

Limits are applied per client IP address. Every route gets the default
per-minute budget through SlowAPIMiddleware; session ingestion has its own
budget so a misbehaving module cannot flood the session log.

Both budgets are read from the current settings on each request.

Example:
    >>> app.state.limiter = limiter
    >>> app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    >>> app.add_middleware(SlowAPIMiddleware)

    @router.post("/sessions")
    @limiter.limit(ingest_rate_limit)
    async def ingest_session(request: Request, ...):
        ...
"""

import logging

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from discoverme.core.config import get_settings

logger = logging.getLogger(__name__)


def default_rate_limit() -> str:
    """Per-client budget applied to every route."""
    return f"{get_settings().rate_limit.requests_per_minute}/minute"


def ingest_rate_limit() -> str:
    """Per-client budget for session submissions."""
    return f"{get_settings().rate_limit.ingest_per_minute}/minute"


# Create the limiter instance
settings = get_settings()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[default_rate_limit],
    storage_uri=settings.rate_limit.storage_uri,
    enabled=settings.rate_limit.enabled,
)


def rate_limit_exceeded_handler(
    request: Request,
    exc: RateLimitExceeded,
) -> Response:
    """Handle rate limit exceeded errors.

    Returns a 429 Too Many Requests response. Retry-After is the length of
    the exceeded limit's window in seconds.

    Args:
        request: HTTP request.
        exc: Rate limit exceeded exception.

    Returns:
        JSON response with error details.
    """
    logger.warning(
        "Rate limit exceeded: %s for %s",
        exc.detail,
        get_remote_address(request),
    )

    return Response(
        content='{"detail": "Too many requests. Please try again later."}',
        status_code=429,
        media_type="application/json",
        headers={
            "Retry-After": str(exc.limit.limit.get_expiry()),
            "X-RateLimit-Limit": str(exc.detail),
        },
    )
