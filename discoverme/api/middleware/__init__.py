# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API middleware components.

Exports:
    limiter: Shared slowapi Limiter.
    default_rate_limit, ingest_rate_limit: Per-request limit providers.
    rate_limit_exceeded_handler: 429 handler for RateLimitExceeded.
"""

from discoverme.api.middleware.rate_limit import (
    default_rate_limit,
    ingest_rate_limit,
    limiter,
    rate_limit_exceeded_handler,
)

__all__ = [
    "limiter",
    "rate_limit_exceeded_handler",
    "default_rate_limit",
    "ingest_rate_limit",
]
