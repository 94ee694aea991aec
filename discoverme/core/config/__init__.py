# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for DiscoverMe.

Settings are Pydantic-based and loaded from environment variables.

Example:
    >>> from discoverme.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from discoverme.core.config.settings import (
    APISettings,
    CORSSettings,
    RateLimitSettings,
    Settings,
    StorageSettings,
    TrackingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "StorageSettings",
    "TrackingSettings",
    "RateLimitSettings",
    "CORSSettings",
    "APISettings",
]
