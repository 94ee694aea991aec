# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for DiscoverMe.

Domains:
    activity: The fixed roster of activity modules.
    tracking: Per-session interaction capture and finalization.
    analytics: Engagement aggregation, feedback insights, dashboards.
"""
