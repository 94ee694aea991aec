# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Infrastructure layer for DiscoverMe.

This package contains persistence adapters:
- storage: File-backed append-only session log
"""
