"""DiscoverMe Activity Analytics Service.

Session tracking and caregiver-facing engagement analytics for the
DiscoverMe children's activity suite.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
