# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session tracking domain.

This module captures interaction events while an activity module is open
and finalizes them into session records:
- SessionTracker: one session's event log
- TrackingSession: owner of the single active session, submits records
- StoreSink / HttpSessionSink: where finished records go

Usage:
    from discoverme.domains.tracking import HttpSessionSink, TrackingSession

    tracking = TrackingSession(sink=HttpSessionSink(url))
    await tracking.start("art-pad")
    tracking.track_drag("canvas", {"tool": "brush"})
    record = await tracking.end()
"""

from discoverme.domains.tracking.models import (
    INTERACTION_EVENT_TYPES,
    EventType,
    SessionMetadata,
    SessionRecord,
    SessionTag,
    TrackingEvent,
)
from discoverme.domains.tracking.tracker import (
    SessionSink,
    SessionTracker,
    TrackingSession,
    derive_tags,
    generate_session_id,
)
from discoverme.domains.tracking.sinks import HttpSessionSink, StoreSink

__all__ = [
    # Models
    "EventType",
    "SessionTag",
    "TrackingEvent",
    "SessionMetadata",
    "SessionRecord",
    "INTERACTION_EVENT_TYPES",
    # Tracking
    "SessionTracker",
    "TrackingSession",
    "SessionSink",
    "derive_tags",
    "generate_session_id",
    # Sinks
    "StoreSink",
    "HttpSessionSink",
]
