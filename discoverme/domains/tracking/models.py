# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for session tracking.

This module defines the wire and storage shapes for:
- Tracking events observed while a module is open
- Finalized session records

Field names are snake_case in Python and camelCase on the wire
(sessionId, startTimestamp, ...) to match the browser client. Either
form is accepted when validating input.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from discoverme.utils.datetime import ensure_utc


class WireModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class EventType(str, Enum):
    """Kinds of interaction events a module can report."""

    CLICK = "click"
    DRAG = "drag"
    COMPLETE = "complete"
    ERROR = "error"
    PAUSE = "pause"
    RESUME = "resume"


# Event types that count towards a session's interaction total
INTERACTION_EVENT_TYPES = frozenset({EventType.CLICK, EventType.DRAG, EventType.COMPLETE})


class SessionTag(str, Enum):
    """Descriptive labels derived when a session ends."""

    COMPLETED = "completed"
    HAD_ERRORS = "had-errors"
    PAUSED = "paused"
    HIGH_INTERACTION = "high-interaction"
    LOW_INTERACTION = "low-interaction"


class TrackingEvent(WireModel):
    """One observed interaction.

    Attributes:
        type: Event kind.
        timestamp: When the event was recorded.
        element: Optional identifier of the UI element involved.
        data: Opaque key-value details supplied by the module.
    """

    model_config = ConfigDict(frozen=True)

    type: EventType
    timestamp: datetime
    element: str | None = None
    data: dict[str, Any] | None = None

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class SessionMetadata(WireModel):
    """Raw event log embedded in a session record.

    Opaque to aggregation; kept so caregivers can drill into a session.
    """

    model_config = ConfigDict(frozen=True)

    events: list[TrackingEvent] = Field(default_factory=list)
    event_count: int = Field(default=0, ge=0)


class SessionRecord(WireModel):
    """One completed activity session.

    Records are finalized once and never updated after persistence.

    Attributes:
        session_id: Opaque identifier generated at session start.
        module_id: Activity module exercised.
        start_timestamp: When the module was opened.
        end_timestamp: When the session was finalized.
        duration: Whole seconds between start and end.
        interactions: Number of click/drag/complete events.
        tags: Derived labels, see SessionTag.
        metadata: Raw event log.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(min_length=1)
    module_id: str = Field(min_length=1)
    start_timestamp: datetime
    end_timestamp: datetime
    duration: int = Field(ge=0, description="Duration in seconds")
    interactions: int = Field(ge=0)
    tags: tuple[str, ...] = ()
    metadata: SessionMetadata | None = None

    @field_validator("start_timestamp", "end_timestamp")
    @classmethod
    def _normalize_timestamps(cls, value: datetime) -> datetime:
        return ensure_utc(value)
