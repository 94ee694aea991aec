# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session tracking for activity modules.

A SessionTracker captures the interaction stream of one open module and
finalizes it into a SessionRecord. A TrackingSession owns at most one
active tracker at a time and hands finished records to a persistence sink.

Persistence is fire-and-forget: end() returns the finalized record
immediately and the sink runs as a background task. Sink failures are
logged and never surface to the caller.

Usage:
    from discoverme.domains.tracking import StoreSink, TrackingSession

    tracking = TrackingSession(sink=StoreSink(store))

    await tracking.start("puzzle-play")
    tracking.track_click("tile", {"action": "move", "from": 3, "to": 4})
    tracking.track_complete({"moves": 42})
    record = await tracking.end()
"""

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime
from typing import Any

from discoverme.domains.tracking.models import (
    INTERACTION_EVENT_TYPES,
    EventType,
    SessionMetadata,
    SessionRecord,
    SessionTag,
    TrackingEvent,
)
from discoverme.utils.datetime import elapsed_seconds, utc_now

logger = logging.getLogger(__name__)

SessionSink = Callable[[SessionRecord], Awaitable[None]]
Clock = Callable[[], datetime]

HIGH_INTERACTION_THRESHOLD = 50
LOW_INTERACTION_THRESHOLD = 10

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_session_id() -> str:
    """Create an opaque session id like "session_1718000000000_k3j9x0a1b"."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"session_{millis}_{suffix}"


def derive_tags(events: Iterable[TrackingEvent], interactions: int) -> tuple[str, ...]:
    """Derive the descriptive tags of a finished session.

    Args:
        events: Every event recorded during the session.
        interactions: The session's interaction count.

    Returns:
        Tags in fixed order: completed, had-errors, paused, then at most
        one of high-interaction / low-interaction. Counts in [10, 50]
        get no interaction tag.
    """
    seen = {event.type for event in events}
    tags: list[str] = []

    if EventType.COMPLETE in seen:
        tags.append(SessionTag.COMPLETED.value)
    if EventType.ERROR in seen:
        tags.append(SessionTag.HAD_ERRORS.value)
    if EventType.PAUSE in seen:
        tags.append(SessionTag.PAUSED.value)

    if interactions > HIGH_INTERACTION_THRESHOLD:
        tags.append(SessionTag.HIGH_INTERACTION.value)
    elif interactions < LOW_INTERACTION_THRESHOLD:
        tags.append(SessionTag.LOW_INTERACTION.value)

    return tuple(tags)


class SessionTracker:
    """Interaction log for one open activity module.

    Attributes:
        session_id: Identifier generated at construction.
        module_id: Module being tracked.
        started_at: Start marker.
    """

    def __init__(
        self,
        module_id: str,
        session_id: str | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Start tracking a module.

        Args:
            module_id: Module being opened.
            session_id: Explicit id (generated when omitted).
            clock: Source of the current time.
        """
        self.module_id = module_id
        self.session_id = session_id or generate_session_id()
        self._clock = clock
        self.started_at = clock()
        self._events: list[TrackingEvent] = []
        self._interactions = 0
        self._record: SessionRecord | None = None

    @property
    def interactions(self) -> int:
        """Number of click/drag/complete events so far."""
        return self._interactions

    @property
    def events(self) -> tuple[TrackingEvent, ...]:
        """Snapshot of the recorded events."""
        return tuple(self._events)

    @property
    def is_finalized(self) -> bool:
        """Whether finalize() has been called."""
        return self._record is not None

    def record(
        self,
        event_type: EventType | str,
        element: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> TrackingEvent | None:
        """Append an event stamped with the current time.

        Args:
            event_type: Kind of event.
            element: Optional UI element identifier.
            data: Optional opaque details.

        Returns:
            The recorded event, or None once the tracker is finalized.
        """
        if self._record is not None:
            logger.debug(
                "Ignoring %s event for finalized session %s",
                event_type,
                self.session_id,
            )
            return None

        event = TrackingEvent(
            type=EventType(event_type),
            timestamp=self._clock(),
            element=element,
            data=data,
        )
        self._events.append(event)

        if event.type in INTERACTION_EVENT_TYPES:
            self._interactions += 1

        return event

    def finalize(self) -> SessionRecord:
        """Freeze the session into a SessionRecord.

        Finalizing twice returns the same record.

        Returns:
            The finalized record.
        """
        if self._record is not None:
            return self._record

        ended_at = self._clock()
        self._record = SessionRecord(
            session_id=self.session_id,
            module_id=self.module_id,
            start_timestamp=self.started_at,
            end_timestamp=ended_at,
            duration=elapsed_seconds(self.started_at, ended_at),
            interactions=self._interactions,
            tags=derive_tags(self._events, self._interactions),
            metadata=SessionMetadata(
                events=list(self._events),
                event_count=len(self._events),
            ),
        )

        logger.debug(
            "Session finalized: session=%s, module=%s, duration=%ds, interactions=%d",
            self.session_id,
            self.module_id,
            self._record.duration,
            self._interactions,
        )

        return self._record


class TrackingSession:
    """Owner of the single active session context.

    Only one tracker is active at a time. Starting a new session while
    another is active ends the previous one first, which is logged as a
    warning rather than treated as an error.

    Attributes:
        active: The active tracker, if any.
    """

    def __init__(
        self,
        sink: SessionSink | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the tracking session.

        Args:
            sink: Coroutine function that persists finished records.
            clock: Source of the current time, shared with trackers.
        """
        self._sink = sink
        self._clock = clock
        self._active: SessionTracker | None = None
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def active(self) -> SessionTracker | None:
        """The active tracker, if any."""
        return self._active

    async def start(self, module_id: str) -> SessionTracker:
        """Open a session for a module.

        Any session still active is ended and submitted before the new
        one begins.

        Args:
            module_id: Module being opened.

        Returns:
            The new active tracker.
        """
        if self._active is not None:
            logger.warning(
                "Session already in progress, ending previous session: session=%s, module=%s",
                self._active.session_id,
                self._active.module_id,
            )
            await self.end()

        self._active = SessionTracker(module_id, clock=self._clock)
        logger.info(
            "Session started: session=%s, module=%s",
            self._active.session_id,
            module_id,
        )
        return self._active

    def record(
        self,
        event_type: EventType | str,
        element: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> TrackingEvent | None:
        """Record an event on the active session; no-op when none is active."""
        if self._active is None:
            return None
        return self._active.record(event_type, element, data)

    def track_click(self, element: str, data: dict[str, Any] | None = None) -> TrackingEvent | None:
        """Record a click on an element."""
        return self.record(EventType.CLICK, element, data)

    def track_drag(self, element: str, data: dict[str, Any] | None = None) -> TrackingEvent | None:
        """Record a drag over an element."""
        return self.record(EventType.DRAG, element, data)

    def track_complete(self, data: dict[str, Any] | None = None) -> TrackingEvent | None:
        """Record that the activity was completed."""
        return self.record(EventType.COMPLETE, None, data)

    def track_error(self, element: str, error: Exception | str) -> TrackingEvent | None:
        """Record an error raised by an element."""
        return self.record(EventType.ERROR, element, {"error": str(error)})

    async def end(self) -> SessionRecord | None:
        """End the active session.

        The record is finalized and returned immediately; persisting it is
        scheduled in the background.

        Returns:
            The finalized record, or None when no session is active.
        """
        tracker = self._active
        if tracker is None:
            return None

        self._active = None
        record = tracker.finalize()
        self._submit(record)

        logger.info(
            "Session ended: session=%s, module=%s, duration=%ds, tags=%s",
            record.session_id,
            record.module_id,
            record.duration,
            ",".join(record.tags) or "-",
        )
        return record

    async def wait_pending(self) -> None:
        """Wait for every in-flight persistence task to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _submit(self, record: SessionRecord) -> None:
        if self._sink is None:
            return

        task = asyncio.create_task(self._persist(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _persist(self, record: SessionRecord) -> None:
        try:
            await self._sink(record)
        except Exception as e:
            logger.error(
                "Failed to save session %s: %s",
                record.session_id,
                str(e),
                exc_info=True,
            )
