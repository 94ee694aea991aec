# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Append-only session log stored as a JSON file.

The log is a single JSON array of session records with camelCase keys and
ISO 8601 UTC timestamps. Appends are read-modify-write operations, so each
file is guarded by one process-wide lock shared by every store instance
pointing at it; concurrent appends are serialized and none is lost.

Writes go to a temporary file that atomically replaces the log, so a failed
append leaves previously persisted records intact.

File IO runs in a worker thread so the event loop is never blocked.
"""

import asyncio
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from discoverme.domains.tracking.models import SessionRecord
from discoverme.infrastructure.storage.exceptions import (
    SessionStoreReadError,
    SessionStoreWriteError,
)

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[SessionRecord])

_registry_lock = threading.Lock()
_file_locks: dict[Path, threading.Lock] = {}


def _lock_for(path: Path) -> threading.Lock:
    """Return the process-wide lock for a log file."""
    key = path.resolve()
    with _registry_lock:
        lock = _file_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _file_locks[key] = lock
        return lock


class SessionStore(ABC):
    """Append-only collection of session records."""

    @abstractmethod
    async def append(self, session: SessionRecord) -> None:
        """Add one record without touching existing ones."""

    @abstractmethod
    async def read_all(self) -> list[SessionRecord]:
        """Return every stored record in insertion order."""


class JSONSessionStore(SessionStore):
    """Session log backed by one JSON file.

    Attributes:
        path: Location of the log file.

    Example:
        >>> store = JSONSessionStore(Path("data/sessions.json"))
        >>> await store.append(record)
        >>> sessions = await store.read_all()
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        The file and its directory are created on first append.

        Args:
            path: Location of the log file.
        """
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    async def append(self, session: SessionRecord) -> None:
        """Persist one session record.

        Args:
            session: Finalized record to append.

        Raises:
            SessionStoreReadError: If the existing log cannot be decoded.
            SessionStoreWriteError: If the updated log cannot be written.
        """
        payload = session.model_dump(mode="json", by_alias=True)
        await asyncio.to_thread(self._append_sync, payload)

        logger.debug(
            "Session appended: session=%s, module=%s, path=%s",
            session.session_id,
            session.module_id,
            self.path,
        )

    async def read_all(self) -> list[SessionRecord]:
        """Read the whole log.

        Returns:
            Records with timestamps reconstructed as datetimes; an empty
            list when nothing has been written yet.

        Raises:
            SessionStoreReadError: If the log exists but cannot be decoded.
        """
        return await asyncio.to_thread(self._read_all_sync)

    def _read_all_sync(self) -> list[SessionRecord]:
        with self._lock:
            raw = self._read_bytes()

        if raw is None:
            return []

        try:
            return _records_adapter.validate_json(raw)
        except ValidationError as e:
            raise SessionStoreReadError(
                "Session log is not a valid list of session records",
                details={"path": str(self.path), "errors": e.error_count()},
            ) from e

    def _append_sync(self, payload: dict[str, Any]) -> None:
        with self._lock:
            raw = self._read_bytes()
            records = self._decode(raw) if raw is not None else []
            records.append(payload)
            self._write(records)

    def _read_bytes(self) -> bytes | None:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise SessionStoreReadError(
                "Failed to read session log",
                details={"path": str(self.path), "error": str(e)},
            ) from e

    def _decode(self, raw: bytes) -> list[dict[str, Any]]:
        try:
            records = json.loads(raw)
        except ValueError as e:
            raise SessionStoreReadError(
                "Session log is not valid JSON",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not isinstance(records, list):
            raise SessionStoreReadError(
                "Session log must contain a JSON array",
                details={"path": str(self.path), "found": type(records).__name__},
            )
        return records

    def _write(self, records: list[dict[str, Any]]) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(records, tmp, indent=2)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SessionStoreWriteError(
                "Failed to write session log",
                details={"path": str(self.path), "error": str(e)},
            ) from e
