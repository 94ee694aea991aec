# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the JSON session store."""

import asyncio
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from discoverme.infrastructure.storage import (
    JSONSessionStore,
    SessionStoreReadError,
    SessionStoreWriteError,
)


class TestReadAll:
    """Tests for JSONSessionStore.read_all."""

    @pytest.mark.asyncio
    async def test_missing_file_is_empty(self, store: JSONSessionStore) -> None:
        """Test a log that was never written reads as empty."""
        assert await store.read_all() == []

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, sessions_path: Path) -> None:
        """Test a corrupt log is reported, not treated as empty."""
        sessions_path.parent.mkdir(parents=True)
        sessions_path.write_text("[{not json", encoding="utf-8")

        with pytest.raises(SessionStoreReadError):
            await JSONSessionStore(sessions_path).read_all()

    @pytest.mark.asyncio
    async def test_non_array_raises(self, sessions_path: Path) -> None:
        """Test a log holding something other than an array is rejected."""
        sessions_path.parent.mkdir(parents=True)
        sessions_path.write_text('{"sessionId": "x"}', encoding="utf-8")

        with pytest.raises(SessionStoreReadError):
            await JSONSessionStore(sessions_path).read_all()

    @pytest.mark.asyncio
    async def test_reads_client_written_records(self, sessions_path: Path) -> None:
        """Test camelCase records with Z timestamps are parsed."""
        sessions_path.parent.mkdir(parents=True)
        sessions_path.write_text(
            json.dumps([
                {
                    "sessionId": "session_1718000000000_abc123def",
                    "moduleId": "puzzle-play",
                    "startTimestamp": "2025-01-06T09:00:00.000Z",
                    "endTimestamp": "2025-01-06T09:05:00.000Z",
                    "duration": 300,
                    "interactions": 42,
                    "tags": ["completed"],
                },
            ]),
            encoding="utf-8",
        )

        sessions = await JSONSessionStore(sessions_path).read_all()

        assert len(sessions) == 1
        assert sessions[0].module_id == "puzzle-play"
        assert sessions[0].start_timestamp.tzinfo is not None
        assert sessions[0].tags == ("completed",)
        assert sessions[0].metadata is None


class TestAppend:
    """Tests for JSONSessionStore.append."""

    @pytest.mark.asyncio
    async def test_append_then_read(self, store: JSONSessionStore, make_session) -> None:
        """Test appended records come back in insertion order and intact."""
        first = make_session(module_id="art-pad")
        second = make_session(module_id="music-maker", tags=("completed",))

        await store.append(first)
        await store.append(second)
        sessions = await store.read_all()

        assert sessions == [first, second]

    @pytest.mark.asyncio
    async def test_creates_directory(self, store: JSONSessionStore, make_session) -> None:
        """Test the first append creates the data directory."""
        await store.append(make_session())

        assert store.path.exists()

    @pytest.mark.asyncio
    async def test_file_uses_camel_case(self, store: JSONSessionStore, make_session) -> None:
        """Test persisted keys match the wire format."""
        await store.append(make_session())

        raw = json.loads(store.path.read_text(encoding="utf-8"))

        assert set(raw[0]) >= {
            "sessionId",
            "moduleId",
            "startTimestamp",
            "endTimestamp",
            "duration",
            "interactions",
            "tags",
        }

    @pytest.mark.asyncio
    async def test_existing_records_untouched(self, sessions_path: Path, make_session) -> None:
        """Test appending keeps earlier records exactly as written."""
        legacy = {
            "sessionId": "legacy",
            "moduleId": "art-pad",
            "startTimestamp": "2025-01-01T10:00:00.000Z",
            "endTimestamp": "2025-01-01T10:01:00.000Z",
            "duration": 60,
            "interactions": 5,
            "tags": [],
        }
        sessions_path.parent.mkdir(parents=True)
        sessions_path.write_text(json.dumps([legacy]), encoding="utf-8")
        store = JSONSessionStore(sessions_path)

        await store.append(make_session())

        raw = json.loads(sessions_path.read_text(encoding="utf-8"))
        assert raw[0] == legacy
        assert len(raw) == 2

    @pytest.mark.asyncio
    async def test_concurrent_appends_are_not_lost(
        self,
        sessions_path: Path,
        make_session,
    ) -> None:
        """Test simultaneous appends from separate store instances all land."""
        stores = [JSONSessionStore(sessions_path) for _ in range(3)]
        records = [make_session() for _ in range(30)]

        await asyncio.gather(
            *(stores[i % 3].append(record) for i, record in enumerate(records))
        )
        stored = await stores[0].read_all()

        assert len(stored) == 30
        assert {s.session_id for s in stored} == {r.session_id for r in records}

    @pytest.mark.asyncio
    async def test_append_to_corrupt_log_raises(self, sessions_path: Path, make_session) -> None:
        """Test a corrupt log is not overwritten."""
        sessions_path.parent.mkdir(parents=True)
        sessions_path.write_text("garbage", encoding="utf-8")

        with pytest.raises(SessionStoreReadError):
            await JSONSessionStore(sessions_path).append(make_session())

        assert sessions_path.read_text(encoding="utf-8") == "garbage"

    @pytest.mark.asyncio
    async def test_write_failure_keeps_previous_log(
        self,
        store: JSONSessionStore,
        make_session,
    ) -> None:
        """Test a failed write leaves the persisted records intact."""
        first = make_session()
        await store.append(first)

        with patch(
            "discoverme.infrastructure.storage.session_store.os.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(SessionStoreWriteError) as exc_info:
                await store.append(make_session())

        assert "disk full" in str(exc_info.value)
        assert await store.read_all() == [first]
        assert list(store.path.parent.glob("*.tmp")) == []
