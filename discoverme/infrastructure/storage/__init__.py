# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""File-backed session storage.

Usage:
    from discoverme.infrastructure.storage import JSONSessionStore

    store = JSONSessionStore("data/sessions.json")
    await store.append(record)
    sessions = await store.read_all()
"""

from discoverme.infrastructure.storage.exceptions import (
    SessionStoreError,
    SessionStoreReadError,
    SessionStoreWriteError,
)
from discoverme.infrastructure.storage.session_store import JSONSessionStore, SessionStore

__all__ = [
    "SessionStore",
    "JSONSessionStore",
    "SessionStoreError",
    "SessionStoreReadError",
    "SessionStoreWriteError",
]
