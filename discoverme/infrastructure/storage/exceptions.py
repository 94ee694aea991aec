# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for session storage.

This module defines the exception hierarchy for storage operations:
- SessionStoreError: Base exception for all storage errors
- SessionStoreReadError: The session log exists but cannot be read or parsed
- SessionStoreWriteError: Appending to the session log failed
"""


class SessionStoreError(Exception):
    """Base exception for all session storage errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize storage error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class SessionStoreReadError(SessionStoreError):
    """The session log exists but could not be read or decoded.

    A missing log is not an error; it reads as an empty collection.
    """


class SessionStoreWriteError(SessionStoreError):
    """Appending a record to the session log failed.

    Previously persisted records are left untouched.
    """
