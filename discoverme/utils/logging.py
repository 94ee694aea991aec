# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

Modules log through logging.getLogger(__name__) with %-style arguments.
setup_logging() installs one stdout handler whose structlog
ProcessorFormatter renders those records: colored console output in
development, one JSON object per line otherwise. Context bound with
bind_context() (request_id, path) is merged into every record.

Example:
    >>> setup_logging(get_settings())
    >>> bind_context(request_id="3f2a...", path="/api/v1/tracking/sessions")
    >>> logging.getLogger("discoverme.api").info("Session stored: %s", "session_1")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from discoverme.core.config.settings import Settings

HANDLER_NAME = "discoverme"

# Third-party loggers kept at WARNING
QUIET_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "slowapi",
    "asyncio",
)


def _build_formatter(settings: "Settings") -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development or settings.debug:
        render: list[Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        render = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *render,
        ],
    )


def setup_logging(settings: "Settings") -> None:
    """Route standard library logging through structlog renderers.

    Safe to call more than once: the handler installed by a previous call
    is replaced, other root handlers are left alone.

    Args:
        settings: Application settings containing log_level and debug flag.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(settings))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("discoverme").setLevel(log_level)


def bind_context(**kwargs: object) -> None:
    """Bind values that are added to every log record in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context values at the end of a request."""
    structlog.contextvars.clear_contextvars()
