"""Structured logging configuration using structlog.

Every event logged while the editor resolves input carries two
correlation fields:

- ``session_key``: the editing session, bound when an image is loaded and
  kept until the context is cleared.
- ``gesture``: the handle or input being resolved ("top-left", "image",
  "wheel"), bound for one drag step or wheel step only.

Rejected candidates are logged at DEBUG, so filtering a JSON log on one
``session_key`` replays why each step of a drag did or did not commit.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from cropframe.config import settings

# Session key outlives gestures; gesture is reset after every step.
_session_key: ContextVar[str | None] = ContextVar("session_key", default=None)
_gesture: ContextVar[str | None] = ContextVar("gesture", default=None)


def set_correlation_context(
    session_key: str | None = None,
    gesture: str | None = None,
) -> None:
    """Bind the editing session and, optionally, the gesture being resolved.

    Fields passed as None keep their current value, so a gesture can be
    bound without repeating the session key.

    Args:
        session_key: Identifier of the editing session (also its storage key)
        gesture: Handle or input being resolved (e.g. "top-left", "wheel")
    """
    if session_key is not None:
        _session_key.set(session_key)
    if gesture is not None:
        _gesture.set(gesture)


def clear_gesture_context() -> None:
    """End a gesture step; later events carry only the session key."""
    _gesture.set(None)


def clear_correlation_context() -> None:
    """Forget both the session and the gesture (e.g. between sessions)."""
    _session_key.set(None)
    _gesture.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding ``session_key`` and ``gesture`` to events."""
    _ = logger, method_name  # Required by structlog processor signature
    session_key = _session_key.get()
    gesture = _gesture.get()

    if session_key is not None:
        event_dict["session_key"] = session_key
    if gesture is not None:
        event_dict["gesture"] = gesture

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog for editor events.

    Both formats run the correlation processor; JSON output is meant for
    filtering by session, console output for reading a drag step by step.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    # Shared processors for all output formats
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
