"""Structured logging for battles.

Engine events (battle start and end, rewinds, rejected actions) are
emitted through structlog with the battle id and fighter names bound as
key-value pairs. They are written to stderr, or to the configured log
file, so that stdout stays free for the battle transcript printed by the
command line.

Example:
    >>> from card_mayhem.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Battle started", player1="Thorin", player2="Gandalf")
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_log_stream: TextIO | None = None


def add_engine_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event as coming from the battle engine."""
    event_dict["app"] = "card_mayhem"
    return event_dict


def _open_log_stream(log_file: str | None) -> TextIO:
    """Get the stream engine events are written to.

    A log file is opened once, in append mode, and reused by later calls
    that name the same file.
    """
    global _log_stream  # noqa: PLW0603

    if log_file is None:
        return sys.stderr
    if _log_stream is not None and _log_stream.name == log_file and not _log_stream.closed:
        return _log_stream
    if _log_stream is not None and not _log_stream.closed:
        _log_stream.close()
    _log_stream = open(log_file, "a", encoding="utf-8")
    return _log_stream


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Set up logging for a battle session.

    Args:
        level: Minimum level of events to emit. Turn and card details are
            DEBUG, battle milestones INFO, rejected actions WARNING.
        json_format: Emit one JSON object per event instead of the
            colored console format.
        log_file: Write events to this file instead of stderr.

    Example:
        >>> configure_logging(level="DEBUG", log_file="battle.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    stream = _open_log_stream(log_file)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_engine_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=log_file is None,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # Records from plain stdlib loggers follow the same destination
    logging.basicConfig(
        format=_LOG_FORMAT,
        level=numeric_level,
        stream=stream,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger for an engine module, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach battle-wide values to every event that follows.

    The arena binds ``battle_id`` when a battle starts, so events from
    cards, fighters and the arena itself can be grouped per battle.

    Example:
        >>> bind_context(battle_id="3f2a")
        >>> logger.info("Turn started")  # carries battle_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop the values bound for the current battle."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
