"""Structured logging for the RPG Adventure game.

The game screen owns stdout, so structlog events are written to stderr
or to a log file and never interleave with menus and combat text.
Nothing is logged below WARNING unless the settings ask for it.

Example:
    >>> from rpg_adventure.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Combat started", character="Aria", monster="Goblin")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


GAME_NAME = "rpg_adventure"


def add_game_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Stamp every event with the game name.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event being processed.

    Returns:
        The event with a ``game`` key added.
    """
    event_dict.setdefault("game", GAME_NAME)
    return event_dict


def _build_processors(*, json_format: bool, colors: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_game_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=colors,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def _open_sink(log_file: str | None) -> TextIO:
    """Stream structured events are printed to."""
    if not log_file:
        return sys.stderr
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    # Line buffered; the handle lives for the whole process.
    return path.open("a", encoding="utf-8", buffering=1)


def configure_logging(
    *,
    level: str = "WARNING",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the standard logging module.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render events as JSON lines.
        log_file: Append events to this file instead of stderr.

    Example:
        >>> configure_logging(level="DEBUG", log_file="logs/game.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    sink = _open_sink(log_file)
    colors = log_file is None and sys.stderr.isatty()

    structlog.configure(
        processors=_build_processors(json_format=json_format, colors=colors),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sink),
        cache_logger_on_first_use=True,
    )

    # Library code using the standard logging module
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        stream=sink,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every following log event.

    Example:
        >>> bind_context(character="Aria", dungeon="Goblin Cave")
        >>> logger.info("Monster defeated")  # includes character and dungeon
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything attached with ``bind_context``."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "GAME_NAME",
    "add_game_context",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
