"""structlog front end for the palette, written out through loguru sinks.

Palette events carry user text (the query being typed, item titles). Those
fields are listed in ``USER_TEXT_FIELDS`` and pass through
``sanitize_log_message`` on every event, so call sites log them as-is.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, cast

import structlog
from loguru import logger as loguru_logger
from structlog.exceptions import DropEvent
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, WrappedLogger

from commandbar.config.settings import ENV_PREFIX, log_dir
from commandbar.utils.sanitize import sanitize_log_message


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <7} | {name} | {message} | {extra}"
DEFAULT_LOG_FILENAME = "commandbar.log"
USER_TEXT_FIELDS = frozenset({"query", "title"})
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class LoggingOptions:
    level: LogLevel = "INFO"
    rotation: str = "2 MB"
    retention: int = 3
    log_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "LoggingOptions":
        """Honour ``COMMANDBAR_LOG_LEVEL``; unknown names keep the default."""
        raw = (os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or "").strip().upper()
        if raw in _LEVELS:
            return cls(level=cast(LogLevel, raw))
        return cls()


_configured_log_path: Optional[Path] = None


def configure_logging(options: LoggingOptions | None = None) -> Path:
    """Install the stderr and file sinks and point structlog at them."""
    global _configured_log_path

    opts = options or LoggingOptions.from_env()
    log_path = opts.log_path or (log_dir() / DEFAULT_LOG_FILENAME)

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=opts.level, format=LOG_FORMAT)
    # The file sink records debug events whatever the console level.
    loguru_logger.add(
        log_path,
        level="DEBUG",
        rotation=opts.rotation,
        retention=opts.retention,
        encoding="utf-8",
        format=LOG_FORMAT,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _sanitize_user_text,
            structlog.processors.format_exc_info,
            _log_to_loguru,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        cache_logger_on_first_use=True,
    )

    _configured_log_path = log_path
    return log_path


def _sanitize_user_text(
    _: WrappedLogger,
    __: str,
    event_dict: EventDict,
) -> EventDict:
    for key in USER_TEXT_FIELDS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = sanitize_log_message(value)
    return event_dict


def _log_to_loguru(
    _: WrappedLogger,
    __: str,
    event_dict: EventDict,
) -> EventDict:
    level = str(event_dict.pop("level", "info")).upper()
    message = str(event_dict.pop("event", ""))
    exception = event_dict.pop("exception", None)
    if exception:
        message = f"{message}\n{exception}"
    loguru_logger.bind(**event_dict).opt(depth=6).log(level, message)
    raise DropEvent


def get_logger(*initial_values: object, **initial_kw: object) -> BoundLogger:
    if _configured_log_path is None:
        configure_logging()
    return cast(BoundLogger, structlog.get_logger(*initial_values, **initial_kw))


def log_file_path() -> Path:
    if _configured_log_path is None:
        return configure_logging()
    return _configured_log_path


__all__ = [
    "LoggingOptions",
    "USER_TEXT_FIELDS",
    "configure_logging",
    "get_logger",
    "log_file_path",
]
