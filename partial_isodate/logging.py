from __future__ import annotations

import logging
import os
import sys

import structlog
from dotenv import load_dotenv

LOG_LEVEL_ENV = "PARTIAL_ISODATE_LOG_LEVEL"

_def_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def resolve_level(level: str | None = None) -> int:
    if level is None:
        load_dotenv()
        level = os.environ.get(LOG_LEVEL_ENV, "").strip() or "INFO"
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise RuntimeError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: str | None = None) -> None:
    """JSON logs on stderr; stdout stays free for command output.

    Loggers are not cached, so calling this again switches the level in-process.
    """
    lvl = resolve_level(level)
    structlog.configure(
        processors=_def_processors,
        wrapper_class=structlog.make_filtering_bound_logger(lvl),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
