"""Structured JSON logger for mdricos.

Every log record is emitted as a single-line JSON object so it can be
consumed by log aggregation pipelines without additional parsing.

Typical structured output::

    {"ts": "2025-07-01T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "mdricos.converter", "message": "conversion complete",
     "tokens": 7, "nodes": 11, "skipped": 0}

Only the package logger ``"mdricos"`` owns a handler.  Module loggers such
as ``"mdricos.walker"`` propagate to it, so one call to
``get_logger("mdricos", level="DEBUG")`` turns on debug output everywhere.

Usage::

    from mdricos.observability import get_logger

    log = get_logger("mdricos.converter")
    log.debug("converted", extra={"extra_fields": {"nodes": 12}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER_NAME = "mdricos"


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The formatter produces a JSON object with the following guaranteed keys:

    * ``ts`` -- ISO-8601 UTC timestamp
    * ``level`` -- Python log level name (``DEBUG``, ``INFO``, ...)
    * ``logger`` -- Logger name
    * ``message`` -- Formatted log message

    Extra structured fields passed via ``extra={"extra_fields": {...}}`` are
    merged into the top-level object.  Exception and stack info are
    serialised when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler on the package logger; get_logger is idempotent.
_configured_root = False


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    level: int | str | None = None,
    stream: Any | None = None,
) -> logging.Logger:
    """Get a logger inside the ``mdricos`` hierarchy.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"mdricos"``.
    level:
        If given, set on the returned logger.  Accepts an ``int`` or a
        case-insensitive level name.  The package logger starts at
        ``WARNING``.
    stream:
        Output stream for the package handler, used only when the handler
        is first created.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The named logger.  The package logger carries a
        :class:`StructuredFormatter` handler and does not propagate to the
        root logger.
    """
    global _configured_root

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _configured_root:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        root.propagate = False
        _configured_root = True

    logger = logging.getLogger(name)
    if level is not None:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)
    return logger
