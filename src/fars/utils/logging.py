"""Centralized log formatting and handler setup for the ``fars`` logger."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, IO, Optional, Union

_PACKAGE_LOGGER = "fars"

# Standard LogRecord attributes; everything else on a record came from extra=
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling again replaces the handler added by the previous call, so the
    function is safe to use repeatedly (e.g. from a notebook).

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of the plain text format.
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT))
    handler._fars_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
