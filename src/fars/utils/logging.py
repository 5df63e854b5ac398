"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO, Union

# Attributes present on every LogRecord; anything else came from ``extra=``.
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_HANDLER_NAME = "fars-default"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload.
    Supports structured queries in log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via logger.info(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a stream handler to the ``fars`` package logger.

    Library modules only create loggers; applications call this once to see
    their output.  Calling it again replaces the previous handler rather
    than adding a second one.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of a plain text format.
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return logger
