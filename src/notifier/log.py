"""Structured JSON logging for the notifier and its senders."""

import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TextIO

# Anything on a record that is not a standard LogRecord attribute came in
# through `extra={...}` and becomes its own JSON field.
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)


class JsonFormatter(logging.Formatter):
    """Render each record as one line of JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RESERVED
        )

        if record.exc_info and record.exc_info[1]:
            entry["error_type"] = type(record.exc_info[1]).__name__
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    suppress: Sequence[str] = (),
    stream: TextIO | None = None,
) -> None:
    """Install a single JSON handler on the root logger.

    Args:
        level: Root log level name; unknown names fall back to INFO.
        suppress: Logger names to quieten to WARNING.
        stream: Where to write; defaults to stdout.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
