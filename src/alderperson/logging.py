from __future__ import annotations

import contextvars
import logging
import sys
from pathlib import Path
from typing import Any

import orjson

_lookup_context: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar("lookup_context", default={})

# Attributes every LogRecord carries; anything else on a record came from ``extra=``.
_RECORD_ATTRS = frozenset(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class LookupJSONFormatter(logging.Formatter):
    """One JSON object per line: core fields, the lookup context and ``extra`` keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            **_lookup_context.get(),
        }
        payload.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """Send JSON lines to stdout, and to ``log_file`` when given."""

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = LookupJSONFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=log_level.upper(), handlers=handlers, force=True)


def set_lookup_context(**fields: Any) -> None:
    """Tag log records emitted by the current task, e.g. with a ``lookup_id``."""

    _lookup_context.set(dict(fields))
