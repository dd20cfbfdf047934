"""
Logging — Build records for enumtable.

Records emitted while a table is being built carry that table's label,
and the builder attaches its own facts (entry count, keys, error type)
as `build_fields`. Both formatters render those fields: JSON merges them
into the object, the readable form appends them as key=value pairs.
"""

import logging
import json
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator


# Label of the table currently being built
_build_label: ContextVar[str | None] = ContextVar("build_label", default=None)


def current_label() -> str | None:
    """Label of the table being built in this context, if any."""
    return _build_label.get()


@contextmanager
def building(label: str | None) -> Iterator[None]:
    """Tag every record emitted inside the block with a table label."""
    token = _build_label.set(str(label) if label else None)
    try:
        yield
    finally:
        _build_label.reset(token)


class BuildRecordFilter(logging.Filter):
    """Normalises enum_label and build_fields on every record."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        record.enum_label = current_label() or "-"
        if not isinstance(getattr(record, "build_fields", None), dict):
            record.build_fields = {}
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record, build_fields merged at top level."""
    
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "enum_label": getattr(record, "enum_label", "-"),
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "build_fields", {}))
        
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(payload, default=str)


class ReadableFormatter(logging.Formatter):
    """`LEVEL [label] logger: message key=value ...` lines."""
    
    def format(self, record: logging.LogRecord) -> str:
        label = getattr(record, "enum_label", "-")
        line = f"{record.levelname:<7} [{label}] {record.name}: {record.getMessage()}"
        
        fields = getattr(record, "build_fields", {})
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        
        return line


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Install a single handler on the `enumtable` logger.
    
    Args:
        level: Logging level
        json_format: Emit JSON objects instead of readable lines
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(BuildRecordFilter())
    handler.setFormatter(JSONFormatter() if json_format else ReadableFormatter())
    
    package_logger = logging.getLogger("enumtable")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an enumtable component."""
    return logging.getLogger(f"enumtable.{name}")
