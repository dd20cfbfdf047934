"""
Observability — Logging for enumtable.
"""

from enumtable.observability.logging import (
    building,
    current_label,
    configure_logging,
    get_logger,
    BuildRecordFilter,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "building",
    "current_label",
    "configure_logging",
    "get_logger",
    "BuildRecordFilter",
    "JSONFormatter",
    "ReadableFormatter",
]
