"""
enumtable — Enriched, read-only enumeration tables.

    >>> from enumtable import create_enum
    >>> Color = create_enum({"RED": {"hex": "#F00"}, "GREEN": {"hex": "#0F0"}})
    >>> Color.GREEN.index
    1
"""

from enumtable.builder import create_enum
from enumtable.errors import EnumBuildError, InvalidDefaultFields, InvalidInputShape
from enumtable.observability import configure_logging, get_logger
from enumtable.options import BuildOptions
from enumtable.table import EnumEntry, EnumTable

__version__ = "0.1.0"

__all__ = [
    "create_enum",
    "BuildOptions",
    "EnumTable",
    "EnumEntry",
    "EnumBuildError",
    "InvalidInputShape",
    "InvalidDefaultFields",
    "configure_logging",
    "get_logger",
]
