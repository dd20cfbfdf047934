"""
Errors raised while building enum tables.

Construction is all-or-nothing: any of these aborts the build and no
partial table is returned.
"""


class EnumBuildError(Exception):
    """Base class for enum construction failures."""
    pass


class InvalidInputShape(EnumBuildError):
    """Raised when entries are not an ordered mapping of mergeable specs."""
    pass


class InvalidDefaultFields(EnumBuildError):
    """Raised when default_fields is present but not a mergeable spec."""
    pass
