"""
Build Options — Configuration for a single enum construction.

Options are validated up front so that a bad configuration is reported
before any entry is merged.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator


class BuildOptions(BaseModel):
    """
    Options recognised by create_enum.
    
    default_fields is merged beneath every entry. Its values are shared
    by reference across all entries, never cloned.
    """
    
    default_fields: dict[str, Any] | None = Field(
        default=None,
        alias="defaultFields",
        description="Fields applied to every entry beneath its own fields",
    )
    
    freeze: bool = Field(
        default=True,
        description="Return read-only EnumTable/EnumEntry views instead of plain dicts",
    )
    
    allow_override: bool = Field(
        default=True,
        description="Let an entry's own spec replace the computed name/index fields",
    )
    
    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
        "frozen": True,
    }
    
    @field_validator("default_fields", mode="before")
    @classmethod
    def _check_mergeable(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ValueError(f"default_fields must be a mapping, got {type(value).__name__}")
        bad_keys = [k for k in value if not isinstance(k, str)]
        if bad_keys:
            raise ValueError(f"default_fields keys must be strings, got {bad_keys!r}")
        return dict(value)
