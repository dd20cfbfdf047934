"""
Enum Table — Read-only views returned by create_enum.

EnumEntry wraps one merged property bag; EnumTable maps keys to entries
in definition order. Both behave as Mappings and also expose their
contents as attributes, so `Color.RED.hex` and `Color["RED"]["hex"]`
are equivalent. Attribute access yields to the class's own methods
(`Color.find` is always the method); use item access for such keys.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterator


class EnumEntry(Mapping):
    """
    One member of an enum table.
    
    Fields iterate in merge order: defaults, then name/index, then the
    entry's own fields. Nested values are shared with the input.
    """
    
    __slots__ = ("_fields",)
    
    def __init__(self, fields: Mapping[str, Any]):
        object.__setattr__(self, "_fields", dict(fields))
    
    def __getitem__(self, key: str) -> Any:
        return self._fields[key]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)
    
    def __len__(self) -> int:
        return len(self._fields)
    
    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_fields":
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} {self._fields.get('name')!r} has no field {name!r}"
            ) from None
    
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")
    
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")
    
    def __dir__(self) -> list[str]:
        fields = [k for k in self._fields if isinstance(k, str)]
        return sorted(set(super().__dir__()) | set(fields))
    
    def __reduce__(self):
        return (type(self), (self._fields,))
    
    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{type(self).__name__}({body})"
    
    def to_dict(self) -> dict[str, Any]:
        """Fresh plain dict with the same fields (shallow)."""
        return dict(self._fields)


class EnumTable(Mapping):
    """
    Ordered, read-only mapping from key to EnumEntry.
    
    Lookup helpers return a default instead of raising when nothing
    matches; "not found" handling belongs to the caller.
    """
    
    __slots__ = ("_entries", "_label")
    
    def __init__(self, entries: Mapping[str, Mapping[str, Any]], label: str | None = None):
        object.__setattr__(self, "_entries", {
            key: value if isinstance(value, EnumEntry) else EnumEntry(value)
            for key, value in entries.items()
        })
        object.__setattr__(self, "_label", label)
    
    @property
    def label(self) -> str | None:
        """Human name given to the table at build time."""
        return self._label
    
    def __getitem__(self, key: str) -> EnumEntry:
        return self._entries[key]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __getattr__(self, name: str) -> EnumEntry:
        if name.startswith("__") or name in ("_entries", "_label"):
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(
                f"{self._label or type(self).__name__} has no entry {name!r}"
            ) from None
    
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")
    
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")
    
    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._entries))
    
    def __reduce__(self):
        return (type(self), (self._entries, self._label))
    
    def __repr__(self) -> str:
        name = self._label or type(self).__name__
        return f"<{name}: {', '.join(self._entries)}>"
    
    def names(self) -> list[str]:
        """Keys in definition order."""
        return list(self._entries)
    
    def by_index(self, index: int) -> EnumEntry:
        """Entry at the given position in definition order (no negative indexing)."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"index {index} out of range for {len(self._entries)} entries")
        return list(self._entries.values())[index]
    
    def find(self, field: str, value: Any, default: Any = None) -> EnumEntry | Any:
        """
        Reverse lookup by a non-key field.
        
        Args:
            field: Field name to compare (e.g. "value", "hex")
            value: Value the field must equal
            default: Returned when no entry matches
        
        Returns:
            First matching entry in definition order, else default
        """
        for entry in self._entries.values():
            if field in entry and entry[field] == value:
                return entry
        return default
    
    def filter(self, predicate: Callable[[EnumEntry], bool]) -> list[EnumEntry]:
        """Entries satisfying predicate, in definition order."""
        return [entry for entry in self._entries.values() if predicate(entry)]
    
    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Plain dict-of-dicts copy of the table."""
        return {key: entry.to_dict() for key, entry in self._entries.items()}
