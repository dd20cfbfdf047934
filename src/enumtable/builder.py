"""
Enum Builder — Turns a plain description into an enum table.

Each key's spec is merged, lowest to highest precedence:

    default_fields  ->  {name: key, index: i}  ->  entry spec

so entry fields always win, including over the computed name/index
(unless BuildOptions.allow_override is False). Indices follow the
input's iteration order: insertion order for mappings, sequence order
for (key, spec) pairs.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from enumtable.errors import EnumBuildError, InvalidDefaultFields, InvalidInputShape
from enumtable.observability.logging import building, get_logger
from enumtable.options import BuildOptions
from enumtable.table import EnumTable


logger = get_logger("builder")

RESERVED_FIELDS = ("name", "index")

EntryTable = Mapping[str, Mapping[str, Any]] | Iterable[tuple[str, Mapping[str, Any]]]


def create_enum(
    entries: EntryTable,
    options: BuildOptions | Mapping[str, Any] | None = None,
    *,
    default_fields: Mapping[str, Any] | None = None,
    label: str | None = None,
) -> EnumTable | dict[str, dict[str, Any]]:
    """
    Build an enum table from entry specs.
    
    Args:
        entries: Ordered mapping of key -> spec, or iterable of (key, spec) pairs
        options: BuildOptions or a mapping of option values
        default_fields: Shorthand for options.default_fields
        label: Name of the table, used in logs and repr
    
    Returns:
        EnumTable, or a plain dict of dicts when options.freeze is False
    
    Raises:
        InvalidInputShape: entries is not an ordered collection of mergeable specs
        InvalidDefaultFields: default_fields is not a mergeable spec
        EnumBuildError: options are otherwise invalid
    """
    with building(label):
        try:
            opts = _resolve_options(options, default_fields)
            pairs = _ordered_pairs(entries)
            merged = _merge(pairs, opts)
        except EnumBuildError as exc:
            logger.warning(
                "Enum construction failed: %s", exc,
                extra={"build_fields": {"error": type(exc).__name__}},
            )
            raise
        
        logger.debug(
            "Built enum with %d entries", len(merged),
            extra={"build_fields": {
                "entry_count": len(merged),
                "keys": list(merged),
                "default_fields": sorted(opts.default_fields or {}),
                "frozen": opts.freeze,
            }},
        )
    
    if not opts.freeze:
        return merged
    return EnumTable(merged, label=label)


def _merge(pairs: list[tuple[str, Mapping[str, Any]]], opts: BuildOptions) -> dict[str, dict[str, Any]]:
    defaults = opts.default_fields or {}
    merged = {}
    
    for index, (key, spec) in enumerate(pairs):
        if not opts.allow_override:
            clashes = [f for f in RESERVED_FIELDS if f in spec]
            if clashes:
                raise InvalidInputShape(
                    f"Entry {key!r} redefines reserved field(s) {', '.join(clashes)}"
                )
        merged[key] = {**defaults, "name": key, "index": index, **spec}
    
    return merged


def _ordered_pairs(entries: Any) -> list[tuple[str, Mapping[str, Any]]]:
    """Normalise entries into a validated list of (key, spec) pairs."""
    if isinstance(entries, Mapping):
        pairs = list(entries.items())
    elif isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
        raise InvalidInputShape(
            f"entries must be a mapping or an iterable of (key, spec) pairs, "
            f"got {type(entries).__name__}"
        )
    else:
        pairs = []
        seen = set()
        for position, item in enumerate(entries):
            if not isinstance(item, (tuple, list)) or len(item) != 2:
                raise InvalidInputShape(
                    f"entries[{position}] must be a (key, spec) pair, got {item!r}"
                )
            key, spec = item
            if not isinstance(key, str):
                raise InvalidInputShape(f"Entry keys must be strings, got {key!r}")
            if key in seen:
                raise InvalidInputShape(f"Duplicate key {key!r} at entries[{position}]")
            seen.add(key)
            pairs.append((key, spec))
    
    for key, spec in pairs:
        if not isinstance(key, str):
            raise InvalidInputShape(f"Entry keys must be strings, got {key!r}")
        if not isinstance(spec, Mapping):
            raise InvalidInputShape(
                f"Spec for {key!r} must be a mapping, got {type(spec).__name__}"
            )
    
    return pairs


def _resolve_options(
    options: BuildOptions | Mapping[str, Any] | None,
    default_fields: Mapping[str, Any] | None,
) -> BuildOptions:
    if options is None:
        opts = BuildOptions()
    elif isinstance(options, BuildOptions):
        opts = options
    elif isinstance(options, Mapping):
        opts = _validate_options(dict(options))
    else:
        raise EnumBuildError(
            f"options must be BuildOptions or a mapping, got {type(options).__name__}"
        )
    
    if default_fields is None:
        return opts
    if opts.default_fields is not None:
        raise InvalidDefaultFields("default_fields given both as keyword and in options")
    
    values = opts.model_dump(exclude={"default_fields"})
    values["default_fields"] = default_fields
    return _validate_options(values)


def _validate_options(values: dict[str, Any]) -> BuildOptions:
    try:
        return BuildOptions.model_validate(values)
    except ValidationError as exc:
        locations = {err["loc"][0] for err in exc.errors() if err["loc"]}
        if locations & {"default_fields", "defaultFields"}:
            raise InvalidDefaultFields(str(exc)) from exc
        raise EnumBuildError(str(exc)) from exc
