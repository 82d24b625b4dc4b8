"""Style mapping primitives: value normalisation, merging and safe lookup."""

from __future__ import annotations

from typing import Any, Mapping

# A style mapping: property name -> primitive value or small nested mapping
# (e.g. a shadow offset {"width": 0, "height": 1}).
StyleMapping = dict[str, Any]

__all__ = ["StyleMapping", "lookup_or_empty", "merge_styles", "normalize_value"]


def normalize_value(value: Any) -> str:
    """Normalize a variant value for comparison.

    Booleans become ``"true"``/``"false"`` so that a table keyed by those
    strings matches literal ``True``/``False``.  Everything else goes through
    ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def lookup_or_empty(mapping: Mapping[Any, Any] | None, *keys: Any) -> Any:
    """Follow *keys* through nested mappings, returning ``{}`` on any miss."""
    current: Any = mapping
    for key in keys:
        if not isinstance(current, Mapping):
            return {}
        current = current.get(key)
        if current is None:
            return {}
    return current


def _flatten(styles: Any, out: list[Mapping[str, Any]]) -> None:
    for item in styles:
        if not item:
            continue
        if isinstance(item, (list, tuple)):
            _flatten(item, out)
        elif isinstance(item, Mapping):
            out.append(item)


def merge_styles(*styles: Any) -> StyleMapping:
    """Merge style mappings left to right into a new mapping.

    Accepts mappings, ``None`` and arbitrarily nested lists/tuples of those.
    Keys whose value is ``None`` are skipped, so they never erase an earlier
    value.
    """
    flat: list[Mapping[str, Any]] = []
    _flatten(styles, flat)

    result: StyleMapping = {}
    for style in flat:
        for key, value in style.items():
            if value is not None:
                result[key] = value
    return result
