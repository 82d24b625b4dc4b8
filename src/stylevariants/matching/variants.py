"""Single-variant matching: style contributed by each selected variant value."""

from __future__ import annotations

from typing import Any, Mapping

from stylevariants.styles import StyleMapping, lookup_or_empty, normalize_value

__all__ = ["match_variant"]


def match_variant(
    slot: str,
    variants: Mapping[str, Any] | None,
    selection: Mapping[str, Any],
) -> StyleMapping:
    """Merge the styles of every selected variant value for *slot*.

    The variant table is walked in declaration order, so a later declared
    variant overrides an earlier one on conflicting keys.  Variants missing
    from the selection (or selected as ``None``), unknown values and values
    without an entry for *slot* contribute nothing.
    """
    style: StyleMapping = {}
    if not variants:
        return style

    for name, values in variants.items():
        value = selection.get(name)
        if value is None or not values:
            continue
        match = lookup_or_empty(values, normalize_value(value), slot)
        if match:
            style = {**style, **match}
    return style
