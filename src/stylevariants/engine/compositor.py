"""Slot composition: base, variant and compound styles merged for one slot."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from stylevariants.matching import match_compound, match_variant
from stylevariants.model.config import CompoundRule
from stylevariants.styles import StyleMapping, lookup_or_empty

__all__ = ["compose_slot"]


def compose_slot(
    slot: str,
    base: Mapping[str, Any] | None,
    variants: Mapping[str, Any] | None,
    rules: Iterable[CompoundRule] | None,
    selection: Mapping[str, Any],
) -> StyleMapping:
    """Compute the final style for *slot*.

    Precedence, lowest to highest: base < variant matches < compound matches.
    """
    return {
        **lookup_or_empty(base, slot),
        **match_variant(slot, variants, selection),
        **match_compound(slot, rules, selection),
    }
