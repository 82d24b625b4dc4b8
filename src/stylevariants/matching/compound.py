"""Compound-variant matching: patches applied when several variants line up."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from stylevariants.model.config import CompoundRule
from stylevariants.styles import StyleMapping, normalize_value

__all__ = ["match_compound", "rule_matches"]


def rule_matches(rule: CompoundRule, selection: Mapping[str, Any]) -> bool:
    """Return True when every condition of *rule* holds for *selection*.

    Conditions compare normalised values.  A condition on a variant that is
    absent from the selection (or selected as ``None``) never holds.  A rule
    without conditions always matches.
    """
    for name, required in rule.conditions.items():
        selected = selection.get(name)
        if selected is None:
            return False
        if normalize_value(required) != normalize_value(selected):
            return False
    return True


def match_compound(
    slot: str,
    rules: Iterable[CompoundRule] | None,
    selection: Mapping[str, Any],
) -> StyleMapping:
    """Merge the *slot* patches of every matching rule, in declaration order."""
    style: StyleMapping = {}
    if not rules:
        return style

    for rule in rules:
        if not rule_matches(rule, selection):
            continue
        patch = rule.css.get(slot)
        if patch:
            style = {**style, **patch}
    return style
