"""Util expansion: rewrite shorthand keys into primitive style properties.

A util is a named shortcut such as ``px`` that expands one value into several
properties::

    utils = {"px": lambda v: {"paddingLeft": v, "paddingRight": v}}
    expand_style({"px": 10, "color": "red"}, utils)
    # {"paddingLeft": 10, "paddingRight": 10, "color": "red"}

Expansion is single pass: a util's output is never expanded again.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Mapping

from stylevariants.model.config import Base, CompoundRule, Config, Variants
from stylevariants.styles import StyleMapping, normalize_value

__all__ = [
    "UtilTable",
    "expand_base",
    "expand_compound_variants",
    "expand_config",
    "expand_style",
    "expand_util",
    "expand_variants",
]

UtilTable = Mapping[str, Callable[[Any], StyleMapping]]


def expand_util(name: str, value: Any, utils: UtilTable) -> StyleMapping:
    """Expand a single ``name: value`` pair.

    A name that is not in *utils* is returned unchanged as ``{name: value}``.
    """
    util = utils.get(name)
    if util is None:
        return {name: value}
    return dict(util(value))


def expand_style(style: Mapping[str, Any] | None, utils: UtilTable) -> StyleMapping:
    """Expand every util key in *style*.

    Util names shadow style properties with the same name.  Keys are processed
    in order and later keys win on conflict.
    """
    if not style:
        return {}

    result: StyleMapping = {}
    for key, value in style.items():
        if key in utils:
            result.update(utils[key](value))
        else:
            result[key] = value
    return result


def expand_base(base: Mapping[str, Any] | None, utils: UtilTable) -> Base:
    """Expand utils in every slot of a base style table."""
    if not base:
        return {}
    return {slot: expand_style(style, utils) for slot, style in base.items()}


def expand_variants(variants: Mapping[str, Any] | None, utils: UtilTable) -> Variants:
    """Expand utils in every leaf of a variant table.

    Value keys are normalised on the way through so ``True`` and ``"true"``
    land on the same entry.
    """
    if not variants:
        return {}

    result: Variants = {}
    for name, values in variants.items():
        if not values:
            continue
        expanded_values: dict[str, dict[str, StyleMapping]] = {}
        for value_key, slots in values.items():
            if not slots:
                continue
            expanded_values[normalize_value(value_key)] = {
                slot: expand_style(style, utils) for slot, style in slots.items()
            }
        result[name] = expanded_values
    return result


def expand_compound_variants(
    rules: tuple[CompoundRule, ...] | list[CompoundRule] | None, utils: UtilTable
) -> tuple[CompoundRule, ...]:
    """Expand utils in each compound rule's patch, preserving rule order."""
    if not rules:
        return ()
    return tuple(
        CompoundRule(
            conditions=dict(rule.conditions),
            css={slot: expand_style(style, utils) for slot, style in rule.css.items()},
        )
        for rule in rules
    )


def expand_config(config: Config, utils: UtilTable) -> Config:
    """Return a copy of *config* with all utils expanded.

    This is the declaration-time pass; the result contains no util keys.
    """
    return replace(
        config,
        base=expand_base(config.base, utils),
        variants=expand_variants(config.variants, utils),
        compound_variants=expand_compound_variants(config.compound_variants, utils),
    )
