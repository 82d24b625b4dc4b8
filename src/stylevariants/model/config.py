"""Configuration model: Config and CompoundRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from stylevariants.styles import StyleMapping

# slot -> style
Base = dict[str, StyleMapping]
# variant name -> value key -> slot -> style
Variants = dict[str, dict[str, dict[str, StyleMapping]]]
# variant name -> selected value
Selection = dict[str, Any]


@dataclass(frozen=True)
class CompoundRule:
    """A style patch applied when every condition matches the selection.

    Attributes:
        conditions: Variant name -> required value.
        css: Slot -> style patch merged when the rule matches.
    """

    conditions: dict[str, Any] = field(default_factory=dict)
    css: dict[str, StyleMapping] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompoundRule:
        """Build a rule from the flat form ``{"size": "lg", "css": {...}}``."""
        conditions = {k: v for k, v in data.items() if k != "css"}
        css = data.get("css") or {}
        return cls(conditions=conditions, css=dict(css))


@dataclass(frozen=True)
class Config:
    """Declarative description of a component's styles.

    Construction never rejects content: unknown slots, variants and values are
    tolerated and simply contribute nothing at resolution time.
    """

    slots: tuple[str, ...]
    base: Base = field(default_factory=dict)
    variants: Variants = field(default_factory=dict)
    default_variants: Selection = field(default_factory=dict)
    compound_variants: tuple[CompoundRule, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists, a lone slot name and flat-dict compound rules; store tuples.
        slots = (self.slots,) if isinstance(self.slots, str) else tuple(self.slots or ())
        object.__setattr__(self, "slots", slots)
        object.__setattr__(self, "base", dict(self.base or {}))
        object.__setattr__(self, "variants", dict(self.variants or {}))
        object.__setattr__(self, "default_variants", dict(self.default_variants or {}))
        rules = tuple(
            rule if isinstance(rule, CompoundRule) else CompoundRule.from_dict(rule)
            for rule in (self.compound_variants or ())
        )
        object.__setattr__(self, "compound_variants", rules)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a Config from a mapping, accepting snake_case or camelCase keys."""
        defaults = data.get("default_variants", data.get("defaultVariants"))
        compounds = data.get("compound_variants", data.get("compoundVariants"))
        return cls(
            slots=data.get("slots") or (),
            base=data.get("base") or {},
            variants=data.get("variants") or {},
            default_variants=defaults or {},
            compound_variants=tuple(compounds or ()),
        )

    @property
    def variant_names(self) -> list[str]:
        """Variant names in declaration order."""
        return list(self.variants)
