"""Stylevariants model layer -- public type re-exports."""

from stylevariants.model.config import Base, CompoundRule, Config, Selection, Variants

__all__ = [
    "Base",
    "Variants",
    "Selection",
    "CompoundRule",
    "Config",
]
