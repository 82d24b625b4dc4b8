"""Style resolver: the cached, per-configuration hot path."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from stylevariants.engine.cache import (
    CachePartition,
    CacheRegistry,
    ResolvedStyleSet,
    canonicalize,
)
from stylevariants.engine.compositor import compose_slot
from stylevariants.model.config import Config, Selection
from stylevariants.utils.expander import UtilTable, expand_config

__all__ = ["StyleResolver", "clear_style_cache", "declare"]

logger = logging.getLogger(__name__)

_NO_UTILS: UtilTable = MappingProxyType({})

# Partitions for configurations declared outside a factory.
_default_registry = CacheRegistry()


class StyleResolver:
    """Compute the resolved style set of a configuration for a selection.

    Utils are expanded once, here, and every call afterwards works on the
    expanded configuration.  Results are stored in the resolver's own
    partition, so calling twice with the same effective selection returns the
    same object.  That object is shared by every caller, so it and its
    per-slot styles are read-only mappings; copy with ``dict()`` to edit.

    Usage::

        button = declare(Config(
            slots=("root", "label"),
            base={"root": {"padding": 16}},
            variants={"size": {"sm": {"root": {"padding": 8}}}},
            default_variants={"size": "sm"},
        ))
        styles = button(size="sm")
        styles["root"]  # {"padding": 8}
    """

    def __init__(
        self,
        config: Config,
        utils: UtilTable | None = None,
        partition: CachePartition | None = None,
    ) -> None:
        self._config = expand_config(config, utils or _NO_UTILS)
        self._slots = tuple(self._config.slots)
        self._rules = tuple(self._config.compound_variants)
        self._defaults = dict(self._config.default_variants)
        self._partition = partition if partition is not None else CachePartition()

        logger.debug(
            "Declared configuration: slots=%s variants=%d compound_rules=%d",
            ",".join(self._slots),
            len(self._config.variants),
            len(self._rules),
        )

    # --- introspection --------------------------------------------------------

    @property
    def config(self) -> Config:
        """The configuration with utils expanded."""
        return self._config

    @property
    def slots(self) -> tuple[str, ...]:
        return self._slots

    @property
    def default_variants(self) -> Selection:
        return dict(self._defaults)

    @property
    def partition(self) -> CachePartition:
        return self._partition

    # --- resolution -----------------------------------------------------------

    def effective_selection(
        self, selection: Mapping[str, Any] | None = None, **variants: Any
    ) -> Selection:
        """Overlay the explicitly provided (non-None) values on the defaults."""
        effective: Selection = dict(self._defaults)
        for source in (selection or {}, variants):
            for name, value in source.items():
                if value is not None:
                    effective[name] = value
        return effective

    def __call__(
        self, selection: Mapping[str, Any] | None = None, **variants: Any
    ) -> ResolvedStyleSet:
        effective = self.effective_selection(selection, **variants)
        key = canonicalize(effective)

        cached = self._partition.get(key)
        if cached is not None:
            return cached

        logger.debug("Style cache miss: key=%s", key)
        result: ResolvedStyleSet = MappingProxyType({
            slot: MappingProxyType(
                compose_slot(
                    slot,
                    self._config.base,
                    self._config.variants,
                    self._rules,
                    effective,
                )
            )
            for slot in self._slots
        })
        return self._partition.put(key, result)

    def __repr__(self) -> str:
        return (
            f"StyleResolver(slots={list(self._slots)}, "
            f"variants={self._config.variant_names}, cached={len(self._partition)})"
        )


def declare(config: Config) -> StyleResolver:
    """Declare a configuration without a theme or utils.

    The resolver's partition comes from the module-level registry, which
    :func:`clear_style_cache` empties.
    """
    label = ",".join(config.slots)
    return StyleResolver(config, partition=_default_registry.allocate(label))


def clear_style_cache() -> None:
    """Clear every partition of configurations declared with :func:`declare`."""
    _default_registry.clear()
