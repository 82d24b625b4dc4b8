"""Resolution engine: compositor, cache and resolver."""

from stylevariants.engine.cache import (
    CachePartition,
    CacheRegistry,
    ResolvedStyleSet,
    canonicalize,
)
from stylevariants.engine.compositor import compose_slot
from stylevariants.engine.resolver import StyleResolver, clear_style_cache, declare

__all__ = [
    "compose_slot",
    "canonicalize",
    "CachePartition",
    "CacheRegistry",
    "ResolvedStyleSet",
    "StyleResolver",
    "declare",
    "clear_style_cache",
]
