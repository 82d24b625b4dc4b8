"""Resolution cache: canonical selection keys and per-configuration partitions."""

from __future__ import annotations

import itertools
import threading
import weakref
from typing import Any, Mapping

from stylevariants.styles import StyleMapping, normalize_value

__all__ = [
    "EMPTY_KEY",
    "CachePartition",
    "CacheRegistry",
    "ResolvedStyleSet",
    "canonicalize",
    "get",
    "put",
]

# slot -> fully merged style, read-only
ResolvedStyleSet = Mapping[str, StyleMapping]

EMPTY_KEY = "{}"

_ESCAPES = str.maketrans({"\\": "\\\\", ":": "\\:", ";": "\\;"})


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def canonicalize(selection: Mapping[str, Any] | None) -> str:
    """Encode a selection as an order-independent cache key.

    Keys are sorted, ``None`` values are skipped and values are normalised the
    same way the matchers normalise them, so ``True`` and ``"true"`` share a
    key while distinct selections never collide.  An empty selection encodes
    as ``"{}"``.
    """
    if not selection:
        return EMPTY_KEY

    parts: list[str] = []
    for name in sorted(selection):
        value = selection[name]
        if value is None:
            continue
        parts.append(f"{_escape(name)}:{_escape(normalize_value(value))};")
    return "".join(parts) or EMPTY_KEY


class CachePartition:
    """Canonical key -> resolved style set store for one declared configuration.

    Entries are inserted once and never updated, so a lock around the dict
    operations is all the coordination needed.
    """

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._lock = threading.Lock()
        self._entries: dict[str, ResolvedStyleSet] = {}

    def get(self, key: str) -> ResolvedStyleSet | None:
        """Return the cached set for *key*, or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: ResolvedStyleSet) -> ResolvedStyleSet:
        """Store *value* under *key* unless already present; return the stored set."""
        with self._lock:
            return self._entries.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"CachePartition(label={self.label!r}, entries={len(self)})"


class CacheRegistry:
    """Hands out one dedicated partition per declared configuration.

    Partitions are tracked weakly: once the resolver owning a partition is
    gone, the partition drops out of the registry.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._partitions: weakref.WeakValueDictionary[int, CachePartition] = (
            weakref.WeakValueDictionary()
        )

    def allocate(self, label: str = "") -> CachePartition:
        """Create and register a fresh, empty partition."""
        partition = CachePartition(label)
        with self._lock:
            self._partitions[next(self._ids)] = partition
        return partition

    def clear(self) -> None:
        """Empty every partition handed out by this registry."""
        with self._lock:
            partitions = list(self._partitions.values())
        for partition in partitions:
            partition.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._partitions)


def get(partition: CachePartition, key: str) -> ResolvedStyleSet | None:
    return partition.get(key)


def put(partition: CachePartition, key: str, value: ResolvedStyleSet) -> ResolvedStyleSet:
    return partition.put(key, value)
