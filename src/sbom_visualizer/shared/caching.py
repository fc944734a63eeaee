"""
Caching utilities for derived SBOM views.
"""

import hashlib
import json
from collections import OrderedDict
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def compute_cache_key(*parts: Any) -> str:
    """Compute a SHA256 cache key over JSON-serializable inputs.

    Args:
        *parts: Values that fully determine the cached result

    Returns:
        SHA256 hex digest
    """
    payload = json.dumps(parts, sort_keys=True, default=str, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class ResultCache(Generic[T]):
    """Bounded in-memory cache keyed explicitly by input hashes."""

    def __init__(self, max_entries: int = 32):
        """Initialize the cache.

        Args:
            max_entries: Maximum number of results to keep (oldest evicted first)
        """
        self.max_entries = max_entries
        self._entries: OrderedDict[str, T] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """Return the cached value for key, computing and storing it on a miss.

        Args:
            key: Cache key from compute_cache_key
            compute: Zero-argument function producing the value

        Returns:
            Cached or freshly computed value
        """
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            return self._entries[key]

        self.misses += 1
        value = compute()
        self._entries[key] = value
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return value

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
