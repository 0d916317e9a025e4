"""In-memory response cache for the Bitbucket v1 client."""

import logging
import threading
from typing import Any

from cachetools import LRUCache

from .constants import DEFAULT_CACHE_MAX_ENTRIES

logger = logging.getLogger("bitbucket-v1.cache")


class CacheProvider:
    """Bounded map from request URL to decoded JSON.

    Entries have no TTL. They are removed through :meth:`invalidate` when a
    write touches the resource, through :meth:`discard` when a caller forces
    a fresh read, or when the least recently used entry is evicted to stay
    within ``maxsize``.

    Each operation holds a lock. A read that spans a network round trip is
    not atomic, so callers take :attr:`generation` before fetching and pass
    it back to :meth:`set`; the value is dropped if anything was removed in
    between.
    """

    def __init__(self, maxsize: int = DEFAULT_CACHE_MAX_ENTRIES) -> None:
        self._entries: LRUCache[str, Any] = LRUCache(maxsize=maxsize)
        self._lock = threading.Lock()
        self._generation = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    @property
    def maxsize(self) -> int:
        return int(self._entries.maxsize)

    @property
    def generation(self) -> int:
        """Counter bumped on every removal."""
        with self._lock:
            return self._generation

    def get(self, key: str) -> Any | None:
        """Return the cached value for ``key``, or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any, generation: int | None = None) -> bool:
        """Store ``value`` under ``key``.

        Args:
            key: Full request URL
            value: Decoded JSON
            generation: :attr:`generation` seen before the value was fetched

        Returns:
            False when the value was dropped because entries were removed
            after ``generation`` was taken
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                logger.debug(f"Not caching {key}, cache changed during the fetch")
                return False
            self._entries[key] = value
            return True

    def discard(self, key: str) -> bool:
        """Drop the entry for exactly ``key``, leaving its children alone.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            self._generation += 1
            return self._entries.pop(key, None) is not None

    def invalidate(self, prefix: str) -> int:
        """Drop the entry for ``prefix`` along with its query variants and children.

        ``.../issues/1`` matches ``.../issues/1``, ``.../issues/1?x=y`` and
        ``.../issues/1/comments`` but never ``.../issues/10``.

        Args:
            prefix: Full URL of the resource

        Returns:
            Number of entries removed
        """
        prefix = prefix.rstrip("/")
        with self._lock:
            self._generation += 1
            stale = [
                key
                for key in self._entries
                if key == prefix
                or key.startswith(prefix + "/")
                or key.startswith(prefix + "?")
            ]
            for key in stale:
                del self._entries[key]

        if stale:
            logger.debug(f"Invalidated {len(stale)} cached object(s) under {prefix}")
        return len(stale)

    def clear(self) -> None:
        """Remove every cached entry."""
        with self._lock:
            self._generation += 1
            self._entries.clear()
