"""
In-process TTL cache for translation results.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from shared.logging import get_logger


DEFAULT_TTL = 3600


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    expires_at: float


class TTLCache:
    """Key-value store whose entries expire a fixed time after being set.

    Expiry is checked when an entry is read; there is no background sweeper
    and no size bound. ``get`` and ``set`` never raise.
    """

    def __init__(self, default_ttl: int = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self.logger = get_logger("actions.cache")

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            self._misses += 1
            self.logger.debug("Cache entry expired", key=key)
            return None

        self._hits += 1
        return entry.value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store a value, replacing any existing entry and restarting its TTL."""
        cache_ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(key=key, value=value, expires_at=self._clock() + cache_ttl)
        self.logger.debug("Cached value", key=key, ttl=cache_ttl)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "default_ttl": self.default_ttl,
        }

    def __len__(self) -> int:
        return len(self._entries)
