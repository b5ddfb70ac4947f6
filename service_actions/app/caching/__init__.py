"""
Actions caching package.

Holds the in-process TTL cache used by the MyMemory translation tool.
Entries live only for the lifetime of the process.
"""

from .ttl_cache import TTLCache, CacheEntry, DEFAULT_TTL

__all__ = ["TTLCache", "CacheEntry", "DEFAULT_TTL"]
