"""
Errors raised by the cache engine.

All of them are ordinary, recoverable outcomes: a failed call leaves the
cache exactly as it was.
"""


class LRUCacheError(Exception):
    """Base class for cache errors"""


class KeyNotFoundError(LRUCacheError, KeyError):
    """Key is not present in the cache"""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found in cache: {self.key!r}"


class EmptyCacheError(LRUCacheError):
    """Operation needs at least one cached entry"""
