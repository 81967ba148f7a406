"""
In-memory Least-Recently-Used cache.

A fixed-capacity associative container that evicts the least recently
accessed entry whenever an insertion would exceed capacity.
"""

from .config import Settings, get_settings
from .exceptions import EmptyCacheError, KeyNotFoundError, LRUCacheError
from .interfaces import ICache
from .lru_cache import CacheItem, LRUCache

__version__ = "0.1.0"

__all__ = [
    # Cache
    "ICache",
    "LRUCache",
    "CacheItem",
    # Errors
    "LRUCacheError",
    "KeyNotFoundError",
    "EmptyCacheError",
    # Configuration
    "Settings",
    "get_settings",
]
