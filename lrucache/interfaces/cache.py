"""
Cache interface - contract shared by cache implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable


class ICache(ABC):
    """
    Cache interface following Strategy Pattern.

    Implementations own their entries and keep lookup and ordering
    consistent across every public call.
    """

    @abstractmethod
    def get(self, key: Hashable) -> Any:
        """
        Retrieve value from cache, marking it as recently used.

        Args:
            key: Cache key

        Returns:
            Cached value

        Raises:
            KeyNotFoundError: If key is not cached
        """
        pass

    @abstractmethod
    def peek(self, key: Hashable) -> Any:
        """
        Retrieve value from cache without touching recency.

        Raises:
            KeyNotFoundError: If key is not cached
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    def delete(self, key: Hashable) -> None:
        """
        Remove specific key from cache. Missing keys are ignored.

        Args:
            key: Cache key to remove
        """
        pass

    @abstractmethod
    def contains(self, key: Hashable) -> bool:
        """Check membership without touching recency."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all entries from cache."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def is_empty(self) -> bool:
        """Equivalent to ``len(cache) == 0``."""
        return len(self) == 0
