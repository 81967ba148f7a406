"""
LRU (Least Recently Used) Cache implementation.

Entries live in an arena of parallel slot lists linked by integer indices
into a doubly-linked recency list (head = most recently used, tail = least
recently used). A dict maps each key to its slot, so lookup, promotion,
insertion and eviction are all O(1).
"""

import logging
from collections.abc import Mapping
from typing import (
    Annotated,
    Any,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from pydantic import Field, StrictInt, TypeAdapter

from .config import get_settings
from .exceptions import EmptyCacheError, KeyNotFoundError
from .interfaces.cache import ICache

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Link value marking "no slot"
_NIL = -1

# Strict: "3", True and 2.0 are rejected rather than coerced
_capacity_adapter = TypeAdapter(Annotated[StrictInt, Field(ge=0)])


class CacheItem(NamedTuple, Generic[K, V]):
    """Snapshot of a single cached (key, value) pair"""
    key: K
    value: V


class LRUCache(ICache, Generic[K, V]):
    """
    LRU Cache backed by a slot arena and a key index.

    Features:
    - O(1) get/peek/put/delete
    - Automatic LRU eviction whenever size exceeds capacity
    - Capacity can be changed at any time; shrinking evicts immediately
    - Freed slots are recycled through a free-list

    Not thread-safe: wrap every call in one external lock when sharing an
    instance between threads.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of entries. Defaults to
                ``Settings.default_capacity``. Zero is allowed and yields a
                cache that evicts everything inserted.

        Raises:
            pydantic.ValidationError: If capacity is negative or not a plain int
        """
        if capacity is None:
            capacity = get_settings().default_capacity
        self._capacity: int = _capacity_adapter.validate_python(capacity)
        self._reset()

    def _reset(self) -> None:
        self._index: Dict[K, int] = {}
        self._keys: List[Any] = []
        self._values: List[Any] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head = _NIL
        self._tail = _NIL

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Maximum number of entries"""
        return self._capacity

    @capacity.setter
    def capacity(self, capacity: int) -> None:
        capacity = _capacity_adapter.validate_python(capacity)
        logger.debug(f"Capacity changed from {self._capacity} to {capacity}")
        self._capacity = capacity
        self._evict_overflow()

    def get_capacity(self) -> int:
        """Get maximum cache size."""
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        """
        Resize the cache.

        Evicts least recently used entries until the cache fits. Growing
        never evicts.
        """
        self.capacity = capacity

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """Return number of cached entries."""
        return len(self._index)

    def get_size(self) -> int:
        """Get current cache size."""
        return len(self._index)

    def is_full(self) -> bool:
        """Equivalent to ``len(cache) == cache.capacity``."""
        return len(self._index) == self._capacity

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def contains(self, key: K) -> bool:
        """Check whether key is cached. Does *not* update recency."""
        return key in self._index

    def peek(self, key: K) -> V:
        """
        Read value by key without updating recency.

        Raises:
            KeyNotFoundError: If key is not cached
        """
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            raise KeyNotFoundError(key)
        return self._values[slot]

    def get(self, key: K) -> V:
        """
        Read value by key and mark it as most recently used.

        Raises:
            KeyNotFoundError: If key is not cached
        """
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            raise KeyNotFoundError(key)
        self._promote(slot)
        return self._values[slot]

    def get_or_default(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Like ``peek``, but return ``default`` instead of raising.

        Never inserts and never updates recency.
        """
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            return default
        return self._values[slot]

    def get_or_insert(self, key: K, default: V) -> V:
        """
        Return the cached value for key, inserting ``default`` if absent.

        A hit leaves recency untouched. A miss inserts ``default`` as the
        most recently used entry, which may evict (with capacity 0 the new
        entry itself is evicted, but ``default`` is still returned).
        """
        slot = self._index.get(key, _NIL)
        if slot != _NIL:
            return self._values[slot]
        self._insert(key, default)
        return default

    def most_recently_used(self) -> CacheItem[K, V]:
        """
        Return the most recently used entry.

        Raises:
            EmptyCacheError: If cache is empty
        """
        if self._head == _NIL:
            raise EmptyCacheError("Cannot get most recently used entry from empty cache")
        return CacheItem(self._keys[self._head], self._values[self._head])

    def least_recently_used(self) -> CacheItem[K, V]:
        """
        Return the least recently used entry, the next eviction candidate.

        Raises:
            EmptyCacheError: If cache is empty
        """
        if self._tail == _NIL:
            raise EmptyCacheError("Cannot get least recently used entry from empty cache")
        return CacheItem(self._keys[self._tail], self._values[self._tail])

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, key: K, value: V) -> None:
        """
        Store value in cache and mark it as most recently used.

        Existing keys are overwritten in place. New keys may evict the least
        recently used entries once size exceeds capacity.
        """
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            self._insert(key, value)
            return
        self._values[slot] = value
        self._promote(slot)

    def put_batch(self, items: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> None:
        """
        Put multiple entries, in order.

        Args:
            items: Mapping or iterable of (key, value) pairs
        """
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self.put(key, value)

    def delete(self, key: K) -> None:
        """Delete key from cache. Does nothing if key is not cached."""
        slot = self._index.get(key, _NIL)
        if slot != _NIL:
            self._remove(slot)

    def clear(self) -> None:
        """Remove all entries."""
        size = len(self._index)
        self._reset()
        logger.debug(f"Cleared {size} entries")

    # ------------------------------------------------------------------
    # Mapping-style access
    # ------------------------------------------------------------------

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        slot = self._index.get(key, _NIL)
        if slot == _NIL:
            raise KeyNotFoundError(key)
        self._remove(slot)

    def __iter__(self) -> Iterator[K]:
        """Iterate over a snapshot of keys, most recently used first."""
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self.items()!r})"

    # ------------------------------------------------------------------
    # Snapshots (most recently used first, never touch recency)
    # ------------------------------------------------------------------

    def _walk(self) -> Iterator[int]:
        slot = self._head
        while slot != _NIL:
            yield slot
            slot = self._next[slot]

    def keys(self) -> List[K]:
        """Get cached keys, most recently used first. Does *not* update recency."""
        return [self._keys[slot] for slot in self._walk()]

    def values(self) -> List[V]:
        """Get cached values, most recently used first. Does *not* update recency."""
        return [self._values[slot] for slot in self._walk()]

    def items(self) -> List[CacheItem[K, V]]:
        """
        Get (key, value) snapshots, most recently used first.

        Does *not* update recency, and the returned items never alias
        cache internals.

        Returns:
            List of CacheItem in recency order
        """
        return [CacheItem(self._keys[slot], self._values[slot]) for slot in self._walk()]

    def lru_order(self) -> List[K]:
        """
        Get keys in LRU order (least recently used first).

        Useful for debugging and monitoring.
        """
        order = []
        slot = self._tail
        while slot != _NIL:
            order.append(self._keys[slot])
            slot = self._prev[slot]
        return order

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _insert(self, key: K, value: V) -> None:
        """Add a new entry at the head, then evict down to capacity."""
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
        else:
            slot = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._prev.append(_NIL)
            self._next.append(_NIL)
        self._index[key] = slot
        self._push_front(slot)
        self._evict_overflow()

    def _push_front(self, slot: int) -> None:
        self._prev[slot] = _NIL
        self._next[slot] = self._head
        if self._head == _NIL:
            self._tail = slot
        else:
            self._prev[self._head] = slot
        self._head = slot

    def _unlink(self, slot: int) -> None:
        prev_slot = self._prev[slot]
        next_slot = self._next[slot]
        if prev_slot == _NIL:
            self._head = next_slot
        else:
            self._next[prev_slot] = next_slot
        if next_slot == _NIL:
            self._tail = prev_slot
        else:
            self._prev[next_slot] = prev_slot

    def _promote(self, slot: int) -> None:
        if slot != self._head:
            self._unlink(slot)
            self._push_front(slot)

    def _remove(self, slot: int) -> None:
        """Drop a slot from both the recency list and the index."""
        self._unlink(slot)
        del self._index[self._keys[slot]]
        # Release references so evicted values can be collected
        self._keys[slot] = None
        self._values[slot] = None
        self._prev[slot] = _NIL
        self._next[slot] = _NIL
        self._free.append(slot)

    def _evict_overflow(self) -> None:
        """Evict least recently used entries while size exceeds capacity."""
        while len(self._index) > self._capacity:
            slot = self._tail
            key = self._keys[slot]
            self._remove(slot)
            logger.debug(f"Evicted LRU entry: {key!r}")
