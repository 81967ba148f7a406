"""
Example: Using the LRUCache

Walks through the basic lifecycle of a cache: eviction on overflow,
growing capacity, and recency updates deciding what gets evicted.

Run with LRUCACHE_LOG_LEVEL=DEBUG to see evictions as they happen.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import lrucache
sys.path.insert(0, str(Path(__file__).parent.parent))

from lrucache import EmptyCacheError, LRUCache, get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def show(cache: LRUCache, keys) -> None:
    state = ", ".join(f"{key}: {'in' if key in cache else 'not in'} cache" for key in keys)
    print(f"  {state}")
    print(f"  {cache!r}")


def main():
    # create a new LRU cache with initial capacity of 1 item
    cache = LRUCache(1)

    print("1. put 1='a', put 2='b' with capacity 1")
    cache[1] = "a"
    cache[2] = "b"
    # key 1 is eldest and capacity is only 1
    show(cache, [1, 2])

    print("\n2. grow capacity to 2 and put 1='a' again")
    cache.capacity = 2
    cache[1] = "a"
    show(cache, [1, 2])

    print("\n3. read key 2, then put 3='c'")
    print(f"  cache[2] == {cache[2]!r}")
    cache[3] = "c"
    # key 1 was least recently used
    show(cache, [1, 2, 3])

    print("\n4. peek does not update recency")
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    print(f"  peek(1) == {cache.peek(1)!r}")
    cache.put(3, 3)
    show(cache, [1, 2, 3])

    print("\n5. empty cache has no most recently used entry")
    try:
        LRUCache(1).most_recently_used()
    except EmptyCacheError as e:
        logger.info(f"Expected failure: {e}")
        print(f"  EmptyCacheError: {e}")


if __name__ == "__main__":
    main()
