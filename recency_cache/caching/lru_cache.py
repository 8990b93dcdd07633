"""
LRU (Least Recently Used) Cache implementation.

Composes a key Index with a RecencyTracker. Every operation resolves the
key in the index first, then updates the tracker, so both structures hold
exactly the same keys after each call.
"""

import itertools
import logging
from typing import Any, Hashable, List, Optional
from ..config import settings
from ..exceptions import InvalidCapacityError, InvariantViolationError
from ..interfaces.cache import ICache, CacheStats
from ..interfaces.recency import IRecencyOrder
from .index import Index
from .recency_tracker import RecencyTracker

logger = logging.getLogger(__name__)


class LRUCache(ICache):
    """
    Fixed-capacity cache with least-recently-used eviction.

    Features:
    - O(1) get/put operations
    - Eviction of the least recently touched key when full
    - Hit/miss/eviction statistics
    - Pluggable recency order (any IRecencyOrder)

    Not thread-safe. Wrap the whole cache in one lock if it is shared.
    """

    def __init__(self, capacity: Optional[int] = None, order: Optional[IRecencyOrder] = None):
        """
        Initialize LRU cache.

        Args:
            capacity: Maximum number of entries (default: settings.default_capacity)
            order: Recency order to use (default: a new RecencyTracker)

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if capacity is None:
            capacity = settings.default_capacity

        # bool is an int subclass but never a meaningful capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(
                f"Capacity must be an integer, got {type(capacity).__name__}"
            )
        if capacity < 1:
            raise InvalidCapacityError(f"Capacity must be >= 1, got {capacity}")

        if order is None:
            order = RecencyTracker()
        elif len(order) != 0:
            raise ValueError("Recency order must be empty")

        self._capacity = capacity
        self._index = Index()
        self._order = order

        # Statistics tracking
        self._stats = CacheStats()

        logger.debug(f"Created LRU cache with capacity {capacity}")

    @property
    def capacity(self) -> int:
        """Maximum number of entries, fixed at construction."""
        return self._capacity

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Retrieve value from cache with LRU tracking.

        A hit promotes the key to most recently used, even if it already
        is. A miss leaves the recency order untouched.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        entry = self._index.lookup(key)

        if entry is None:
            self._stats.misses += 1
            return None

        self._order.move_to_front(entry.handle)
        self._stats.hits += 1
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache, evicting the LRU entry if needed.

        Updating an existing key replaces its entry and makes it the most
        recently used one without changing the size.

        Args:
            key: Cache key
            value: Value to cache
        """
        existing = self._index.lookup(key)

        if existing is not None:
            self._order.remove(existing.handle)
            self._index.remove(key)
        elif len(self._index) == self._capacity:
            self._evict_lru()

        handle = self._order.push_front(key)
        self._index.insert(key, value, handle)

    def evict(self, key: Hashable) -> None:
        """
        Remove specific key from cache.

        Args:
            key: Cache key to evict
        """
        entry = self._index.lookup(key)
        if entry is not None:
            self._order.remove(entry.handle)
            self._index.remove(key)
            self._stats.evictions += 1

    def clear(self) -> None:
        """Clear all entries from cache."""
        self._index.clear()
        self._order.clear()
        self._stats = CacheStats()  # Reset stats

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, size, and hit_rate
        """
        self._stats.size = len(self._index)
        return self._stats

    def contains(self, key: Hashable) -> bool:
        """Check if key is cached without updating recency."""
        return key in self._index

    def peek_lru(self) -> Optional[Hashable]:
        """Key that the next eviction would remove, without promoting it."""
        return self._order.back()

    def keys_by_recency(self) -> List[Hashable]:
        """
        Get keys from most to least recently used.

        Useful for debugging and monitoring; does not promote anything.
        """
        return list(self._order)

    def check_consistency(self) -> None:
        """
        Verify that index and recency order describe the same entries.

        Raises:
            InvariantViolationError: On any mismatch
        """
        # A corrupted chain may cycle, so walk at most one node past the count
        expected = len(self._order)
        ordered = list(itertools.islice(self._order, expected + 1))

        if len(ordered) != expected:
            raise InvariantViolationError(
                f"Recency order reports {expected} nodes but its links disagree"
            )
        if len(self._index) != len(ordered):
            raise InvariantViolationError(
                f"Index holds {len(self._index)} keys, recency order {len(ordered)}"
            )
        if len(ordered) > self._capacity:
            raise InvariantViolationError(
                f"Cache holds {len(ordered)} entries, capacity is {self._capacity}"
            )
        if set(ordered) != set(self._index.keys()):
            raise InvariantViolationError("Index and recency order hold different keys")

        for key in ordered:
            entry = self._index.lookup(key)
            if entry.handle not in self._order:
                raise InvariantViolationError(f"Key {key!r} has a stale recency handle")

    def _evict_lru(self) -> None:
        """Evict the least recently used entry (back of the recency order)."""
        if len(self._order) == 0:
            raise InvariantViolationError("Cache is full but recency order is empty")

        lru_key = self._order.pop_back()
        if self._index.remove(lru_key) is None:
            raise InvariantViolationError(f"Evicted key {lru_key!r} was not indexed")

        self._stats.evictions += 1
        logger.debug(f"Evicted LRU key: {lru_key!r}")

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self)})"
