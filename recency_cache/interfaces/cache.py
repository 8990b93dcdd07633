"""
Cache contract shared by every cache in the package.

Implementations are bounded, in-memory and single-threaded. Reads and
writes both count as a "touch" for eviction purposes.
"""

from abc import ABC, abstractmethod
from typing import Optional, Any, Hashable
from pydantic import BaseModel


class CacheStats(BaseModel):
    """Counters kept since construction or the last clear()"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0  # capacity evictions plus explicit evict() calls
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Share of get() calls that found their key, 0.0 before any get()"""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups > 0 else 0.0


class ICache(ABC):
    """
    Bounded key-value cache.

    A cache never holds more entries than its capacity. When a new key
    arrives at capacity, the implementation picks one resident entry to
    drop; callers must not rely on any entry surviving.
    """

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Look up key and count the lookup as a touch.

        A hit makes the key the most recently used entry. A miss is not
        an error and changes no entry's standing.

        Args:
            key: Hashable key

        Returns:
            Stored value on a hit, None on a miss
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or replace the value for key and count it as a touch.

        Replacing an existing key never evicts another entry. Inserting a
        new key into a full cache evicts exactly one entry first.

        Args:
            key: Hashable key
            value: Any object; stored by reference
        """
        pass

    @abstractmethod
    def evict(self, key: Hashable) -> None:
        """
        Drop key if present; absent keys are ignored.

        Args:
            key: Hashable key
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Hit, miss and eviction counters plus current size."""
        pass
