"""
Fixed-capacity in-memory key-value cache with LRU eviction.

Example:
    cache = LRUCache(2)
    cache.put(1, 15)
    cache.put(2, 50)
    cache.get(1)  # 15
"""

from .caching import Index, LRUCache, RecencyTracker
from .exceptions import (
    CacheError,
    InvalidCapacityError,
    InvariantViolationError,
    StaleHandleError,
)
from .interfaces import ICache, CacheStats, IRecencyOrder
from .models import CacheEntry, NodeHandle

__version__ = "1.0.0"

__all__ = [
    "LRUCache",
    "RecencyTracker",
    "Index",
    "ICache",
    "IRecencyOrder",
    "CacheStats",
    "CacheEntry",
    "NodeHandle",
    "CacheError",
    "InvalidCapacityError",
    "InvariantViolationError",
    "StaleHandleError",
]
