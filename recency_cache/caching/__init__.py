"""
Cache implementations and the structures they are built from.

LRUCache implements the ICache interface; RecencyTracker implements
IRecencyOrder and can be swapped for another recency order.
"""

from .index import Index
from .lru_cache import LRUCache
from .recency_tracker import RecencyTracker

__all__ = [
    "Index",
    "LRUCache",
    "RecencyTracker",
]
