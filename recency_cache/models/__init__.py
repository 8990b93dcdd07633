from .entry import CacheEntry, NodeHandle

__all__ = [
    "CacheEntry",
    "NodeHandle",
]
