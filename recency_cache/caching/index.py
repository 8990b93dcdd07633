"""
Key index for the LRU cache: key -> (value, recency node handle).
"""

from typing import Any, Dict, Hashable, Iterator, Optional
from ..exceptions import InvariantViolationError
from ..models.entry import CacheEntry, NodeHandle


class Index:
    """Hash-based association of cache keys to their entries."""

    def __init__(self):
        self._entries: Dict[Hashable, CacheEntry] = {}

    def insert(self, key: Hashable, value: Any, handle: NodeHandle) -> CacheEntry:
        """
        Add a new entry.

        Raises:
            InvariantViolationError: If key is already indexed
        """
        if key in self._entries:
            raise InvariantViolationError(f"Key {key!r} is already indexed")
        entry = CacheEntry(key=key, value=value, handle=handle)
        self._entries[key] = entry
        return entry

    def lookup(self, key: Hashable) -> Optional[CacheEntry]:
        """Return the stored entry (mutable in place) or None."""
        return self._entries.get(key)

    def remove(self, key: Hashable) -> Optional[CacheEntry]:
        return self._entries.pop(key, None)

    def contains(self, key: Hashable) -> bool:
        return key in self._entries

    def keys(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
