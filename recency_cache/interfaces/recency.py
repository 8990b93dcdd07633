"""
Recency order interface.

A recency order is a sequence of keys from most recently used (front)
to least recently used (back). Every operation is O(1); nodes are
addressed through handles so that promotion and removal never search.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Optional
from ..models.entry import NodeHandle


class IRecencyOrder(ABC):
    """Contract for the linked ordering behind an LRU cache."""

    @abstractmethod
    def push_front(self, key: Hashable) -> NodeHandle:
        """
        Insert a new node holding key at the front.

        Returns:
            Handle for later promotion or removal of this node
        """
        pass

    @abstractmethod
    def move_to_front(self, handle: NodeHandle) -> None:
        """Detach the node behind handle and re-insert it at the front."""
        pass

    @abstractmethod
    def remove(self, handle: NodeHandle) -> None:
        """Detach the node behind handle. The handle is dead afterwards."""
        pass

    @abstractmethod
    def back(self) -> Optional[Hashable]:
        """Key of the least recently used node, or None if empty."""
        pass

    @abstractmethod
    def pop_back(self) -> Hashable:
        """
        Remove the least recently used node.

        Returns:
            The key that was held by the removed node

        Raises:
            IndexError: If the order is empty
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every node. Outstanding handles become stale."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Hashable]:
        """Iterate keys from front (most recent) to back (least recent)."""
        pass

    @abstractmethod
    def __contains__(self, handle: object) -> bool:
        """True if handle refers to a live node."""
        pass
