"""
Recency tracker backed by an arena of slots.

Nodes live in parallel lists indexed by slot number. The prev/next links
are plain slot indices, with NIL marking "no neighbour", so promotion and
removal are a handful of index rewrites. Freed slots go on a free list
and are reused by the next push.
"""

import itertools
from typing import Hashable, Iterator, List, Optional
from ..exceptions import StaleHandleError
from ..interfaces.recency import IRecencyOrder
from ..models.entry import NodeHandle

NIL = -1

_tracker_ids = itertools.count()


class RecencyTracker(IRecencyOrder):
    """
    Doubly-linked recency order over cache keys.

    Front is the most recently used key, back is the least recently
    used one (the eviction candidate).

    Features:
    - O(1) push_front, move_to_front, remove, back and pop_back
    - Generation-checked handles: a handle to a removed node is rejected
      with StaleHandleError instead of corrupting the chain
    - Owner-checked handles: a handle issued by another tracker is
      rejected the same way
    """

    def __init__(self):
        self._owner = next(_tracker_ids)
        self._keys: List[Optional[Hashable]] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._generation: List[int] = []
        self._live: List[bool] = []
        self._free: List[int] = []

        self._head = NIL
        self._tail = NIL
        self._size = 0

    def push_front(self, key: Hashable) -> NodeHandle:
        """
        Insert a new node holding key at the front.

        Args:
            key: Key to track

        Returns:
            Handle of the new node
        """
        slot = self._allocate(key)
        self._link_front(slot)
        self._size += 1
        return NodeHandle(
            owner=self._owner, slot=slot, generation=self._generation[slot]
        )

    def move_to_front(self, handle: NodeHandle) -> None:
        """
        Promote the node behind handle to most recently used.

        Args:
            handle: Handle of a live node
        """
        slot = self._resolve(handle)
        if slot == self._head:
            return
        self._unlink(slot)
        self._link_front(slot)

    def remove(self, handle: NodeHandle) -> None:
        """
        Detach the node behind handle and free its slot.

        Args:
            handle: Handle of a live node
        """
        slot = self._resolve(handle)
        self._unlink(slot)
        self._release(slot)

    def back(self) -> Optional[Hashable]:
        """Key of the least recently used node, None if empty."""
        if self._tail == NIL:
            return None
        return self._keys[self._tail]

    def front(self) -> Optional[Hashable]:
        """Key of the most recently used node, None if empty."""
        if self._head == NIL:
            return None
        return self._keys[self._head]

    def pop_back(self) -> Hashable:
        """
        Remove the least recently used node.

        Returns:
            Key held by the removed node

        Raises:
            IndexError: If the tracker is empty
        """
        slot = self._tail
        if slot == NIL:
            raise IndexError("pop_back from empty recency tracker")
        key = self._keys[slot]
        self._unlink(slot)
        self._release(slot)
        return key

    def clear(self) -> None:
        """Drop every node. Outstanding handles become stale."""
        # Generations survive a clear so old handles stay rejected
        for slot, live in enumerate(self._live):
            if live:
                self._release(slot)
        self._head = NIL
        self._tail = NIL

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Hashable]:
        slot = self._head
        while slot != NIL:
            yield self._keys[slot]
            slot = self._next[slot]

    def __contains__(self, handle: object) -> bool:
        """True if handle refers to a live node of this tracker."""
        if not isinstance(handle, NodeHandle):
            return False
        return self._is_live(handle)

    def __repr__(self) -> str:
        return f"RecencyTracker({list(self)!r})"

    # Slot management

    def _allocate(self, key: Hashable) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._live[slot] = True
            return slot

        self._keys.append(key)
        self._prev.append(NIL)
        self._next.append(NIL)
        self._generation.append(0)
        self._live.append(True)
        return len(self._keys) - 1

    def _release(self, slot: int) -> None:
        self._keys[slot] = None
        self._prev[slot] = NIL
        self._next[slot] = NIL
        self._generation[slot] += 1
        self._live[slot] = False
        self._free.append(slot)
        self._size -= 1

    def _is_live(self, handle: NodeHandle) -> bool:
        slot = handle.slot
        return (
            handle.owner == self._owner
            and 0 <= slot < len(self._keys)
            and self._live[slot]
            and self._generation[slot] == handle.generation
        )

    def _resolve(self, handle: NodeHandle) -> int:
        if not self._is_live(handle):
            raise StaleHandleError(
                f"Handle {handle!r} does not refer to a live node"
            )
        return handle.slot

    # Link management

    def _link_front(self, slot: int) -> None:
        self._prev[slot] = NIL
        self._next[slot] = self._head
        if self._head != NIL:
            self._prev[self._head] = slot
        self._head = slot
        if self._tail == NIL:
            self._tail = slot

    def _unlink(self, slot: int) -> None:
        prev_slot = self._prev[slot]
        next_slot = self._next[slot]

        if prev_slot != NIL:
            self._next[prev_slot] = next_slot
        else:
            self._head = next_slot

        if next_slot != NIL:
            self._prev[next_slot] = prev_slot
        else:
            self._tail = prev_slot

        self._prev[slot] = NIL
        self._next[slot] = NIL
