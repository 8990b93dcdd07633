"""
Data models shared by the recency tracker, the index and the cache.
"""

from typing import Any, Hashable
from pydantic import BaseModel, ConfigDict


class NodeHandle(BaseModel):
    """
    Opaque reference to one node of a recency tracker.

    The generation is bumped every time a slot is freed, so a handle
    kept after its node was removed never matches a recycled slot.
    The owner identifies the tracker that issued the handle.
    """
    model_config = ConfigDict(frozen=True)

    owner: int
    slot: int
    generation: int


class CacheEntry(BaseModel):
    """Index slot: cached value plus the handle of its recency node"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: Hashable
    value: Any
    handle: NodeHandle
