"""
Exception types raised by the recency cache.

A cache miss is never an error; ``get`` simply returns None.
"""


class CacheError(Exception):
    """Base class for all cache errors"""


class InvalidCapacityError(CacheError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


class InvariantViolationError(CacheError, RuntimeError):
    """
    Internal state is inconsistent.

    Signals a programming defect, not bad input. Callers should not
    try to recover from it.
    """


class StaleHandleError(InvariantViolationError):
    """Raised when a node handle no longer refers to a live tracker node."""
