"""
Unit tests for the key index.
"""

import pytest
from recency_cache.caching import Index
from recency_cache.exceptions import InvariantViolationError
from recency_cache.models import NodeHandle


@pytest.fixture
def handle():
    return NodeHandle(owner=0, slot=0, generation=0)


class TestIndex:
    """Insert, lookup and removal."""

    def test_lookup_missing_key(self):
        index = Index()
        assert index.lookup("missing") is None
        assert not index.contains("missing")
        assert len(index) == 0

    def test_insert_and_lookup(self, handle):
        index = Index()
        index.insert("bolt", 3, handle)

        entry = index.lookup("bolt")
        assert entry.key == "bolt"
        assert entry.value == 3
        assert entry.handle == handle
        assert "bolt" in index
        assert len(index) == 1

    def test_lookup_returns_stored_entry(self, handle):
        index = Index()
        index.insert("bolt", 3, handle)

        index.lookup("bolt").value = 4
        assert index.lookup("bolt").value == 4

    def test_duplicate_insert_is_rejected(self, handle):
        index = Index()
        index.insert("bolt", 3, handle)
        with pytest.raises(InvariantViolationError):
            index.insert("bolt", 5, NodeHandle(owner=0, slot=1, generation=0))
        assert index.lookup("bolt").value == 3

    def test_remove(self, handle):
        index = Index()
        index.insert("bolt", 3, handle)

        entry = index.remove("bolt")
        assert entry.value == 3
        assert entry.handle == handle
        assert index.remove("bolt") is None
        assert len(index) == 0

    def test_keys_and_clear(self):
        index = Index()
        for slot, key in enumerate(["a", "b", "c"]):
            index.insert(key, slot, NodeHandle(owner=0, slot=slot, generation=0))

        assert set(index.keys()) == {"a", "b", "c"}
        index.clear()
        assert len(index) == 0
        assert list(index.keys()) == []

    def test_value_may_be_any_object(self, handle):
        index = Index()
        value = object()
        index.insert(("tuple", "key"), value, handle)
        assert index.lookup(("tuple", "key")).value is value
