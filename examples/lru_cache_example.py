"""
Example: LRU eviction order in a small cache.

Run with RECENCY_CACHE_LOG_LEVEL=DEBUG to see evictions logged.
"""

import logging

from recency_cache import LRUCache
from recency_cache.config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def main():
    cache = LRUCache(capacity=2)

    cache.put("Lightning Bolt", 1)
    cache.put("Counterspell", 2)
    logger.info(f"Lightning Bolt -> {cache.get('Lightning Bolt')}")

    # Counterspell is now least recently used and gets evicted
    cache.put("Dark Ritual", 1)

    logger.info(f"Recency order: {cache.keys_by_recency()}")
    logger.info(f"Counterspell cached: {'Counterspell' in cache}")
    logger.info(f"Stats: {cache.get_stats()}")


if __name__ == "__main__":
    main()
