"""In-memory cache service with support for multiple eviction policies."""

from evictcache.services.in_memory_cache.cache_factory import (
    create_cache,
    get_in_memory_cache,
    reset_in_memory_cache
)
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.services.in_memory_cache.base import BaseCache
from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.values_iterator import CacheValuesIterator
from evictcache.services.in_memory_cache.eviction_policy.fifo_cache import FIFOCache
from evictcache.services.in_memory_cache.eviction_policy.lru_cache import LRUCache
from evictcache.services.in_memory_cache.eviction_policy.lfu_cache import LFUCache
from evictcache.services.in_memory_cache.eviction_policy.timed_cache import TimedCache
from evictcache.services.in_memory_cache.exceptions import (
    CacheError,
    FileCacheReadError,
    IllegalIteratorStateError,
    InvalidEvictionPolicyError,
    InvalidMaxSizeError,
    InvalidTtlError
)

__all__ = [
    "create_cache",
    "get_in_memory_cache",
    "reset_in_memory_cache",
    "EvictionPolicy",
    "BaseCache",
    "CacheEntry",
    "CacheValuesIterator",
    "FIFOCache",
    "LRUCache",
    "LFUCache",
    "TimedCache",
    "CacheError",
    "FileCacheReadError",
    "IllegalIteratorStateError",
    "InvalidEvictionPolicyError",
    "InvalidMaxSizeError",
    "InvalidTtlError",
]
