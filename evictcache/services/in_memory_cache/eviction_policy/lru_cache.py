"""LRU (Least Recently Used) cache implementation."""

from collections import OrderedDict
from typing import Dict

import structlog

from evictcache.metrics import CACHE_EVICTIONS
from evictcache.services.in_memory_cache.base import BaseCache
from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy

logger = structlog.get_logger()


class LRUCache(BaseCache):
    """
    Thread-safe LRU (Least Recently Used) cache implementation.
    
    Uses an OrderedDict kept in access order: every put and every successful
    get moves the key to the most recently used end. When an insert pushes
    the size past max_size, the least recently used entry is dropped right
    away, so prune() only has to deal with expired entries.
    
    Fast and adaptive, but not scan resistant.
    """
    
    policy = EvictionPolicy.LRU
    
    def _create_map(self) -> Dict:
        return OrderedDict()
    
    def _insert(self, key, entry: CacheEntry) -> None:
        """
        Add or replace an entry at the most recently used end.
        
        Evicts the least recently used entry if the cache is now over size.
        """
        self._cache_map[key] = entry
        self._cache_map.move_to_end(key)
        
        if self._max_size and len(self._cache_map) > self._max_size:
            eldest_key, eldest = next(iter(self._cache_map.items()))
            self._evict(eldest_key, eldest)
            CACHE_EVICTIONS.labels(policy=self.policy.value).inc()
            logger.debug("Cache evicted least recently used entry", policy=self.policy.value)
    
    def _record_hit(self, key) -> None:
        with self._structure_lock:
            try:
                self._cache_map.move_to_end(key)
            except KeyError:
                # removed by a concurrent reader that found it expired
                pass
    
    def _prune_cache(self) -> int:
        """
        Prune only expired entries. Size eviction already happens on insert.
        
        Returns:
            The number of entries removed
        """
        if not self._is_prune_expired_active():
            return 0
        return self._prune_expired(self._clock())
