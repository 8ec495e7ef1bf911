"""FIFO (First In First Out) cache implementation."""

from typing import Optional

from evictcache.services.in_memory_cache.base import BaseCache
from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy


class FIFOCache(BaseCache):
    """
    Thread-safe FIFO (First In First Out) cache implementation.
    
    Entries are kept in insertion order and never moved on access. When the
    cache is full, the oldest inserted entry is ejected. Replacing an existing
    key keeps its original position.
    
    Fast and simple, but not adaptive: frequently used entries are evicted
    just as readily as ones that are never read.
    """
    
    policy = EvictionPolicy.FIFO
    
    def _prune_cache(self) -> int:
        """
        Prune expired entries and, if the cache is still full, the oldest one.
        
        Returns:
            The number of entries removed
        """
        count = 0
        first: Optional[CacheEntry] = None
        now = self._clock()
        
        for key, entry in list(self._cache_map.items()):
            if entry.is_expired(now):
                self._evict(key, entry)
                count += 1
            elif first is None:
                first = entry
        
        if first is not None and self.is_full():
            self._evict(first.key, first)
            count += 1
        
        return count
