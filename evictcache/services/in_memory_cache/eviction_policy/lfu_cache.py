"""LFU (Least Frequently Used) cache implementation."""

from typing import Optional

from evictcache.services.in_memory_cache.base import BaseCache
from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy


class LFUCache(BaseCache):
    """
    Thread-safe LFU (Least Frequently Used) cache implementation.
    
    Frequency is the entry's access count. On eviction, the access count of
    every entry is reduced by the count of the least used one, and all
    entries that drop to zero are removed together. Entries that were used
    much more than the evicted baseline keep their lead, while new entries
    get a fair chance to enter the cache.
    
    Captures long term usage patterns and is scan resistant, but prune is a
    full pass over the cache and it adapts slowly to changing access patterns.
    """
    
    policy = EvictionPolicy.LFU
    
    def _prune_cache(self) -> int:
        """
        Prune expired entries and, if the cache is still full, the least
        frequently used ones.
        
        Returns:
            The number of entries removed
        """
        count = 0
        least_used: Optional[CacheEntry] = None
        now = self._clock()
        
        # remove expired entries and find the one with the lowest access count
        for key, entry in list(self._cache_map.items()):
            if entry.is_expired(now):
                self._evict(key, entry)
                count += 1
                continue
            if least_used is None or entry.access_count < least_used.access_count:
                least_used = entry
        
        if not self.is_full() or least_used is None:
            return count
        
        # normalize access counts against the least used entry
        min_access_count = least_used.access_count
        for key, entry in list(self._cache_map.items()):
            entry.access_count -= min_access_count
            if entry.access_count <= 0:
                self._evict(key, entry)
                count += 1
        
        return count
