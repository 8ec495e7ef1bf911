"""Base cache shared by all eviction policy implementations."""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar
import threading
import time

import structlog

from evictcache.metrics import CACHE_EVICTIONS, CACHE_HITS, CACHE_MISSES
from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.services.in_memory_cache.exceptions import InvalidMaxSizeError, InvalidTtlError
from evictcache.services.in_memory_cache.rw_lock import ReadWriteLock
from evictcache.services.in_memory_cache.values_iterator import CacheValuesIterator

logger = structlog.get_logger()

K = TypeVar("K")
V = TypeVar("V")

RemovalCallback = Callable[[K, V], None]


class BaseCache(ABC, Generic[K, V]):
    """
    Abstract base class for timed, size-bounded caches.
    
    Holds a single backing map from key to CacheEntry, guarded by a
    reader/writer lock. Lookups take the read lock so they can run in
    parallel; every mutation takes the write lock. Subclasses choose the map
    type and implement their own prune strategy.
    
    Since the read lock can't be upgraded, get() removes expired entries while
    holding only the read lock. Removal from the map is idempotent, so two
    readers racing on the same expired key both succeed. Changes made to the
    map under the read lock, and the snapshots taken by iterators, are
    serialized by a small structure lock so a snapshot never sees the map
    change underneath it.
    """
    
    policy: EvictionPolicy
    
    def __init__(
        self,
        max_size: int = 0,
        default_ttl: float = 0,
        on_remove: Optional[RemovalCallback] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.
        
        Args:
            max_size: Maximum number of entries, 0 for no limit
            default_ttl: Default time-to-live in seconds, 0 for no expiry
            on_remove: Optional callback invoked with (key, value) for every
                entry removed by a prune pass, a size eviction or an expired
                lookup, and for an entry replaced by put. It runs while the
                cache lock is held, and the lock is not reentrant: the callback
                must not call back into the same cache
            clock: Source of the current time in seconds
        """
        if not isinstance(max_size, int) or isinstance(max_size, bool) or max_size < 0:
            raise InvalidMaxSizeError(max_size)
        if default_ttl < 0:
            raise InvalidTtlError(default_ttl)
        
        self._max_size = max_size
        self._default_ttl = default_ttl
        self._on_remove = on_remove
        self._clock = clock
        self._lock = ReadWriteLock()
        self._structure_lock = threading.Lock()
        self._cache_map: Dict[K, CacheEntry[K, V]] = self._create_map()
        # Set once any entry is stored with a ttl
        self._custom_ttl_used = False
    
    def _create_map(self) -> Dict[K, CacheEntry[K, V]]:
        """Create the backing map. Subclasses override to pick an ordering."""
        return {}
    
    @property
    def max_size(self) -> int:
        """Get the maximum number of entries, 0 meaning unbounded."""
        return self._max_size
    
    @property
    def default_ttl(self) -> float:
        """Get the default time-to-live in seconds, 0 meaning no expiry."""
        return self._default_ttl
    
    def put(self, key: K, value: V, ttl: Optional[float] = None) -> None:
        """
        Store a value in the cache.
        
        If the cache is full, it is pruned before the new entry is inserted,
        so the new entry is never evicted by its own put. An existing entry
        under the same key is replaced along with its bookkeeping.
        
        Args:
            key: The key to store
            value: The value to store
            ttl: Time-to-live in seconds; None uses the default ttl, 0 never expires
        """
        if ttl is None:
            ttl = self._default_ttl
        
        with self._lock.write_lock():
            entry = CacheEntry(key, value, ttl, self._clock())
            if ttl != 0:
                self._custom_ttl_used = True
            if self.is_full():
                self._run_prune()
            displaced = self._cache_map.get(key)
            self._insert(key, entry)
            if displaced is not None and self._on_remove is not None:
                self._on_remove(key, displaced.value)
    
    def _insert(self, key: K, entry: CacheEntry[K, V]) -> None:
        """Place an entry in the backing map. Called with the write lock held."""
        self._cache_map[key] = entry
    
    def get(self, key: K) -> Optional[V]:
        """
        Get a value from the cache by key.
        
        A found entry is touched: its last access time is refreshed and its
        access count incremented. An expired entry is removed and reported
        as missing.
        
        Args:
            key: The key to look up
            
        Returns:
            The cached value, or None if not found or expired
        """
        with self._lock.read_lock():
            entry = self._cache_map.get(key)
            if entry is None:
                CACHE_MISSES.labels(policy=self.policy.value).inc()
                return None
            
            now = self._clock()
            if entry.is_expired(now):
                # can't upgrade the lock; a concurrent reader may have popped it already
                with self._structure_lock:
                    popped = self._cache_map.pop(key, None)
                if popped is entry and self._on_remove is not None:
                    self._on_remove(key, entry.value)
                CACHE_MISSES.labels(policy=self.policy.value).inc()
                return None
            
            value = entry.touch_and_read(now)
            self._record_hit(key)
            CACHE_HITS.labels(policy=self.policy.value).inc()
            return value
    
    def _record_hit(self, key: K) -> None:
        """Hook for policies that reorder on access. Called with the read lock held."""
    
    def iterate(self) -> CacheValuesIterator[V]:
        """
        Get a lazy iterator over the non-expired values in the cache.
        
        Returns:
            An iterator that skips expired entries as it advances
        """
        return CacheValuesIterator(self)
    
    def __iter__(self) -> CacheValuesIterator[V]:
        return self.iterate()
    
    def _snapshot_items(self) -> List[Tuple[K, CacheEntry[K, V]]]:
        """Copy the map's items. Called with the read lock held."""
        with self._structure_lock:
            return list(self._cache_map.items())
    
    def prune(self) -> int:
        """
        Run the eviction policy's prune pass.
        
        Returns:
            The number of entries removed
        """
        with self._lock.write_lock():
            return self._run_prune()
    
    def _run_prune(self) -> int:
        removed = self._prune_cache()
        if removed:
            CACHE_EVICTIONS.labels(policy=self.policy.value).inc(removed)
            logger.debug(
                "Cache pruned",
                policy=self.policy.value,
                removed=removed,
                size=len(self._cache_map)
            )
        return removed
    
    @abstractmethod
    def _prune_cache(self) -> int:
        """
        Remove entries according to the eviction policy.
        
        Called with the write lock held.
        
        Returns:
            The number of entries removed
        """
        pass
    
    def _is_prune_expired_active(self) -> bool:
        """Check whether any entry could ever expire."""
        return self._default_ttl != 0 or self._custom_ttl_used
    
    def _prune_expired(self, now: float) -> int:
        """Remove every expired entry. Called with the write lock held."""
        count = 0
        for key, entry in list(self._cache_map.items()):
            if entry.is_expired(now):
                self._evict(key, entry)
                count += 1
        return count
    
    def _evict(self, key: K, entry: CacheEntry[K, V]) -> None:
        """Drop an entry chosen by the policy and notify the removal callback."""
        del self._cache_map[key]
        if self._on_remove is not None:
            self._on_remove(key, entry.value)
    
    def is_full(self) -> bool:
        """
        Check whether the cache has reached its size bound.
        
        Returns:
            False for an unbounded cache, otherwise True if size >= max_size
        """
        if self._max_size == 0:
            return False
        return len(self._cache_map) >= self._max_size
    
    def remove(self, key: K) -> None:
        """
        Remove a key from the cache. Missing keys are ignored.
        
        Args:
            key: The key to remove
        """
        with self._lock.write_lock():
            self._cache_map.pop(key, None)
    
    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock.write_lock():
            count = len(self._cache_map)
            self._cache_map.clear()
        logger.info("Cache cleared", policy=self.policy.value, removed=count)
    
    def size(self) -> int:
        """
        Get the current number of entries in the cache.
        
        Expired entries still count until they are removed.
        
        Returns:
            The number of entries currently in the cache
        """
        return len(self._cache_map)
    
    def is_empty(self) -> bool:
        """Check if the cache holds no entries."""
        return self.size() == 0
    
    def __len__(self) -> int:
        return self.size()
