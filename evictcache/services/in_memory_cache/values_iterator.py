"""Lazy iterator over the live values of a cache."""

from typing import TYPE_CHECKING, Generic, List, Optional, Tuple, TypeVar

from evictcache.services.in_memory_cache.cache_entry import CacheEntry
from evictcache.services.in_memory_cache.exceptions import IllegalIteratorStateError

if TYPE_CHECKING:
    from evictcache.services.in_memory_cache.base import BaseCache

K = TypeVar("K")
V = TypeVar("V")


class CacheValuesIterator(Generic[V]):
    """
    Single-pass iterator over non-expired cache values.
    
    The entries present at creation are captured under the read lock; values
    are then resolved lazily. Entries that have expired, or that were removed
    or replaced after the iterator was created, are skipped. Skipping never
    evicts anything: only remove() deletes from the cache.
    """
    
    def __init__(self, cache: "BaseCache[K, V]"):
        self._cache_map = cache._cache_map
        self._lock = cache._lock
        self._clock = cache._clock
        with self._lock.read_lock():
            self._entries: List[Tuple[K, CacheEntry[K, V]]] = cache._snapshot_items()
        self._position = 0
        self._next_entry: Optional[CacheEntry[K, V]] = None
        self._current_entry: Optional[CacheEntry[K, V]] = None
        self._advance()
    
    def _advance(self) -> None:
        """Resolve the next live entry, or None when the iterator is exhausted."""
        with self._lock.read_lock():
            now = self._clock()
            while self._position < len(self._entries):
                key, entry = self._entries[self._position]
                self._position += 1
                if self._cache_map.get(key) is entry and not entry.is_expired(now):
                    self._next_entry = entry
                    return
        self._next_entry = None
        self._entries = []
    
    def has_next(self) -> bool:
        """Check whether another live value is available."""
        return self._next_entry is not None
    
    def __iter__(self) -> "CacheValuesIterator[V]":
        return self
    
    def __next__(self) -> V:
        entry = self._next_entry
        if entry is None:
            raise StopIteration
        self._current_entry = entry
        self._advance()
        return entry.value
    
    def remove(self) -> None:
        """
        Remove the most recently returned value from the cache.
        
        Raises:
            IllegalIteratorStateError: If next() has not returned a value yet
        """
        if self._current_entry is None:
            raise IllegalIteratorStateError()
        
        entry = self._current_entry
        self._current_entry = None
        with self._lock.write_lock():
            if self._cache_map.get(entry.key) is entry:
                del self._cache_map[entry.key]
