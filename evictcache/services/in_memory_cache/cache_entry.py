"""Cache entry holding a value and its access bookkeeping."""

from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class CacheEntry(Generic[K, V]):
    """
    A single cached value.
    
    The key, value and ttl are fixed for the life of the entry. The last access
    time and access count are updated on every successful read.
    """
    
    __slots__ = ("key", "value", "ttl", "last_access", "access_count")
    
    def __init__(self, key: K, value: V, ttl: float, now: float):
        """
        Create an entry.
        
        Args:
            key: The key the entry is stored under
            value: The cached value
            ttl: Time-to-live in seconds, measured from the last access; 0 never expires
            now: Current clock reading, used as the initial last access time
        """
        self.key = key
        self.value = value
        self.ttl = ttl
        self.last_access = now
        self.access_count = 0
    
    def is_expired(self, now: float) -> bool:
        """Check whether the entry has outlived its ttl at the given time."""
        if self.ttl == 0:
            return False
        return now >= self.last_access + self.ttl
    
    def touch_and_read(self, now: float) -> V:
        """
        Record an access and return the value.
        
        Args:
            now: Current clock reading
            
        Returns:
            The cached value
        """
        if now > self.last_access:
            self.last_access = now
        self.access_count += 1
        return self.value
    
    def __repr__(self) -> str:
        return (
            f"CacheEntry(key={self.key!r}, ttl={self.ttl}, "
            f"last_access={self.last_access}, access_count={self.access_count})"
        )
