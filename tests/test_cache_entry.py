"""Unit tests for CacheEntry."""

from evictcache.services.in_memory_cache.cache_entry import CacheEntry


class TestCacheEntryExpiry:
    
    def test_zero_ttl_never_expires(self) -> None:
        entry = CacheEntry("k", "v", ttl=0, now=100.0)
        assert not entry.is_expired(100.0)
        assert not entry.is_expired(10_000_000.0)
    
    def test_not_expired_before_ttl(self) -> None:
        entry = CacheEntry("k", "v", ttl=5, now=100.0)
        assert not entry.is_expired(104.5)
    
    def test_expired_at_ttl_boundary(self) -> None:
        """An entry is expired once now reaches last_access + ttl."""
        entry = CacheEntry("k", "v", ttl=5, now=100.0)
        assert entry.is_expired(105.0)
        assert entry.is_expired(200.0)
    
    def test_is_expired_has_no_side_effects(self) -> None:
        entry = CacheEntry("k", "v", ttl=5, now=100.0)
        entry.is_expired(200.0)
        assert entry.last_access == 100.0
        assert entry.access_count == 0


class TestCacheEntryAccess:
    
    def test_new_entry_has_no_accesses(self) -> None:
        entry = CacheEntry("k", "v", ttl=0, now=100.0)
        assert entry.access_count == 0
        assert entry.last_access == 100.0
    
    def test_touch_and_read_updates_bookkeeping(self) -> None:
        entry = CacheEntry("k", "v", ttl=5, now=100.0)
        
        assert entry.touch_and_read(103.0) == "v"
        assert entry.touch_and_read(104.0) == "v"
        
        assert entry.access_count == 2
        assert entry.last_access == 104.0
        # refreshed, so no longer expired at the original deadline
        assert not entry.is_expired(105.0)
    
    def test_last_access_never_moves_backwards(self) -> None:
        entry = CacheEntry("k", "v", ttl=0, now=100.0)
        entry.touch_and_read(90.0)
        assert entry.last_access == 100.0
        assert entry.access_count == 1
