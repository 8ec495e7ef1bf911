"""Unit tests for TimedCache."""

import pytest

from evictcache.services.in_memory_cache import InvalidTtlError, TimedCache
from tests.helpers import wait_for


class TestTimedCache:
    
    def test_never_full(self, clock) -> None:
        cache = TimedCache(0.1, clock=clock)
        for i in range(50):
            cache.put(i, i)
        assert not cache.is_full()
        assert cache.max_size == 0
    
    def test_prune_removes_only_expired_entries(self, clock) -> None:
        cache = TimedCache(0.1, clock=clock)
        cache.put("1", "1")
        cache.put("2", "2")
        cache.put("3", "3")
        clock.advance(0.2)
        
        assert not cache.is_full()
        # nothing removes them until a prune runs
        assert cache.size() == 3
        assert cache.prune() == 3
        assert cache.size() == 0
        
        cache.put("4", "4")
        clock.advance(0.05)
        assert cache.prune() == 0
        assert cache.size() == 1
        
        clock.advance(0.051)
        assert cache.prune() == 1
        assert cache.size() == 0
    
    def test_zero_ttl_entries_survive_prune(self, clock) -> None:
        cache = TimedCache(0.1, clock=clock)
        cache.put("forever", "v", ttl=0)
        clock.advance(1_000)
        
        assert cache.prune() == 0
        assert cache.get("forever") == "v"
    
    def test_negative_default_ttl_is_rejected(self) -> None:
        with pytest.raises(InvalidTtlError):
            TimedCache(-1)


class TestTimedCacheSchedule:
    
    def test_scheduled_prune_empties_cache(self) -> None:
        cache = TimedCache(0.05)
        scheduler = cache.schedule_prune(0.01)
        try:
            cache.put("1", "1")
            cache.put("2", "2")
            cache.put("3", "3")
            assert wait_for(lambda: cache.size() == 0)
        finally:
            cache.cancel_prune_schedule()
        
        assert not scheduler.is_running
    
    def test_schedule_replaces_previous_schedule(self) -> None:
        cache = TimedCache(10)
        first = cache.schedule_prune(10)
        second = cache.schedule_prune(10)
        try:
            assert not first.is_running
            assert second.is_running
        finally:
            cache.cancel_prune_schedule()
        
        assert not second.is_running
    
    def test_cancel_without_schedule_is_noop(self) -> None:
        cache = TimedCache(10)
        cache.cancel_prune_schedule()
