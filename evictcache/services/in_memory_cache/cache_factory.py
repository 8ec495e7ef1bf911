"""Factory for creating cache instances based on eviction policy."""

from typing import Callable, Optional, Union
import threading
import time

import structlog

from evictcache.config import settings
from evictcache.services.in_memory_cache.base import BaseCache, RemovalCallback
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.services.in_memory_cache.eviction_policy.fifo_cache import FIFOCache
from evictcache.services.in_memory_cache.eviction_policy.lfu_cache import LFUCache
from evictcache.services.in_memory_cache.eviction_policy.lru_cache import LRUCache
from evictcache.services.in_memory_cache.eviction_policy.timed_cache import TimedCache
from evictcache.services.in_memory_cache.exceptions import (
    InvalidEvictionPolicyError,
    InvalidMaxSizeError,
    InvalidTtlError
)

logger = structlog.get_logger()

# Singleton cache instance
_cache_instance: Optional[BaseCache] = None
_cache_lock = threading.Lock()


def create_cache(
    eviction_policy: Union[EvictionPolicy, str],
    max_size: int = 0,
    default_ttl: float = 0,
    on_remove: Optional[RemovalCallback] = None,
    clock: Callable[[], float] = time.monotonic
) -> BaseCache:
    """
    Create a cache instance based on the specified eviction policy.
    
    Args:
        eviction_policy: The eviction policy to use (FIFO, LRU, LFU or TIMED)
        max_size: Maximum number of entries, 0 for no limit; ignored for TIMED
        default_ttl: Default time-to-live in seconds, 0 for no expiry
        on_remove: Optional callback invoked with (key, value) for removed entries
        clock: Source of the current time in seconds
        
    Returns:
        A cache instance implementing the BaseCache interface
        
    Raises:
        InvalidEvictionPolicyError: If the eviction policy is not supported
        InvalidMaxSizeError: If max_size is invalid
        InvalidTtlError: If default_ttl is negative
    """
    # Validate max_size
    if not isinstance(max_size, int) or isinstance(max_size, bool) or max_size < 0:
        raise InvalidMaxSizeError(max_size)
    if default_ttl < 0:
        raise InvalidTtlError(default_ttl)
    
    # Normalize eviction policy
    if isinstance(eviction_policy, str) and not isinstance(eviction_policy, EvictionPolicy):
        try:
            eviction_policy = EvictionPolicy(eviction_policy.upper())
        except ValueError:
            raise InvalidEvictionPolicyError(eviction_policy)
    
    # Create appropriate cache instance
    if eviction_policy == EvictionPolicy.FIFO:
        return FIFOCache(max_size, default_ttl, on_remove=on_remove, clock=clock)
    elif eviction_policy == EvictionPolicy.LRU:
        return LRUCache(max_size, default_ttl, on_remove=on_remove, clock=clock)
    elif eviction_policy == EvictionPolicy.LFU:
        return LFUCache(max_size, default_ttl, on_remove=on_remove, clock=clock)
    elif eviction_policy == EvictionPolicy.TIMED:
        return TimedCache(default_ttl, on_remove=on_remove, clock=clock)
    else:
        raise InvalidEvictionPolicyError(str(eviction_policy))


def get_in_memory_cache() -> BaseCache:
    """
    Get the process-wide in-memory cache instance.
    
    The first call builds the cache from settings (EVICTCACHE_EVICTION_POLICY,
    EVICTCACHE_MAX_SIZE, EVICTCACHE_DEFAULT_TTL_SECONDS); later calls return
    the same instance. A TIMED cache is also given a background prune
    schedule every EVICTCACHE_PRUNE_INTERVAL_SECONDS.
    
    Returns:
        The singleton cache instance implementing the BaseCache interface
        
    Raises:
        InvalidEvictionPolicyError: If the configured eviction policy is not supported
    """
    global _cache_instance
    
    # Double-checked locking pattern for thread-safe singleton
    if _cache_instance is None:
        with _cache_lock:
            if _cache_instance is None:
                _cache_instance = create_cache(
                    settings.eviction_policy,
                    settings.max_size,
                    settings.default_ttl_seconds
                )
                # a timed cache only shrinks when something prunes it
                if isinstance(_cache_instance, TimedCache):
                    _cache_instance.schedule_prune(settings.prune_interval_seconds)
                logger.info(
                    "In-memory cache created",
                    policy=_cache_instance.policy.value,
                    max_size=_cache_instance.max_size,
                    default_ttl_seconds=_cache_instance.default_ttl
                )
    
    return _cache_instance


def reset_in_memory_cache() -> None:
    """Drop the singleton so the next get_in_memory_cache() rebuilds it from settings."""
    global _cache_instance
    
    with _cache_lock:
        if isinstance(_cache_instance, TimedCache):
            _cache_instance.cancel_prune_schedule()
        _cache_instance = None
