"""In-process key/value caches with FIFO, LRU, LFU and timed eviction."""

from evictcache.services.in_memory_cache import (
    BaseCache,
    CacheError,
    EvictionPolicy,
    FIFOCache,
    LFUCache,
    LRUCache,
    TimedCache,
    create_cache,
    get_in_memory_cache
)
from evictcache.config import Settings, settings
from evictcache.logging_config import configure_logging
from evictcache.services.file_cache import FileLFUCache
from evictcache.services.prune_scheduler import PruneScheduler

__version__ = "1.0.0"

__all__ = [
    "BaseCache",
    "CacheError",
    "EvictionPolicy",
    "FIFOCache",
    "LFUCache",
    "LRUCache",
    "TimedCache",
    "create_cache",
    "get_in_memory_cache",
    "FileLFUCache",
    "PruneScheduler",
    "Settings",
    "settings",
    "configure_logging",
]
