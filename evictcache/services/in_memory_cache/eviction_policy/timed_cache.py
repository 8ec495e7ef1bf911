"""Timed cache implementation, with expiry as the only eviction rule."""

from typing import Callable, Optional
import time

from evictcache.services.in_memory_cache.base import BaseCache, RemovalCallback
from evictcache.services.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy
from evictcache.services.prune_scheduler import PruneScheduler


class TimedCache(BaseCache):
    """
    Unbounded cache whose entries are only removed once they expire.
    
    Neither get nor put is guaranteed to notice every expired entry, so a
    TimedCache is usually paired with a PruneScheduler that calls prune()
    at a fixed interval. schedule_prune() sets one up.
    """
    
    policy = EvictionPolicy.TIMED
    
    def __init__(
        self,
        default_ttl: float,
        on_remove: Optional[RemovalCallback] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize timed cache.
        
        Args:
            default_ttl: Default time-to-live in seconds
            on_remove: Optional callback invoked for every pruned entry
            clock: Source of the current time in seconds
        """
        super().__init__(max_size=0, default_ttl=default_ttl, on_remove=on_remove, clock=clock)
        self._prune_scheduler: Optional[PruneScheduler] = None
    
    def _prune_cache(self) -> int:
        return self._prune_expired(self._clock())
    
    def schedule_prune(self, interval: float) -> PruneScheduler:
        """
        Prune this cache in the background every `interval` seconds.
        
        Replaces any schedule started earlier.
        
        Args:
            interval: Seconds between prune passes
            
        Returns:
            The running scheduler
        """
        self.cancel_prune_schedule()
        self._prune_scheduler = PruneScheduler(self, interval)
        self._prune_scheduler.start()
        return self._prune_scheduler
    
    def cancel_prune_schedule(self) -> None:
        """Stop the background pruning started by schedule_prune(), if any."""
        if self._prune_scheduler is not None:
            self._prune_scheduler.stop()
            self._prune_scheduler = None
