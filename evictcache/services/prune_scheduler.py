"""
Prune Scheduler.

Background loop that prunes a cache at a fixed interval, so expired entries
are dropped even when nothing reads or writes them again.
"""

import threading
from typing import TYPE_CHECKING, Optional

import structlog

from evictcache.services.in_memory_cache.exceptions import InvalidTtlError

if TYPE_CHECKING:
    from evictcache.services.in_memory_cache.base import BaseCache

logger = structlog.get_logger()


class PruneScheduler:
    """
    Periodic pruner for a single cache.
    
    Runs in a daemon thread and calls the cache's prune() every `interval`
    seconds until stopped. It relies entirely on prune() for locking.
    """
    
    def __init__(self, cache: "BaseCache", interval: float):
        """
        Args:
            cache: The cache to prune
            interval: Seconds between prune passes, must be positive
        """
        if interval <= 0:
            raise InvalidTtlError(interval)
        
        self._cache = cache
        self._interval = interval
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._total_pruned = 0
    
    @property
    def interval(self) -> float:
        return self._interval
    
    @property
    def is_running(self) -> bool:
        """Check whether the background loop is alive."""
        return self._thread is not None and self._thread.is_alive()
    
    @property
    def total_pruned(self) -> int:
        """Get the number of entries removed since the scheduler was created."""
        return self._total_pruned
    
    def start(self) -> None:
        """Start the background prune loop."""
        if self.is_running:
            logger.warning("Prune scheduler already running", policy=self._cache.policy.value)
            return
        
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="evictcache-prune-scheduler", daemon=True
        )
        self._thread.start()
        logger.info(
            "Prune scheduler started",
            policy=self._cache.policy.value,
            interval_seconds=self._interval
        )
    
    def stop(self, timeout: float = 5.0) -> None:
        """
        Stop the background prune loop and wait for it to exit.
        
        Called from the loop's own thread (e.g. by a removal callback), it
        only signals the loop, which exits after the current pass. If the
        loop is still inside a prune when the timeout runs out, the scheduler
        keeps reporting as running until it finishes.
        
        Args:
            timeout: Seconds to wait for the loop thread to exit
        """
        thread = self._thread
        if thread is None:
            return
        
        self._stop_event.set()
        if thread is threading.current_thread():
            return
        
        thread.join(timeout)
        if thread.is_alive():
            logger.warning(
                "Prune scheduler still running after stop timeout",
                policy=self._cache.policy.value,
                timeout_seconds=timeout
            )
            return
        
        self._thread = None
        logger.info(
            "Prune scheduler stopped",
            policy=self._cache.policy.value,
            total_pruned=self._total_pruned
        )
    
    def _run_loop(self) -> None:
        while not self._stop_event.wait(timeout=self._interval):
            try:
                removed = self._cache.prune()
            except Exception as e:
                # keep the loop alive; a failing removal callback must not stop pruning
                logger.error("Scheduled prune failed", policy=self._cache.policy.value, error=str(e))
                continue
            self._total_pruned += removed
            if removed:
                logger.debug(
                    "Scheduled prune removed entries",
                    policy=self._cache.policy.value,
                    removed=removed
                )
    
    def __enter__(self) -> "PruneScheduler":
        self.start()
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
