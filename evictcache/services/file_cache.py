"""File content caching on top of the LFU cache, bounded by total bytes."""

from pathlib import Path
import threading
from typing import Optional, Union

import structlog

from evictcache.config import settings
from evictcache.services.in_memory_cache.eviction_policy.lfu_cache import LFUCache
from evictcache.services.in_memory_cache.exceptions import (
    FileCacheReadError,
    InvalidMaxSizeError
)

logger = structlog.get_logger()


class _ByteBudgetLFUCache(LFUCache):
    """LFU cache that is full once its owner's byte budget is exceeded."""
    
    def __init__(self, owner: "FileLFUCache", default_ttl: float):
        super().__init__(max_size=0, default_ttl=default_ttl, on_remove=owner._on_remove)
        self._owner = owner
    
    def is_full(self) -> bool:
        return self._owner.used_size > self._owner.max_size


class FileLFUCache:
    """
    Keeps the contents of frequently read files in memory.
    
    The cache is bounded by the total number of cached bytes rather than by
    the number of files. Files larger than max_file_size are read but never
    cached, even when there is room for them.
    """
    
    def __init__(
        self,
        max_size: int,
        max_file_size: Optional[int] = None,
        default_ttl: float = 0
    ):
        """
        Initialize file cache.
        
        Args:
            max_size: Total cache size in bytes
            max_file_size: Largest file size in bytes that will be cached;
                defaults to half of max_size, 0 means no per-file limit
            default_ttl: Time-to-live of cached files in seconds, 0 for no expiry
        """
        if max_file_size is None:
            max_file_size = max_size // 2
        if max_size < 0:
            raise InvalidMaxSizeError(max_size)
        if max_file_size < 0:
            raise InvalidMaxSizeError(max_file_size)
        
        self._max_size = max_size
        self._max_file_size = max_file_size
        self._used_size = 0
        self._usage_lock = threading.Lock()
        self._cache = _ByteBudgetLFUCache(self, default_ttl)
    
    @classmethod
    def from_settings(cls) -> "FileLFUCache":
        """Create a file cache sized by the EVICTCACHE_FILE_CACHE_* settings."""
        return cls(
            settings.file_cache_max_bytes,
            settings.effective_file_cache_max_file_bytes,
            settings.default_ttl_seconds
        )
    
    def _on_remove(self, key: Path, content: bytes) -> None:
        with self._usage_lock:
            self._used_size -= len(content)
    
    @property
    def max_size(self) -> int:
        """Get the total cache size in bytes."""
        return self._max_size
    
    @property
    def max_file_size(self) -> int:
        """Get the largest file size in bytes that can be cached."""
        return self._max_file_size
    
    @property
    def used_size(self) -> int:
        """Get the number of bytes currently held by cached files."""
        return self._used_size
    
    @property
    def cached_files_count(self) -> int:
        """Get the number of cached files."""
        return self._cache.size()
    
    @property
    def cache_timeout(self) -> float:
        """Get the time-to-live of cached files in seconds."""
        return self._cache.default_ttl
    
    def clear(self) -> None:
        """Clear the cache and reset the used byte count."""
        self._cache.clear()
        with self._usage_lock:
            self._used_size = 0
    
    def get_file_bytes(self, file: Union[str, Path]) -> bytes:
        """
        Get the contents of a file, from the cache when possible.
        
        Args:
            file: Path of the file to read
            
        Returns:
            The file contents
            
        Raises:
            FileCacheReadError: If the file is not cached and cannot be read
        """
        path = Path(file)
        content = self._cache.get(path)
        if content is not None:
            return content
        
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error("Failed to read file for cache", path=str(path), error=str(e))
            raise FileCacheReadError(str(path), str(e)) from e
        
        if self._max_file_size != 0 and len(content) > self._max_file_size:
            logger.debug(
                "File too large to cache",
                path=str(path),
                size=len(content),
                max_file_size=self._max_file_size
            )
            return content
        
        with self._usage_lock:
            self._used_size += len(content)
        # if the byte budget is now exceeded, put() prunes before inserting
        self._cache.put(path, content)
        return content
