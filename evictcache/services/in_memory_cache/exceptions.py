"""Custom exceptions for in-memory cache operations."""


class CacheError(Exception):
    """Base class for all cache errors."""


class InvalidEvictionPolicyError(CacheError):
    """Raised when an invalid eviction policy is provided."""
    
    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(f"Invalid eviction policy: {policy}. Supported policies: FIFO, LRU, LFU, TIMED")


class InvalidMaxSizeError(CacheError):
    """Raised when an invalid max_size is provided."""
    
    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"Invalid max_size: {max_size}. Must be a non-negative integer (0 means unbounded)")


class InvalidTtlError(CacheError):
    """Raised when a negative time-to-live or interval is provided."""
    
    def __init__(self, ttl: float):
        self.ttl = ttl
        super().__init__(f"Invalid ttl: {ttl}. Must be a non-negative number of seconds (0 means never expires)")


class IllegalIteratorStateError(CacheError):
    """Raised when an iterator removal is requested before any value was returned."""
    
    def __init__(self):
        super().__init__("remove() called before next() on cache values iterator")


class FileCacheReadError(CacheError):
    """Raised when the file cache cannot read a source file."""
    
    def __init__(self, path: str, error_message: str):
        self.path = path
        super().__init__(f"Failed to read file {path}: {error_message}")
