"""Configuration management for the cache library."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Cache settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="EVICTCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )
    
    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    
    # In-Memory Cache Configuration
    eviction_policy: str = Field(default="LRU", description="Eviction policy of the shared cache: FIFO, LRU, LFU or TIMED")
    max_size: int = Field(default=1000, ge=0, description="Maximum number of entries in the shared cache, 0 for no limit")
    default_ttl_seconds: float = Field(default=0, ge=0, description="Default time-to-live in seconds, 0 for no expiry")
    prune_interval_seconds: float = Field(default=60, gt=0, description="Interval between scheduled prune passes in seconds")
    
    # File Cache Configuration
    file_cache_max_bytes: int = Field(default=10 * 1024 * 1024, ge=0, description="Total bytes the file cache may hold")
    file_cache_max_file_bytes: int = Field(default=0, ge=0, description="Largest cacheable file in bytes, 0 for half of the total")
    
    @property
    def effective_file_cache_max_file_bytes(self) -> int:
        """Get the per-file limit, falling back to half of the file cache budget."""
        return self.file_cache_max_file_bytes or self.file_cache_max_bytes // 2


# Global settings instance
settings = Settings()
