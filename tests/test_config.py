"""Unit tests for settings and logging setup."""

import logging

import structlog

from evictcache.config import Settings
from evictcache.logging_config import configure_logging


class TestSettings:
    
    def test_defaults(self, monkeypatch) -> None:
        for name in ("EVICTCACHE_EVICTION_POLICY", "EVICTCACHE_MAX_SIZE", "EVICTCACHE_DEFAULT_TTL_SECONDS"):
            monkeypatch.delenv(name, raising=False)
        
        settings = Settings(_env_file=None)
        
        assert settings.eviction_policy == "LRU"
        assert settings.max_size == 1000
        assert settings.default_ttl_seconds == 0
        assert settings.prune_interval_seconds == 60
    
    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("EVICTCACHE_EVICTION_POLICY", "LFU")
        monkeypatch.setenv("EVICTCACHE_MAX_SIZE", "5")
        monkeypatch.setenv("EVICTCACHE_DEFAULT_TTL_SECONDS", "2.5")
        
        settings = Settings(_env_file=None)
        
        assert settings.eviction_policy == "LFU"
        assert settings.max_size == 5
        assert settings.default_ttl_seconds == 2.5
    
    def test_file_cache_limit_falls_back_to_half_budget(self) -> None:
        settings = Settings(_env_file=None, file_cache_max_bytes=100, file_cache_max_file_bytes=0)
        assert settings.effective_file_cache_max_file_bytes == 50
        
        settings = Settings(_env_file=None, file_cache_max_bytes=100, file_cache_max_file_bytes=30)
        assert settings.effective_file_cache_max_file_bytes == 30


class TestConfigureLogging:
    
    def test_configures_structlog_and_level(self) -> None:
        try:
            configure_logging("debug")
            
            assert logging.getLogger().level == logging.DEBUG
            assert structlog.is_configured()
            structlog.get_logger("evictcache.test").debug("Logging configured", check=True)
        finally:
            structlog.reset_defaults()
            logging.getLogger().setLevel(logging.WARNING)
