"""
Pytest Configuration and Shared Fixtures.
"""

import pytest

from evictcache.services.in_memory_cache import reset_in_memory_cache
from tests.helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    """Clock that only moves when a test advances it."""
    return FakeClock()


@pytest.fixture
def fresh_singleton():
    """Make sure each test builds its own process-wide cache."""
    reset_in_memory_cache()
    yield
    reset_in_memory_cache()
