"""Prometheus metrics for cache activity."""

from prometheus_client import Counter

CACHE_HITS = Counter('evictcache_hits_total', 'Cache lookups that returned a value', ['policy'])
CACHE_MISSES = Counter('evictcache_misses_total', 'Cache lookups that found no live entry', ['policy'])
CACHE_EVICTIONS = Counter('evictcache_evictions_total', 'Entries removed by pruning or size eviction', ['policy'])
