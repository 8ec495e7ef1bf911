"""Cache services built on the in-memory cache core."""
