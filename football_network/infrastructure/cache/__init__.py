"""Cache implementations."""

from football_network.infrastructure.cache.in_memory_cache import InMemoryCacheService

__all__ = ["InMemoryCacheService"]
