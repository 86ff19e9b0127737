"""
In-memory cache service implementation.

Simple in-process TTL cache for read models (dashboard statistics,
graph data). Not shared between processes.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.ports.cache import ICacheService

logger = logging.getLogger(__name__)


class InMemoryCacheService(ICacheService):
    """In-memory implementation of ICacheService.

    Expired entries are dropped lazily on access and by
    ``cleanup_expired``.
    """

    def __init__(self) -> None:
        # Storage: key -> (value, expiration_time)
        self._cache: Dict[str, Tuple[Any, datetime]] = {}
        logger.debug("InMemoryCacheService initialized")

    async def get(self, key: str) -> Optional[Any]:
        entry = self._cache.get(key)
        if entry is None:
            logger.debug("Cache miss", extra={"cache_key": key})
            return None

        value, expiration = entry
        if utc_now() >= expiration:
            logger.debug("Cache entry expired", extra={"cache_key": key})
            del self._cache[key]
            return None

        logger.debug("Cache hit", extra={"cache_key": key})
        return value

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self._cache[key] = (value, utc_now() + timedelta(seconds=ttl_seconds))
        logger.debug("Cached value", extra={"cache_key": key, "ttl_seconds": ttl_seconds})

    async def remove(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    async def remove_by_prefix(self, prefix: str) -> int:
        doomed = [key for key in self._cache if key.startswith(prefix)]
        for key in doomed:
            del self._cache[key]
        return len(doomed)

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    async def clear(self) -> None:
        self._cache.clear()
        logger.debug("Cache cleared")

    async def cleanup_expired(self) -> int:
        """Remove expired entries.

        Returns:
            Number of entries removed
        """
        now = utc_now()
        expired = [key for key, (_, expiration) in self._cache.items() if now >= expiration]
        for key in expired:
            del self._cache[key]
        if expired:
            logger.info("Cleaned up expired cache entries", extra={"entries": len(expired)})
        return len(expired)

    def size(self) -> int:
        """Number of entries, expired ones included (test utility)."""
        return len(self._cache)
