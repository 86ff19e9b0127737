"""Cache port used by read models (dashboard statistics, graph data)."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ICacheService(ABC):
    """Key/value cache with per-entry time-to-live."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return cached value, or None when missing or expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store value for ttl_seconds."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> bool:
        """Drop key. Returns True if it existed."""
        pass

    @abstractmethod
    async def remove_by_prefix(self, prefix: str) -> int:
        """Drop every key starting with prefix. Returns number removed.

        Used by write handlers to invalidate derived read models, e.g.
        ``remove_by_prefix("graph-data")`` after a connection changes.
        """
        pass
