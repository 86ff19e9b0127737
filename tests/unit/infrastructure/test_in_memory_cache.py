"""Tests for the in-process TTL cache and the intended URL store."""

import pytest
from freezegun import freeze_time

from football_network.infrastructure.navigation.intended_url_store import TTLIntendedUrlStore


class TestInMemoryCacheService:
    @pytest.mark.asyncio
    async def test_entries_expire(self, cache):
        with freeze_time("2024-06-15 12:00:00") as frozen:
            await cache.set("graph-data:active", {"nodes": []}, ttl_seconds=60)
            assert await cache.get("graph-data:active") == {"nodes": []}

            frozen.tick(61)

            assert await cache.get("graph-data:active") is None
            assert cache.size() == 0

    @pytest.mark.asyncio
    async def test_remove_by_prefix(self, cache):
        await cache.set("dashboard-stats", 1, 60)
        await cache.set("dashboard-stats:detailed", 2, 60)
        await cache.set("graph-data", 3, 60)

        removed = await cache.remove_by_prefix("dashboard-stats")

        assert removed == 2
        assert await cache.exists("graph-data")
        assert not await cache.exists("dashboard-stats")

    @pytest.mark.asyncio
    async def test_cleanup_expired(self, cache):
        with freeze_time("2024-06-15 12:00:00") as frozen:
            await cache.set("short", 1, 10)
            await cache.set("long", 2, 600)
            frozen.tick(30)

            assert await cache.cleanup_expired() == 1
            assert cache.size() == 1

    @pytest.mark.asyncio
    async def test_remove_and_clear(self, cache):
        await cache.set("a", 1, 60)

        assert await cache.remove("a") is True
        assert await cache.remove("a") is False

        await cache.set("b", 1, 60)
        await cache.clear()
        assert cache.size() == 0


class TestTTLIntendedUrlStore:
    def test_pop_returns_once(self):
        store = TTLIntendedUrlStore()
        store.remember("s1", "/admin/clubs")

        assert store.pop("s1") == "/admin/clubs"
        assert store.pop("s1") is None

    def test_latest_url_wins(self):
        store = TTLIntendedUrlStore()
        store.remember("s1", "/admin/clubs")
        store.remember("s1", "/admin/users")

        assert store.pop("s1") == "/admin/users"
