"""Startup and shutdown of the application."""

import pytest
from _pytest.monkeypatch import MonkeyPatch

from football_network.app import create_app
from football_network.application.common.dispatcher import HandlerRegistrationError
from football_network.application.graph.queries.get_graph_data import GetGraphDataQuery
from football_network.domain.user.enums import UserRole
from football_network.infrastructure.config import BootstrapAdmin
from football_network.infrastructure.container import seed_admin


class TestSeedAdmin:
    @pytest.mark.asyncio
    async def test_creates_super_admin_once(self, container):
        admin = BootstrapAdmin(email="root@example.com", password="changeme", username="root")

        assert await seed_admin(container, admin) is True
        assert await seed_admin(container, admin) is False

        user = await container.users.get_by_email("root@example.com")
        assert user is not None
        assert user.role is UserRole.SUPER_ADMIN
        assert user.username == "root"

    @pytest.mark.asyncio
    async def test_skipped_without_configuration(self, container, monkeypatch: MonkeyPatch):
        monkeypatch.delenv("ADMIN_EMAIL", raising=False)
        monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

        assert await seed_admin(container) is False

    @pytest.mark.asyncio
    async def test_invalid_account_is_not_created(self, container):
        admin = BootstrapAdmin(email="root@example.com", password="123", username="root")

        assert await seed_admin(container, admin) is False
        assert await container.users.get_by_email("root@example.com") is None


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_seeds_configured_admin(self, container, monkeypatch: MonkeyPatch):
        monkeypatch.setenv("ADMIN_EMAIL", "boot@example.com")
        monkeypatch.setenv("ADMIN_PASSWORD", "changeme")
        monkeypatch.setenv("ADMIN_USERNAME", "boot")
        app = create_app(container=container)

        async with app.router.lifespan_context(app):
            assert app.state.container is container
            user = await container.users.get_by_email("boot@example.com")

        assert user is not None
        assert user.role is UserRole.SUPER_ADMIN

    @pytest.mark.asyncio
    async def test_startup_fails_on_missing_handler(self, container):
        del container.dispatcher._handlers[GetGraphDataQuery]
        app = create_app(container=container)

        with pytest.raises(HandlerRegistrationError, match="GetGraphDataQuery"):
            async with app.router.lifespan_context(app):
                pass
