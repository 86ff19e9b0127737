"""Full application over in-memory adapters, driven with httpx."""

from typing import Awaitable, Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from football_network.app import create_app
from football_network.application.users.commands.create_user import CreateUserCommand
from football_network.domain.user.enums import UserRole
from football_network.infrastructure.auth.jwt_token_service import JwtTokenService
from football_network.infrastructure.container import Container, build_container
from football_network.infrastructure.persistence.in_memory import (
    InMemoryClubRepository,
    InMemoryConnectionRepository,
    InMemoryFileRepository,
    InMemoryUserRepository,
)
from football_network.infrastructure.storage.local_file_storage import LocalFileStorage

PASSWORD = "secret123"


def pytest_collection_modifyitems(items):
    for item in items:
        if "tests/integration" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def container(tmp_path, auth_settings, password_hasher) -> Container:
    return build_container(
        clubs=InMemoryClubRepository(),
        connections=InMemoryConnectionRepository(),
        users=InMemoryUserRepository(),
        files=InMemoryFileRepository(),
        file_storage=LocalFileStorage(str(tmp_path / "uploads")),
        tokens=JwtTokenService(auth_settings),
        password_hasher=password_hasher,
    )


@pytest_asyncio.fixture
async def client(container):
    app = create_app(container=container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http


@pytest_asyncio.fixture
async def accounts(container) -> Dict[UserRole, str]:
    """One account per role; returns role -> email."""
    emails = {}
    for role in UserRole:
        username = role.name.lower()
        result = await container.dispatcher.send(
            CreateUserCommand(
                username=username,
                email=f"{username}@example.com",
                first_name=role.name.title(),
                last_name="Tester",
                password=PASSWORD,
                role=role,
            )
        )
        assert result.is_success, result.errors
        emails[role] = f"{username}@example.com"
    return emails


@pytest.fixture
def login(client, accounts) -> Callable[[UserRole], Awaitable[Dict[str, str]]]:
    """Log in as role; returns the Authorization header."""

    async def _login(role: UserRole) -> Dict[str, str]:
        response = await client.post(
            "/api/v1/auth/login", json={"email": accounts[role], "password": PASSWORD}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}

    return _login
