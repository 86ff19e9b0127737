"""Shared fixtures: in-memory adapters and entity factories."""

from typing import Any, Callable

import pytest

from football_network.application.authorization.models import AuthUser
from football_network.domain.club.entities import Club
from football_network.domain.club.enums import LeagueType
from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.shared.value_objects import Point2D
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole
from football_network.infrastructure.auth.jwt_token_service import JwtTokenService
from football_network.infrastructure.auth.password_hasher import Pbkdf2PasswordHasher
from football_network.infrastructure.cache.in_memory_cache import InMemoryCacheService
from football_network.infrastructure.config import AuthSettings
from football_network.infrastructure.events.in_memory_bus import InMemoryEventBus
from football_network.infrastructure.persistence.in_memory import (
    InMemoryClubRepository,
    InMemoryConnectionRepository,
    InMemoryFileRepository,
    InMemoryUserRepository,
)

TEST_SECRET = "test-secret-with-enough-length-for-hs256"


@pytest.fixture
def club_repository() -> InMemoryClubRepository:
    return InMemoryClubRepository()


@pytest.fixture
def connection_repository() -> InMemoryConnectionRepository:
    return InMemoryConnectionRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def file_repository() -> InMemoryFileRepository:
    return InMemoryFileRepository()


@pytest.fixture
def cache() -> InMemoryCacheService:
    return InMemoryCacheService()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def password_hasher() -> Pbkdf2PasswordHasher:
    """Hasher with few iterations to keep tests fast."""
    return Pbkdf2PasswordHasher(iterations=1000)


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(
        jwt_secret=TEST_SECRET,
        jwt_issuer="football-network",
        jwt_audience="football-network-clients",
        access_token_minutes=60,
        refresh_token_days=7,
        auth_required=False,
    )


@pytest.fixture
def token_service(auth_settings: AuthSettings) -> JwtTokenService:
    return JwtTokenService(auth_settings)


@pytest.fixture
def make_club() -> Callable[..., Club]:
    """Factory for clubs with sensible defaults; events are discarded."""

    def factory(name: str = "Legia Warszawa", **overrides: Any) -> Club:
        attributes = {
            "league": LeagueType.EKSTRAKLASA,
            "country": "Poland",
            "city": "Warszawa",
            "position": Point2D(10.0, 20.0),
        }
        attributes.update(overrides)
        club = Club.create(name=name, **attributes)
        club.collect_events()
        return club

    return factory


@pytest.fixture
def make_connection() -> Callable[..., Connection]:
    def factory(source: Club, target: Club, **overrides: Any) -> Connection:
        attributes = {
            "type": ConnectionType.FRIENDSHIP,
            "strength": ConnectionStrength.STRONG,
        }
        attributes.update(overrides)
        connection = Connection.create(source.id, target.id, **attributes)
        connection.collect_events()
        return connection

    return factory


@pytest.fixture
def make_user(password_hasher: Pbkdf2PasswordHasher) -> Callable[..., User]:
    def factory(
        username: str = "jkowalski",
        email: str = "jan@example.com",
        role: UserRole = UserRole.USER,
        password: str = "secret123",
    ) -> User:
        user = User.create(username, email, "Jan", "Kowalski", password_hasher.hash(password), role)
        user.collect_events()
        return user

    return factory


@pytest.fixture
def principal(make_user: Callable[..., User]) -> Callable[..., AuthUser]:
    """Factory for AuthUser principals by account role."""

    def factory(role: UserRole = UserRole.USER, is_active: bool = True) -> AuthUser:
        user = make_user(username=f"user-{role.name.lower()}", role=role)
        if not is_active:
            user.deactivate()
        return AuthUser.from_user(user)

    return factory
