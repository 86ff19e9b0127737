"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- tests: REPOSITORY_BACKEND=inmemory (fast, isolated)
- Default: inmemory

All MongoDB repositories share one motor client.

Usage:
    from football_network.infrastructure.persistence.factory import get_club_repository

    repo = get_club_repository()  # inmemory or mongodb based on env, singleton
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.file.ports import IFileRepository
from football_network.domain.user.ports import IUserRepository
from football_network.infrastructure.config import get_repository_backend
from football_network.infrastructure.persistence.in_memory import (
    InMemoryClubRepository,
    InMemoryConnectionRepository,
    InMemoryFileRepository,
    InMemoryUserRepository,
)
from football_network.infrastructure.persistence.mongodb.base import (
    MongoBaseRepository,
    create_mongo_client,
)
from football_network.infrastructure.persistence.mongodb.club_repository import MongoClubRepository
from football_network.infrastructure.persistence.mongodb.connection_repository import (
    MongoConnectionRepository,
)
from football_network.infrastructure.persistence.mongodb.file_repository import MongoFileRepository
from football_network.infrastructure.persistence.mongodb.user_repository import MongoUserRepository

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient] = None
_club_repository: Optional[IClubRepository] = None
_connection_repository: Optional[IConnectionRepository] = None
_user_repository: Optional[IUserRepository] = None
_file_repository: Optional[IFileRepository] = None


def _use_mongodb() -> bool:
    return get_repository_backend() == "mongodb"


def _get_mongo_client() -> AsyncIOMotorClient:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client()
        logger.info("MongoDB client created")
    return _mongo_client


def create_club_repository() -> IClubRepository:
    """Create club repository based on REPOSITORY_BACKEND env var.

    Raises:
        ConfigurationError: If mongodb is selected but MONGODB_URI is not set
    """
    if _use_mongodb():
        return MongoClubRepository(_get_mongo_client())
    return InMemoryClubRepository()


def create_connection_repository() -> IConnectionRepository:
    if _use_mongodb():
        return MongoConnectionRepository(_get_mongo_client())
    return InMemoryConnectionRepository()


def create_user_repository() -> IUserRepository:
    if _use_mongodb():
        return MongoUserRepository(_get_mongo_client())
    return InMemoryUserRepository()


def create_file_repository() -> IFileRepository:
    if _use_mongodb():
        return MongoFileRepository(_get_mongo_client())
    return InMemoryFileRepository()


def get_club_repository() -> IClubRepository:
    """Singleton club repository."""
    global _club_repository
    if _club_repository is None:
        _club_repository = create_club_repository()
    return _club_repository


def get_connection_repository() -> IConnectionRepository:
    global _connection_repository
    if _connection_repository is None:
        _connection_repository = create_connection_repository()
    return _connection_repository


def get_user_repository() -> IUserRepository:
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
    return _user_repository


def get_file_repository() -> IFileRepository:
    global _file_repository
    if _file_repository is None:
        _file_repository = create_file_repository()
    return _file_repository


def reset_repositories() -> None:
    """Reset singleton repository instances and close the MongoDB client.

    Useful in tests to force re-creation with different env vars.
    """
    global _mongo_client, _club_repository, _connection_repository
    global _user_repository, _file_repository
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _club_repository = None
    _connection_repository = None
    _user_repository = None
    _file_repository = None


async def ensure_indexes(*repositories: object) -> int:
    """Create indexes for the MongoDB-backed repositories among the given ones.

    Returns:
        Number of repositories whose indexes were ensured
    """
    ensured = 0
    for repository in repositories:
        if isinstance(repository, MongoBaseRepository):
            await repository.ensure_indexes()
            ensured += 1
    return ensured
