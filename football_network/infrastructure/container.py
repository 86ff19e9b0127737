"""Composition root: builds adapters, services and the dispatcher."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from football_network.application.authorization.service import AuthorizationService
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.navigation.service import NavigationService
from football_network.application.registry import build_dispatcher
from football_network.application.users.commands.create_user import CreateUserCommand
from football_network.domain.auth.ports import ITokenService
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.file.ports import IFileRepository, IFileStorage
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IPasswordHasher, IUserRepository
from football_network.infrastructure.auth.jwt_token_service import JwtTokenService
from football_network.infrastructure.auth.password_hasher import Pbkdf2PasswordHasher
from football_network.infrastructure.cache.in_memory_cache import InMemoryCacheService
from football_network.infrastructure.config import (
    BootstrapAdmin,
    get_auth_settings,
    get_bootstrap_admin,
    get_upload_dir,
)
from football_network.infrastructure.events.in_memory_bus import InMemoryEventBus
from football_network.infrastructure.navigation.intended_url_store import TTLIntendedUrlStore
from football_network.infrastructure.persistence.factory import (
    get_club_repository,
    get_connection_repository,
    get_file_repository,
    get_user_repository,
)
from football_network.infrastructure.storage.local_file_storage import LocalFileStorage

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Application services shared by the REST and GraphQL layers."""

    clubs: IClubRepository
    connections: IConnectionRepository
    users: IUserRepository
    files: IFileRepository
    file_storage: IFileStorage
    cache: ICacheService
    event_bus: InMemoryEventBus
    tokens: ITokenService
    password_hasher: IPasswordHasher
    authorization: AuthorizationService
    navigation: NavigationService
    dispatcher: Dispatcher = field(init=False)

    def __post_init__(self) -> None:
        self.dispatcher = build_dispatcher(self)


def build_container(
    clubs: Optional[IClubRepository] = None,
    connections: Optional[IConnectionRepository] = None,
    users: Optional[IUserRepository] = None,
    files: Optional[IFileRepository] = None,
    file_storage: Optional[IFileStorage] = None,
    tokens: Optional[ITokenService] = None,
    password_hasher: Optional[IPasswordHasher] = None,
) -> Container:
    """Build the container from configuration; arguments override the
    configured adapters (tests pass in-memory ones)."""
    authorization = AuthorizationService()
    container = Container(
        clubs=clubs or get_club_repository(),
        connections=connections or get_connection_repository(),
        users=users or get_user_repository(),
        files=files or get_file_repository(),
        file_storage=file_storage or LocalFileStorage(get_upload_dir()),
        cache=InMemoryCacheService(),
        event_bus=InMemoryEventBus(),
        tokens=tokens or JwtTokenService(get_auth_settings()),
        password_hasher=password_hasher or Pbkdf2PasswordHasher(),
        authorization=authorization,
        navigation=NavigationService(authorization, TTLIntendedUrlStore()),
    )
    logger.info("Container built", extra={"repository": type(container.clubs).__name__})
    return container


async def seed_admin(container: Container, admin: Optional[BootstrapAdmin] = None) -> bool:
    """Create the bootstrap super administrator if configured and missing.

    Returns:
        True if an account was created
    """
    admin = admin or get_bootstrap_admin()
    if admin is None:
        return False
    if await container.users.get_by_email(admin.email) is not None:
        logger.debug("Bootstrap admin already present", extra={"email": admin.email})
        return False

    result = await container.dispatcher.send(
        CreateUserCommand(
            username=admin.username,
            email=admin.email,
            first_name="System",
            last_name="Administrator",
            password=admin.password,
            role=UserRole.SUPER_ADMIN,
        )
    )
    if result.is_failure:
        logger.error("Bootstrap admin not created", extra={"errors": result.errors})
        return False
    logger.info("Bootstrap admin created", extra={"email": admin.email})
    return True
