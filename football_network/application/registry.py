"""Explicit handler registry.

Every feature handler is wired here against its request type;
``build_dispatcher`` verifies that ``ALL_REQUEST_TYPES`` is fully
covered, so a forgotten registration fails at startup.
"""

from typing import Optional, Protocol, Tuple, Type

from football_network.application.auth.commands.authenticate_user import (
    AuthenticateUserCommand,
    AuthenticateUserCommandHandler,
)
from football_network.application.auth.commands.logout import LogoutCommand, LogoutCommandHandler
from football_network.application.auth.commands.refresh_token import (
    RefreshTokenCommand,
    RefreshTokenCommandHandler,
)
from football_network.application.auth.queries.get_current_user import (
    GetCurrentUserQuery,
    GetCurrentUserQueryHandler,
)
from football_network.application.auth.queries.validate_token import (
    ValidateTokenQuery,
    ValidateTokenQueryHandler,
)
from football_network.application.clubs.commands.change_club_status import (
    ChangeClubStatusCommand,
    ChangeClubStatusCommandHandler,
)
from football_network.application.clubs.commands.create_club import (
    CreateClubCommand,
    CreateClubCommandHandler,
)
from football_network.application.clubs.commands.delete_club import (
    DeleteClubCommand,
    DeleteClubCommandHandler,
)
from football_network.application.clubs.commands.update_club import (
    UpdateClubCommand,
    UpdateClubCommandHandler,
)
from football_network.application.clubs.commands.upload_logo import (
    UploadClubLogoCommand,
    UploadClubLogoCommandHandler,
)
from football_network.application.clubs.queries.get_club_by_id import (
    GetClubByIdQuery,
    GetClubByIdQueryHandler,
)
from football_network.application.clubs.queries.get_club_connections import (
    GetClubConnectionsQuery,
    GetClubConnectionsQueryHandler,
)
from football_network.application.clubs.queries.get_clubs import (
    GetClubsQuery,
    GetClubsQueryHandler,
)
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.common.requests import Request
from football_network.application.connections.commands.create_connection import (
    CreateConnectionCommand,
    CreateConnectionCommandHandler,
)
from football_network.application.connections.commands.delete_connection import (
    DeleteConnectionCommand,
    DeleteConnectionCommandHandler,
)
from football_network.application.connections.commands.update_connection import (
    UpdateConnectionCommand,
    UpdateConnectionCommandHandler,
)
from football_network.application.connections.commands.verify_connection import (
    VerifyConnectionCommand,
    VerifyConnectionCommandHandler,
)
from football_network.application.connections.queries.get_connections import (
    GetConnectionsQuery,
    GetConnectionsQueryHandler,
)
from football_network.application.dashboard.queries.get_dashboard_stats import (
    GetDashboardStatsQuery,
    GetDashboardStatsQueryHandler,
)
from football_network.application.files.commands.delete_file import (
    DeleteFileCommand,
    DeleteFileCommandHandler,
)
from football_network.application.files.queries.get_files import (
    GetFilesQuery,
    GetFilesQueryHandler,
)
from football_network.application.graph.queries.get_graph_data import (
    GetGraphDataQuery,
    GetGraphDataQueryHandler,
)
from football_network.application.navigation.service import NavigationService
from football_network.application.users.commands.create_user import (
    CreateUserCommand,
    CreateUserCommandHandler,
)
from football_network.application.users.commands.set_user_active import (
    SetUserActiveCommand,
    SetUserActiveCommandHandler,
)
from football_network.application.users.commands.update_user_role import (
    UpdateUserRoleCommand,
    UpdateUserRoleCommandHandler,
)
from football_network.application.users.queries.get_users import (
    GetUsersQuery,
    GetUsersQueryHandler,
)
from football_network.domain.auth.ports import ITokenService
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.file.ports import IFileRepository, IFileStorage
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus
from football_network.domain.user.ports import IPasswordHasher, IUserRepository

ALL_REQUEST_TYPES: Tuple[Type[Request], ...] = (
    # auth
    AuthenticateUserCommand,
    RefreshTokenCommand,
    LogoutCommand,
    ValidateTokenQuery,
    GetCurrentUserQuery,
    # clubs
    CreateClubCommand,
    UpdateClubCommand,
    DeleteClubCommand,
    UploadClubLogoCommand,
    ChangeClubStatusCommand,
    GetClubByIdQuery,
    GetClubsQuery,
    GetClubConnectionsQuery,
    # connections
    CreateConnectionCommand,
    UpdateConnectionCommand,
    DeleteConnectionCommand,
    VerifyConnectionCommand,
    GetConnectionsQuery,
    # read models
    GetDashboardStatsQuery,
    GetGraphDataQuery,
    # users
    CreateUserCommand,
    UpdateUserRoleCommand,
    SetUserActiveCommand,
    GetUsersQuery,
    # files
    GetFilesQuery,
    DeleteFileCommand,
)


class HandlerDependencies(Protocol):
    """Collaborators the handlers are built from."""

    clubs: IClubRepository
    connections: IConnectionRepository
    users: IUserRepository
    files: IFileRepository
    file_storage: IFileStorage
    cache: ICacheService
    event_bus: Optional[IEventBus]
    tokens: ITokenService
    password_hasher: IPasswordHasher
    navigation: NavigationService


def build_dispatcher(deps: HandlerDependencies) -> Dispatcher:
    """Register every feature handler and verify the registry is complete.

    Raises:
        HandlerRegistrationError: On a duplicate or missing registration
    """
    bus, cache = deps.event_bus, deps.cache
    dispatcher = Dispatcher()
    register = dispatcher.register

    # auth
    register(
        AuthenticateUserCommand,
        AuthenticateUserCommandHandler(
            deps.users, deps.password_hasher, deps.tokens, deps.navigation, bus
        ),
    )
    register(RefreshTokenCommand, RefreshTokenCommandHandler(deps.users, deps.tokens))
    register(LogoutCommand, LogoutCommandHandler(deps.tokens))
    register(ValidateTokenQuery, ValidateTokenQueryHandler(deps.users, deps.tokens))
    register(GetCurrentUserQuery, GetCurrentUserQueryHandler(deps.users))

    # clubs
    register(CreateClubCommand, CreateClubCommandHandler(deps.clubs, bus, cache))
    register(UpdateClubCommand, UpdateClubCommandHandler(deps.clubs, deps.connections, bus, cache))
    register(
        DeleteClubCommand,
        DeleteClubCommandHandler(deps.clubs, deps.connections, deps.file_storage, bus, cache),
    )
    register(
        UploadClubLogoCommand,
        UploadClubLogoCommandHandler(deps.clubs, deps.file_storage, deps.files, bus, cache),
    )
    register(ChangeClubStatusCommand, ChangeClubStatusCommandHandler(deps.clubs, bus, cache))
    register(GetClubByIdQuery, GetClubByIdQueryHandler(deps.clubs, deps.connections))
    register(GetClubsQuery, GetClubsQueryHandler(deps.clubs, deps.connections))
    register(GetClubConnectionsQuery, GetClubConnectionsQueryHandler(deps.clubs, deps.connections))

    # connections
    register(
        CreateConnectionCommand,
        CreateConnectionCommandHandler(deps.clubs, deps.connections, bus, cache),
    )
    register(
        UpdateConnectionCommand,
        UpdateConnectionCommandHandler(deps.clubs, deps.connections, bus, cache),
    )
    register(DeleteConnectionCommand, DeleteConnectionCommandHandler(deps.connections, bus, cache))
    register(VerifyConnectionCommand, VerifyConnectionCommandHandler(deps.connections, bus, cache))
    register(GetConnectionsQuery, GetConnectionsQueryHandler(deps.clubs, deps.connections))

    # read models
    register(
        GetDashboardStatsQuery,
        GetDashboardStatsQueryHandler(deps.clubs, deps.connections, deps.users, deps.files, cache),
    )
    register(GetGraphDataQuery, GetGraphDataQueryHandler(deps.clubs, deps.connections, cache))

    # users
    register(
        CreateUserCommand,
        CreateUserCommandHandler(deps.users, deps.password_hasher, bus, cache),
    )
    register(UpdateUserRoleCommand, UpdateUserRoleCommandHandler(deps.users, bus))
    register(SetUserActiveCommand, SetUserActiveCommandHandler(deps.users, bus, cache))
    register(GetUsersQuery, GetUsersQueryHandler(deps.users))

    # files
    register(GetFilesQuery, GetFilesQueryHandler(deps.files))
    register(
        DeleteFileCommand,
        DeleteFileCommandHandler(deps.files, deps.file_storage, deps.clubs, bus, cache),
    )

    dispatcher.verify(ALL_REQUEST_TYPES)
    return dispatcher
