"""Create user command (administration)."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import (
    ValidationErrors,
    Validator,
    is_blank,
    is_email,
    length_between,
    matches,
    max_length,
)
from football_network.application.users.dtos import UserDto
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IPasswordHasher, IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateUserCommand(Command):
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = field(default="", repr=False)
    role: UserRole = UserRole.USER


class CreateUserValidator(Validator[CreateUserCommand]):
    def rules(self, request: CreateUserCommand, errors: ValidationErrors) -> None:
        if errors.check(not is_blank(request.username), "Username is required."):
            errors.check(
                matches(request.username.strip(), r"^[A-Za-z0-9_-]{3,50}$"),
                "Username must be 3-50 characters of letters, digits, '_' or '-'.",
            )
        if errors.check(not is_blank(request.email), "Email is required."):
            errors.check(is_email(request.email.strip()), "Email must be a valid email address.")
            errors.check(max_length(request.email, 254), "Email must not exceed 254 characters.")
        if errors.check(not is_blank(request.first_name), "First name is required."):
            errors.check(max_length(request.first_name, 50), "First name must not exceed 50 characters.")
        if errors.check(not is_blank(request.last_name), "Last name is required."):
            errors.check(max_length(request.last_name, 50), "Last name must not exceed 50 characters.")
        if errors.check(bool(request.password), "Password is required."):
            errors.check(
                length_between(request.password, 6, 100),
                "Password must be between 6 and 100 characters long.",
            )
        errors.check(
            request.role in {r.value for r in UserRole},
            "Role is invalid.",
        )


class CreateUserCommandHandler(RequestHandler[CreateUserCommand, UserDto]):
    validator = CreateUserValidator()
    operation = "creating the user"

    def __init__(
        self,
        users: IUserRepository,
        password_hasher: IPasswordHasher,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._users = users
        self._password_hasher = password_hasher
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: CreateUserCommand) -> Result[UserDto]:
        username = command.username.strip().lower()
        email = command.email.strip().lower()
        logger.info("Creating user", extra={"username": username})

        if await self._users.get_by_username(username) is not None:
            return Result.failure(
                f"A user with the username '{username}' already exists.", ErrorKind.CONFLICT
            )
        if await self._users.get_by_email(email) is not None:
            return Result.failure(
                f"A user with the email '{email}' already exists.", ErrorKind.CONFLICT
            )

        user = User.create(
            username=username,
            email=email,
            first_name=command.first_name,
            last_name=command.last_name,
            password_hash=self._password_hasher.hash(command.password),
            role=UserRole(command.role),
        )
        await self._users.add(user)
        await publish_events(self._event_bus, user)
        await invalidate_read_models(self._cache)

        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.name})
        return Result.success(UserDto.from_domain(user))
