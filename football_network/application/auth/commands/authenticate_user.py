"""Authenticate user (login) command and handler."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from football_network.application.auth.dtos import AuthenticationResultDto
from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import (
    ValidationErrors,
    Validator,
    is_blank,
    is_email,
)
from football_network.application.navigation.service import NavigationService
from football_network.application.users.dtos import UserDto
from football_network.domain.auth.ports import ITokenService
from football_network.domain.shared.ports.event_bus import IEventBus
from football_network.domain.user.ports import IPasswordHasher, IUserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."
ACCOUNT_DEACTIVATED = "Your account has been deactivated. Please contact support."


@dataclass(frozen=True)
class AuthenticateUserCommand(Command):
    """
    Command: Exchange email and password for tokens.

    Attributes:
        email: Account email (case-insensitive)
        password: Plain text password
        session_key: Browser session identifier used to look up the URL
            the visitor wanted before being redirected to login
    """

    email: str = ""
    password: str = field(default="", repr=False)
    session_key: Optional[str] = None


class AuthenticateUserValidator(Validator[AuthenticateUserCommand]):
    def rules(self, request: AuthenticateUserCommand, errors: ValidationErrors) -> None:
        if errors.check(not is_blank(request.email), "Email is required."):
            errors.check(is_email(request.email.strip()), "Email must be a valid email address.")
            errors.check(len(request.email) <= 255, "Email must not exceed 255 characters.")
        if errors.check(bool(request.password), "Password is required."):
            errors.check(len(request.password) >= 6, "Password must be at least 6 characters long.")
            errors.check(len(request.password) <= 100, "Password must not exceed 100 characters.")


class AuthenticateUserCommandHandler(RequestHandler[AuthenticateUserCommand, AuthenticationResultDto]):
    """Handler for AuthenticateUserCommand."""

    validator = AuthenticateUserValidator()
    operation = "authenticating"

    def __init__(
        self,
        users: IUserRepository,
        password_hasher: IPasswordHasher,
        tokens: ITokenService,
        navigation: Optional[NavigationService] = None,
        event_bus: Optional[IEventBus] = None,
    ):
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._navigation = navigation
        self._event_bus = event_bus

    async def _execute(self, command: AuthenticateUserCommand) -> Result[AuthenticationResultDto]:
        email = command.email.strip().lower()
        logger.info("Processing authentication request", extra={"email": email})

        user = await self._users.get_by_email(email)
        if user is None:
            logger.warning("Authentication failed - unknown email", extra={"email": email})
            return Result.failure(INVALID_CREDENTIALS, ErrorKind.UNAUTHORIZED)

        if not self._password_hasher.verify(command.password, user.password_hash):
            logger.warning("Authentication failed - invalid password", extra={"email": email})
            return Result.failure(INVALID_CREDENTIALS, ErrorKind.UNAUTHORIZED)

        if not user.is_active:
            logger.warning("Authentication failed - inactive account", extra={"email": email})
            return Result.failure(ACCOUNT_DEACTIVATED, ErrorKind.FORBIDDEN)

        access_token = self._tokens.create_access_token(user)
        refresh_token = await self._tokens.issue_refresh_token(user.id)

        user.record_login()
        await self._users.update(user)
        await publish_events(self._event_bus, user)

        redirect_to = "/dashboard"
        if self._navigation is not None:
            redirect_to = self._navigation.pop_intended_url(command.session_key)

        logger.info("Authentication successful", extra={"user_id": str(user.id)})
        return Result.success(
            AuthenticationResultDto(
                token=access_token.value,
                refresh_token=refresh_token,
                expires_at=access_token.expires_at,
                user=UserDto.from_domain(user),
                redirect_to=redirect_to,
            )
        )
