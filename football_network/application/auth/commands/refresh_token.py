"""Refresh token command: rotate the refresh token, issue a new access token."""

import logging
from dataclasses import dataclass, field

from football_network.application.auth.dtos import AuthenticationResultDto
from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator, is_blank
from football_network.application.users.dtos import UserDto
from football_network.domain.auth.ports import ITokenService
from football_network.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)

INVALID_REFRESH_TOKEN = "Invalid or expired refresh token."


@dataclass(frozen=True)
class RefreshTokenCommand(Command):
    refresh_token: str = field(default="", repr=False)


class RefreshTokenValidator(Validator[RefreshTokenCommand]):
    def rules(self, request: RefreshTokenCommand, errors: ValidationErrors) -> None:
        errors.check(not is_blank(request.refresh_token), "Refresh token is required.")


class RefreshTokenCommandHandler(RequestHandler[RefreshTokenCommand, AuthenticationResultDto]):
    validator = RefreshTokenValidator()
    operation = "refreshing the token"

    def __init__(self, users: IUserRepository, tokens: ITokenService):
        self._users = users
        self._tokens = tokens

    async def _execute(self, command: RefreshTokenCommand) -> Result[AuthenticationResultDto]:
        logger.info("Processing refresh token request")

        user_id = await self._tokens.consume_refresh_token(command.refresh_token)
        if user_id is None:
            logger.warning("Refresh with unknown or expired token")
            return Result.failure(INVALID_REFRESH_TOKEN, ErrorKind.UNAUTHORIZED)

        user = await self._users.get_by_id(user_id)
        if user is None or not user.is_active:
            logger.warning("Refresh for missing or inactive user", extra={"user_id": str(user_id)})
            return Result.failure(INVALID_REFRESH_TOKEN, ErrorKind.UNAUTHORIZED)

        access_token = self._tokens.create_access_token(user)
        refresh_token = await self._tokens.issue_refresh_token(user.id)

        logger.info("Token refreshed", extra={"user_id": str(user.id)})
        return Result.success(
            AuthenticationResultDto(
                token=access_token.value,
                refresh_token=refresh_token,
                expires_at=access_token.expires_at,
                user=UserDto.from_domain(user),
            )
        )
