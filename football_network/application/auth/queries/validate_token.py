"""Validate an access token and resolve its principal."""

import logging
from dataclasses import dataclass, field

from football_network.application.auth.dtos import TokenValidationDto
from football_network.application.authorization.models import AuthUser
from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Query
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator, is_blank
from football_network.domain.auth.ports import ITokenService
from football_network.domain.shared.errors import AuthenticationError
from football_network.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidateTokenQuery(Query):
    token: str = field(default="", repr=False)


class ValidateTokenValidator(Validator[ValidateTokenQuery]):
    def rules(self, request: ValidateTokenQuery, errors: ValidationErrors) -> None:
        errors.check(not is_blank(request.token), "Token is required.")


class ValidateTokenQueryHandler(RequestHandler[ValidateTokenQuery, TokenValidationDto]):
    """Verify the token, then reload the account so that deactivation
    and role changes apply before the token expires."""

    validator = ValidateTokenValidator()
    operation = "validating the token"

    def __init__(self, users: IUserRepository, tokens: ITokenService):
        self._users = users
        self._tokens = tokens

    async def _execute(self, query: ValidateTokenQuery) -> Result[TokenValidationDto]:
        try:
            claims = self._tokens.decode_access_token(query.token)
        except AuthenticationError as e:
            logger.debug("Token rejected", extra={"reason": str(e)})
            return Result.failure(str(e), ErrorKind.UNAUTHORIZED)

        user = await self._users.get_by_id(claims.user_id)
        if user is None:
            return Result.failure("Token subject no longer exists.", ErrorKind.UNAUTHORIZED)

        return Result.success(
            TokenValidationDto(principal=AuthUser.from_user(user), expires_at=claims.expires_at)
        )
