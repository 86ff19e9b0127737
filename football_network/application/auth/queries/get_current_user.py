"""Profile of the signed-in user."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Query
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.users.dtos import UserDto
from football_network.domain.user.ports import IUserRepository


@dataclass(frozen=True)
class GetCurrentUserQuery(Query):
    user_id: Optional[UUID] = None


class GetCurrentUserValidator(Validator[GetCurrentUserQuery]):
    def rules(self, request: GetCurrentUserQuery, errors: ValidationErrors) -> None:
        errors.check(request.user_id is not None, "User ID is required.")


class GetCurrentUserQueryHandler(RequestHandler[GetCurrentUserQuery, UserDto]):
    validator = GetCurrentUserValidator()
    operation = "retrieving the current user"

    def __init__(self, users: IUserRepository):
        self._users = users

    async def _execute(self, query: GetCurrentUserQuery) -> Result[UserDto]:
        user = await self._users.get_by_id(query.user_id)  # type: ignore[arg-type]
        if user is None:
            return Result.failure(f"User with ID '{query.user_id}' not found.", ErrorKind.NOT_FOUND)
        return Result.success(UserDto.from_domain(user))
