"""List users query."""

from dataclasses import dataclass
from typing import Optional

from football_network.application.common.handler import RequestHandler
from football_network.application.common.pagination import MAX_PAGE_SIZE, PagedResult
from football_network.application.common.requests import Query
from football_network.application.common.result import Result
from football_network.application.common.validation import (
    ValidationErrors,
    Validator,
    max_length,
    valid_page,
)
from football_network.application.users.dtos import UserDto
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IUserRepository, UserSearchCriteria


@dataclass(frozen=True)
class GetUsersQuery(Query):
    search_term: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    page: int = 1
    page_size: int = 20


class GetUsersValidator(Validator[GetUsersQuery]):
    def rules(self, request: GetUsersQuery, errors: ValidationErrors) -> None:
        valid_page(errors, request.page, request.page_size, MAX_PAGE_SIZE)
        errors.check(
            max_length(request.search_term, 100),
            "Search term must not exceed 100 characters.",
        )


class GetUsersQueryHandler(RequestHandler[GetUsersQuery, PagedResult[UserDto]]):
    validator = GetUsersValidator()
    operation = "retrieving users"

    def __init__(self, users: IUserRepository):
        self._users = users

    async def _execute(self, query: GetUsersQuery) -> Result[PagedResult[UserDto]]:
        criteria = UserSearchCriteria(
            search_term=query.search_term,
            role=query.role,
            is_active=query.is_active,
            page=query.page,
            page_size=query.page_size,
        )
        users, total = await self._users.search(criteria)
        return Result.success(
            PagedResult(
                items=[UserDto.from_domain(user) for user in users],
                total_count=total,
                page=query.page,
                page_size=query.page_size,
            )
        )
