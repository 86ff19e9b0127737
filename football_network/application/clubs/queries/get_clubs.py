"""List clubs query (search, filters, sort, paging)."""

import logging
from dataclasses import dataclass
from typing import Optional

from football_network.application.clubs.dtos import ClubDto
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
from football_network.domain.club.enums import LeagueType
from football_network.domain.club.ports import CLUB_SORT_FIELDS, ClubSearchCriteria, IClubRepository
from football_network.domain.connection.ports import IConnectionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetClubsQuery(Query):
    """
    Query: Page through clubs.

    Attributes:
        search_term: Matches name, short name, city or nickname
        sort_by: One of name, city, founded, created_at
        sort_direction: ASC or DESC (case-insensitive)
    """

    page: int = 1
    page_size: int = 20
    search_term: Optional[str] = None
    league: Optional[LeagueType] = None
    country: Optional[str] = None
    city: Optional[str] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None
    founded_from: Optional[int] = None
    founded_to: Optional[int] = None
    sort_by: str = "name"
    sort_direction: str = "ASC"

    @property
    def is_descending(self) -> bool:
        return self.sort_direction.upper() == "DESC"


class GetClubsValidator(Validator[GetClubsQuery]):
    def rules(self, request: GetClubsQuery, errors: ValidationErrors) -> None:
        valid_page(errors, request.page, request.page_size, MAX_PAGE_SIZE)
        errors.check(
            max_length(request.search_term, 100),
            "Search term must not exceed 100 characters.",
        )
        errors.check(
            request.sort_by in CLUB_SORT_FIELDS,
            "Sort by must be one of: " + ", ".join(CLUB_SORT_FIELDS) + ".",
        )
        errors.check(
            request.sort_direction.upper() in ("ASC", "DESC"),
            "Sort direction must be ASC or DESC.",
        )
        if request.founded_from is not None and request.founded_to is not None:
            errors.check(
                request.founded_from <= request.founded_to,
                "Founded year range is invalid.",
            )


class GetClubsQueryHandler(RequestHandler[GetClubsQuery, PagedResult[ClubDto]]):
    validator = GetClubsValidator()
    operation = "retrieving clubs"

    def __init__(self, repository: IClubRepository, connections: IConnectionRepository):
        self._repository = repository
        self._connections = connections

    async def _execute(self, query: GetClubsQuery) -> Result[PagedResult[ClubDto]]:
        criteria = ClubSearchCriteria(
            search_term=query.search_term,
            league=query.league,
            country=query.country,
            city=query.city,
            is_active=query.is_active,
            is_verified=query.is_verified,
            is_featured=query.is_featured,
            founded_from=query.founded_from,
            founded_to=query.founded_to,
            sort_by=query.sort_by,
            descending=query.is_descending,
            page=query.page,
            page_size=query.page_size,
        )
        clubs, total = await self._repository.search(criteria)

        items = []
        for club in clubs:
            connections = await self._connections.list_for_club(club.id)
            items.append(ClubDto.from_domain(club, len(connections)))

        logger.debug(
            "Clubs retrieved",
            extra={"count": len(items), "total": total, "page": query.page},
        )
        return Result.success(
            PagedResult(items=items, total_count=total, page=query.page, page_size=query.page_size)
        )
