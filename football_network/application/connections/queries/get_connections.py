"""List connections query."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.pagination import MAX_PAGE_SIZE, PagedResult
from football_network.application.common.requests import Query
from football_network.application.common.result import Result
from football_network.application.common.validation import ValidationErrors, Validator, valid_page
from football_network.application.connections.dtos import ConnectionDetailDto
from football_network.application.connections.mapping import to_detail_dtos
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.connection.ports import (
    CONNECTION_SORT_FIELDS,
    ConnectionSearchCriteria,
    IConnectionRepository,
)


@dataclass(frozen=True)
class GetConnectionsQuery(Query):
    page: int = 1
    page_size: int = 20
    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    is_verified: Optional[bool] = None
    club_id: Optional[UUID] = None
    min_reliability_score: Optional[float] = None
    sort_by: str = "created_at"
    sort_direction: str = "DESC"

    @property
    def is_descending(self) -> bool:
        return self.sort_direction.upper() == "DESC"


class GetConnectionsValidator(Validator[GetConnectionsQuery]):
    def rules(self, request: GetConnectionsQuery, errors: ValidationErrors) -> None:
        valid_page(errors, request.page, request.page_size, MAX_PAGE_SIZE)
        errors.check(
            request.sort_by in CONNECTION_SORT_FIELDS,
            "Sort by must be one of: " + ", ".join(CONNECTION_SORT_FIELDS) + ".",
        )
        errors.check(
            request.sort_direction.upper() in ("ASC", "DESC"),
            "Sort direction must be ASC or DESC.",
        )
        if request.min_reliability_score is not None:
            errors.check(
                0.0 <= request.min_reliability_score <= 1.0,
                "Minimum reliability score must be between 0 and 1.",
            )


class GetConnectionsQueryHandler(
    RequestHandler[GetConnectionsQuery, PagedResult[ConnectionDetailDto]]
):
    validator = GetConnectionsValidator()
    operation = "retrieving connections"

    def __init__(self, clubs: IClubRepository, connections: IConnectionRepository):
        self._clubs = clubs
        self._connections = connections

    async def _execute(self, query: GetConnectionsQuery) -> Result[PagedResult[ConnectionDetailDto]]:
        criteria = ConnectionSearchCriteria(
            type=query.type,
            strength=query.strength,
            is_verified=query.is_verified,
            club_id=query.club_id,
            min_reliability_score=query.min_reliability_score,
            sort_by=query.sort_by,
            descending=query.is_descending,
            page=query.page,
            page_size=query.page_size,
        )
        connections, total = await self._connections.search(criteria)
        items = await to_detail_dtos(connections, self._clubs)
        return Result.success(
            PagedResult(items=items, total_count=total, page=query.page, page_size=query.page_size)
        )
