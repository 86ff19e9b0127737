"""Connections of a single club."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.pagination import MAX_PAGE_SIZE, PagedResult
from football_network.application.common.requests import Query
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator, valid_page
from football_network.application.connections.dtos import ConnectionDetailDto
from football_network.application.connections.mapping import to_detail_dtos
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository


@dataclass(frozen=True)
class GetClubConnectionsQuery(Query):
    club_id: Optional[UUID] = None
    verified_only: bool = False
    page: int = 1
    page_size: int = 20


class GetClubConnectionsValidator(Validator[GetClubConnectionsQuery]):
    def rules(self, request: GetClubConnectionsQuery, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")
        valid_page(errors, request.page, request.page_size, MAX_PAGE_SIZE)


class GetClubConnectionsQueryHandler(
    RequestHandler[GetClubConnectionsQuery, PagedResult[ConnectionDetailDto]]
):
    validator = GetClubConnectionsValidator()
    operation = "retrieving club connections"

    def __init__(self, clubs: IClubRepository, connections: IConnectionRepository):
        self._clubs = clubs
        self._connections = connections

    async def _execute(
        self, query: GetClubConnectionsQuery
    ) -> Result[PagedResult[ConnectionDetailDto]]:
        club = await self._clubs.get_by_id(query.club_id)  # type: ignore[arg-type]
        if club is None:
            return Result.failure(f"Club with ID '{query.club_id}' not found.", ErrorKind.NOT_FOUND)

        connections = await self._connections.list_for_club(club.id)
        if query.verified_only:
            connections = [c for c in connections if c.is_verified]
        connections.sort(key=lambda c: c.created_at, reverse=True)

        page = PagedResult.from_sequence(connections, query.page, query.page_size)
        items = await to_detail_dtos(page.items, self._clubs)
        return Result.success(
            PagedResult(
                items=items,
                total_count=page.total_count,
                page=page.page,
                page_size=page.page_size,
            )
        )
