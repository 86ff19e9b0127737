"""Get club by ID query."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.clubs.dtos import ClubDto
from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Query
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository


@dataclass(frozen=True)
class GetClubByIdQuery(Query):
    club_id: Optional[UUID] = None


class GetClubByIdValidator(Validator[GetClubByIdQuery]):
    def rules(self, request: GetClubByIdQuery, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")


class GetClubByIdQueryHandler(RequestHandler[GetClubByIdQuery, ClubDto]):
    validator = GetClubByIdValidator()
    operation = "retrieving the club"

    def __init__(self, repository: IClubRepository, connections: IConnectionRepository):
        self._repository = repository
        self._connections = connections

    async def _execute(self, query: GetClubByIdQuery) -> Result[ClubDto]:
        club = await self._repository.get_by_id(query.club_id)  # type: ignore[arg-type]
        if club is None:
            return Result.failure(f"Club with ID '{query.club_id}' not found.", ErrorKind.NOT_FOUND)
        connections = await self._connections.list_for_club(club.id)
        return Result.success(ClubDto.from_domain(club, len(connections)))
