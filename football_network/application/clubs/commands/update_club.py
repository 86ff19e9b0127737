"""Update club command and handler."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.clubs.dtos import ClubDto
from football_network.application.clubs.validators import (
    ClubFields,
    check_club_fields,
    club_attributes,
)
from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateClubCommand(ClubFields, Command):
    """
    Command: Replace the editable attributes of a club.

    Attributes:
        club_id: Club to update
    """

    club_id: Optional[UUID] = None


class UpdateClubValidator(Validator[UpdateClubCommand]):
    def rules(self, request: UpdateClubCommand, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")
        check_club_fields(request, errors)


class UpdateClubCommandHandler(RequestHandler[UpdateClubCommand, ClubDto]):
    """Handler for UpdateClubCommand."""

    validator = UpdateClubValidator()
    operation = "updating the club"

    def __init__(
        self,
        repository: IClubRepository,
        connections: IConnectionRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._repository = repository
        self._connections = connections
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: UpdateClubCommand) -> Result[ClubDto]:
        club = await self._repository.get_by_id(command.club_id)  # type: ignore[arg-type]
        if club is None:
            return Result.failure(
                f"Club with ID '{command.club_id}' not found.", ErrorKind.NOT_FOUND
            )

        attributes = club_attributes(command, club.country)
        name = attributes["name"]
        short_name = attributes["short_name"]

        same_name = await self._repository.get_by_name(name)
        if same_name is not None and same_name.id != club.id:
            return Result.failure(
                f"A club with the name '{name}' already exists.", ErrorKind.CONFLICT
            )

        if short_name:
            same_short = await self._repository.get_by_short_name(short_name)
            if same_short is not None and same_short.id != club.id:
                return Result.failure(
                    f"A club with the short name '{short_name}' already exists.",
                    ErrorKind.CONFLICT,
                )

        if command.slug:
            slug = command.slug.lower()
            same_slug = await self._repository.get_by_slug(slug)
            if same_slug is not None and same_slug.id != club.id:
                return Result.failure(
                    f"A club with the slug '{slug}' already exists.", ErrorKind.CONFLICT
                )
            attributes["slug"] = slug

        changed = club.update(**attributes)
        if changed:
            await self._repository.update(club)
            await publish_events(self._event_bus, club)
            await invalidate_read_models(self._cache)

        logger.info(
            "Club updated",
            extra={"club_id": str(club.id), "changed_fields": changed},
        )
        connection_count = len(await self._connections.list_for_club(club.id))
        return Result.success(ClubDto.from_domain(club, connection_count))
