"""Create club command and handler."""

import logging
from dataclasses import dataclass
from typing import Optional

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
from football_network.domain.club.entities import Club, slugify
from football_network.domain.club.ports import IClubRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "Poland"


@dataclass(frozen=True)
class CreateClubCommand(ClubFields, Command):
    """
    Command: Create a club.

    Slug defaults to the name lowercased with spaces replaced by hyphens,
    country defaults to Poland and position to the canvas origin.
    """


class CreateClubValidator(Validator[CreateClubCommand]):
    def rules(self, request: CreateClubCommand, errors: ValidationErrors) -> None:
        check_club_fields(request, errors)


class CreateClubCommandHandler(RequestHandler[CreateClubCommand, ClubDto]):
    """Handler for CreateClubCommand."""

    validator = CreateClubValidator()
    operation = "creating the club"

    def __init__(
        self,
        repository: IClubRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        """
        Initialize handler.

        Args:
            repository: Club repository port
            event_bus: Event bus port (ClubCreated is published)
            cache: Read model cache, invalidated after the write
        """
        self._repository = repository
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: CreateClubCommand) -> Result[ClubDto]:
        attributes = club_attributes(command, DEFAULT_COUNTRY)
        name = attributes["name"]
        short_name = attributes["short_name"]

        logger.info("Creating club", extra={"club_name": name})

        if await self._repository.get_by_name(name) is not None:
            logger.warning("Duplicate club name", extra={"club_name": name})
            return Result.failure(
                f"A club with the name '{name}' already exists.", ErrorKind.CONFLICT
            )

        if short_name and await self._repository.get_by_short_name(short_name) is not None:
            return Result.failure(
                f"A club with the short name '{short_name}' already exists.",
                ErrorKind.CONFLICT,
            )

        slug = (command.slug or slugify(name)).lower()
        if await self._repository.get_by_slug(slug) is not None:
            return Result.failure(
                f"A club with the slug '{slug}' already exists.", ErrorKind.CONFLICT
            )

        club = Club.create(slug=slug, **attributes)
        await self._repository.add(club)

        await publish_events(self._event_bus, club)
        await invalidate_read_models(self._cache)

        logger.info("Club created", extra={"club_id": str(club.id), "club_name": club.name})
        return Result.success(ClubDto.from_domain(club))
