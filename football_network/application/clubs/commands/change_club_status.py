"""Change club status flags (active, verified, featured)."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.clubs.dtos import ClubDto
from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.club.ports import IClubRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeClubStatusCommand(Command):
    """
    Command: Toggle club flags. ``None`` leaves a flag unchanged.

    Approving a club from the admin panel is ``is_verified=True``.
    """

    club_id: Optional[UUID] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None


class ChangeClubStatusValidator(Validator[ChangeClubStatusCommand]):
    def rules(self, request: ChangeClubStatusCommand, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")
        errors.check(
            any(
                flag is not None
                for flag in (request.is_active, request.is_verified, request.is_featured)
            ),
            "At least one status flag must be provided.",
        )


class ChangeClubStatusCommandHandler(RequestHandler[ChangeClubStatusCommand, ClubDto]):
    validator = ChangeClubStatusValidator()
    operation = "changing the club status"

    def __init__(
        self,
        repository: IClubRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._repository = repository
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: ChangeClubStatusCommand) -> Result[ClubDto]:
        club = await self._repository.get_by_id(command.club_id)  # type: ignore[arg-type]
        if club is None:
            return Result.failure(
                f"Club with ID '{command.club_id}' not found.", ErrorKind.NOT_FOUND
            )

        before = (club.is_active, club.is_verified, club.is_featured)
        toggles = (
            (command.is_active, club.activate, club.deactivate),
            (command.is_verified, club.verify, club.unverify),
            (command.is_featured, club.feature, club.unfeature),
        )
        for flag, enable, disable in toggles:
            if flag is None:
                continue
            if flag:
                enable()
            else:
                disable()

        if (club.is_active, club.is_verified, club.is_featured) != before:
            await self._repository.update(club)
            await publish_events(self._event_bus, club)
            await invalidate_read_models(self._cache)
            logger.info(
                "Club status changed",
                extra={
                    "club_id": str(club.id),
                    "is_active": club.is_active,
                    "is_verified": club.is_verified,
                    "is_featured": club.is_featured,
                },
            )
        return Result.success(ClubDto.from_domain(club))
