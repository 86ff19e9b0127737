"""Delete club command and handler."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.club.events import ClubDeleted
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.file.ports import IFileStorage
from football_network.domain.shared.events import DomainEvent
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteClubCommand(Command):
    """
    Command: Delete club.

    A club with connections is only deleted with ``force_delete``, in
    which case its connections go first.

    Attributes:
        club_id: Club to delete
        force_delete: Also delete the club's connections
    """

    club_id: Optional[UUID] = None
    force_delete: bool = False


class DeleteClubValidator(Validator[DeleteClubCommand]):
    def rules(self, request: DeleteClubCommand, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")


class DeleteClubCommandHandler(RequestHandler[DeleteClubCommand, bool]):
    """Handler for DeleteClubCommand."""

    validator = DeleteClubValidator()
    operation = "deleting the club"

    def __init__(
        self,
        repository: IClubRepository,
        connections: IConnectionRepository,
        file_storage: IFileStorage,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._repository = repository
        self._connections = connections
        self._file_storage = file_storage
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: DeleteClubCommand) -> Result[bool]:
        logger.info(
            "Deleting club",
            extra={"club_id": str(command.club_id), "force_delete": command.force_delete},
        )

        club = await self._repository.get_by_id(command.club_id)  # type: ignore[arg-type]
        if club is None:
            return Result.failure(
                f"Club with ID '{command.club_id}' not found.", ErrorKind.NOT_FOUND
            )

        connections = await self._connections.list_for_club(club.id)
        removed_connections = 0
        if connections:
            if not command.force_delete:
                return Result.failure(
                    f"Cannot delete club '{club.name}' because it has {len(connections)} "
                    "existing connections. Use force delete to remove all connections "
                    "and delete the club.",
                    ErrorKind.BUSINESS_RULE,
                )
            removed_connections = await self._connections.delete_for_club(club.id)
            logger.info(
                "Club connections deleted",
                extra={"club_id": str(club.id), "count": removed_connections},
            )

        if club.logo_path:
            try:
                await self._file_storage.delete(club.logo_path)
            except Exception as e:
                # Orphaned logo files are acceptable
                logger.warning(
                    "Failed to delete club logo",
                    extra={"club_id": str(club.id), "logo_path": club.logo_path, "error": str(e)},
                )

        await self._repository.delete(club.id)

        if self._event_bus is not None:
            await self._event_bus.publish(
                ClubDeleted(
                    **DomainEvent.new_metadata(),
                    club_id=club.id,
                    name=club.name,
                    removed_connections=removed_connections,
                )
            )
        await invalidate_read_models(self._cache)

        logger.info("Club deleted", extra={"club_id": str(club.id)})
        return Result.success(True)
