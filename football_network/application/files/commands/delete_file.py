"""Delete a stored file (blob and metadata)."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.club.ports import IClubRepository
from football_network.domain.file.ports import IFileRepository, IFileStorage, StorageError
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteFileCommand(Command):
    file_id: Optional[UUID] = None


class DeleteFileValidator(Validator[DeleteFileCommand]):
    def rules(self, request: DeleteFileCommand, errors: ValidationErrors) -> None:
        errors.check(request.file_id is not None, "File ID is required.")


class DeleteFileCommandHandler(RequestHandler[DeleteFileCommand, bool]):
    """Removes the file; a club using it as logo loses its logo."""

    validator = DeleteFileValidator()
    operation = "deleting the file"

    def __init__(
        self,
        files: IFileRepository,
        file_storage: IFileStorage,
        clubs: IClubRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._files = files
        self._file_storage = file_storage
        self._clubs = clubs
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: DeleteFileCommand) -> Result[bool]:
        stored = await self._files.get_by_id(command.file_id)  # type: ignore[arg-type]
        if stored is None:
            return Result.failure(f"File with ID '{command.file_id}' not found.", ErrorKind.NOT_FOUND)

        try:
            await self._file_storage.delete(stored.path)
        except StorageError:
            logger.exception("Failed to delete file content", extra={"path": stored.path})
            return Result.failure("Failed to delete file.", ErrorKind.UNEXPECTED)

        await self._files.delete(stored.id)

        if stored.club_id is not None:
            club = await self._clubs.get_by_id(stored.club_id)
            if club is not None and club.logo_path == stored.path:
                club.update_logo_path(None)
                await self._clubs.update(club)
                await publish_events(self._event_bus, club)

        await invalidate_read_models(self._cache)
        logger.info("File deleted", extra={"file_id": str(stored.id), "path": stored.path})
        return Result.success(True)
