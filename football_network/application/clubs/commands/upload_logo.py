"""Upload club logo command and handler."""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from football_network.application.clubs.dtos import FileUploadResultDto
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.events import publish_events
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator, is_blank
from football_network.domain.club.ports import IClubRepository
from football_network.domain.file.entities import StoredFile
from football_network.domain.file.ports import IFileRepository, IFileStorage, StorageError
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")
ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")
MAX_LOGO_SIZE_BYTES = 5 * 1024 * 1024
LOGO_DIRECTORY = "clubs/logos"


@dataclass(frozen=True)
class UploadClubLogoCommand(Command):
    """
    Command: Replace a club's logo.

    Attributes:
        club_id: Club receiving the logo
        file_name: Original file name (extension is kept)
        content_type: MIME type declared by the client
        content: Raw image bytes
        uploaded_by: Acting user, recorded on the stored file
    """

    club_id: Optional[UUID] = None
    file_name: str = ""
    content_type: str = ""
    content: bytes = field(default=b"", repr=False)
    uploaded_by: Optional[UUID] = None


class UploadClubLogoValidator(Validator[UploadClubLogoCommand]):
    def rules(self, request: UploadClubLogoCommand, errors: ValidationErrors) -> None:
        errors.check(request.club_id is not None, "Club ID is required.")

        if errors.check(not is_blank(request.file_name), "File name is required."):
            extension = os.path.splitext(request.file_name)[1].lower()
            errors.check(
                extension in ALLOWED_EXTENSIONS,
                "File must have one of the following extensions: " + ", ".join(ALLOWED_EXTENSIONS),
            )

        if errors.check(not is_blank(request.content_type), "Content type is required."):
            errors.check(
                request.content_type.lower() in ALLOWED_CONTENT_TYPES,
                "Content type must be a valid image type.",
            )

        if errors.check(bool(request.content), "File content is required."):
            errors.check(
                len(request.content) <= MAX_LOGO_SIZE_BYTES,
                f"File size must not exceed {MAX_LOGO_SIZE_BYTES // (1024 * 1024)}MB.",
            )


class UploadClubLogoCommandHandler(RequestHandler[UploadClubLogoCommand, FileUploadResultDto]):
    """Handler for UploadClubLogoCommand."""

    validator = UploadClubLogoValidator()
    operation = "uploading the club logo"

    def __init__(
        self,
        repository: IClubRepository,
        file_storage: IFileStorage,
        files: IFileRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._repository = repository
        self._file_storage = file_storage
        self._files = files
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: UploadClubLogoCommand) -> Result[FileUploadResultDto]:
        logger.info("Processing logo upload", extra={"club_id": str(command.club_id)})

        club = await self._repository.get_by_id(command.club_id)  # type: ignore[arg-type]
        if club is None:
            logger.warning("Logo upload for unknown club", extra={"club_id": str(command.club_id)})
            return Result.failure(
                f"Club with ID '{command.club_id}' not found.", ErrorKind.NOT_FOUND
            )

        extension = os.path.splitext(command.file_name)[1].lower()
        stored_name = f"logo_{club.id}_{uuid4().hex}{extension}"
        path = f"{LOGO_DIRECTORY}/{stored_name}"

        try:
            public_path = await self._file_storage.save(path, command.content, command.content_type)
        except StorageError as e:
            logger.warning(
                "Logo upload failed",
                extra={"club_id": str(club.id), "error": str(e)},
            )
            return Result.failure("Failed to upload logo file.", ErrorKind.VALIDATION)

        stored = StoredFile.create(
            original_name=command.file_name,
            stored_name=stored_name,
            path=public_path,
            content_type=command.content_type.lower(),
            size_bytes=len(command.content),
            club_id=club.id,
            uploaded_by=command.uploaded_by,
        )
        await self._files.add(stored)

        previous_logo = club.logo_path
        club.update_logo_path(public_path)
        await self._repository.update(club)
        await publish_events(self._event_bus, club)
        await invalidate_read_models(self._cache)

        if previous_logo and previous_logo != public_path:
            await self._remove_previous_logo(previous_logo)

        logger.info("Club logo uploaded", extra={"club_id": str(club.id), "path": public_path})
        return Result.success(
            FileUploadResultDto(
                file_name=stored_name,
                path=public_path,
                content_type=stored.content_type,
                size_bytes=stored.size_bytes,
                uploaded_at=stored.created_at,
            )
        )

    async def _remove_previous_logo(self, logo_path: str) -> None:
        try:
            await self._file_storage.delete(logo_path)
            previous = await self._files.get_by_path(logo_path)
            if previous is not None:
                await self._files.delete(previous.id)
        except Exception as e:
            logger.warning(
                "Failed to delete previous logo",
                extra={"logo_path": logo_path, "error": str(e)},
            )
