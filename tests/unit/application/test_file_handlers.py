"""Tests for stored file commands and queries."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from football_network.application.common.result import ErrorKind
from football_network.application.files.commands.delete_file import (
    DeleteFileCommand,
    DeleteFileCommandHandler,
)
from football_network.application.files.queries.get_files import GetFilesQuery, GetFilesQueryHandler
from football_network.domain.file.entities import StoredFile
from football_network.domain.file.enums import FileType
from football_network.domain.file.ports import IFileStorage, StorageError


@pytest.fixture
def file_storage():
    storage = MagicMock(spec=IFileStorage)
    storage.delete = AsyncMock(return_value=True)
    return storage


def _logo(club_id=None) -> StoredFile:
    return StoredFile.create(
        original_name="crest.png",
        stored_name="crest-1.png",
        path="clubs/crest-1.png",
        content_type="image/png",
        size_bytes=2048,
        club_id=club_id,
    )


class TestDeleteFile:
    @pytest.mark.asyncio
    async def test_deleting_logo_clears_club_logo_path(
        self, file_repository, file_storage, club_repository, make_club
    ):
        club = make_club()
        club.update_logo_path("clubs/crest-1.png")
        club.collect_events()
        await club_repository.add(club)
        stored = _logo(club.id)
        await file_repository.add(stored)
        handler = DeleteFileCommandHandler(file_repository, file_storage, club_repository)

        result = await handler.handle(DeleteFileCommand(file_id=stored.id))

        assert result.value is True
        file_storage.delete.assert_awaited_once_with("clubs/crest-1.png")
        assert await file_repository.get_by_id(stored.id) is None
        assert (await club_repository.get_by_id(club.id)).logo_path is None

    @pytest.mark.asyncio
    async def test_unknown_file(self, file_repository, file_storage, club_repository):
        missing = uuid4()
        handler = DeleteFileCommandHandler(file_repository, file_storage, club_repository)

        result = await handler.handle(DeleteFileCommand(file_id=missing))

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.error == f"File with ID '{missing}' not found."

    @pytest.mark.asyncio
    async def test_storage_failure_keeps_metadata(
        self, file_repository, file_storage, club_repository
    ):
        stored = _logo()
        await file_repository.add(stored)
        file_storage.delete.side_effect = StorageError("disk gone")
        handler = DeleteFileCommandHandler(file_repository, file_storage, club_repository)

        result = await handler.handle(DeleteFileCommand(file_id=stored.id))

        assert result.kind is ErrorKind.UNEXPECTED
        assert result.error == "Failed to delete file."
        assert await file_repository.get_by_id(stored.id) is not None


class TestGetFiles:
    @pytest.mark.asyncio
    async def test_filters_by_type_and_club(self, file_repository):
        club_id = uuid4()
        await file_repository.add(_logo(club_id))
        await file_repository.add(
            StoredFile.create("rules.pdf", "rules-1.pdf", "docs/rules-1.pdf", "application/pdf", 10)
        )
        handler = GetFilesQueryHandler(file_repository)

        images = await handler.handle(GetFilesQuery(file_type=FileType.IMAGE))
        for_club = await handler.handle(GetFilesQuery(club_id=club_id))
        everything = await handler.handle(GetFilesQuery())

        assert [f.original_name for f in images.value.items] == ["crest.png"]
        assert for_club.value.total_count == 1
        assert everything.value.total_count == 2
