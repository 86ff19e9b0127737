"""Tests for club commands and queries."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from football_network.application.clubs.commands.change_club_status import (
    ChangeClubStatusCommand,
    ChangeClubStatusCommandHandler,
)
from football_network.application.clubs.commands.create_club import (
    CreateClubCommand,
    CreateClubCommandHandler,
)
from football_network.application.clubs.commands.delete_club import (
    DeleteClubCommand,
    DeleteClubCommandHandler,
)
from football_network.application.clubs.commands.update_club import (
    UpdateClubCommand,
    UpdateClubCommandHandler,
)
from football_network.application.clubs.commands.upload_logo import (
    UploadClubLogoCommand,
    UploadClubLogoCommandHandler,
)
from football_network.application.clubs.queries.get_club_by_id import (
    GetClubByIdQuery,
    GetClubByIdQueryHandler,
)
from football_network.application.clubs.queries.get_clubs import GetClubsQuery, GetClubsQueryHandler
from football_network.application.common.result import ErrorKind
from football_network.domain.club.enums import LeagueType
from football_network.domain.club.events import ClubCreated, ClubDeleted, ClubUpdated
from football_network.domain.file.entities import StoredFile
from football_network.domain.file.ports import IFileStorage, StorageError
from football_network.domain.shared.errors import ConflictError


def _create_command(**overrides) -> CreateClubCommand:
    fields = {
        "name": "Legia Warszawa",
        "short_name": "LEG",
        "league": LeagueType.EKSTRAKLASA,
        "city": "Warszawa",
        "colors": ("#FFFFFF", "#00AA00"),
    }
    fields.update(overrides)
    return CreateClubCommand(**fields)


@pytest.fixture
def file_storage():
    storage = MagicMock(spec=IFileStorage)
    storage.save = AsyncMock(side_effect=lambda path, content, content_type: path)
    storage.delete = AsyncMock(return_value=True)
    storage.exists = AsyncMock(return_value=True)
    return storage


class TestCreateClub:
    @pytest.mark.asyncio
    async def test_creates_club_with_defaults(self, club_repository, event_bus, cache):
        published = []

        async def on_created(event):
            published.append(event)

        event_bus.subscribe(ClubCreated, on_created)
        await cache.set("graph-data:all", object(), 60)
        handler = CreateClubCommandHandler(club_repository, event_bus, cache)

        result = await handler.handle(_create_command())

        assert result.is_success
        club = result.value
        assert club.slug == "legia-warszawa"
        assert club.country == "Poland"
        assert club.colors == "#FFFFFF,#00AA00"
        assert (club.x, club.y) == (0.0, 0.0)
        assert await club_repository.get_by_id(club.id) is not None
        assert len(published) == 1
        assert await cache.exists("graph-data:all") is False

    @pytest.mark.asyncio
    async def test_validation_collects_all_messages(self, club_repository):
        handler = CreateClubCommandHandler(club_repository)

        result = await handler.handle(
            CreateClubCommand(name="", short_name="TOO-LONG-NAME", city="", colors=("red",))
        )

        assert result.kind is ErrorKind.VALIDATION
        assert "Club name is required." in result.errors
        assert "Short name must not exceed 10 characters." in result.errors
        assert "Short name can only contain letters and numbers." in result.errors
        assert "Invalid league specified." in result.errors
        assert "City is required." in result.errors
        assert "All colors must be valid hex color codes." in result.errors

    @pytest.mark.asyncio
    async def test_duplicate_name_is_a_conflict(self, club_repository, make_club):
        await club_repository.add(make_club("Legia Warszawa"))
        handler = CreateClubCommandHandler(club_repository)

        result = await handler.handle(_create_command(name="legia warszawa", short_name="LW"))

        assert result.kind is ErrorKind.CONFLICT
        assert result.error == "A club with the name 'legia warszawa' already exists."

    @pytest.mark.asyncio
    async def test_duplicate_short_name_is_a_conflict(self, club_repository, make_club):
        await club_repository.add(make_club("Lech Poznan", short_name="LECH"))
        handler = CreateClubCommandHandler(club_repository)

        result = await handler.handle(_create_command(short_name="lech"))

        assert result.kind is ErrorKind.CONFLICT
        assert "short name" in result.error

    @pytest.mark.asyncio
    async def test_store_rejecting_duplicate_is_a_conflict(self, club_repository, monkeypatch):
        message = "A club with the same name, short name or slug already exists."
        monkeypatch.setattr(club_repository, "add", AsyncMock(side_effect=ConflictError(message)))
        handler = CreateClubCommandHandler(club_repository)

        result = await handler.handle(_create_command())

        assert result.kind is ErrorKind.CONFLICT
        assert result.error == message


class TestUpdateClub:
    @pytest.mark.asyncio
    async def test_unknown_club_is_not_found(self, club_repository, connection_repository):
        handler = UpdateClubCommandHandler(club_repository, connection_repository)
        club_id = uuid4()

        result = await handler.handle(_update_command(club_id))

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.error == f"Club with ID '{club_id}' not found."

    @pytest.mark.asyncio
    async def test_updates_attributes_and_publishes(
        self, club_repository, connection_repository, event_bus, make_club
    ):
        club = make_club("Legia Warszawa", short_name="LEG")
        await club_repository.add(club)
        updates = []

        async def on_updated(event):
            updates.append(event)

        event_bus.subscribe(ClubUpdated, on_updated)
        handler = UpdateClubCommandHandler(club_repository, connection_repository, event_bus)

        result = await handler.handle(_update_command(club.id, stadium="Stadion Wojska Polskiego"))

        assert result.is_success
        assert result.value.stadium == "Stadion Wojska Polskiego"
        assert "stadium" in updates[0].changed_fields

    @pytest.mark.asyncio
    async def test_renaming_to_other_club_name_conflicts(
        self, club_repository, connection_repository, make_club
    ):
        club = make_club("Legia Warszawa", short_name="LEG")
        await club_repository.add(club)
        await club_repository.add(make_club("Lech Poznan", short_name="LECH"))
        handler = UpdateClubCommandHandler(club_repository, connection_repository)

        result = await handler.handle(_update_command(club.id, name="Lech Poznan"))

        assert result.kind is ErrorKind.CONFLICT


def _update_command(club_id, **overrides) -> UpdateClubCommand:
    fields = {
        "club_id": club_id,
        "name": "Legia Warszawa",
        "short_name": "LEG",
        "league": LeagueType.EKSTRAKLASA,
        "city": "Warszawa",
    }
    fields.update(overrides)
    return UpdateClubCommand(**fields)


class TestDeleteClub:
    @pytest.mark.asyncio
    async def test_club_with_connections_requires_force(
        self, club_repository, connection_repository, file_storage, make_club, make_connection
    ):
        legia, lech = make_club("Legia Warszawa"), make_club("Lech Poznan")
        for club in (legia, lech):
            await club_repository.add(club)
        await connection_repository.add(make_connection(legia, lech))
        handler = DeleteClubCommandHandler(club_repository, connection_repository, file_storage)

        result = await handler.handle(DeleteClubCommand(club_id=legia.id))

        assert result.kind is ErrorKind.BUSINESS_RULE
        assert result.error == (
            "Cannot delete club 'Legia Warszawa' because it has 1 existing connections. "
            "Use force delete to remove all connections and delete the club."
        )
        assert await club_repository.get_by_id(legia.id) is not None

    @pytest.mark.asyncio
    async def test_force_delete_removes_connections_and_logo(
        self,
        club_repository,
        connection_repository,
        file_storage,
        event_bus,
        make_club,
        make_connection,
    ):
        legia, lech = make_club("Legia Warszawa"), make_club("Lech Poznan")
        legia.update_logo_path("clubs/logos/legia.png")
        legia.collect_events()
        for club in (legia, lech):
            await club_repository.add(club)
        await connection_repository.add(make_connection(legia, lech))
        deleted = []

        async def on_deleted(event):
            deleted.append(event)

        event_bus.subscribe(ClubDeleted, on_deleted)
        handler = DeleteClubCommandHandler(
            club_repository, connection_repository, file_storage, event_bus
        )

        result = await handler.handle(DeleteClubCommand(club_id=legia.id, force_delete=True))

        assert result.value is True
        assert await club_repository.get_by_id(legia.id) is None
        assert await connection_repository.list_for_club(lech.id) == []
        file_storage.delete.assert_awaited_once_with("clubs/logos/legia.png")
        assert deleted[0].removed_connections == 1

    @pytest.mark.asyncio
    async def test_logo_deletion_failure_does_not_block(
        self, club_repository, connection_repository, file_storage, make_club
    ):
        club = make_club()
        club.update_logo_path("clubs/logos/gone.png")
        await club_repository.add(club)
        file_storage.delete.side_effect = OSError("disk gone")
        handler = DeleteClubCommandHandler(club_repository, connection_repository, file_storage)

        result = await handler.handle(DeleteClubCommand(club_id=club.id))

        assert result.is_success


class TestChangeClubStatus:
    @pytest.mark.asyncio
    async def test_only_given_flags_change(self, club_repository, make_club):
        club = make_club()
        await club_repository.add(club)
        handler = ChangeClubStatusCommandHandler(club_repository)

        result = await handler.handle(ChangeClubStatusCommand(club_id=club.id, is_verified=True))

        assert result.value.is_verified is True
        assert result.value.is_active is True
        assert result.value.is_featured is False


class TestUploadLogo:
    @pytest.mark.asyncio
    async def test_upload_replaces_previous_logo(
        self, club_repository, file_repository, file_storage, make_club, cache
    ):
        club = make_club()
        club.update_logo_path("clubs/logos/old.png")
        await club_repository.add(club)
        handler = UploadClubLogoCommandHandler(
            club_repository, file_storage, file_repository, cache=cache
        )

        result = await handler.handle(
            UploadClubLogoCommand(
                club_id=club.id,
                file_name="crest.PNG",
                content_type="image/png",
                content=b"\x89PNG fake",
            )
        )

        assert result.is_success
        assert result.value.path.startswith(f"clubs/logos/logo_{club.id}_")
        assert result.value.path.endswith(".png")
        file_storage.delete.assert_awaited_once_with("clubs/logos/old.png")
        stored = await file_repository.get_by_path(result.value.path)
        assert stored is not None and stored.club_id == club.id
        assert (await club_repository.get_by_id(club.id)).logo_path == result.value.path

    @pytest.mark.asyncio
    async def test_rejects_non_image_upload(self, club_repository, file_repository, file_storage):
        handler = UploadClubLogoCommandHandler(club_repository, file_storage, file_repository)

        result = await handler.handle(
            UploadClubLogoCommand(
                club_id=uuid4(),
                file_name="notes.txt",
                content_type="text/plain",
                content=b"hello",
            )
        )

        assert result.kind is ErrorKind.VALIDATION
        assert "Content type must be a valid image type." in result.errors

    @pytest.mark.asyncio
    async def test_storage_error_is_reported(
        self, club_repository, file_repository, file_storage, make_club
    ):
        club = make_club()
        await club_repository.add(club)
        file_storage.save.side_effect = StorageError("not an image")
        handler = UploadClubLogoCommandHandler(club_repository, file_storage, file_repository)

        result = await handler.handle(
            UploadClubLogoCommand(
                club_id=club.id, file_name="a.png", content_type="image/png", content=b"x"
            )
        )

        assert result.error == "Failed to upload logo file."

    @pytest.mark.asyncio
    async def test_failed_replacement_keeps_previous_logo(
        self, club_repository, file_repository, file_storage, make_club
    ):
        club = make_club()
        club.update_logo_path("clubs/logos/old.png")
        await club_repository.add(club)
        previous = StoredFile.create(
            original_name="old.png",
            stored_name="old.png",
            path="clubs/logos/old.png",
            content_type="image/png",
            size_bytes=3,
            club_id=club.id,
        )
        await file_repository.add(previous)
        file_storage.save.side_effect = StorageError("not an image")
        handler = UploadClubLogoCommandHandler(club_repository, file_storage, file_repository)

        result = await handler.handle(
            UploadClubLogoCommand(
                club_id=club.id, file_name="new.png", content_type="image/png", content=b"x"
            )
        )

        assert result.is_failure
        file_storage.delete.assert_not_awaited()
        assert (await club_repository.get_by_id(club.id)).logo_path == "clubs/logos/old.png"
        assert await file_repository.get_by_path("clubs/logos/old.png") is not None


class TestClubQueries:
    @pytest.mark.asyncio
    async def test_get_by_id_includes_connection_count(
        self, club_repository, connection_repository, make_club, make_connection
    ):
        legia, lech, wisla = make_club("Legia"), make_club("Lech"), make_club("Wisla")
        for club in (legia, lech, wisla):
            await club_repository.add(club)
        await connection_repository.add(make_connection(legia, lech))
        await connection_repository.add(make_connection(wisla, legia))
        handler = GetClubByIdQueryHandler(club_repository, connection_repository)

        result = await handler.handle(GetClubByIdQuery(club_id=legia.id))

        assert result.value.connection_count == 2

    @pytest.mark.asyncio
    async def test_list_filters_and_pages(self, club_repository, connection_repository, make_club):
        for name in ("Arka Gdynia", "Lech Poznan", "Legia Warszawa"):
            await club_repository.add(make_club(name))
        await club_repository.add(make_club("Real Madrid", league=LeagueType.EUROPEAN_CLUB))
        handler = GetClubsQueryHandler(club_repository, connection_repository)

        result = await handler.handle(
            GetClubsQuery(league=LeagueType.EKSTRAKLASA, page=1, page_size=2)
        )

        page = result.value
        assert page.total_count == 3
        assert [c.name for c in page.items] == ["Arka Gdynia", "Lech Poznan"]
        assert page.has_next_page

    @pytest.mark.asyncio
    async def test_invalid_sort_field_is_rejected(self, club_repository, connection_repository):
        handler = GetClubsQueryHandler(club_repository, connection_repository)

        result = await handler.handle(GetClubsQuery(sort_by="stadium"))

        assert result.kind is ErrorKind.VALIDATION
        assert result.error == "Sort by must be one of: name, city, founded, created_at."
