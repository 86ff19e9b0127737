"""Document mapping of the MongoDB repositories (no server needed)."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from pymongo.errors import DuplicateKeyError

from football_network.domain.connection.enums import ConnectionType
from football_network.domain.shared.errors import ConflictError
from football_network.domain.shared.value_objects import DateRange
from football_network.infrastructure.persistence.mongodb.base import MongoBaseRepository
from football_network.infrastructure.persistence.mongodb.club_repository import MongoClubRepository
from football_network.infrastructure.persistence.mongodb.connection_repository import (
    MongoConnectionRepository,
    pair_key,
)
from football_network.infrastructure.persistence.mongodb.user_repository import MongoUserRepository


@pytest.fixture
def client():
    return MagicMock()


class TestMongoClubRepository:
    def test_document_round_trip(self, client, make_club):
        repository = MongoClubRepository(client)
        club = make_club(short_name="LEG", founded=1916, nickname="Wojskowi")

        doc = repository.to_document(club)
        restored = repository.from_document(doc)

        assert doc["_id"] == str(club.id)
        assert doc["name_lower"] == "legia warszawa"
        assert doc["league"] == 1
        assert doc["position"] == {"x": 10.0, "y": 20.0}
        assert restored.id == club.id
        assert restored.short_name == "LEG"
        assert restored.founded == 1916
        assert restored.created_at == club.created_at

    @pytest.mark.asyncio
    async def test_missing_field_is_reported(self, client):
        repository = MongoClubRepository(client)
        repository.collection.find_one = AsyncMock(return_value={"_id": str(uuid4())})

        with pytest.raises(ValueError, match="Missing required field"):
            await repository.get_by_slug("legia-warszawa")

    @pytest.mark.asyncio
    async def test_ensure_indexes_declares_unique_keys(self, client):
        repository = MongoClubRepository(client)
        repository.collection.create_indexes = AsyncMock(return_value=["name_lower_1"])

        await repository.ensure_indexes()

        (models,), _ = repository.collection.create_indexes.await_args
        unique = [dict(m.document["key"]) for m in models if m.document.get("unique")]
        assert unique == [{"name_lower": 1}, {"slug": 1}, {"short_name_lower": 1}]

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self, client, make_club):
        repository = MongoClubRepository(client)
        repository.collection.insert_one = AsyncMock(
            side_effect=DuplicateKeyError("E11000 duplicate key error")
        )

        with pytest.raises(ConflictError, match="same name, short name or slug"):
            await repository.add(make_club())


class TestMongoConnectionRepository:
    def test_active_period_is_flattened(self, client, make_club, make_connection):
        repository = MongoConnectionRepository(client)
        start = datetime(2001, 5, 1, tzinfo=timezone.utc)
        connection = make_connection(
            make_club("Legia Warszawa"),
            make_club("Lech Poznan"),
            type=ConnectionType.RIVALRY,
            active_period=DateRange(start, None),
        )

        doc = repository.to_document(connection)
        restored = repository.from_document(doc)

        assert doc["start_date"] == start.isoformat()
        assert doc["end_date"] is None
        assert restored.active_period.start == start
        assert restored.type is ConnectionType.RIVALRY

    def test_pair_key_ignores_direction(self, client, make_club, make_connection):
        repository = MongoConnectionRepository(client)
        legia, lech = make_club("Legia Warszawa"), make_club("Lech Poznan")

        forward = repository.to_document(make_connection(legia, lech))
        backward = repository.to_document(make_connection(lech, legia))

        assert forward["pair_key"] == backward["pair_key"] == pair_key(lech.id, legia.id)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_pair_is_a_conflict(
        self, client, make_club, make_connection
    ):
        repository = MongoConnectionRepository(client)
        repository.collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000"))

        with pytest.raises(ConflictError, match="already exists between these clubs"):
            await repository.add(make_connection(make_club("Legia"), make_club("Lech")))


class TestMongoUserRepository:
    def test_document_round_trip(self, client, make_user):
        repository = MongoUserRepository(client)
        user = make_user()

        restored = repository.from_document(repository.to_document(user))

        assert restored.email == user.email
        assert restored.password_hash == user.password_hash
        assert restored.role is user.role


class TestDatetimeConversion:
    def test_naive_datetime_is_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            MongoBaseRepository.datetime_to_iso(datetime(2024, 1, 1))

    def test_naive_iso_string_is_read_as_utc(self):
        value = MongoBaseRepository.iso_to_datetime("2024-01-01T10:00:00")

        assert value.tzinfo is timezone.utc
