"""Tests for the dictionary-backed repositories."""

import pytest

from football_network.domain.club.enums import LeagueType
from football_network.domain.club.ports import ClubSearchCriteria
from football_network.domain.connection.enums import ConnectionType
from football_network.domain.connection.ports import ConnectionSearchCriteria
from football_network.domain.shared.errors import EntityNotFoundError


class TestInMemoryClubRepository:
    @pytest.mark.asyncio
    async def test_stored_copies_are_isolated(self, club_repository, make_club):
        club = make_club()
        await club_repository.add(club)

        club.city = "Krakow"
        loaded = await club_repository.get_by_id(club.id)
        loaded.city = "Gdansk"

        assert (await club_repository.get_by_id(club.id)).city == "Warszawa"

    @pytest.mark.asyncio
    async def test_lookups_are_case_insensitive(self, club_repository, make_club):
        await club_repository.add(make_club(short_name="LEG"))

        assert await club_repository.get_by_name("  legia WARSZAWA ")
        assert await club_repository.get_by_short_name("leg")
        assert await club_repository.get_by_slug("Legia-Warszawa")
        assert await club_repository.get_by_name("Lech Poznan") is None

    @pytest.mark.asyncio
    async def test_search_filters_sorts_and_pages(self, club_repository, make_club):
        await club_repository.add(make_club("Legia Warszawa", founded=1916))
        await club_repository.add(make_club("Polonia Warszawa", founded=1911))
        await club_repository.add(make_club("Lech Poznan", city="Poznan", founded=1922))
        await club_repository.add(
            make_club(
                "Ajax",
                league=LeagueType.EUROPEAN_CLUB,
                country="Netherlands",
                city="Amsterdam",
                founded=1900,
            )
        )

        page, total = await club_repository.search(
            ClubSearchCriteria(
                league=LeagueType.EKSTRAKLASA,
                founded_from=1910,
                sort_by="founded",
                descending=True,
                page=1,
                page_size=2,
            )
        )
        in_warsaw, _ = await club_repository.search(ClubSearchCriteria(city="warszawa"))

        assert total == 3
        assert [c.name for c in page] == ["Lech Poznan", "Legia Warszawa"]
        assert [c.name for c in in_warsaw] == ["Legia Warszawa", "Polonia Warszawa"]

    @pytest.mark.asyncio
    async def test_update_unknown_club_raises(self, club_repository, make_club):
        with pytest.raises(EntityNotFoundError):
            await club_repository.update(make_club())

    @pytest.mark.asyncio
    async def test_delete(self, club_repository, make_club):
        club = make_club()
        await club_repository.add(club)

        assert await club_repository.delete(club.id) is True
        assert await club_repository.delete(club.id) is False


class TestInMemoryConnectionRepository:
    @pytest.mark.asyncio
    async def test_get_between_ignores_direction(
        self, connection_repository, make_club, make_connection
    ):
        legia, lech = make_club("Legia Warszawa"), make_club("Lech Poznan")
        connection = make_connection(legia, lech)
        await connection_repository.add(connection)

        found = await connection_repository.get_between(lech.id, legia.id)

        assert found.id == connection.id

    @pytest.mark.asyncio
    async def test_list_and_delete_for_club(
        self, connection_repository, make_club, make_connection
    ):
        legia, lech, wisla = make_club("Legia Warszawa"), make_club("Lech Poznan"), make_club("Wisla")
        await connection_repository.add(make_connection(legia, lech))
        await connection_repository.add(make_connection(wisla, legia))
        await connection_repository.add(make_connection(lech, wisla))

        assert len(await connection_repository.list_for_club(legia.id)) == 2
        assert await connection_repository.delete_for_club(legia.id) == 2
        assert len(await connection_repository.list_all()) == 1

    @pytest.mark.asyncio
    async def test_search_by_type(self, connection_repository, make_club, make_connection):
        legia, lech, wisla = make_club("Legia Warszawa"), make_club("Lech Poznan"), make_club("Wisla")
        await connection_repository.add(make_connection(legia, lech, type=ConnectionType.RIVALRY))
        await connection_repository.add(make_connection(lech, wisla))

        rivalries, total = await connection_repository.search(
            ConnectionSearchCriteria(type=ConnectionType.RIVALRY)
        )

        assert total == 1
        assert rivalries[0].type is ConnectionType.RIVALRY


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_lookups(self, user_repository, make_user):
        user = make_user()
        await user_repository.add(user)

        assert (await user_repository.get_by_email("JAN@example.com")).id == user.id
        assert (await user_repository.get_by_username("jkowalski")).id == user.id
        assert await user_repository.count() == 1
