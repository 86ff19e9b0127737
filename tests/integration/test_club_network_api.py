"""Clubs, connections, graph, files and dashboard over HTTP."""

import io

import pytest
from PIL import Image

from football_network.domain.user.enums import UserRole


def club_body(name: str, short_name: str, **overrides) -> dict:
    body = {"name": name, "short_name": short_name, "league": 1, "city": "Warszawa"}
    body.update(overrides)
    return body


def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(0, 120, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


async def create_club(client, headers, name, short_name, **overrides) -> dict:
    response = await client.post(
        "/api/v1/clubs", json=club_body(name, short_name, **overrides), headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestClubs:
    @pytest.mark.asyncio
    async def test_create_read_update(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)

        created = await create_club(
            client, admin, "Legia Warszawa", "LEG", colors=["#FFFFFF", "#00AA00"], x=120.5, y=-40
        )
        fetched = await client.get(f"/api/v1/clubs/{created['id']}", headers=admin)
        updated = await client.put(
            f"/api/v1/clubs/{created['id']}",
            json=club_body("Legia Warszawa", "LEG", stadium="Stadion Wojska Polskiego"),
            headers=admin,
        )

        assert created["country"] == "Poland"
        assert created["slug"] == "legia-warszawa"
        assert (created["x"], created["y"]) == (120.5, -40.0)
        assert fetched.json()["data"]["name"] == "Legia Warszawa"
        assert updated.json()["data"]["stadium"] == "Stadion Wojska Polskiego"

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        await create_club(client, admin, "Legia Warszawa", "LEG")

        response = await client.post(
            "/api/v1/clubs", json=club_body("legia warszawa", "LW"), headers=admin
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_validation_messages_come_together(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)

        response = await client.post(
            "/api/v1/clubs", json={"name": "", "short_name": "", "city": ""}, headers=admin
        )

        errors = response.json()["errors"]
        assert response.status_code == 400
        assert "Club name is required." in errors
        assert "Short name is required." in errors
        assert "City is required." in errors

    @pytest.mark.asyncio
    async def test_user_can_read_but_not_write(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        user = await login(UserRole.USER)
        await create_club(client, admin, "Legia Warszawa", "LEG")

        listing = await client.get("/api/v1/clubs", headers=user)
        create = await client.post("/api/v1/clubs", json=club_body("Lech Poznan", "LPO"), headers=user)

        assert listing.json()["data"]["total_count"] == 1
        assert listing.json()["data"]["has_next_page"] is False
        assert create.status_code == 403
        assert create.json()["errors"] == ["You do not have permission to create clubs."]

    @pytest.mark.asyncio
    async def test_anonymous_is_401(self, client):
        response = await client.get("/api/v1/clubs")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_status_change_by_moderator(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        moderator = await login(UserRole.MODERATOR)
        club = await create_club(client, admin, "Legia Warszawa", "LEG")

        response = await client.patch(
            f"/api/v1/clubs/{club['id']}/status",
            json={"is_verified": True, "is_featured": True},
            headers=moderator,
        )

        data = response.json()["data"]
        assert (data["is_verified"], data["is_featured"], data["is_active"]) == (True, True, True)

    @pytest.mark.asyncio
    async def test_only_super_admin_deletes(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        super_admin = await login(UserRole.SUPER_ADMIN)
        club = await create_club(client, admin, "Legia Warszawa", "LEG")

        by_admin = await client.delete(f"/api/v1/clubs/{club['id']}", headers=admin)
        by_super_admin = await client.delete(f"/api/v1/clubs/{club['id']}", headers=super_admin)
        again = await client.get(f"/api/v1/clubs/{club['id']}", headers=super_admin)

        assert by_admin.status_code == 403
        assert by_super_admin.status_code == 200
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_is_400(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)

        response = await client.get("/api/v1/clubs/not-a-uuid", headers=admin)

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogoUpload:
    @pytest.mark.asyncio
    async def test_upload_then_delete_file(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        club = await create_club(client, admin, "Legia Warszawa", "LEG")

        upload = await client.post(
            f"/api/v1/clubs/{club['id']}/logo",
            files={"file": ("crest.png", png_bytes(), "image/png")},
            headers=admin,
        )
        files = await client.get("/api/v1/files", params={"club_id": club["id"]}, headers=admin)
        file_id = files.json()["data"]["items"][0]["id"]
        with_logo = await client.get(f"/api/v1/clubs/{club['id']}", headers=admin)
        deleted = await client.delete(f"/api/v1/files/{file_id}", headers=admin)
        without_logo = await client.get(f"/api/v1/clubs/{club['id']}", headers=admin)

        assert upload.status_code == 201
        assert upload.json()["data"]["path"].startswith("clubs/logos/logo_")
        assert with_logo.json()["data"]["logo_path"] == upload.json()["data"]["path"]
        assert deleted.json()["data"] is True
        assert without_logo.json()["data"]["logo_path"] is None

    @pytest.mark.asyncio
    async def test_broken_image_is_rejected(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        club = await create_club(client, admin, "Legia Warszawa", "LEG")

        response = await client.post(
            f"/api/v1/clubs/{club['id']}/logo",
            files={"file": ("crest.png", b"not an image", "image/png")},
            headers=admin,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_broken_replacement_keeps_current_logo(self, client, login, container):
        admin = await login(UserRole.ADMINISTRATOR)
        club = await create_club(client, admin, "Legia Warszawa", "LEG")
        logo_url = f"/api/v1/clubs/{club['id']}/logo"

        first = await client.post(
            logo_url, files={"file": ("crest.png", png_bytes(), "image/png")}, headers=admin
        )
        broken = await client.post(
            logo_url, files={"file": ("crest.png", b"not an image", "image/png")}, headers=admin
        )
        current = await client.get(f"/api/v1/clubs/{club['id']}", headers=admin)

        logo_path = first.json()["data"]["path"]
        assert broken.status_code == 400
        assert current.json()["data"]["logo_path"] == logo_path
        assert await container.file_storage.exists(logo_path) is True
        assert await container.files.get_by_path(logo_path) is not None


class TestConnectionsAndGraph:
    @pytest.mark.asyncio
    async def test_connection_lifecycle_and_graph(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        super_admin = await login(UserRole.SUPER_ADMIN)
        legia = await create_club(client, admin, "Legia Warszawa", "LEG")
        lech = await create_club(client, admin, "Lech Poznan", "LPO", city="Poznan")
        ajax = await create_club(
            client, admin, "Ajax", "AJA", league=3, city="Amsterdam", country="Netherlands"
        )

        created = await client.post(
            "/api/v1/connections",
            json={
                "source_club_id": legia["id"],
                "target_club_id": lech["id"],
                "type": 2,
                "strength": 4,
                "start_date": "2001-05-01",
            },
            headers=admin,
        )
        connection_id = created.json()["data"]["id"]
        duplicate = await client.post(
            "/api/v1/connections",
            json={
                "source_club_id": lech["id"],
                "target_club_id": legia["id"],
                "type": 3,
                "strength": 1,
            },
            headers=admin,
        )
        verified = await client.post(f"/api/v1/connections/{connection_id}/verify", headers=admin)
        graph = await client.get(
            "/api/v1/graph", params={"verified_only": "true"}, headers=admin
        )
        club_connections = await client.get(
            f"/api/v1/clubs/{legia['id']}/connections", headers=admin
        )
        filtered_graph = await client.get(
            "/api/v1/graph", params={"include_leagues": [3]}, headers=admin
        )
        deleted_by_admin = await client.delete(f"/api/v1/connections/{connection_id}", headers=admin)
        deleted = await client.delete(f"/api/v1/connections/{connection_id}", headers=super_admin)

        assert created.status_code == 201
        assert created.json()["data"]["source_club"]["name"] == "Legia Warszawa"
        assert duplicate.status_code == 409
        assert verified.json()["data"] is True
        graph_data = graph.json()["data"]
        assert graph_data["metadata"]["total_nodes"] == 3
        assert graph_data["metadata"]["total_edges"] == 1
        edge = graph_data["edges"][0]
        assert (edge["type"], edge["color"], edge["weight"]) == ("RIVALRY", "#FF0000", 4)
        sizes = {node["label"]: node["size"] for node in graph_data["nodes"]}
        assert sizes == {"Legia Warszawa": 22, "Lech Poznan": 22, "Ajax": 20}
        assert club_connections.json()["data"]["total_count"] == 1
        assert [n["label"] for n in filtered_graph.json()["data"]["nodes"]] == ["Ajax"]
        assert deleted_by_admin.status_code == 403
        assert deleted.json()["data"] is True

    @pytest.mark.asyncio
    async def test_same_club_connection_is_invalid(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        legia = await create_club(client, admin, "Legia Warszawa", "LEG")

        response = await client.post(
            "/api/v1/connections",
            json={
                "source_club_id": legia["id"],
                "target_club_id": legia["id"],
                "type": 1,
                "strength": 2,
            },
            headers=admin,
        )

        assert response.status_code == 400
        assert "Source and target clubs must be different." in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_graph_cache_is_invalidated_by_writes(self, client, login):
        admin = await login(UserRole.ADMINISTRATOR)
        await create_club(client, admin, "Legia Warszawa", "LEG")
        before = await client.get("/api/v1/graph", headers=admin)

        await create_club(client, admin, "Lech Poznan", "LPO")
        after = await client.get("/api/v1/graph", headers=admin)

        assert before.json()["data"]["metadata"]["total_nodes"] == 1
        assert after.json()["data"]["metadata"]["total_nodes"] == 2


class TestAdministration:
    @pytest.mark.asyncio
    async def test_dashboard_requires_admin_access(self, client, login):
        user = await login(UserRole.USER)
        moderator = await login(UserRole.MODERATOR)

        denied = await client.get("/api/v1/dashboard/stats", headers=user)
        allowed = await client.get(
            "/api/v1/dashboard/stats", params={"include_details": "true"}, headers=moderator
        )

        assert denied.status_code == 403
        stats = allowed.json()["data"]
        assert stats["total_users"] == 4
        assert stats["active_users"] == 4
        assert stats["recent_activity"]["items"] == []

    @pytest.mark.asyncio
    async def test_user_management(self, client, login, accounts, container):
        admin = await login(UserRole.ADMINISTRATOR)
        super_admin = await login(UserRole.SUPER_ADMIN)
        target = await container.users.get_by_email(accounts[UserRole.USER])
        me = await container.users.get_by_email(accounts[UserRole.ADMINISTRATOR])

        listing = await client.get("/api/v1/users", params={"role": 2}, headers=admin)
        create_by_admin = await client.post(
            "/api/v1/users",
            json={
                "username": "anowak",
                "email": "anna@example.com",
                "first_name": "Anna",
                "last_name": "Nowak",
                "password": "secret123",
            },
            headers=admin,
        )
        promoted = await client.put(
            f"/api/v1/users/{target.id}/role", json={"role": 2}, headers=admin
        )
        self_change = await client.put(
            f"/api/v1/users/{me.id}/role", json={"role": 4}, headers=admin
        )
        deactivated = await client.put(
            f"/api/v1/users/{target.id}/status", json={"is_active": False}, headers=super_admin
        )
        blocked_login = await client.post(
            "/api/v1/auth/login",
            json={"email": accounts[UserRole.USER], "password": "secret123"},
        )

        assert [u["username"] for u in listing.json()["data"]["items"]] == ["moderator"]
        assert create_by_admin.status_code == 403
        assert promoted.json()["data"]["role"] == 2
        assert self_change.status_code == 422
        assert deactivated.json()["data"]["is_active"] is False
        assert blocked_login.status_code == 403

    @pytest.mark.asyncio
    async def test_role_hierarchy_is_enforced(self, client, login, accounts, container):
        moderator = await login(UserRole.MODERATOR)
        admin = await login(UserRole.ADMINISTRATOR)
        root = await container.users.get_by_email(accounts[UserRole.SUPER_ADMIN])
        user = await container.users.get_by_email(accounts[UserRole.USER])

        lock_out = await client.put(
            f"/api/v1/users/{root.id}/status", json={"is_active": False}, headers=moderator
        )
        escalate = await client.put(
            f"/api/v1/users/{user.id}/role", json={"role": 4}, headers=admin
        )

        assert lock_out.status_code == 403
        assert escalate.status_code == 403
        assert escalate.json()["errors"] == ["You cannot assign a role higher than your own."]
        assert (await container.users.get_by_id(root.id)).is_active is True
        assert (await container.users.get_by_id(user.id)).role is UserRole.USER
