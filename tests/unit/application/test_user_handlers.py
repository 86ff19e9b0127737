"""Tests for user administration commands and queries."""

from uuid import uuid4

import pytest

from football_network.application.common.result import ErrorKind
from football_network.application.users.commands.create_user import (
    CreateUserCommand,
    CreateUserCommandHandler,
)
from football_network.application.users.commands.set_user_active import (
    SetUserActiveCommand,
    SetUserActiveCommandHandler,
)
from football_network.application.users.commands.update_user_role import (
    UpdateUserRoleCommand,
    UpdateUserRoleCommandHandler,
)
from football_network.application.users.queries.get_users import GetUsersQuery, GetUsersQueryHandler
from football_network.domain.user.enums import UserRole
from football_network.domain.user.events import UserActivationChanged, UserRoleChanged


def _create(**overrides) -> CreateUserCommand:
    fields = {
        "username": "Anowak",
        "email": "Anna.Nowak@Example.com",
        "first_name": "Anna",
        "last_name": "Nowak",
        "password": "secret123",
        "role": UserRole.MODERATOR,
    }
    fields.update(overrides)
    return CreateUserCommand(**fields)


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(self, user_repository, password_hasher):
        handler = CreateUserCommandHandler(user_repository, password_hasher)

        result = await handler.handle(_create())

        dto = result.value
        assert dto.username == "anowak"
        assert dto.email == "anna.nowak@example.com"
        assert dto.roles == ("moderator",)
        stored = await user_repository.get_by_id(dto.id)
        assert stored.password_hash != "secret123"
        assert password_hasher.verify("secret123", stored.password_hash)

    @pytest.mark.asyncio
    async def test_username_and_email_must_be_unique(
        self, user_repository, password_hasher, make_user
    ):
        await user_repository.add(make_user(username="anowak", email="anna@example.com"))
        handler = CreateUserCommandHandler(user_repository, password_hasher)

        by_username = await handler.handle(_create(email="other@example.com"))
        by_email = await handler.handle(_create(username="someone", email="ANNA@example.com"))

        assert by_username.kind is ErrorKind.CONFLICT
        assert by_username.error == "A user with the username 'anowak' already exists."
        assert by_email.error == "A user with the email 'anna@example.com' already exists."

    @pytest.mark.asyncio
    async def test_validation(self, user_repository, password_hasher):
        handler = CreateUserCommandHandler(user_repository, password_hasher)

        result = await handler.handle(
            _create(username="a b", email="", first_name=" ", password="123")
        )

        assert result.kind is ErrorKind.VALIDATION
        assert result.errors == [
            "Username must be 3-50 characters of letters, digits, '_' or '-'.",
            "Email is required.",
            "First name is required.",
            "Password must be between 6 and 100 characters long.",
        ]


class TestRoleAndStatus:
    @pytest.mark.asyncio
    async def test_role_change_publishes_event(self, user_repository, event_bus, make_user):
        admin = make_user(username="admin", email="admin@example.com", role=UserRole.ADMINISTRATOR)
        user = make_user()
        await user_repository.add(admin)
        await user_repository.add(user)
        changes = []

        async def on_changed(event):
            changes.append(event)

        event_bus.subscribe(UserRoleChanged, on_changed)
        handler = UpdateUserRoleCommandHandler(user_repository, event_bus)

        result = await handler.handle(
            UpdateUserRoleCommand(
                user_id=user.id, role=UserRole.MODERATOR, acting_user_id=admin.id
            )
        )

        assert result.value.role is UserRole.MODERATOR
        assert "admin.access" in result.value.permissions
        assert len(changes) == 1

    @pytest.mark.asyncio
    async def test_cannot_change_own_role(self, user_repository, make_user):
        admin = make_user(role=UserRole.ADMINISTRATOR)
        await user_repository.add(admin)
        handler = UpdateUserRoleCommandHandler(user_repository)

        result = await handler.handle(
            UpdateUserRoleCommand(
                user_id=admin.id, role=UserRole.SUPER_ADMIN, acting_user_id=admin.id
            )
        )

        assert result.kind is ErrorKind.BUSINESS_RULE
        assert result.error == "You cannot change your own role."

    @pytest.mark.asyncio
    async def test_role_is_required(self, user_repository):
        handler = UpdateUserRoleCommandHandler(user_repository)

        result = await handler.handle(UpdateUserRoleCommand(user_id=uuid4()))

        assert result.errors == ["Role is invalid."]

    @pytest.mark.asyncio
    async def test_deactivate_and_reactivate(self, user_repository, event_bus, make_user):
        user = make_user()
        await user_repository.add(user)
        changes = []

        async def on_changed(event):
            changes.append(event)

        event_bus.subscribe(UserActivationChanged, on_changed)
        handler = SetUserActiveCommandHandler(user_repository, event_bus)

        deactivated = await handler.handle(SetUserActiveCommand(user_id=user.id, is_active=False))
        unchanged = await handler.handle(SetUserActiveCommand(user_id=user.id, is_active=False))
        reactivated = await handler.handle(SetUserActiveCommand(user_id=user.id, is_active=True))

        assert deactivated.value.is_active is False
        assert unchanged.value.is_active is False
        assert reactivated.value.is_active is True
        assert len(changes) == 2

    @pytest.mark.asyncio
    async def test_cannot_deactivate_self(self, user_repository, make_user):
        user = make_user()
        await user_repository.add(user)
        handler = SetUserActiveCommandHandler(user_repository)

        result = await handler.handle(
            SetUserActiveCommand(user_id=user.id, is_active=False, acting_user_id=user.id)
        )

        assert result.error == "You cannot deactivate your own account."


class TestGetUsers:
    @pytest.mark.asyncio
    async def test_filters_and_orders_by_username(self, user_repository, make_user):
        await user_repository.add(make_user("zbigniew", "zb@example.com"))
        await user_repository.add(make_user("adam", "adam@example.com", role=UserRole.MODERATOR))
        inactive = make_user("marek", "marek@example.com")
        inactive.deactivate()
        await user_repository.add(inactive)
        handler = GetUsersQueryHandler(user_repository)

        everyone = await handler.handle(GetUsersQuery())
        active = await handler.handle(GetUsersQuery(is_active=True))
        moderators = await handler.handle(GetUsersQuery(role=UserRole.MODERATOR))
        searched = await handler.handle(GetUsersQuery(search_term="MAREK"))

        assert [u.username for u in everyone.value.items] == ["adam", "marek", "zbigniew"]
        assert active.value.total_count == 2
        assert [u.username for u in moderators.value.items] == ["adam"]
        assert [u.username for u in searched.value.items] == ["marek"]

    @pytest.mark.asyncio
    async def test_page_size_is_bounded(self, user_repository):
        handler = GetUsersQueryHandler(user_repository)

        result = await handler.handle(GetUsersQuery(page=0, page_size=1000))

        assert result.kind is ErrorKind.VALIDATION
        assert len(result.errors) == 2


class TestRoleHierarchy:
    @pytest.mark.asyncio
    async def test_moderator_cannot_deactivate_higher_accounts(self, user_repository, make_user):
        moderator = make_user("mod", "mod@example.com", role=UserRole.MODERATOR)
        peer = make_user("peer", "peer@example.com", role=UserRole.MODERATOR)
        root = make_user("root", "root@example.com", role=UserRole.SUPER_ADMIN)
        for user in (moderator, peer, root):
            await user_repository.add(user)
        handler = SetUserActiveCommandHandler(user_repository)

        results = [
            await handler.handle(
                SetUserActiveCommand(
                    user_id=target.id,
                    is_active=False,
                    acting_user_id=moderator.id,
                    acting_user_role=UserRole.MODERATOR,
                )
            )
            for target in (peer, root)
        ]

        assert [r.kind for r in results] == [ErrorKind.FORBIDDEN, ErrorKind.FORBIDDEN]
        assert results[0].error == (
            "You cannot manage a user whose role is equal to or higher than your own."
        )
        assert (await user_repository.get_by_id(root.id)).is_active is True

    @pytest.mark.asyncio
    async def test_moderator_can_deactivate_user(self, user_repository, make_user):
        user = make_user()
        await user_repository.add(user)
        handler = SetUserActiveCommandHandler(user_repository)

        result = await handler.handle(
            SetUserActiveCommand(
                user_id=user.id, is_active=False, acting_user_role=UserRole.MODERATOR
            )
        )

        assert result.value.is_active is False

    @pytest.mark.asyncio
    async def test_administrator_cannot_grant_super_admin(self, user_repository, make_user):
        user = make_user()
        await user_repository.add(user)
        handler = UpdateUserRoleCommandHandler(user_repository)

        result = await handler.handle(
            UpdateUserRoleCommand(
                user_id=user.id,
                role=UserRole.SUPER_ADMIN,
                acting_user_role=UserRole.ADMINISTRATOR,
            )
        )

        assert result.kind is ErrorKind.FORBIDDEN
        assert result.error == "You cannot assign a role higher than your own."
        assert (await user_repository.get_by_id(user.id)).role is UserRole.USER

    @pytest.mark.asyncio
    async def test_administrator_cannot_demote_peer(self, user_repository, make_user):
        peer = make_user("peer", "peer@example.com", role=UserRole.ADMINISTRATOR)
        await user_repository.add(peer)
        handler = UpdateUserRoleCommandHandler(user_repository)

        result = await handler.handle(
            UpdateUserRoleCommand(
                user_id=peer.id, role=UserRole.USER, acting_user_role=UserRole.ADMINISTRATOR
            )
        )

        assert result.kind is ErrorKind.FORBIDDEN

    @pytest.mark.asyncio
    async def test_super_admin_is_unrestricted(self, user_repository, make_user):
        other = make_user("other", "other@example.com", role=UserRole.SUPER_ADMIN)
        await user_repository.add(other)
        handler = UpdateUserRoleCommandHandler(user_repository)

        result = await handler.handle(
            UpdateUserRoleCommand(
                user_id=other.id,
                role=UserRole.ADMINISTRATOR,
                acting_user_role=UserRole.SUPER_ADMIN,
            )
        )

        assert result.value.role is UserRole.ADMINISTRATOR
