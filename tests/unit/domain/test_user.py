"""Tests for the User aggregate."""

import pytest

from football_network.domain.shared.errors import DomainValidationError
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole
from football_network.domain.user.events import (
    UserActivationChanged,
    UserLoggedIn,
    UserRegistered,
    UserRoleChanged,
)


class TestUser:
    def test_create_normalises_username_and_email(self):
        user = User.create("Admin_1", "Admin@Example.com", "Ada", "Nowak", "hash")

        assert user.username == "admin_1"
        assert user.email == "admin@example.com"
        assert user.full_name == "Ada Nowak"
        assert isinstance(user.collect_events()[0], UserRegistered)

    @pytest.mark.parametrize("username", ["ab", "with space", "x" * 51, "bad!"])
    def test_invalid_username_is_rejected(self, username):
        with pytest.raises(DomainValidationError, match="Username"):
            User.create(username, "a@example.com", "Ada", "Nowak", "hash")

    def test_invalid_email_is_rejected(self):
        with pytest.raises(DomainValidationError, match="Invalid email"):
            User.create("ada", "not-an-email", "Ada", "Nowak", "hash")

    def test_role_hierarchy(self, make_user):
        moderator = make_user(role=UserRole.MODERATOR)

        assert moderator.can_perform_action(UserRole.USER)
        assert moderator.can_perform_action(UserRole.MODERATOR)
        assert not moderator.can_perform_action(UserRole.ADMINISTRATOR)

    def test_inactive_user_cannot_perform_actions(self, make_user):
        admin = make_user(role=UserRole.SUPER_ADMIN)
        admin.deactivate()

        assert not admin.can_perform_action(UserRole.USER)

    def test_lifecycle_events(self, make_user):
        user = make_user()

        user.record_login()
        user.change_role(UserRole.MODERATOR)
        user.change_role(UserRole.MODERATOR)
        user.deactivate()
        user.deactivate()

        events = user.collect_events()
        assert [type(e) for e in events] == [UserLoggedIn, UserRoleChanged, UserActivationChanged]
        assert events[1].previous_role is UserRole.USER
        assert user.last_login_at is not None
