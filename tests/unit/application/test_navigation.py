"""Tests for route matching, guards and navigation resolution."""

import pytest

from football_network.application.authorization.service import AuthorizationService
from football_network.application.navigation.guards import (
    AuthGuard,
    GuardOutcome,
    PermissionGuard,
    RoleGuard,
    RouteData,
)
from football_network.application.navigation.routes import (
    DEFAULT_ROUTES,
    RouteDefinition,
    RouteTable,
)
from football_network.application.navigation.service import NavigationService
from football_network.domain.user.enums import UserRole
from football_network.infrastructure.navigation.intended_url_store import TTLIntendedUrlStore


@pytest.fixture
def navigation() -> NavigationService:
    return NavigationService(AuthorizationService(), TTLIntendedUrlStore())


class TestRouteTable:
    def test_matches_parameters_and_ignores_query(self):
        table = RouteTable(DEFAULT_ROUTES)

        match = table.match("/admin/clubs/42/edit?tab=logo")

        assert match.route.path == "/admin/clubs/:id/edit"
        assert match.params == {"id": "42"}

    def test_static_segment_wins_when_listed_first(self):
        table = RouteTable(DEFAULT_ROUTES)

        assert table.match("/admin/clubs/create").route.path == "/admin/clubs/create"

    def test_unknown_path(self):
        assert RouteTable(DEFAULT_ROUTES).match("/nowhere/at/all") is None

    def test_pattern_length_must_match(self):
        route = RouteDefinition("/clubs/:id")

        assert route.match("/clubs") is None
        assert route.match("/clubs/7/") == {"id": "7"}


class TestGuards:
    def test_auth_guard(self, principal):
        guard = AuthGuard()

        assert guard.check(principal(), RouteData()).allowed
        assert guard.check(None, RouteData()).redirect_to == "/login"
        assert guard.check(principal(is_active=False), RouteData()).redirect_to == "/login"

    def test_role_guard_without_roles_allows_anyone(self):
        guard = RoleGuard(AuthorizationService())

        assert guard.check(None, RouteData()).allowed

    def test_permission_guard_any_and_all(self, principal):
        guard = PermissionGuard(AuthorizationService())
        moderator = principal(UserRole.MODERATOR)

        any_of = guard.check(moderator, RouteData(permissions=("users.create", "users.edit")))
        all_of = guard.check(
            moderator,
            RouteData(permissions=("users.create", "users.edit"), require_all_permissions=True),
        )

        assert any_of.allowed
        assert all_of.outcome is GuardOutcome.REDIRECT
        assert all_of.redirect_to == "/unauthorized"
        assert all_of.reason == "requires all of permissions: users.create, users.edit"


class TestNavigationService:
    def test_anonymous_visitor_is_sent_to_login_and_url_remembered(self, navigation):
        result = navigation.resolve("/admin/clubs", user=None, session_key="s1")

        assert result.allowed is False
        assert result.target_path == "/login"
        assert navigation.pop_intended_url("s1") == "/admin/clubs"
        assert navigation.pop_intended_url("s1") == "/dashboard"

    def test_forbidden_user_goes_to_unauthorized_without_remembering(self, navigation, principal):
        result = navigation.resolve("/admin/users", principal(UserRole.USER), session_key="s2")

        assert result.target_path == "/unauthorized"
        assert navigation.pop_intended_url("s2") == "/dashboard"

    def test_redirect_routes_are_followed(self, navigation, principal):
        root = navigation.resolve("/", principal())
        admin = navigation.resolve("/admin", principal(UserRole.ADMINISTRATOR))

        assert root.target_path == "/dashboard"
        assert root.title == "Dashboard"
        assert admin.target_path == "/admin/dashboard"
        assert admin.allowed

    def test_route_params_are_returned(self, navigation, principal):
        result = navigation.resolve("/clubs/abc", principal())

        assert result.allowed
        assert result.params == {"id": "abc"}

    def test_unknown_path_resolves_to_not_found(self, navigation, principal):
        result = navigation.resolve("/does-not-exist", principal())

        assert result.target_path == "/404"
        assert result.allowed is False

    @pytest.mark.parametrize(
        "role, path, allowed",
        [
            (UserRole.MODERATOR, "/admin/clubs/1/approve", True),
            (UserRole.MODERATOR, "/admin/settings", False),
            (UserRole.ADMINISTRATOR, "/admin/settings", True),
            (UserRole.ADMINISTRATOR, "/admin/settings/security", False),
            (UserRole.SUPER_ADMIN, "/admin/settings/security", True),
            (UserRole.ADMINISTRATOR, "/admin/logs", False),
            (UserRole.SUPER_ADMIN, "/admin/logs", True),
            (UserRole.MODERATOR, "/admin/analytics", False),
            (UserRole.ADMINISTRATOR, "/admin/analytics", True),
            (UserRole.ADMINISTRATOR, "/admin/analytics/reports", True),
            (UserRole.MODERATOR, "/admin/analytics/reports", False),
            (UserRole.MODERATOR, "/admin/profile", True),
            (UserRole.USER, "/admin/profile", False),
        ],
    )
    def test_admin_routes_by_role(self, navigation, principal, role, path, allowed):
        assert navigation.resolve(path, principal(role)).allowed is allowed

    def test_missing_session_key_lands_on_dashboard(self, navigation):
        assert navigation.pop_intended_url(None) == "/dashboard"
