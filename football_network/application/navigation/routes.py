"""Frontend route table.

Routes are flat: guards declared on an admin parent route are repeated
on each child, in the order they run (parent first).
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from football_network.application.navigation.guards import RouteData

NOT_FOUND_PATH = "/404"
DEFAULT_LANDING_PATH = "/dashboard"


class GuardKind(str, Enum):
    AUTH = "auth"
    ADMIN = "admin"
    ROLE = "role"
    PERMISSION = "permission"
    RESOURCE = "resource"


@dataclass(frozen=True)
class RouteDefinition:
    """A route pattern (``/admin/clubs/:id/edit``) with guards and data."""

    path: str
    guards: Tuple[GuardKind, ...] = field(default_factory=tuple)
    data: RouteData = field(default_factory=RouteData)
    redirect_to: Optional[str] = None

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Return path parameters when path matches this pattern."""
        pattern_parts = _segments(self.path)
        path_parts = _segments(path)
        if len(pattern_parts) != len(path_parts):
            return None
        params: Dict[str, str] = {}
        for expected, actual in zip(pattern_parts, path_parts):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


@dataclass(frozen=True)
class RouteMatch:
    route: RouteDefinition
    params: Dict[str, str]


def _segments(path: str) -> List[str]:
    path = re.split(r"[?#]", path, maxsplit=1)[0]
    return [part for part in path.strip("/").split("/") if part]


class RouteTable:
    """Ordered list of routes; the first match wins.

    Example:
        >>> table = RouteTable(DEFAULT_ROUTES)
        >>> table.match("/admin/clubs/42/edit").params
        {'id': '42'}
    """

    def __init__(self, routes: Sequence[RouteDefinition]):
        self._routes = list(routes)

    def match(self, path: str) -> Optional[RouteMatch]:
        for route in self._routes:
            params = route.match(path)
            if params is not None:
                return RouteMatch(route, params)
        return None

    @property
    def routes(self) -> List[RouteDefinition]:
        return list(self._routes)


_ADMIN = (GuardKind.ADMIN,)


def _admin(
    path: str,
    *guards: GuardKind,
    resource: Optional[str] = None,
    action: Optional[str] = None,
    permissions: Tuple[str, ...] = (),
    roles: Tuple[str, ...] = (),
    title: Optional[str] = None,
) -> RouteDefinition:
    return RouteDefinition(
        path=f"/admin{path}",
        guards=_ADMIN + guards,
        data=RouteData(
            roles=roles,
            permissions=permissions,
            resource=resource,
            action=action,
            title=title,
        ),
    )


_P = GuardKind.PERMISSION
_R = GuardKind.RESOURCE

DEFAULT_ROUTES: List[RouteDefinition] = [
    RouteDefinition("/", redirect_to=DEFAULT_LANDING_PATH),
    RouteDefinition("/login", data=RouteData(title="Sign in")),
    RouteDefinition("/auth/login", data=RouteData(title="Sign in")),
    RouteDefinition("/unauthorized", data=RouteData(title="Access denied")),
    RouteDefinition(NOT_FOUND_PATH, data=RouteData(title="Not found")),
    RouteDefinition("/dashboard", (GuardKind.AUTH,), RouteData(title="Dashboard")),
    RouteDefinition("/graph", (GuardKind.AUTH,), RouteData(title="Club graph")),
    RouteDefinition(
        "/clubs",
        (GuardKind.AUTH, _R),
        RouteData(resource="clubs", action="view", title="Clubs"),
    ),
    RouteDefinition(
        "/clubs/:id",
        (GuardKind.AUTH, _R),
        RouteData(resource="clubs", action="view", title="Club"),
    ),
    RouteDefinition("/profile", (GuardKind.AUTH,), RouteData(title="Profile")),
    RouteDefinition("/admin", _ADMIN, redirect_to="/admin/dashboard"),
    _admin("/dashboard", permissions=("admin.access",), resource="dashboard", action="view", title="Dashboard"),
    _admin("/users", _P, permissions=("users.view",), resource="users", action="view", title="Users"),
    _admin("/users/create", _P, permissions=("users.create",), resource="users", action="create"),
    _admin("/users/:id", _R, resource="users", action="view"),
    _admin("/users/:id/edit", _P, permissions=("users.edit",), resource="users", action="edit"),
    _admin("/clubs", _P, permissions=("clubs.view",), resource="clubs", action="view", title="Clubs"),
    _admin("/clubs/create", _P, permissions=("clubs.create",), resource="clubs", action="create"),
    _admin("/clubs/:id", _R, resource="clubs", action="view"),
    _admin("/clubs/:id/edit", _P, permissions=("clubs.edit",), resource="clubs", action="edit"),
    _admin("/clubs/:id/approve", _P, permissions=("clubs.approve",), resource="clubs", action="approve"),
    _admin(
        "/connections",
        _P,
        permissions=("connections.view",),
        resource="connections",
        action="view",
        title="Connections",
    ),
    _admin("/connections/create", _P, permissions=("connections.create",), resource="connections", action="create"),
    _admin("/connections/:id", _R, resource="connections", action="view"),
    _admin("/connections/:id/edit", _P, permissions=("connections.edit",), resource="connections", action="edit"),
    _admin("/files", _P, permissions=("files.view",), resource="files", action="view", title="Files"),
    _admin("/files/upload", _P, permissions=("files.upload",), resource="files", action="upload"),
    _admin("/files/manage", _P, permissions=("files.manage",), resource="files", action="manage"),
    _admin(
        "/settings",
        GuardKind.ROLE,
        roles=("admin", "super_admin"),
        resource="system",
        action="settings",
        title="Settings",
    ),
    _admin("/settings/general", _P, permissions=("system.settings",)),
    _admin("/settings/security", GuardKind.ROLE, roles=("super_admin",)),
    _admin("/settings/notifications", _P, permissions=("system.settings",)),
    _admin("/settings/backup", _P, permissions=("system.backup",)),
    _admin("/health", _P, permissions=("system.health",), resource="system", action="health"),
    _admin(
        "/logs",
        GuardKind.ROLE,
        _P,
        roles=("admin", "super_admin"),
        permissions=("system.logs",),
        resource="system",
        action="logs",
    ),
    _admin(
        "/analytics",
        _P,
        permissions=("analytics.view",),
        resource="analytics",
        action="view",
        title="Analytics",
    ),
    _admin(
        "/analytics/reports",
        _P,
        permissions=("reports.generate",),
        resource="reports",
        action="generate",
        title="Reports",
    ),
    _admin("/profile", title="User Profile"),
]
