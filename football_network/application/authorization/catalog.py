"""Static catalog of permissions, roles and access policies.

Roles are identified by short ids (``admin``, ``moderator``...) and
carry a level; a higher level grants at least the rights of a lower one
for ``has_minimum_role_level`` checks. Access policies bind a
(resource, action) pair to the permissions and, optionally, roles that
unlock it. A pair without any policy is denied.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from football_network.domain.user.enums import UserRole


@dataclass(frozen=True)
class Permission:
    id: str
    name: str
    category: str


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    level: int
    permissions: FrozenSet[str]


@dataclass(frozen=True)
class AccessPolicy:
    """Grants (resource, action) to holders of any listed permission.

    When ``roles`` is non-empty the holder must also have one of them.
    """

    resource: str
    action: str
    permissions: Tuple[str, ...]
    roles: Tuple[str, ...] = field(default_factory=tuple)


SUPER_ADMIN = "super_admin"
ADMIN = "admin"
MODERATOR = "moderator"
USER = "user"

ADMIN_ROLES = (ADMIN, SUPER_ADMIN, MODERATOR)
ADMIN_PERMISSIONS = ("admin.access", "system.settings")

PERMISSIONS: List[Permission] = [
    Permission("users.view", "View Users", "User Management"),
    Permission("users.create", "Create Users", "User Management"),
    Permission("users.edit", "Edit Users", "User Management"),
    Permission("users.delete", "Delete Users", "User Management"),
    Permission("users.manage_roles", "Manage User Roles", "User Management"),
    Permission("clubs.view", "View Clubs", "Club Management"),
    Permission("clubs.create", "Create Clubs", "Club Management"),
    Permission("clubs.edit", "Edit Clubs", "Club Management"),
    Permission("clubs.delete", "Delete Clubs", "Club Management"),
    Permission("clubs.approve", "Approve Clubs", "Club Management"),
    Permission("connections.view", "View Connections", "Connection Management"),
    Permission("connections.create", "Create Connections", "Connection Management"),
    Permission("connections.edit", "Edit Connections", "Connection Management"),
    Permission("connections.delete", "Delete Connections", "Connection Management"),
    Permission("files.view", "View Files", "File Management"),
    Permission("files.upload", "Upload Files", "File Management"),
    Permission("files.delete", "Delete Files", "File Management"),
    Permission("files.manage", "Manage Files", "File Management"),
    Permission("system.settings", "System Settings", "System"),
    Permission("system.health", "System Health", "System"),
    Permission("system.logs", "System Logs", "System"),
    Permission("system.backup", "System Backup", "System"),
    Permission("analytics.view", "View Analytics", "Analytics"),
    Permission("reports.generate", "Generate Reports", "Analytics"),
    Permission("admin.access", "Admin Panel Access", "Administration"),
]

ROLES: Dict[str, Role] = {
    SUPER_ADMIN: Role(
        SUPER_ADMIN,
        "Super Administrator",
        100,
        frozenset(p.id for p in PERMISSIONS),
    ),
    ADMIN: Role(
        ADMIN,
        "Administrator",
        80,
        frozenset(
            {
                "users.view",
                "users.edit",
                "users.manage_roles",
                "clubs.view",
                "clubs.create",
                "clubs.edit",
                "clubs.approve",
                "connections.view",
                "connections.create",
                "connections.edit",
                "files.view",
                "files.upload",
                "files.delete",
                "files.manage",
                "system.settings",
                "system.health",
                "analytics.view",
                "reports.generate",
                "admin.access",
            }
        ),
    ),
    MODERATOR: Role(
        MODERATOR,
        "Moderator",
        50,
        frozenset(
            {
                "users.view",
                "users.edit",
                "clubs.view",
                "clubs.edit",
                "clubs.approve",
                "connections.view",
                "connections.edit",
                "files.view",
                "files.upload",
                "admin.access",
            }
        ),
    ),
    USER: Role(USER, "User", 10, frozenset({"clubs.view", "connections.view", "files.view"})),
}

POLICIES: List[AccessPolicy] = [
    AccessPolicy("admin", "access", ("admin.access",), ADMIN_ROLES),
    AccessPolicy("dashboard", "view", ("admin.access",)),
    AccessPolicy("analytics", "view", ("analytics.view", "admin.access")),
    AccessPolicy("reports", "generate", ("reports.generate",)),
    AccessPolicy("users", "view", ("users.view",)),
    AccessPolicy("users", "create", ("users.create",)),
    AccessPolicy("users", "edit", ("users.edit",)),
    AccessPolicy("users", "manage_roles", ("users.manage_roles",)),
    AccessPolicy("users", "delete", ("users.delete",), (SUPER_ADMIN,)),
    AccessPolicy("clubs", "view", ("clubs.view",)),
    AccessPolicy("clubs", "create", ("clubs.create",)),
    AccessPolicy("clubs", "edit", ("clubs.edit",)),
    AccessPolicy("clubs", "approve", ("clubs.approve",)),
    AccessPolicy("clubs", "delete", ("clubs.delete",), (ADMIN, SUPER_ADMIN)),
    AccessPolicy("connections", "view", ("connections.view",)),
    AccessPolicy("connections", "create", ("connections.create",)),
    AccessPolicy("connections", "edit", ("connections.edit",)),
    AccessPolicy("connections", "delete", ("connections.delete",)),
    AccessPolicy("files", "view", ("files.view",)),
    AccessPolicy("files", "upload", ("files.upload",)),
    AccessPolicy("files", "delete", ("files.delete",)),
    AccessPolicy("files", "manage", ("files.manage",)),
    AccessPolicy("system", "settings", ("system.settings",), (ADMIN, SUPER_ADMIN)),
    AccessPolicy("system", "health", ("system.health",)),
    AccessPolicy("system", "logs", ("system.logs",), (ADMIN, SUPER_ADMIN)),
]

_ROLE_BY_USER_ROLE = {
    UserRole.USER: USER,
    UserRole.MODERATOR: MODERATOR,
    UserRole.ADMINISTRATOR: ADMIN,
    UserRole.SUPER_ADMIN: SUPER_ADMIN,
}


def role_id_for(user_role: UserRole) -> str:
    """Catalog role id of an account role."""
    return _ROLE_BY_USER_ROLE[UserRole(user_role)]


def permissions_for_roles(role_ids: Tuple[str, ...]) -> FrozenSet[str]:
    granted: set = set()
    for role_id in role_ids:
        role = ROLES.get(role_id)
        if role is not None:
            granted |= role.permissions
    return frozenset(granted)


def account_role_for(role_ids: Tuple[str, ...]) -> Optional[UserRole]:
    """Highest account role among catalog role ids, None when none maps."""
    account_roles = [r for r, role_id in _ROLE_BY_USER_ROLE.items() if role_id in role_ids]
    return max(account_roles, default=None)
