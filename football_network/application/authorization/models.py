"""Authenticated principal."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple
from uuid import UUID

from football_network.application.authorization.catalog import (
    account_role_for,
    permissions_for_roles,
    role_id_for,
)
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole


@dataclass(frozen=True)
class AuthUser:
    """Identity plus roles and permissions, valid for the token lifetime.

    Examples:
        >>> principal = AuthUser.from_user(admin_user)
        >>> principal.roles
        ('admin',)
        >>> "clubs.create" in principal.permissions
        True
    """

    user_id: UUID
    username: str
    email: str
    display_name: str
    roles: Tuple[str, ...] = field(default_factory=tuple)
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    is_active: bool = True

    @staticmethod
    def from_user(user: User) -> "AuthUser":
        roles = (role_id_for(user.role),)
        return AuthUser(
            user_id=user.id,
            username=user.username,
            email=user.email,
            display_name=user.full_name,
            roles=roles,
            permissions=permissions_for_roles(roles),
            is_active=user.is_active,
        )

    @property
    def account_role(self) -> Optional[UserRole]:
        """Highest account role behind the catalog roles."""
        return account_role_for(self.roles)
