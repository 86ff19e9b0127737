"""User read models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID

from football_network.application.authorization.models import AuthUser
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole


@dataclass(frozen=True)
class UserDto:
    """Public view of an account (never includes the password hash)."""

    id: UUID
    username: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    role: UserRole
    is_active: bool
    is_email_verified: bool
    last_login_at: Optional[datetime]
    created_at: datetime
    roles: Tuple[str, ...] = field(default_factory=tuple)
    permissions: Tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def from_domain(user: User) -> "UserDto":
        principal = AuthUser.from_user(user)
        return UserDto(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            role=user.role,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            roles=principal.roles,
            permissions=tuple(sorted(principal.permissions)),
        )
