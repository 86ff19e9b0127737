"""User domain events."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from football_network.domain.shared.events import DomainEvent
from football_network.domain.user.enums import UserRole


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    user_id: UUID
    username: str
    role: UserRole


@dataclass(frozen=True)
class UserLoggedIn(DomainEvent):
    user_id: UUID
    logged_in_at: datetime


@dataclass(frozen=True)
class UserRoleChanged(DomainEvent):
    user_id: UUID
    previous_role: UserRole
    new_role: UserRole


@dataclass(frozen=True)
class UserActivationChanged(DomainEvent):
    user_id: UUID
    is_active: bool
