"""User aggregate root."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.errors import DomainValidationError
from football_network.domain.shared.events import DomainEvent, EventRecorder
from football_network.domain.shared.value_objects import Email
from football_network.domain.user.enums import UserRole
from football_network.domain.user.events import (
    UserActivationChanged,
    UserLoggedIn,
    UserRegistered,
    UserRoleChanged,
)

_USERNAME_PATTERN = re.compile(r"^[a-z0-9_-]{3,50}$")
MAX_NAME_LENGTH = 50


@dataclass
class User(EventRecorder):
    """Back-office account.

    Invariants:
    - username is 3-50 characters of letters, digits, ``_`` or ``-``,
      stored lowercase
    - email is a valid address, stored lowercase
    - first and last name are required, at most 50 characters

    Examples:
        >>> user = User.create("Admin_1", "Admin@Example.com", "Ada", "Nowak", "hash")
        >>> user.username, user.email
        ('admin_1', 'admin@example.com')
        >>> user.can_perform_action(UserRole.MODERATOR)
        False
    """

    id: UUID
    username: str
    email: str
    first_name: str
    last_name: str
    password_hash: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    is_email_verified: bool = False
    last_login_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=utc_now)
    modified_at: Optional[datetime] = None
    _events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.username = (self.username or "").strip().lower()
        if not _USERNAME_PATTERN.match(self.username):
            raise DomainValidationError(
                "Username must be 3-50 characters of letters, digits, '_' or '-'."
            )
        self.email = Email(self.email).value
        self.first_name = self._clean_name(self.first_name, "First name")
        self.last_name = self._clean_name(self.last_name, "Last name")
        self.role = UserRole(self.role)
        if not self.password_hash:
            raise DomainValidationError("Password hash is required.")

    @staticmethod
    def _clean_name(value: str, label: str) -> str:
        value = (value or "").strip()
        if not value:
            raise DomainValidationError(f"{label} is required.")
        if len(value) > MAX_NAME_LENGTH:
            raise DomainValidationError(f"{label} must not exceed {MAX_NAME_LENGTH} characters.")
        return value

    @staticmethod
    def create(
        username: str,
        email: str,
        first_name: str,
        last_name: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """Factory for a new account; records UserRegistered."""
        user = User(
            id=uuid4(),
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
            role=role,
        )
        user._add_event(
            UserRegistered(
                **DomainEvent.new_metadata(),
                user_id=user.id,
                username=user.username,
                role=user.role,
            )
        )
        return user

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def can_perform_action(self, required_role: UserRole) -> bool:
        return self.is_active and self.role >= required_role

    def record_login(self, at: Optional[datetime] = None) -> None:
        self.last_login_at = at or utc_now()
        self._add_event(
            UserLoggedIn(
                **DomainEvent.new_metadata(),
                user_id=self.id,
                logged_in_at=self.last_login_at,
            )
        )

    def change_role(self, role: UserRole) -> None:
        role = UserRole(role)
        if role == self.role:
            return
        previous = self.role
        self.role = role
        self.modified_at = utc_now()
        self._add_event(
            UserRoleChanged(
                **DomainEvent.new_metadata(),
                user_id=self.id,
                previous_role=previous,
                new_role=role,
            )
        )

    def activate(self) -> None:
        self._set_active(True)

    def deactivate(self) -> None:
        self._set_active(False)

    def _set_active(self, value: bool) -> None:
        if self.is_active == value:
            return
        self.is_active = value
        self.modified_at = utc_now()
        self._add_event(
            UserActivationChanged(
                **DomainEvent.new_metadata(),
                user_id=self.id,
                is_active=value,
            )
        )

    def update_profile(self, first_name: str, last_name: str, email: str) -> None:
        self.first_name = self._clean_name(first_name, "First name")
        self.last_name = self._clean_name(last_name, "Last name")
        self.email = Email(email).value
        self.modified_at = utc_now()

    def change_password(self, password_hash: str) -> None:
        if not password_hash:
            raise DomainValidationError("Password hash is required.")
        self.password_hash = password_hash
        self.modified_at = utc_now()
