"""User persistence and credential ports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole


@dataclass(frozen=True)
class UserSearchCriteria:
    """Filter and paging options for the user administration list."""

    search_term: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    page: int = 1
    page_size: int = 20

    def matches(self, user: User) -> bool:
        if self.search_term:
            term = self.search_term.lower()
            haystack = (user.username, user.email, user.first_name.lower(), user.last_name.lower())
            if not any(term in value for value in haystack):
                return False
        if self.role is not None and user.role != self.role:
            return False
        if self.is_active is not None and user.is_active != self.is_active:
            return False
        return True


class IUserRepository(ABC):
    """Repository interface for the User aggregate.

    Email and username lookups are case-insensitive (both are stored
    lowercase by the entity).
    """

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def search(self, criteria: UserSearchCriteria) -> Tuple[List[User], int]:
        """Return (page of users ordered by username, total matching count)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def add(self, user: User) -> None:
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes of an existing user.

        Raises:
            EntityNotFoundError: If the user does not exist
        """
        pass


class IPasswordHasher(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison of password against password_hash."""
        pass
