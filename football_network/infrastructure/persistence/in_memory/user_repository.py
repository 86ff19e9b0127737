"""In-memory user repository implementation."""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from football_network.domain.shared.errors import EntityNotFoundError
from football_network.domain.user.entities import User
from football_network.domain.user.ports import IUserRepository, UserSearchCriteria
from football_network.infrastructure.persistence.in_memory.base import paginate, snapshot, sort_key


class InMemoryUserRepository(IUserRepository):
    """Dictionary-backed IUserRepository."""

    def __init__(self) -> None:
        self._users: Dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        user = self._users.get(user_id)
        return snapshot(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        for user in self._users.values():
            if user.email == wanted:
                return snapshot(user)
        return None

    async def get_by_username(self, username: str) -> Optional[User]:
        wanted = username.strip().lower()
        for user in self._users.values():
            if user.username == wanted:
                return snapshot(user)
        return None

    async def search(self, criteria: UserSearchCriteria) -> Tuple[List[User], int]:
        matching = sorted(
            (u for u in self._users.values() if criteria.matches(u)),
            key=sort_key("username"),
        )
        return paginate(matching, criteria.page, criteria.page_size), len(matching)

    async def count(self) -> int:
        return len(self._users)

    async def add(self, user: User) -> None:
        self._users[user.id] = snapshot(user)

    async def update(self, user: User) -> None:
        if user.id not in self._users:
            raise EntityNotFoundError("User", user.id)
        self._users[user.id] = snapshot(user)

    def clear(self) -> None:
        self._users.clear()
