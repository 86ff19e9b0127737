"""MongoDB implementation of the user repository."""

import re
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from pymongo import ASCENDING, IndexModel

from football_network.domain.shared.errors import EntityNotFoundError
from football_network.domain.user.entities import User
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IUserRepository, UserSearchCriteria
from football_network.infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    duplicate_message = "A user with the same username or email already exists."

    @property
    def collection_name(self) -> str:
        return "users"

    def index_models(self) -> List[IndexModel]:
        return [IndexModel("username", unique=True), IndexModel("email", unique=True)]

    def to_document(self, entity: User) -> Dict[str, Any]:
        user = entity
        return {
            "_id": self.uuid_to_str(user.id),
            "username": user.username,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "password_hash": user.password_hash,
            "role": int(user.role),
            "is_active": user.is_active,
            "is_email_verified": user.is_email_verified,
            "last_login_at": self.datetime_to_iso(user.last_login_at),
            "created_at": self.datetime_to_iso(user.created_at),
            "modified_at": self.datetime_to_iso(user.modified_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        return User(
            id=UUID(doc["_id"]),
            username=doc["username"],
            email=doc["email"],
            first_name=doc["first_name"],
            last_name=doc["last_name"],
            password_hash=doc["password_hash"],
            role=UserRole(doc.get("role", UserRole.USER)),
            is_active=doc.get("is_active", True),
            is_email_verified=doc.get("is_email_verified", False),
            last_login_at=self.iso_to_datetime(doc.get("last_login_at")),
            created_at=self.iso_to_datetime(doc["created_at"]),
            modified_at=self.iso_to_datetime(doc.get("modified_at")),
        )

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return await self._find_one({"_id": str(user_id)})

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._find_one({"email": email.strip().lower()})

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find_one({"username": username.strip().lower()})

    async def search(self, criteria: UserSearchCriteria) -> Tuple[List[User], int]:
        query: Dict[str, Any] = {}
        if criteria.search_term:
            pattern = {"$regex": re.escape(criteria.search_term), "$options": "i"}
            query["$or"] = [
                {"username": pattern},
                {"email": pattern},
                {"first_name": pattern},
                {"last_name": pattern},
            ]
        if criteria.role is not None:
            query["role"] = int(criteria.role)
        if criteria.is_active is not None:
            query["is_active"] = criteria.is_active
        return await self._find_page(
            query, [("username", ASCENDING)], criteria.page, criteria.page_size
        )

    async def count(self) -> int:
        return await self._count({})

    async def add(self, user: User) -> None:
        await self._insert(user)

    async def update(self, user: User) -> None:
        if not await self._replace(user.id, user):
            raise EntityNotFoundError("User", user.id)
