"""MongoDB implementation of the club repository.

Document Schema:
{
    "_id": "uuid-string",
    "name": "Legia Warszawa",
    "name_lower": "legia warszawa",
    "short_name": "LEG",
    "short_name_lower": "leg",
    "slug": "legia-warszawa",
    "league": 1,
    "country": "Poland",
    "city": "Warszawa",
    "position": {"x": 0.0, "y": 0.0},
    ...
    "created_at": "2025-01-10T10:00:00+00:00",
    "modified_at": null
}

Indexes:
- name_lower, slug: unique
- short_name_lower: unique among clubs that have a short name
- league, city: filters
"""

import re
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from pymongo import ASCENDING, DESCENDING, IndexModel

from football_network.domain.club.entities import Club
from football_network.domain.club.enums import LeagueType
from football_network.domain.club.ports import ClubSearchCriteria, IClubRepository
from football_network.domain.shared.errors import EntityNotFoundError
from football_network.domain.shared.value_objects import Point2D
from football_network.infrastructure.persistence.mongodb.base import MongoBaseRepository

_SORT_FIELDS = {
    "name": "name_lower",
    "city": "city",
    "founded": "founded",
    "created_at": "created_at",
}


def _exact(value: str) -> Dict[str, Any]:
    return {"$regex": f"^{re.escape(value)}$", "$options": "i"}


class MongoClubRepository(MongoBaseRepository[Club], IClubRepository):
    duplicate_message = "A club with the same name, short name or slug already exists."

    @property
    def collection_name(self) -> str:
        return "clubs"

    def index_models(self) -> List[IndexModel]:
        return [
            IndexModel("name_lower", unique=True),
            IndexModel("slug", unique=True),
            IndexModel(
                "short_name_lower",
                unique=True,
                partialFilterExpression={"short_name_lower": {"$type": "string"}},
            ),
            IndexModel([("league", ASCENDING), ("city", ASCENDING)]),
        ]

    def to_document(self, entity: Club) -> Dict[str, Any]:
        club = entity
        return {
            "_id": self.uuid_to_str(club.id),
            "name": club.name,
            "name_lower": club.name.lower(),
            "short_name": club.short_name,
            "short_name_lower": club.short_name.lower() if club.short_name else None,
            "slug": club.slug,
            "league": int(club.league),
            "country": club.country,
            "city": club.city,
            "region": club.region,
            "position": {"x": club.position.x, "y": club.position.y},
            "logo_path": club.logo_path,
            "founded": club.founded,
            "stadium": club.stadium,
            "website": club.website,
            "colors": club.colors,
            "description": club.description,
            "nickname": club.nickname,
            "motto": club.motto,
            "metadata": club.metadata,
            "is_active": club.is_active,
            "is_verified": club.is_verified,
            "is_featured": club.is_featured,
            "created_at": self.datetime_to_iso(club.created_at),
            "modified_at": self.datetime_to_iso(club.modified_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Club:
        position = doc.get("position") or {}
        return Club(
            id=UUID(doc["_id"]),
            name=doc["name"],
            slug=doc["slug"],
            league=LeagueType(doc["league"]),
            country=doc["country"],
            city=doc["city"],
            position=Point2D(position.get("x", 0.0), position.get("y", 0.0)),
            short_name=doc.get("short_name"),
            region=doc.get("region"),
            logo_path=doc.get("logo_path"),
            founded=doc.get("founded"),
            stadium=doc.get("stadium"),
            website=doc.get("website"),
            colors=doc.get("colors"),
            description=doc.get("description"),
            nickname=doc.get("nickname"),
            motto=doc.get("motto"),
            metadata=doc.get("metadata") or {},
            is_active=doc.get("is_active", True),
            is_verified=doc.get("is_verified", False),
            is_featured=doc.get("is_featured", False),
            created_at=self.iso_to_datetime(doc["created_at"]),
            modified_at=self.iso_to_datetime(doc.get("modified_at")),
        )

    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        return await self._find_one({"_id": str(club_id)})

    async def get_by_name(self, name: str) -> Optional[Club]:
        return await self._find_one({"name_lower": name.strip().lower()})

    async def get_by_short_name(self, short_name: str) -> Optional[Club]:
        return await self._find_one({"short_name_lower": short_name.strip().lower()})

    async def get_by_slug(self, slug: str) -> Optional[Club]:
        return await self._find_one({"slug": slug.strip().lower()})

    async def list_all(self) -> List[Club]:
        return await self._find_many({}, sort=[("name_lower", ASCENDING)])

    async def search(self, criteria: ClubSearchCriteria) -> Tuple[List[Club], int]:
        query: Dict[str, Any] = {}
        if criteria.search_term:
            pattern = {"$regex": re.escape(criteria.search_term), "$options": "i"}
            query["$or"] = [
                {"name": pattern},
                {"short_name": pattern},
                {"city": pattern},
                {"nickname": pattern},
            ]
        if criteria.league is not None:
            query["league"] = int(criteria.league)
        if criteria.country:
            query["country"] = _exact(criteria.country)
        if criteria.city:
            query["city"] = _exact(criteria.city)
        for flag in ("is_active", "is_verified", "is_featured"):
            value = getattr(criteria, flag)
            if value is not None:
                query[flag] = value
        founded: Dict[str, int] = {}
        if criteria.founded_from is not None:
            founded["$gte"] = criteria.founded_from
        if criteria.founded_to is not None:
            founded["$lte"] = criteria.founded_to
        if founded:
            query["founded"] = founded

        direction = DESCENDING if criteria.descending else ASCENDING
        sort = [(_SORT_FIELDS.get(criteria.sort_by, "name_lower"), direction), ("_id", ASCENDING)]
        return await self._find_page(query, sort, criteria.page, criteria.page_size)

    async def add(self, club: Club) -> None:
        await self._insert(club)

    async def update(self, club: Club) -> None:
        if not await self._replace(club.id, club):
            raise EntityNotFoundError("Club", club.id)

    async def delete(self, club_id: UUID) -> bool:
        return await self._delete_many({"_id": str(club_id)}) > 0
