"""MongoDB implementation of the connection repository."""

from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from pymongo import ASCENDING, DESCENDING, IndexModel

from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.connection.ports import (
    ConnectionSearchCriteria,
    IConnectionRepository,
)
from football_network.domain.shared.errors import EntityNotFoundError
from football_network.domain.shared.value_objects import DateRange
from football_network.infrastructure.persistence.mongodb.base import MongoBaseRepository


def _involving(club_id: UUID) -> Dict[str, Any]:
    return {"$or": [{"source_club_id": str(club_id)}, {"target_club_id": str(club_id)}]}


def pair_key(club_a: UUID, club_b: UUID) -> str:
    """Direction independent key of a club pair, unique per connection."""
    return ":".join(sorted((str(club_a), str(club_b))))


class MongoConnectionRepository(MongoBaseRepository[Connection], IConnectionRepository):
    duplicate_message = "A connection already exists between these clubs."

    @property
    def collection_name(self) -> str:
        return "connections"

    def index_models(self) -> List[IndexModel]:
        return [
            IndexModel("pair_key", unique=True),
            IndexModel("source_club_id"),
            IndexModel("target_club_id"),
        ]

    def to_document(self, entity: Connection) -> Dict[str, Any]:
        connection = entity
        period = connection.active_period
        return {
            "_id": self.uuid_to_str(connection.id),
            "source_club_id": self.uuid_to_str(connection.source_club_id),
            "target_club_id": self.uuid_to_str(connection.target_club_id),
            "pair_key": pair_key(connection.source_club_id, connection.target_club_id),
            "type": int(connection.type),
            "strength": int(connection.strength),
            "start_date": self.datetime_to_iso(period.start) if period else None,
            "end_date": self.datetime_to_iso(period.end) if period else None,
            "description": connection.description,
            "notes": connection.notes,
            "reliability_score": connection.reliability_score,
            "is_verified": connection.is_verified,
            "created_at": self.datetime_to_iso(connection.created_at),
            "modified_at": self.datetime_to_iso(connection.modified_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Connection:
        start = self.iso_to_datetime(doc.get("start_date"))
        return Connection(
            id=UUID(doc["_id"]),
            source_club_id=UUID(doc["source_club_id"]),
            target_club_id=UUID(doc["target_club_id"]),
            type=ConnectionType(doc["type"]),
            strength=ConnectionStrength(doc["strength"]),
            active_period=(
                DateRange(start, self.iso_to_datetime(doc.get("end_date"))) if start else None
            ),
            description=doc.get("description"),
            notes=doc.get("notes"),
            reliability_score=doc.get("reliability_score", 0.5),
            is_verified=doc.get("is_verified", False),
            created_at=self.iso_to_datetime(doc["created_at"]),
            modified_at=self.iso_to_datetime(doc.get("modified_at")),
        )

    async def get_by_id(self, connection_id: UUID) -> Optional[Connection]:
        return await self._find_one({"_id": str(connection_id)})

    async def get_between(self, club_a: UUID, club_b: UUID) -> Optional[Connection]:
        a, b = str(club_a), str(club_b)
        return await self._find_one(
            {
                "$or": [
                    {"source_club_id": a, "target_club_id": b},
                    {"source_club_id": b, "target_club_id": a},
                ]
            }
        )

    async def list_for_club(self, club_id: UUID) -> List[Connection]:
        return await self._find_many(_involving(club_id), sort=[("created_at", DESCENDING)])

    async def list_all(self) -> List[Connection]:
        return await self._find_many({}, sort=[("created_at", DESCENDING)])

    async def search(self, criteria: ConnectionSearchCriteria) -> Tuple[List[Connection], int]:
        query: Dict[str, Any] = {}
        if criteria.type is not None:
            query["type"] = int(criteria.type)
        if criteria.strength is not None:
            query["strength"] = int(criteria.strength)
        if criteria.is_verified is not None:
            query["is_verified"] = criteria.is_verified
        if criteria.club_id is not None:
            query.update(_involving(criteria.club_id))
        if criteria.min_reliability_score is not None:
            query["reliability_score"] = {"$gte": criteria.min_reliability_score}

        direction = DESCENDING if criteria.descending else ASCENDING
        sort = [(criteria.sort_by, direction), ("_id", ASCENDING)]
        return await self._find_page(query, sort, criteria.page, criteria.page_size)

    async def add(self, connection: Connection) -> None:
        await self._insert(connection)

    async def update(self, connection: Connection) -> None:
        if not await self._replace(connection.id, connection):
            raise EntityNotFoundError("Connection", connection.id)

    async def delete(self, connection_id: UUID) -> bool:
        return await self._delete_many({"_id": str(connection_id)}) > 0

    async def delete_for_club(self, club_id: UUID) -> int:
        return await self._delete_many(_involving(club_id))
