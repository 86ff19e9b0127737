"""In-memory connection repository implementation."""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from football_network.domain.connection.entities import Connection
from football_network.domain.connection.ports import (
    ConnectionSearchCriteria,
    IConnectionRepository,
)
from football_network.domain.shared.errors import EntityNotFoundError
from football_network.infrastructure.persistence.in_memory.base import paginate, snapshot, sort_key


class InMemoryConnectionRepository(IConnectionRepository):
    """Dictionary-backed IConnectionRepository (deep copies in and out)."""

    def __init__(self) -> None:
        self._storage: Dict[UUID, Connection] = {}

    async def get_by_id(self, connection_id: UUID) -> Optional[Connection]:
        connection = self._storage.get(connection_id)
        return snapshot(connection) if connection else None

    async def get_between(self, club_a: UUID, club_b: UUID) -> Optional[Connection]:
        for connection in self._storage.values():
            if connection.connects(club_a, club_b):
                return snapshot(connection)
        return None

    async def list_for_club(self, club_id: UUID) -> List[Connection]:
        found = [c for c in self._storage.values() if c.involves_club(club_id)]
        found.sort(key=sort_key("created_at"), reverse=True)
        return [snapshot(c) for c in found]

    async def list_all(self) -> List[Connection]:
        connections = sorted(self._storage.values(), key=sort_key("created_at"), reverse=True)
        return [snapshot(c) for c in connections]

    async def search(self, criteria: ConnectionSearchCriteria) -> Tuple[List[Connection], int]:
        matching = [c for c in self._storage.values() if criteria.matches(c)]
        matching.sort(key=sort_key(criteria.sort_by), reverse=criteria.descending)
        return paginate(matching, criteria.page, criteria.page_size), len(matching)

    async def add(self, connection: Connection) -> None:
        self._storage[connection.id] = snapshot(connection)

    async def update(self, connection: Connection) -> None:
        if connection.id not in self._storage:
            raise EntityNotFoundError("Connection", connection.id)
        self._storage[connection.id] = snapshot(connection)

    async def delete(self, connection_id: UUID) -> bool:
        return self._storage.pop(connection_id, None) is not None

    async def delete_for_club(self, club_id: UUID) -> int:
        doomed = [cid for cid, c in self._storage.items() if c.involves_club(club_id)]
        for connection_id in doomed:
            del self._storage[connection_id]
        return len(doomed)

    def clear(self) -> None:
        self._storage.clear()
