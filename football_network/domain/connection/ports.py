"""Connection repository port (interface)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType

CONNECTION_SORT_FIELDS = ("created_at", "strength", "type")


@dataclass(frozen=True)
class ConnectionSearchCriteria:
    """Filter, sort and paging options for connection listings."""

    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    is_verified: Optional[bool] = None
    club_id: Optional[UUID] = None
    min_reliability_score: Optional[float] = None
    sort_by: str = "created_at"
    descending: bool = True
    page: int = 1
    page_size: int = 20

    def matches(self, connection: Connection) -> bool:
        if self.type is not None and connection.type != self.type:
            return False
        if self.strength is not None and connection.strength != self.strength:
            return False
        if self.is_verified is not None and connection.is_verified != self.is_verified:
            return False
        if self.club_id is not None and not connection.involves_club(self.club_id):
            return False
        if (
            self.min_reliability_score is not None
            and connection.reliability_score < self.min_reliability_score
        ):
            return False
        return True


class IConnectionRepository(ABC):
    """Repository interface for the Connection aggregate."""

    @abstractmethod
    async def get_by_id(self, connection_id: UUID) -> Optional[Connection]:
        pass

    @abstractmethod
    async def get_between(self, club_a: UUID, club_b: UUID) -> Optional[Connection]:
        """Find the connection linking two clubs, in either direction.

        Args:
            club_a: One club ID
            club_b: The other club ID

        Returns:
            Connection if the pair is linked, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_club(self, club_id: UUID) -> List[Connection]:
        """Every connection where club_id is source or target."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Connection]:
        pass

    @abstractmethod
    async def search(self, criteria: ConnectionSearchCriteria) -> Tuple[List[Connection], int]:
        """Return (page of connections, total matching count)."""
        pass

    @abstractmethod
    async def add(self, connection: Connection) -> None:
        pass

    @abstractmethod
    async def update(self, connection: Connection) -> None:
        """Persist changes of an existing connection.

        Raises:
            EntityNotFoundError: If the connection does not exist
        """
        pass

    @abstractmethod
    async def delete(self, connection_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_for_club(self, club_id: UUID) -> int:
        """Delete every connection involving club_id. Returns count."""
        pass
