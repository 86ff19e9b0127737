"""In-memory club repository implementation.

Provides a dictionary-based implementation of IClubRepository for
tests and local development. Stored and returned objects are deep
copies, so callers never mutate the store directly.
"""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from football_network.domain.club.entities import Club
from football_network.domain.club.ports import ClubSearchCriteria, IClubRepository
from football_network.domain.shared.errors import EntityNotFoundError
from football_network.infrastructure.persistence.in_memory.base import paginate, snapshot, sort_key


class InMemoryClubRepository(IClubRepository):
    """
    In-memory implementation of IClubRepository.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Data lost on process restart

    Example:
        >>> repository = InMemoryClubRepository()
        >>> await repository.add(club)
        >>> (await repository.get_by_slug("legia-warszawa")).name
        'Legia Warszawa'
    """

    def __init__(self) -> None:
        self._storage: Dict[UUID, Club] = {}

    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        club = self._storage.get(club_id)
        return snapshot(club) if club else None

    async def get_by_name(self, name: str) -> Optional[Club]:
        return self._find(lambda club: club.name.lower() == name.strip().lower())

    async def get_by_short_name(self, short_name: str) -> Optional[Club]:
        wanted = short_name.strip().lower()
        return self._find(lambda club: bool(club.short_name) and club.short_name.lower() == wanted)

    async def get_by_slug(self, slug: str) -> Optional[Club]:
        return self._find(lambda club: club.slug == slug.strip().lower())

    async def list_all(self) -> List[Club]:
        clubs = sorted(self._storage.values(), key=sort_key("name"))
        return [snapshot(club) for club in clubs]

    async def search(self, criteria: ClubSearchCriteria) -> Tuple[List[Club], int]:
        matching = [club for club in self._storage.values() if criteria.matches(club)]
        matching.sort(key=sort_key(criteria.sort_by), reverse=criteria.descending)
        return paginate(matching, criteria.page, criteria.page_size), len(matching)

    async def add(self, club: Club) -> None:
        self._storage[club.id] = snapshot(club)

    async def update(self, club: Club) -> None:
        if club.id not in self._storage:
            raise EntityNotFoundError("Club", club.id)
        self._storage[club.id] = snapshot(club)

    async def delete(self, club_id: UUID) -> bool:
        return self._storage.pop(club_id, None) is not None

    def clear(self) -> None:
        """Remove all clubs (test utility)."""
        self._storage.clear()

    def _find(self, predicate) -> Optional[Club]:
        for club in self._storage.values():
            if predicate(club):
                return snapshot(club)
        return None
