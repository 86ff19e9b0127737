"""Club repository port (interface)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from football_network.domain.club.entities import Club
from football_network.domain.club.enums import LeagueType

CLUB_SORT_FIELDS = ("name", "city", "founded", "created_at")


@dataclass(frozen=True)
class ClubSearchCriteria:
    """Filter, sort and paging options for club listings.

    Text filters are case-insensitive; ``search_term`` matches name,
    short name, city or nickname.
    """

    search_term: Optional[str] = None
    league: Optional[LeagueType] = None
    country: Optional[str] = None
    city: Optional[str] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None
    founded_from: Optional[int] = None
    founded_to: Optional[int] = None
    sort_by: str = "name"
    descending: bool = False
    page: int = 1
    page_size: int = 20

    def matches(self, club: Club) -> bool:
        """In-process evaluation of the filter part of the criteria."""
        if self.search_term:
            term = self.search_term.lower()
            haystack = [club.name, club.short_name, club.city, club.nickname]
            if not any(value and term in value.lower() for value in haystack):
                return False
        if self.league is not None and club.league != self.league:
            return False
        if self.country and club.country.lower() != self.country.lower():
            return False
        if self.city and club.city.lower() != self.city.lower():
            return False
        for flag in ("is_active", "is_verified", "is_featured"):
            expected = getattr(self, flag)
            if expected is not None and getattr(club, flag) != expected:
                return False
        if self.founded_from is not None and (club.founded is None or club.founded < self.founded_from):
            return False
        if self.founded_to is not None and (club.founded is None or club.founded > self.founded_to):
            return False
        return True


class IClubRepository(ABC):
    """Repository interface for the Club aggregate.

    Name, short name and slug lookups are case-insensitive.
    """

    @abstractmethod
    async def get_by_id(self, club_id: UUID) -> Optional[Club]:
        """Find club by ID.

        Args:
            club_id: Club identifier

        Returns:
            Club if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Club]:
        pass

    @abstractmethod
    async def get_by_short_name(self, short_name: str) -> Optional[Club]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Club]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Club]:
        """Return every club, active or not.

        Used by read models (graph, dashboard) that aggregate over the
        whole network.
        """
        pass

    @abstractmethod
    async def search(self, criteria: ClubSearchCriteria) -> Tuple[List[Club], int]:
        """Find clubs matching criteria.

        Args:
            criteria: Filter, sort and paging options

        Returns:
            Tuple of (clubs on the requested page, total matching count)

        Examples:
            >>> clubs, total = await repository.search(
            ...     ClubSearchCriteria(league=LeagueType.EKSTRAKLASA, page=2)
            ... )
        """
        pass

    @abstractmethod
    async def add(self, club: Club) -> None:
        pass

    @abstractmethod
    async def update(self, club: Club) -> None:
        """Persist changes of an existing club.

        Raises:
            EntityNotFoundError: If the club does not exist
        """
        pass

    @abstractmethod
    async def delete(self, club_id: UUID) -> bool:
        """Delete club. Returns True if it existed."""
        pass
