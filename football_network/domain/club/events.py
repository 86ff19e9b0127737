"""Club domain events."""

from dataclasses import dataclass
from typing import Tuple
from uuid import UUID

from football_network.domain.club.enums import LeagueType
from football_network.domain.shared.events import DomainEvent


@dataclass(frozen=True)
class ClubCreated(DomainEvent):
    """A club was added to the network."""

    club_id: UUID
    name: str
    league: LeagueType


@dataclass(frozen=True)
class ClubUpdated(DomainEvent):
    """One or more club attributes changed."""

    club_id: UUID
    changed_fields: Tuple[str, ...]


@dataclass(frozen=True)
class ClubDeleted(DomainEvent):
    """A club was removed, optionally together with its connections."""

    club_id: UUID
    name: str
    removed_connections: int = 0
