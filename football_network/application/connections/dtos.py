"""Connection read models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from football_network.application.clubs.dtos import ClubSummaryDto
from football_network.domain.club.entities import Club
from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType


@dataclass(frozen=True)
class ConnectionDetailDto:
    id: UUID
    source_club: ClubSummaryDto
    target_club: ClubSummaryDto
    type: ConnectionType
    strength: ConnectionStrength
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    description: Optional[str]
    notes: Optional[str]
    reliability_score: float
    is_verified: bool
    is_active: bool
    created_at: datetime
    modified_at: Optional[datetime]

    @staticmethod
    def from_domain(connection: Connection, source: Club, target: Club) -> "ConnectionDetailDto":
        period = connection.active_period
        return ConnectionDetailDto(
            id=connection.id,
            source_club=ClubSummaryDto.from_domain(source),
            target_club=ClubSummaryDto.from_domain(target),
            type=connection.type,
            strength=connection.strength,
            start_date=period.start if period else None,
            end_date=period.end if period else None,
            description=connection.description,
            notes=connection.notes,
            reliability_score=connection.reliability_score,
            is_verified=connection.is_verified,
            is_active=connection.is_active_at(),
            created_at=connection.created_at,
            modified_at=connection.modified_at,
        )
