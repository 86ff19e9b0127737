"""Club read models returned by handlers."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from football_network.domain.club.entities import Club
from football_network.domain.club.enums import LeagueType


@dataclass(frozen=True)
class ClubDto:
    id: UUID
    name: str
    short_name: Optional[str]
    slug: str
    league: LeagueType
    country: str
    city: str
    region: Optional[str]
    logo_path: Optional[str]
    x: float
    y: float
    founded: Optional[int]
    stadium: Optional[str]
    website: Optional[str]
    colors: Optional[str]
    description: Optional[str]
    nickname: Optional[str]
    motto: Optional[str]
    is_active: bool
    is_verified: bool
    is_featured: bool
    created_at: datetime
    modified_at: Optional[datetime]
    connection_count: int = 0

    @staticmethod
    def from_domain(club: Club, connection_count: int = 0) -> "ClubDto":
        return ClubDto(
            id=club.id,
            name=club.name,
            short_name=club.short_name,
            slug=club.slug,
            league=club.league,
            country=club.country,
            city=club.city,
            region=club.region,
            logo_path=club.logo_path,
            x=club.position.x,
            y=club.position.y,
            founded=club.founded,
            stadium=club.stadium,
            website=club.website,
            colors=club.colors,
            description=club.description,
            nickname=club.nickname,
            motto=club.motto,
            is_active=club.is_active,
            is_verified=club.is_verified,
            is_featured=club.is_featured,
            created_at=club.created_at,
            modified_at=club.modified_at,
            connection_count=connection_count,
        )


@dataclass(frozen=True)
class ClubSummaryDto:
    """Compact club reference embedded in connection listings."""

    id: UUID
    name: str
    short_name: Optional[str]
    city: str
    league: LeagueType
    logo_path: Optional[str]

    @staticmethod
    def from_domain(club: Club) -> "ClubSummaryDto":
        return ClubSummaryDto(
            id=club.id,
            name=club.name,
            short_name=club.short_name,
            city=club.city,
            league=club.league,
            logo_path=club.logo_path,
        )


@dataclass(frozen=True)
class FileUploadResultDto:
    file_name: str
    path: str
    content_type: str
    size_bytes: int
    uploaded_at: datetime
