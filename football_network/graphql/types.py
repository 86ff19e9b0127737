"""GraphQL object types mirroring the application read models."""

from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.scalars import JSON

from football_network.application.clubs.dtos import ClubDto
from football_network.application.common.pagination import PagedResult
from football_network.application.dashboard.dtos import (
    ActivityItemDto,
    DashboardStatsDto,
    RecentActivityDto,
)
from football_network.application.graph.dtos import (
    GraphDataDto,
    GraphEdgeDto,
    GraphMetadataDto,
    GraphNodeDto,
)
from football_network.domain.club.enums import LeagueType

League = strawberry.enum(LeagueType, name="League")


@strawberry.type
class ClubType:
    id: strawberry.ID
    name: str
    short_name: Optional[str]
    slug: str
    league: League
    league_name: str
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
    connection_count: int
    created_at: datetime
    modified_at: Optional[datetime]

    @staticmethod
    def from_dto(dto: ClubDto) -> "ClubType":
        return ClubType(
            id=strawberry.ID(str(dto.id)),
            name=dto.name,
            short_name=dto.short_name,
            slug=dto.slug,
            league=dto.league,
            league_name=dto.league.display_name,
            country=dto.country,
            city=dto.city,
            region=dto.region,
            logo_path=dto.logo_path,
            x=dto.x,
            y=dto.y,
            founded=dto.founded,
            stadium=dto.stadium,
            website=dto.website,
            colors=dto.colors,
            description=dto.description,
            nickname=dto.nickname,
            motto=dto.motto,
            is_active=dto.is_active,
            is_verified=dto.is_verified,
            is_featured=dto.is_featured,
            connection_count=dto.connection_count,
            created_at=dto.created_at,
            modified_at=dto.modified_at,
        )


@strawberry.type
class ClubPage:
    items: List[ClubType]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @staticmethod
    def from_result(result: PagedResult[ClubDto]) -> "ClubPage":
        return ClubPage(
            items=[ClubType.from_dto(dto) for dto in result.items],
            total_count=result.total_count,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            has_next_page=result.has_next_page,
            has_previous_page=result.has_previous_page,
        )


@strawberry.type
class GraphNode:
    id: strawberry.ID
    label: str
    short_name: Optional[str]
    league: str
    city: str
    logo_url: Optional[str]
    x: float
    y: float
    color: str
    size: int
    connection_count: int
    is_verified: bool
    is_featured: bool

    @staticmethod
    def from_dto(dto: GraphNodeDto) -> "GraphNode":
        values = dict(dto.__dict__)
        values["id"] = strawberry.ID(str(dto.id))
        return GraphNode(**values)


@strawberry.type
class GraphEdge:
    id: strawberry.ID
    source: strawberry.ID
    target: strawberry.ID
    type: str
    strength: str
    label: Optional[str]
    color: str
    weight: int
    reliability_score: float
    is_verified: bool

    @staticmethod
    def from_dto(dto: GraphEdgeDto) -> "GraphEdge":
        values = dict(dto.__dict__)
        for key in ("id", "source", "target"):
            values[key] = strawberry.ID(str(values[key]))
        return GraphEdge(**values)


@strawberry.type
class GraphMetadata:
    total_nodes: int
    total_edges: int
    generated_at: datetime
    league_distribution: JSON
    connection_type_distribution: JSON
    applied_filters: JSON

    @staticmethod
    def from_dto(dto: GraphMetadataDto) -> "GraphMetadata":
        return GraphMetadata(
            total_nodes=dto.total_nodes,
            total_edges=dto.total_edges,
            generated_at=dto.generated_at,
            league_distribution=dict(dto.league_distribution),
            connection_type_distribution=dict(dto.connection_type_distribution),
            applied_filters=dict(dto.applied_filters),
        )


@strawberry.type
class GraphData:
    nodes: List[GraphNode]
    edges: List[GraphEdge]
    metadata: GraphMetadata

    @staticmethod
    def from_dto(dto: GraphDataDto) -> "GraphData":
        return GraphData(
            nodes=[GraphNode.from_dto(node) for node in dto.nodes],
            edges=[GraphEdge.from_dto(edge) for edge in dto.edges],
            metadata=GraphMetadata.from_dto(dto.metadata),
        )


@strawberry.type
class ActivityItem:
    kind: str
    entity_id: strawberry.ID
    label: str
    occurred_at: datetime

    @staticmethod
    def from_dto(dto: ActivityItemDto) -> "ActivityItem":
        return ActivityItem(
            kind=dto.kind,
            entity_id=strawberry.ID(str(dto.entity_id)),
            label=dto.label,
            occurred_at=dto.occurred_at,
        )


@strawberry.type
class RecentActivity:
    clubs_created_last_30_days: int
    connections_created_last_30_days: int
    files_uploaded_last_30_days: int
    last_data_modification_at: Optional[datetime]
    items: List[ActivityItem]

    @staticmethod
    def from_dto(dto: RecentActivityDto) -> "RecentActivity":
        return RecentActivity(
            clubs_created_last_30_days=dto.clubs_created_last_30_days,
            connections_created_last_30_days=dto.connections_created_last_30_days,
            files_uploaded_last_30_days=dto.files_uploaded_last_30_days,
            last_data_modification_at=dto.last_data_modification_at,
            items=[ActivityItem.from_dto(item) for item in dto.items],
        )


@strawberry.type
class DashboardStats:
    total_clubs: int
    active_clubs: int
    verified_clubs: int
    featured_clubs: int
    total_connections: int
    verified_connections: int
    connections_requiring_verification: int
    total_users: int
    active_users: int
    total_files: int
    total_file_size: float
    generated_at: datetime
    clubs_by_league: JSON
    connections_by_type: JSON
    connections_by_strength: JSON
    recent_activity: Optional[RecentActivity]

    @staticmethod
    def from_dto(dto: DashboardStatsDto) -> "DashboardStats":
        return DashboardStats(
            total_clubs=dto.total_clubs,
            active_clubs=dto.active_clubs,
            verified_clubs=dto.verified_clubs,
            featured_clubs=dto.featured_clubs,
            total_connections=dto.total_connections,
            verified_connections=dto.verified_connections,
            connections_requiring_verification=dto.connections_requiring_verification,
            total_users=dto.total_users,
            active_users=dto.active_users,
            total_files=dto.total_files,
            # GraphQL Int is 32 bit
            total_file_size=float(dto.total_file_size),
            generated_at=dto.generated_at,
            clubs_by_league=dict(dto.clubs_by_league),
            connections_by_type=dict(dto.connections_by_type),
            connections_by_strength=dict(dto.connections_by_strength),
            recent_activity=(
                RecentActivity.from_dto(dto.recent_activity) if dto.recent_activity else None
            ),
        )
