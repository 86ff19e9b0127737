"""Graph data query: clubs as nodes, connections as edges."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import (
    GRAPH_DATA_PREFIX,
    GRAPH_DATA_TTL_SECONDS,
)
from football_network.application.common.requests import Query
from football_network.application.common.result import Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.graph.dtos import (
    GraphDataDto,
    GraphEdgeDto,
    GraphMetadataDto,
    GraphNodeDto,
)
from football_network.domain.club.entities import Club
from football_network.domain.club.enums import LeagueType
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionType
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.ports.cache import ICacheService

logger = logging.getLogger(__name__)

MAX_LEAGUE_FILTERS = 10
DEFAULT_COLOR = "#808080"

LEAGUE_COLORS = {
    LeagueType.EKSTRAKLASA: "#FF0000",
    LeagueType.FORTUNA_1_LIGA: "#0066CC",
    LeagueType.EUROPEAN_CLUB: "#32CD32",
}

CONNECTION_COLORS = {
    ConnectionType.ALLIANCE: "#32CD32",
    ConnectionType.RIVALRY: "#FF0000",
    ConnectionType.FRIENDSHIP: "#0066CC",
}


def node_size(connection_count: int) -> int:
    """Node diameter: 20 plus 2 per connection, capped at 100."""
    return min(20 + connection_count * 2, 100)


@dataclass(frozen=True)
class GetGraphDataQuery(Query):
    """
    Query: Build the club network graph.

    Attributes:
        active_only: Only active clubs become nodes
        verified_only: Only verified connections become edges
        include_leagues: Restrict nodes to these leagues (at most 10)
        include_isolated_nodes: Keep clubs without any edge
        min_reliability_score: Drop edges below this score (0..1)
    """

    active_only: bool = True
    verified_only: bool = False
    include_leagues: Optional[Tuple[LeagueType, ...]] = None
    include_isolated_nodes: bool = True
    min_reliability_score: Optional[float] = None

    @property
    def cache_key(self) -> str:
        parts = [GRAPH_DATA_PREFIX]
        if self.verified_only:
            parts.append("verified")
        if self.active_only:
            parts.append("active")
        if self.min_reliability_score is not None:
            parts.append(f"reliability-{self.min_reliability_score}")
        if self.include_leagues:
            leagues = sorted(LeagueType(league).name for league in self.include_leagues)
            parts.append("leagues-" + ",".join(leagues))
        if not self.include_isolated_nodes:
            parts.append("no-isolated")
        return ":".join(parts)

    def applied_filters(self) -> Dict[str, Any]:
        filters: Dict[str, Any] = {}
        if self.verified_only:
            filters["verified_only"] = True
        if self.active_only:
            filters["active_only"] = True
        if self.min_reliability_score is not None:
            filters["min_reliability_score"] = self.min_reliability_score
        if self.include_leagues:
            filters["include_leagues"] = [LeagueType(league).name for league in self.include_leagues]
        if not self.include_isolated_nodes:
            filters["exclude_isolated_nodes"] = True
        return filters


class GetGraphDataValidator(Validator[GetGraphDataQuery]):
    def rules(self, request: GetGraphDataQuery, errors: ValidationErrors) -> None:
        if request.min_reliability_score is not None:
            errors.check(
                0.0 <= request.min_reliability_score <= 1.0,
                "Reliability score must be between 0 and 1.",
            )
        if request.include_leagues is not None:
            errors.check(
                len(request.include_leagues) <= MAX_LEAGUE_FILTERS,
                f"Cannot include more than {MAX_LEAGUE_FILTERS} leagues.",
            )


class GetGraphDataQueryHandler(RequestHandler[GetGraphDataQuery, GraphDataDto]):
    validator = GetGraphDataValidator()
    operation = "generating graph data"

    def __init__(
        self,
        clubs: IClubRepository,
        connections: IConnectionRepository,
        cache: ICacheService,
    ):
        self._clubs = clubs
        self._connections = connections
        self._cache = cache

    async def _execute(self, query: GetGraphDataQuery) -> Result[GraphDataDto]:
        cache_key = query.cache_key
        cached = await self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Returning cached graph data", extra={"cache_key": cache_key})
            return Result.success(cached)

        clubs = await self._filtered_clubs(query)
        club_ids = {club.id for club in clubs}
        connections = [
            connection
            for connection in await self._filtered_connections(query)
            if connection.source_club_id in club_ids and connection.target_club_id in club_ids
        ]

        counts: Counter = Counter()
        for connection in connections:
            counts[connection.source_club_id] += 1
            counts[connection.target_club_id] += 1

        if not query.include_isolated_nodes:
            clubs = [club for club in clubs if counts[club.id] > 0]

        graph = GraphDataDto(
            nodes=[self._to_node(club, counts[club.id]) for club in clubs],
            edges=[self._to_edge(connection) for connection in connections],
            metadata=GraphMetadataDto(
                total_nodes=len(clubs),
                total_edges=len(connections),
                generated_at=utc_now(),
                league_distribution=dict(Counter(club.league.name for club in clubs)),
                connection_type_distribution=dict(Counter(c.type.name for c in connections)),
                applied_filters=query.applied_filters(),
            ),
        )

        await self._cache.set(cache_key, graph, GRAPH_DATA_TTL_SECONDS)
        logger.info(
            "Generated graph data",
            extra={"nodes": len(graph.nodes), "edges": len(graph.edges), "cache_key": cache_key},
        )
        return Result.success(graph)

    async def _filtered_clubs(self, query: GetGraphDataQuery) -> List[Club]:
        clubs = await self._clubs.list_all()
        if query.active_only:
            clubs = [club for club in clubs if club.is_active]
        if query.include_leagues:
            leagues = {LeagueType(league) for league in query.include_leagues}
            clubs = [club for club in clubs if club.league in leagues]
        return clubs

    async def _filtered_connections(self, query: GetGraphDataQuery) -> List[Connection]:
        connections = await self._connections.list_all()
        if query.verified_only:
            connections = [c for c in connections if c.is_verified]
        if query.min_reliability_score is not None:
            connections = [
                c for c in connections if c.reliability_score >= query.min_reliability_score
            ]
        return connections

    @staticmethod
    def _to_node(club: Club, connection_count: int) -> GraphNodeDto:
        return GraphNodeDto(
            id=club.id,
            label=club.name,
            short_name=club.short_name,
            league=club.league.name,
            city=club.city,
            logo_url=club.logo_path,
            x=club.position.x,
            y=club.position.y,
            color=LEAGUE_COLORS.get(club.league, DEFAULT_COLOR),
            size=node_size(connection_count),
            connection_count=connection_count,
            is_verified=club.is_verified,
            is_featured=club.is_featured,
        )

    @staticmethod
    def _to_edge(connection: Connection) -> GraphEdgeDto:
        return GraphEdgeDto(
            id=connection.id,
            source=connection.source_club_id,
            target=connection.target_club_id,
            type=connection.type.name,
            strength=connection.strength.name,
            label=connection.description,
            color=CONNECTION_COLORS.get(connection.type, DEFAULT_COLOR),
            weight=int(connection.strength),
            reliability_score=connection.reliability_score,
            is_verified=connection.is_verified,
        )
