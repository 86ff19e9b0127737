"""Read-only GraphQL schema over the query handlers."""

import logging
from datetime import date
from typing import Any, List, Optional
from uuid import UUID

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from football_network.application.clubs.queries.get_club_by_id import GetClubByIdQuery
from football_network.application.clubs.queries.get_clubs import GetClubsQuery
from football_network.application.common.result import ErrorKind, Result
from football_network.application.dashboard.queries.get_dashboard_stats import (
    GetDashboardStatsQuery,
)
from football_network.application.graph.queries.get_graph_data import GetGraphDataQuery
from football_network.graphql.permissions import IsAuthenticated
from football_network.graphql.types import (
    ClubPage,
    ClubType,
    DashboardStats,
    GraphData,
    League,
)

logger = logging.getLogger(__name__)


def _require(info: Info, resource: str, action: str) -> None:
    if not info.context.can_access(resource, action):
        raise GraphQLError(f"You do not have permission to {action} {resource}.")


def _unwrap(result: Result[Any]) -> Any:
    if result.is_failure:
        raise GraphQLError("; ".join(result.errors), extensions={"kind": result.kind.value})
    return result.value


@strawberry.type
class Query:
    """Queries used by the network visualisation and the dashboard.

    Examples:
        query {
          graph(verifiedOnly: true, includeLeagues: [EKSTRAKLASA]) {
            nodes { id label color size }
            edges { source target weight }
            metadata { totalNodes totalEdges }
          }
        }
    """

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def graph(
        self,
        info: Info,
        active_only: bool = True,
        verified_only: bool = False,
        include_leagues: Optional[List[League]] = None,
        include_isolated_nodes: bool = True,
        min_reliability_score: Optional[float] = None,
    ) -> GraphData:
        _require(info, "clubs", "view")
        query = GetGraphDataQuery(
            active_only=active_only,
            verified_only=verified_only,
            include_leagues=tuple(include_leagues) if include_leagues else None,
            include_isolated_nodes=include_isolated_nodes,
            min_reliability_score=min_reliability_score,
        )
        return GraphData.from_dto(_unwrap(await info.context.dispatcher.send(query)))

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def clubs(
        self,
        info: Info,
        page: int = 1,
        page_size: int = 20,
        search_term: Optional[str] = None,
        league: Optional[League] = None,
        is_active: Optional[bool] = None,
        is_verified: Optional[bool] = None,
        sort_by: str = "name",
        sort_direction: str = "ASC",
    ) -> ClubPage:
        _require(info, "clubs", "view")
        query = GetClubsQuery(
            page=page,
            page_size=page_size,
            search_term=search_term,
            league=league,
            is_active=is_active,
            is_verified=is_verified,
            sort_by=sort_by,
            sort_direction=sort_direction,
        )
        return ClubPage.from_result(_unwrap(await info.context.dispatcher.send(query)))

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def club(self, info: Info, id: strawberry.ID) -> Optional[ClubType]:
        """Club by id, null when it does not exist."""
        _require(info, "clubs", "view")
        try:
            club_id = UUID(str(id))
        except ValueError:
            raise GraphQLError("Club ID is not a valid identifier.") from None
        result = await info.context.dispatcher.send(GetClubByIdQuery(club_id=club_id))
        if result.is_failure and result.kind is ErrorKind.NOT_FOUND:
            return None
        return ClubType.from_dto(_unwrap(result))

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def dashboard_stats(
        self,
        info: Info,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        include_details: bool = False,
    ) -> DashboardStats:
        _require(info, "dashboard", "view")
        query = GetDashboardStatsQuery(
            start_date=start_date, end_date=end_date, include_details=include_details
        )
        return DashboardStats.from_dto(_unwrap(await info.context.dispatcher.send(query)))


schema = strawberry.Schema(query=Query)
