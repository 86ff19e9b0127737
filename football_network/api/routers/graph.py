"""Graph endpoint."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.graph.queries.get_graph_data import GetGraphDataQuery
from football_network.domain.club.enums import LeagueType

router = APIRouter(prefix="/api/v1/graph", tags=["graph"])


@router.get("", dependencies=[Depends(require_access("clubs", "view"))])
async def get_graph(
    active_only: bool = True,
    verified_only: bool = False,
    include_leagues: Optional[List[LeagueType]] = Query(None),
    include_isolated_nodes: bool = True,
    min_reliability_score: Optional[float] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetGraphDataQuery(
        active_only=active_only,
        verified_only=verified_only,
        include_leagues=tuple(include_leagues) if include_leagues else None,
        include_isolated_nodes=include_isolated_nodes,
        min_reliability_score=min_reliability_score,
    )
    return to_response(await dispatcher.send(query))
