"""Join connections with their clubs for listing."""

import logging
from typing import Dict, Iterable, List
from uuid import UUID

from football_network.application.connections.dtos import ConnectionDetailDto
from football_network.domain.club.entities import Club
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.entities import Connection

logger = logging.getLogger(__name__)


async def to_detail_dtos(
    connections: Iterable[Connection],
    clubs: IClubRepository,
) -> List[ConnectionDetailDto]:
    """Map connections to DTOs, loading each referenced club once.

    Connections pointing at a missing club are skipped and logged.
    """
    cache: Dict[UUID, Club] = {}
    result: List[ConnectionDetailDto] = []
    for connection in connections:
        ends = []
        for club_id in (connection.source_club_id, connection.target_club_id):
            if club_id not in cache:
                club = await clubs.get_by_id(club_id)
                if club is not None:
                    cache[club_id] = club
            ends.append(cache.get(club_id))
        source, target = ends
        if source is None or target is None:
            logger.warning(
                "Connection references a missing club",
                extra={"connection_id": str(connection.id)},
            )
            continue
        result.append(ConnectionDetailDto.from_domain(connection, source, target))
    return result
