"""Dashboard statistics query.

Totals are computed over the clubs and connections created inside the
optional date window. The result is cached for five minutes; every
write command drops the cached entries.
"""

import logging
from collections import Counter
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import (
    DASHBOARD_STATS_TTL_SECONDS,
    dashboard_stats_key,
)
from football_network.application.common.requests import Query
from football_network.application.common.result import Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.dashboard.dtos import (
    ActivityItemDto,
    DashboardStatsDto,
    RecentActivityDto,
)
from football_network.domain.club.entities import Club
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.entities import Connection
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.file.entities import StoredFile
from football_network.domain.file.ports import FileSearchCriteria, IFileRepository
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.user.ports import IUserRepository, UserSearchCriteria

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_DAYS = 30
RECENT_ACTIVITY_LIMIT = 20
_FILE_SCAN_PAGE_SIZE = 100


@dataclass(frozen=True)
class GetDashboardStatsQuery(Query):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    include_details: bool = False


class GetDashboardStatsValidator(Validator[GetDashboardStatsQuery]):
    def rules(self, request: GetDashboardStatsQuery, errors: ValidationErrors) -> None:
        if request.start_date is not None and request.end_date is not None:
            errors.check(
                request.start_date <= request.end_date,
                "Start date must be before or equal to end date.",
            )
        if request.end_date is not None:
            errors.check(
                request.end_date <= utc_now().date(),
                "End date cannot be in the future.",
            )


def _in_window(created_at: datetime, start: Optional[date], end: Optional[date]) -> bool:
    day = created_at.date()
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def _latest(values: Iterable[Optional[datetime]]) -> Optional[datetime]:
    present = [value for value in values if value is not None]
    return max(present) if present else None


class GetDashboardStatsQueryHandler(RequestHandler[GetDashboardStatsQuery, DashboardStatsDto]):
    validator = GetDashboardStatsValidator()
    operation = "retrieving dashboard statistics"

    def __init__(
        self,
        clubs: IClubRepository,
        connections: IConnectionRepository,
        users: IUserRepository,
        files: IFileRepository,
        cache: ICacheService,
    ):
        self._clubs = clubs
        self._connections = connections
        self._users = users
        self._files = files
        self._cache = cache

    async def _execute(self, query: GetDashboardStatsQuery) -> Result[DashboardStatsDto]:
        cache_key = dashboard_stats_key(query.start_date, query.end_date, query.include_details)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Returning cached dashboard stats", extra={"cache_key": cache_key})
            return Result.success(cached)

        clubs = [
            club
            for club in await self._clubs.list_all()
            if _in_window(club.created_at, query.start_date, query.end_date)
        ]
        connections = [
            connection
            for connection in await self._connections.list_all()
            if _in_window(connection.created_at, query.start_date, query.end_date)
        ]
        files = await self._all_files()
        _, active_users = await self._users.search(UserSearchCriteria(is_active=True, page_size=1))
        verified_connections = sum(1 for c in connections if c.is_verified)

        stats = DashboardStatsDto(
            total_clubs=len(clubs),
            active_clubs=sum(1 for c in clubs if c.is_active),
            verified_clubs=sum(1 for c in clubs if c.is_verified),
            featured_clubs=sum(1 for c in clubs if c.is_featured),
            total_connections=len(connections),
            verified_connections=verified_connections,
            connections_requiring_verification=len(connections) - verified_connections,
            total_users=await self._users.count(),
            active_users=active_users,
            total_files=len(files),
            total_file_size=sum(f.size_bytes for f in files),
            generated_at=utc_now(),
        )

        if query.include_details:
            stats = replace(
                stats,
                clubs_by_league=dict(Counter(c.league.display_name for c in clubs)),
                connections_by_type=dict(Counter(c.type.name.title() for c in connections)),
                connections_by_strength=dict(
                    Counter(c.strength.name.replace("_", " ").title() for c in connections)
                ),
                recent_activity=self._recent_activity(clubs, connections, files),
            )

        await self._cache.set(cache_key, stats, DASHBOARD_STATS_TTL_SECONDS)
        logger.info(
            "Generated dashboard stats",
            extra={"total_clubs": stats.total_clubs, "total_connections": stats.total_connections},
        )
        return Result.success(stats)

    async def _all_files(self) -> List[StoredFile]:
        files: List[StoredFile] = []
        page = 1
        while True:
            batch, total = await self._files.search(
                FileSearchCriteria(page=page, page_size=_FILE_SCAN_PAGE_SIZE)
            )
            files.extend(batch)
            if not batch or len(files) >= total:
                return files
            page += 1

    @staticmethod
    def _recent_activity(
        clubs: List[Club],
        connections: List[Connection],
        files: List[StoredFile],
    ) -> RecentActivityDto:
        since = utc_now() - timedelta(days=RECENT_ACTIVITY_DAYS)
        names = {club.id: club.name for club in clubs}

        items = [
            ActivityItemDto("club_created", club.id, club.name, club.created_at)
            for club in clubs
            if club.created_at >= since
        ]
        clubs_created = len(items)
        items.extend(
            ActivityItemDto(
                "connection_created",
                connection.id,
                "{} - {}".format(
                    names.get(connection.source_club_id, str(connection.source_club_id)),
                    names.get(connection.target_club_id, str(connection.target_club_id)),
                ),
                connection.created_at,
            )
            for connection in connections
            if connection.created_at >= since
        )
        items.sort(key=lambda item: item.occurred_at, reverse=True)

        return RecentActivityDto(
            clubs_created_last_30_days=clubs_created,
            connections_created_last_30_days=len(items) - clubs_created,
            files_uploaded_last_30_days=sum(1 for f in files if f.created_at >= since),
            last_data_modification_at=_latest(
                [c.modified_at for c in clubs] + [c.modified_at for c in connections]
            ),
            items=items[:RECENT_ACTIVITY_LIMIT],
        )
