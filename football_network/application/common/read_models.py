"""Cache keys of derived read models and their invalidation."""

import logging
from datetime import date
from typing import Optional

from football_network.domain.shared.ports.cache import ICacheService

logger = logging.getLogger(__name__)

DASHBOARD_STATS_PREFIX = "dashboard-stats"
GRAPH_DATA_PREFIX = "graph-data"

DASHBOARD_STATS_TTL_SECONDS = 5 * 60
GRAPH_DATA_TTL_SECONDS = 10 * 60


def dashboard_stats_key(
    start_date: Optional[date],
    end_date: Optional[date],
    include_details: bool,
) -> str:
    """Cache key of a dashboard statistics query.

    Examples:
        >>> dashboard_stats_key(date(2024, 1, 1), None, True)
        'dashboard-stats:start-20240101:detailed'
    """
    key = DASHBOARD_STATS_PREFIX
    if start_date is not None:
        key += f":start-{start_date:%Y%m%d}"
    if end_date is not None:
        key += f":end-{end_date:%Y%m%d}"
    if include_details:
        key += ":detailed"
    return key


async def invalidate_read_models(cache: Optional[ICacheService]) -> None:
    """Drop cached dashboard and graph data after a write."""
    if cache is None:
        return
    removed = await cache.remove_by_prefix(DASHBOARD_STATS_PREFIX)
    removed += await cache.remove_by_prefix(GRAPH_DATA_PREFIX)
    if removed:
        logger.debug("Read model cache invalidated", extra={"entries": removed})
