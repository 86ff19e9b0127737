"""Dashboard read models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID


@dataclass(frozen=True)
class ActivityItemDto:
    """One entry of the recent activity feed."""

    kind: str
    entity_id: UUID
    label: str
    occurred_at: datetime


@dataclass(frozen=True)
class RecentActivityDto:
    clubs_created_last_30_days: int = 0
    connections_created_last_30_days: int = 0
    files_uploaded_last_30_days: int = 0
    last_data_modification_at: Optional[datetime] = None
    items: List[ActivityItemDto] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardStatsDto:
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
    total_file_size: int
    generated_at: datetime
    clubs_by_league: Dict[str, int] = field(default_factory=dict)
    connections_by_type: Dict[str, int] = field(default_factory=dict)
    connections_by_strength: Dict[str, int] = field(default_factory=dict)
    recent_activity: Optional[RecentActivityDto] = None
