"""Graph read models consumed by the network visualisation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID


@dataclass(frozen=True)
class GraphNodeDto:
    id: UUID
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


@dataclass(frozen=True)
class GraphEdgeDto:
    id: UUID
    source: UUID
    target: UUID
    type: str
    strength: str
    label: Optional[str]
    color: str
    weight: int
    reliability_score: float
    is_verified: bool


@dataclass(frozen=True)
class GraphMetadataDto:
    total_nodes: int
    total_edges: int
    generated_at: datetime
    league_distribution: Dict[str, int] = field(default_factory=dict)
    connection_type_distribution: Dict[str, int] = field(default_factory=dict)
    applied_filters: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GraphDataDto:
    nodes: List[GraphNodeDto]
    edges: List[GraphEdgeDto]
    metadata: GraphMetadataDto
