"""Connection domain events."""

from dataclasses import dataclass
from typing import Tuple
from uuid import UUID

from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.shared.events import DomainEvent


@dataclass(frozen=True)
class ConnectionEstablished(DomainEvent):
    connection_id: UUID
    source_club_id: UUID
    target_club_id: UUID
    type: ConnectionType
    strength: ConnectionStrength


@dataclass(frozen=True)
class ConnectionUpdated(DomainEvent):
    connection_id: UUID
    changed_fields: Tuple[str, ...]


@dataclass(frozen=True)
class ConnectionRemoved(DomainEvent):
    connection_id: UUID
    source_club_id: UUID
    target_club_id: UUID
