"""Connection aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.connection.events import ConnectionEstablished, ConnectionUpdated
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.errors import BusinessRuleError, DomainValidationError
from football_network.domain.shared.events import DomainEvent, EventRecorder
from football_network.domain.shared.value_objects import DateRange

MAX_DESCRIPTION_LENGTH = 500
DEFAULT_RELIABILITY_SCORE = 0.5

UPDATABLE_FIELDS = frozenset(
    {"type", "strength", "active_period", "description", "notes", "reliability_score"}
)


@dataclass
class Connection(EventRecorder):
    """Relation between two clubs.

    A connection is undirected for lookups (``connects`` ignores order)
    but keeps the source/target pair it was created with.

    Invariants:
    - source and target clubs differ
    - description is at most 500 characters
    - reliability_score lies in [0, 1]
    """

    id: UUID
    source_club_id: UUID
    target_club_id: UUID
    type: ConnectionType
    strength: ConnectionStrength
    active_period: Optional[DateRange] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    reliability_score: float = DEFAULT_RELIABILITY_SCORE
    is_verified: bool = False
    created_at: datetime = field(default_factory=utc_now)
    modified_at: Optional[datetime] = None
    _events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.type = ConnectionType(self.type)
        self.strength = ConnectionStrength(self.strength)
        self._validate()

    def _validate(self) -> None:
        if self.source_club_id == self.target_club_id:
            raise DomainValidationError("Source and target clubs must be different.")
        if self.description is not None and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise DomainValidationError(
                f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters."
            )
        if not 0.0 <= self.reliability_score <= 1.0:
            raise DomainValidationError("Reliability score must be between 0 and 1.")

    @staticmethod
    def create(
        source_club_id: UUID,
        target_club_id: UUID,
        type: ConnectionType,
        strength: ConnectionStrength,
        active_period: Optional[DateRange] = None,
        description: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> "Connection":
        """Factory for a new connection; records ConnectionEstablished."""
        connection = Connection(
            id=uuid4(),
            source_club_id=source_club_id,
            target_club_id=target_club_id,
            type=type,
            strength=strength,
            active_period=active_period,
            description=description,
            notes=notes,
        )
        connection._add_event(
            ConnectionEstablished(
                **DomainEvent.new_metadata(),
                connection_id=connection.id,
                source_club_id=source_club_id,
                target_club_id=target_club_id,
                type=connection.type,
                strength=connection.strength,
            )
        )
        return connection

    def update(self, **changes: Any) -> List[str]:
        """Apply attribute changes atomically. Returns changed names."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update connection attributes: {', '.join(sorted(unknown))}")

        changed = [name for name, value in changes.items() if getattr(self, name) != value]
        if not changed:
            return []

        snapshot = {name: getattr(self, name) for name in changed}
        for name in changed:
            setattr(self, name, changes[name])
        try:
            self.__post_init__()
        except DomainValidationError:
            for name, value in snapshot.items():
                setattr(self, name, value)
            raise

        self._touch(changed)
        return changed

    def verify(self) -> None:
        if self.is_verified:
            return
        self.is_verified = True
        self._touch(["is_verified"])

    def is_active_at(self, moment: Optional[datetime] = None) -> bool:
        """True when the connection holds at moment (now by default).

        Connections without an active period are considered permanent.
        """
        if self.active_period is None:
            return True
        return self.active_period.contains(moment or utc_now())

    def involves_club(self, club_id: UUID) -> bool:
        return club_id in (self.source_club_id, self.target_club_id)

    def connects(self, club_a: UUID, club_b: UUID) -> bool:
        return {self.source_club_id, self.target_club_id} == {club_a, club_b}

    def get_other_club_id(self, club_id: UUID) -> UUID:
        """Return the opposite end of the connection.

        Raises:
            BusinessRuleError: If club_id is not part of the connection
        """
        if club_id == self.source_club_id:
            return self.target_club_id
        if club_id == self.target_club_id:
            return self.source_club_id
        raise BusinessRuleError(f"Club '{club_id}' is not part of connection '{self.id}'.")

    def overlaps_with(self, other: "Connection") -> bool:
        """Same club pair with intersecting active periods."""
        if not self.connects(other.source_club_id, other.target_club_id):
            return False
        if self.active_period is None or other.active_period is None:
            return True
        return self.active_period.overlaps(other.active_period)

    def _touch(self, changed: List[str]) -> None:
        self.modified_at = utc_now()
        self._add_event(
            ConnectionUpdated(
                **DomainEvent.new_metadata(),
                connection_id=self.id,
                changed_fields=tuple(changed),
            )
        )
