"""Base domain event.

Events are immutable records of facts that occurred.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID, uuid4

from football_network.domain.shared.clock import utc_now


@dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC timezone-aware).

    Raises:
        ValueError: If occurred_at is not timezone-aware.
    """

    event_id: UUID
    occurred_at: datetime

    def __post_init__(self) -> None:
        """Validate event invariants."""
        if self.occurred_at.tzinfo is None:
            raise ValueError("occurred_at must be timezone-aware (use UTC)")

    @staticmethod
    def new_metadata() -> Dict[str, Any]:
        """Keyword arguments for a fresh event_id/occurred_at pair."""
        return {"event_id": uuid4(), "occurred_at": utc_now()}


class EventRecorder:
    """Mixin for aggregates that record domain events.

    Aggregates are dataclasses; they declare ``_events`` as a
    non-init field and use this mixin for the bookkeeping.
    """

    _events: List[DomainEvent]

    def _add_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Return recorded events and clear the buffer."""
        events = list(self._events)
        self._events.clear()
        return events
