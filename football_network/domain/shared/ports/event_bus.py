"""Event bus port (interface).

Domain defines the port, infrastructure provides the implementation.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from football_network.domain.shared.events import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """Publish/subscribe contract for domain events.

    Example usage (application layer):
        >>> async def on_club_created(event: ClubCreated) -> None:
        ...     print(f"Club {event.club_id} created")
        ...
        >>> event_bus.subscribe(ClubCreated, on_club_created)
        >>> await event_bus.publish(ClubCreated(...))
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """Register handler for event_type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver event to every handler subscribed to its type."""
        ...
