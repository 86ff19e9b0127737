"""Publishing of events recorded by aggregates."""

from typing import Optional

from football_network.domain.shared.events import EventRecorder
from football_network.domain.shared.ports.event_bus import IEventBus


async def publish_events(event_bus: Optional[IEventBus], *aggregates: EventRecorder) -> int:
    """Publish and clear the events of each aggregate, in order.

    Returns:
        Number of events published
    """
    published = 0
    for aggregate in aggregates:
        for event in aggregate.collect_events():
            if event_bus is not None:
                await event_bus.publish(event)
            published += 1
    return published
