"""Request markers for the command/query split.

Commands describe an intended state change, queries an intended read.
Both are immutable value objects; handlers are looked up by their
concrete type, so a request never carries a reference to its handler.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Request:
    """Base class for everything the dispatcher can route."""


@dataclass(frozen=True)
class Command(Request):
    """Marker for requests that mutate state."""


@dataclass(frozen=True)
class Query(Request):
    """Marker for read-only requests."""
