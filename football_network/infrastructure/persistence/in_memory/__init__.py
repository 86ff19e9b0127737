"""In-memory repositories (tests, local development)."""

from football_network.infrastructure.persistence.in_memory.club_repository import (
    InMemoryClubRepository,
)
from football_network.infrastructure.persistence.in_memory.connection_repository import (
    InMemoryConnectionRepository,
)
from football_network.infrastructure.persistence.in_memory.file_repository import (
    InMemoryFileRepository,
)
from football_network.infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryClubRepository",
    "InMemoryConnectionRepository",
    "InMemoryFileRepository",
    "InMemoryUserRepository",
]
