"""In-memory file metadata repository."""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from football_network.domain.file.entities import StoredFile
from football_network.domain.file.ports import FileSearchCriteria, IFileRepository
from football_network.infrastructure.persistence.in_memory.base import paginate, snapshot, sort_key


class InMemoryFileRepository(IFileRepository):
    def __init__(self) -> None:
        self._files: Dict[UUID, StoredFile] = {}

    async def get_by_id(self, file_id: UUID) -> Optional[StoredFile]:
        stored = self._files.get(file_id)
        return snapshot(stored) if stored else None

    async def get_by_path(self, path: str) -> Optional[StoredFile]:
        for stored in self._files.values():
            if stored.path == path:
                return snapshot(stored)
        return None

    async def search(self, criteria: FileSearchCriteria) -> Tuple[List[StoredFile], int]:
        matching = sorted(
            (f for f in self._files.values() if criteria.matches(f)),
            key=sort_key("created_at"),
            reverse=True,
        )
        return paginate(matching, criteria.page, criteria.page_size), len(matching)

    async def count(self) -> int:
        return len(self._files)

    async def add(self, stored: StoredFile) -> None:
        self._files[stored.id] = snapshot(stored)

    async def delete(self, file_id: UUID) -> bool:
        return self._files.pop(file_id, None) is not None
