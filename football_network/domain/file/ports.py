"""File metadata repository and binary storage ports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from football_network.domain.file.entities import StoredFile
from football_network.domain.file.enums import FileType


@dataclass(frozen=True)
class FileSearchCriteria:
    file_type: Optional[FileType] = None
    club_id: Optional[UUID] = None
    page: int = 1
    page_size: int = 20

    def matches(self, stored: StoredFile) -> bool:
        if self.file_type is not None and stored.file_type != self.file_type:
            return False
        if self.club_id is not None and stored.club_id != self.club_id:
            return False
        return True


class IFileRepository(ABC):
    """Metadata of stored files."""

    @abstractmethod
    async def get_by_id(self, file_id: UUID) -> Optional[StoredFile]:
        pass

    @abstractmethod
    async def get_by_path(self, path: str) -> Optional[StoredFile]:
        pass

    @abstractmethod
    async def search(self, criteria: FileSearchCriteria) -> Tuple[List[StoredFile], int]:
        """Return (page of files, newest first, total matching count)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def add(self, stored: StoredFile) -> None:
        pass

    @abstractmethod
    async def delete(self, file_id: UUID) -> bool:
        pass


class IFileStorage(ABC):
    """Binary storage for uploaded content.

    Paths are relative, forward-slash separated (``clubs/logos/x.png``).
    """

    @abstractmethod
    async def save(self, path: str, content: bytes, content_type: str) -> str:
        """Store content under path.

        Returns:
            Public path/URL of the stored file

        Raises:
            StorageError: If content cannot be stored
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """Remove stored file. Returns False when it did not exist."""
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        pass


class StorageError(Exception):
    """File storage backend failure."""
