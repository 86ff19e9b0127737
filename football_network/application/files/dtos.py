"""File read models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from football_network.domain.file.entities import StoredFile
from football_network.domain.file.enums import FileType


@dataclass(frozen=True)
class StoredFileDto:
    id: UUID
    original_name: str
    path: str
    content_type: str
    size_bytes: int
    file_type: FileType
    club_id: Optional[UUID]
    uploaded_by: Optional[UUID]
    created_at: datetime

    @staticmethod
    def from_domain(stored: StoredFile) -> "StoredFileDto":
        return StoredFileDto(
            id=stored.id,
            original_name=stored.original_name,
            path=stored.path,
            content_type=stored.content_type,
            size_bytes=stored.size_bytes,
            file_type=stored.file_type,
            club_id=stored.club_id,
            uploaded_by=stored.uploaded_by,
            created_at=stored.created_at,
        )
