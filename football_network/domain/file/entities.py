"""Stored file entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from football_network.domain.file.enums import FileType
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.errors import DomainValidationError


@dataclass
class StoredFile:
    """Metadata of a file kept in file storage (club logos, documents)."""

    id: UUID
    original_name: str
    stored_name: str
    path: str
    content_type: str
    size_bytes: int
    file_type: FileType
    club_id: Optional[UUID] = None
    uploaded_by: Optional[UUID] = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.file_type = FileType(self.file_type)
        if self.size_bytes < 0:
            raise DomainValidationError("File size cannot be negative.")
        if not self.path:
            raise DomainValidationError("File path is required.")

    @staticmethod
    def create(
        original_name: str,
        stored_name: str,
        path: str,
        content_type: str,
        size_bytes: int,
        club_id: Optional[UUID] = None,
        uploaded_by: Optional[UUID] = None,
    ) -> "StoredFile":
        return StoredFile(
            id=uuid4(),
            original_name=original_name,
            stored_name=stored_name,
            path=path,
            content_type=content_type,
            size_bytes=size_bytes,
            file_type=FileType.from_content_type(content_type),
            club_id=club_id,
            uploaded_by=uploaded_by,
        )
