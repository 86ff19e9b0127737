"""MongoDB implementation of the file metadata repository."""

from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from pymongo import DESCENDING, IndexModel

from football_network.domain.file.entities import StoredFile
from football_network.domain.file.enums import FileType
from football_network.domain.file.ports import FileSearchCriteria, IFileRepository
from football_network.infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoFileRepository(MongoBaseRepository[StoredFile], IFileRepository):
    duplicate_message = "A file is already stored under this path."

    @property
    def collection_name(self) -> str:
        return "files"

    def index_models(self) -> List[IndexModel]:
        return [IndexModel("path", unique=True), IndexModel("club_id")]

    def to_document(self, entity: StoredFile) -> Dict[str, Any]:
        return {
            "_id": self.uuid_to_str(entity.id),
            "original_name": entity.original_name,
            "stored_name": entity.stored_name,
            "path": entity.path,
            "content_type": entity.content_type,
            "size_bytes": entity.size_bytes,
            "file_type": int(entity.file_type),
            "club_id": self.uuid_to_str(entity.club_id),
            "uploaded_by": self.uuid_to_str(entity.uploaded_by),
            "created_at": self.datetime_to_iso(entity.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> StoredFile:
        return StoredFile(
            id=UUID(doc["_id"]),
            original_name=doc["original_name"],
            stored_name=doc["stored_name"],
            path=doc["path"],
            content_type=doc["content_type"],
            size_bytes=doc["size_bytes"],
            file_type=FileType(doc.get("file_type", FileType.OTHER)),
            club_id=self.str_to_uuid(doc.get("club_id")),
            uploaded_by=self.str_to_uuid(doc.get("uploaded_by")),
            created_at=self.iso_to_datetime(doc["created_at"]),
        )

    async def get_by_id(self, file_id: UUID) -> Optional[StoredFile]:
        return await self._find_one({"_id": str(file_id)})

    async def get_by_path(self, path: str) -> Optional[StoredFile]:
        return await self._find_one({"path": path})

    async def search(self, criteria: FileSearchCriteria) -> Tuple[List[StoredFile], int]:
        query: Dict[str, Any] = {}
        if criteria.file_type is not None:
            query["file_type"] = int(criteria.file_type)
        if criteria.club_id is not None:
            query["club_id"] = str(criteria.club_id)
        return await self._find_page(
            query, [("created_at", DESCENDING)], criteria.page, criteria.page_size
        )

    async def count(self) -> int:
        return await self._count({})

    async def add(self, stored: StoredFile) -> None:
        await self._insert(stored)

    async def delete(self, file_id: UUID) -> bool:
        return await self._delete_many({"_id": str(file_id)}) > 0
