"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain <-> MongoDB)
- Error logging
- Paging helpers
- Index creation, unique index violations raised as ConflictError

All concrete MongoDB repositories inherit from MongoBaseRepository.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import IndexModel
from pymongo.errors import DuplicateKeyError

from football_network.domain.shared.errors import ConflictError
from football_network.infrastructure.config import (
    ConfigurationError,
    get_mongodb_database,
    get_mongodb_uri,
)

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


def create_mongo_client() -> AsyncIOMotorClient:
    """Create a motor client from MONGODB_URI.

    Raises:
        ConfigurationError: If MONGODB_URI is not set
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ConfigurationError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    return AsyncIOMotorClient(uri, uuidRepresentation="standard")


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Storage conventions:
    - ``_id`` holds the entity UUID as a string
    - datetimes are stored as ISO 8601 strings in UTC
    - enums are stored by value

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Subclasses may override:
    - index_models(): Indexes created by ensure_indexes()
    - duplicate_message: Conflict message when a unique index rejects a write
    """

    duplicate_message = "A record with the same unique values already exists."

    def __init__(self, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        self._client = client if client is not None else create_mongo_client()
        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "Initialized MongoDB repository",
            extra={"repository": self.__class__.__name__, "collection": self.collection_name},
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self._collection

    def index_models(self) -> List[IndexModel]:
        return []

    async def ensure_indexes(self) -> None:
        """Create the collection indexes; existing ones are left untouched."""
        models = self.index_models()
        if not models:
            return
        names = await self._collection.create_indexes(models)
        logger.info(
            "Ensured MongoDB indexes",
            extra={"collection": self.collection_name, "indexes": names},
        )

    def _conflict(self, error: DuplicateKeyError) -> ConflictError:
        logger.warning(
            "Unique index violation",
            extra={"collection": self.collection_name, "error": str(error)},
        )
        return ConflictError(self.duplicate_message)

    @staticmethod
    def uuid_to_str(uuid_value: Optional[UUID]) -> Optional[str]:
        return str(uuid_value) if uuid_value is not None else None

    @staticmethod
    def str_to_uuid(str_value: Optional[str]) -> Optional[UUID]:
        return UUID(str_value) if str_value else None

    @staticmethod
    def datetime_to_iso(dt: Optional[datetime]) -> Optional[str]:
        """
        Convert datetime to ISO string for MongoDB storage.

        Raises:
            ValueError: If dt is naive
        """
        if dt is None:
            return None
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.astimezone(timezone.utc).isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: Optional[str]) -> Optional[datetime]:
        """Convert ISO string to timezone-aware datetime (naive means UTC)."""
        if not iso_str:
            return None
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def _map(self, doc: Dict[str, Any]) -> TEntity:
        try:
            return self.from_document(doc)
        except KeyError as e:
            raise ValueError(f"Missing required field in MongoDB document: {e}")

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[TEntity]:
        try:
            doc = await self._collection.find_one(filter_dict)
        except Exception:
            logger.error(
                "Error in find_one",
                extra={"collection": self.collection_name, "filter": str(filter_dict)},
                exc_info=True,
            )
            raise
        return self._map(doc) if doc else None

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[TEntity]:
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=limit)
        except Exception:
            logger.error(
                "Error in find_many",
                extra={"collection": self.collection_name, "filter": str(filter_dict)},
                exc_info=True,
            )
            raise
        return [self._map(doc) for doc in documents]

    async def _find_page(
        self,
        filter_dict: Dict[str, Any],
        sort: List[Tuple[str, int]],
        page: int,
        page_size: int,
    ) -> Tuple[List[TEntity], int]:
        total = await self._count(filter_dict)
        items = await self._find_many(
            filter_dict, sort=sort, limit=page_size, skip=(page - 1) * page_size
        )
        return items, total

    async def _insert(self, entity: TEntity) -> None:
        try:
            await self._collection.insert_one(self.to_document(entity))
        except DuplicateKeyError as e:
            raise self._conflict(e) from e
        except Exception:
            logger.error("Error in insert_one", extra={"collection": self.collection_name}, exc_info=True)
            raise

    async def _replace(self, entity_id: UUID, entity: TEntity) -> int:
        """Replace the stored document. Returns the matched count."""
        try:
            result = await self._collection.replace_one(
                {"_id": str(entity_id)}, self.to_document(entity)
            )
        except DuplicateKeyError as e:
            raise self._conflict(e) from e
        except Exception:
            logger.error("Error in replace_one", extra={"collection": self.collection_name}, exc_info=True)
            raise
        return result.matched_count

    async def _delete_many(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_many(filter_dict)
        except Exception:
            logger.error(
                "Error in delete_many",
                extra={"collection": self.collection_name, "filter": str(filter_dict)},
                exc_info=True,
            )
            raise
        return result.deleted_count

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        try:
            return await self._collection.count_documents(filter_dict)
        except Exception:
            logger.error(
                "Error in count",
                extra={"collection": self.collection_name, "filter": str(filter_dict)},
                exc_info=True,
            )
            raise

    async def close(self) -> None:
        self._client.close()
        logger.info("Closed MongoDB connection", extra={"repository": self.__class__.__name__})
