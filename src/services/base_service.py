"""
Base service layer for unified document store operations
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from database.connection import get_database

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


def to_object_id(record_id: Any) -> Optional[ObjectId]:
    """Convert a record id to an ObjectId, or None when it is not a valid id"""
    if isinstance(record_id, ObjectId):
        return record_id
    try:
        return ObjectId(str(record_id))
    except (InvalidId, TypeError):
        return None


class BaseService:
    """Base service wrapping a single document collection"""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        logger.info(f"BaseService initialized for collection: {collection_name}")

    @property
    def collection(self):
        """Collection handle on the currently initialized database"""
        return get_database()[self.collection_name]

    def _not_found(self, record_id: Any) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"Record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )

    def _database_error(self, operation: str, error: Exception) -> ServiceResult:
        logger.error(f"{operation} operation failed for {self.collection_name}: {error}", exc_info=True)
        return ServiceResult(
            success=False,
            error=f"Database operation failed: {error}",
            error_type="DATABASE_ERROR"
        )

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a single document

        Args:
            data: Field values of the new document

        Returns:
            ServiceResult with the created document as stored (including its _id)
        """
        try:
            result = await self.collection.insert_one(dict(data))
            # The store truncates timestamps; hand back what it kept
            document = await self.collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            return self._database_error("Create", e)

        if document is None:
            return ServiceResult(
                success=False,
                error=f"Created record {result.inserted_id} could not be read back",
                error_type="EXECUTION_ERROR"
            )
        return ServiceResult(success=True, data=[document], count=1)

    async def create_many(self, records: List[Dict[str, Any]]) -> ServiceResult:
        """Bulk insert documents in a single round trip"""
        documents = [dict(record) for record in records]
        if not documents:
            return ServiceResult(success=True, data=[], count=0)

        try:
            result = await self.collection.insert_many(documents)
        except PyMongoError as e:
            return self._database_error("Bulk create", e)

        for document, inserted_id in zip(documents, result.inserted_ids):
            document["_id"] = inserted_id
        return ServiceResult(success=True, data=documents, count=len(documents))

    async def read(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """
        Read documents matching a filter

        Args:
            filters: MongoDB filter document (default: everything)

        Returns:
            ServiceResult with matched documents
        """
        try:
            cursor = self.collection.find(filters or {})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            return self._database_error("Read", e)

        return ServiceResult(success=True, data=documents, count=len(documents))

    async def get_by_id(self, record_id: str) -> ServiceResult:
        """
        Get a single document by id

        Args:
            record_id: String form of the document ObjectId

        Returns:
            ServiceResult with the document, or RESOURCE_NOT_FOUND
        """
        object_id = to_object_id(record_id)
        if object_id is None:
            return self._not_found(record_id)

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            return self._database_error("Read", e)

        if document is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, data=[document], count=1)

    async def update(self, record_id: str, data: Dict[str, Any]) -> ServiceResult:
        """
        Set fields on an existing document

        Args:
            record_id: String form of the document ObjectId
            data: Field values to set; other fields are left untouched

        Returns:
            ServiceResult with the updated document
        """
        object_id = to_object_id(record_id)
        if object_id is None:
            return self._not_found(record_id)

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": data},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            return self._database_error("Update", e)

        if document is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, data=[document], count=1)

    async def delete(self, record_id: str) -> ServiceResult:
        """
        Delete a document by id

        Returns:
            ServiceResult with the deleted document, or RESOURCE_NOT_FOUND
        """
        object_id = to_object_id(record_id)
        if object_id is None:
            return self._not_found(record_id)

        try:
            document = await self.collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            return self._database_error("Delete", e)

        if document is None:
            return self._not_found(record_id)
        return ServiceResult(success=True, data=[document], count=1)

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> ServiceResult:
        """Count documents matching a filter"""
        try:
            total = await self.collection.count_documents(filters or {})
        except PyMongoError as e:
            return self._database_error("Count", e)

        return ServiceResult(success=True, data=[], count=total)
