"""
MongoDB User Repository

Implements UserRepository on top of a Motor collection. Driver errors are
re-raised as StorageError; nothing is retried here beyond the driver's own
retryable reads and writes.
"""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from ..exceptions import StorageError, UserNotFoundError
from ..models import User
from ..observability import get_logger as get_contextual_logger
from ..observability import timed_operation
from .base import UserRepository, parse_object_id

logger = logging.getLogger(__name__)
contextual_logger = get_contextual_logger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of the UserRepository interface.

    Example:
        repo = MongoUserRepository(connection_manager.users_collection)

        user_id = await repo.create(User(name="Ada", location="London", title="Engineer"))
        user = await repo.get_by_id(user_id)
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize the repository.

        Args:
            collection: Collection holding user documents
        """
        self._collection = collection

    def _storage_error(self, operation: str, error: Exception) -> StorageError:
        contextual_logger.error(
            "User storage operation failed",
            extra={
                "operation": operation,
                "error_type": type(error).__name__,
                "error": str(error),
            },
        )
        return StorageError(f"Failed to {operation} user: {error}", operation=operation)

    def _to_user(self, doc: dict[str, Any], operation: str) -> User:
        try:
            return User.from_document(doc)
        except ValidationError as e:
            raise self._storage_error(operation, e) from e

    @timed_operation("users.create")
    async def create(self, user: User) -> str:
        """Insert a new user and return its ObjectId as a hex string."""
        try:
            result = await self._collection.insert_one(user.to_document())
        except PyMongoError as e:
            raise self._storage_error("create", e) from e

        user_id = str(result.inserted_id)
        logger.debug(f"Created user with id={user_id}")
        return user_id

    @timed_operation("users.get")
    async def get_by_id(self, id: str) -> User:
        """Fetch a user by id."""
        object_id = parse_object_id(id)
        try:
            doc = await self._collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._storage_error("get", e) from e

        if doc is None:
            raise UserNotFoundError(f"User {id} not found", user_id=id)
        return self._to_user(doc, "get")

    @timed_operation("users.update")
    async def update_by_id(self, id: str, user: User) -> int:
        """Overwrite the text fields of a user; returns the matched count."""
        object_id = parse_object_id(id)
        try:
            result = await self._collection.update_one(
                {"_id": object_id}, {"$set": user.to_document()}
            )
        except PyMongoError as e:
            raise self._storage_error("update", e) from e

        logger.debug(f"Updated user id={id}: matched={result.matched_count}")
        return result.matched_count

    @timed_operation("users.delete")
    async def delete_by_id(self, id: str) -> int:
        """Delete a user; returns the deleted count."""
        object_id = parse_object_id(id)
        try:
            result = await self._collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._storage_error("delete", e) from e

        logger.debug(f"Deleted user id={id}: deleted={result.deleted_count}")
        return result.deleted_count

    @timed_operation("users.list")
    async def list_all(self) -> list[User]:
        """Return every user as a materialized list."""
        try:
            docs = await self._collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise self._storage_error("list", e) from e

        return [self._to_user(doc, "list") for doc in docs]
