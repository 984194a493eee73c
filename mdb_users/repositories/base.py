"""
Abstract User Repository

Defines the data access contract the HTTP handlers depend on, plus an
in-memory implementation with the same semantics for tests.
"""

from abc import ABC, abstractmethod
from typing import Any

from bson import ObjectId

from ..exceptions import InvalidIdentifierError, UserNotFoundError
from ..models import User


def parse_object_id(id: str) -> ObjectId:
    """
    Parse a hex identifier into an ObjectId.

    Raises:
        InvalidIdentifierError: If ``id`` is not a 24-character hex string
    """
    if not isinstance(id, str) or not ObjectId.is_valid(id):
        raise InvalidIdentifierError(f"Invalid user identifier: {id!r}", identifier=str(id))
    return ObjectId(id)


class UserRepository(ABC):
    """
    Data access for user records.

    Each method performs exactly one storage round trip. Implementations
    raise InvalidIdentifierError for malformed ids, UserNotFoundError when a
    lookup matches nothing, and StorageError for backend failures.
    """

    @abstractmethod
    async def create(self, user: User) -> str:
        """
        Insert a new user. Any ``id`` on the input is ignored.

        Returns:
            Identifier assigned by the storage engine
        """

    @abstractmethod
    async def get_by_id(self, id: str) -> User:
        """
        Fetch one user.

        Raises:
            InvalidIdentifierError: If ``id`` is malformed
            UserNotFoundError: If no user has this id
        """

    @abstractmethod
    async def update_by_id(self, id: str, user: User) -> int:
        """
        Overwrite name, location and title of one user.

        Returns:
            Number of matched records (0 or 1)
        """

    @abstractmethod
    async def delete_by_id(self, id: str) -> int:
        """
        Remove one user.

        Returns:
            Number of deleted records (0 or 1)
        """

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user, in storage order."""


class InMemoryUserRepository(UserRepository):
    """
    In-memory repository implementation for testing.

    Stores documents in a dictionary keyed by ObjectId hex strings, so the
    identifier rules match the MongoDB implementation.
    """

    def __init__(self) -> None:
        self._storage: dict[str, dict[str, Any]] = {}

    async def create(self, user: User) -> str:
        id = str(ObjectId())
        self._storage[id] = {"_id": id, **user.to_document()}
        return id

    async def get_by_id(self, id: str) -> User:
        key = str(parse_object_id(id))
        data = self._storage.get(key)
        if data is None:
            raise UserNotFoundError(f"User {id} not found", user_id=id)
        return User.from_document(data)

    async def update_by_id(self, id: str, user: User) -> int:
        key = str(parse_object_id(id))
        if key not in self._storage:
            return 0
        self._storage[key].update(user.to_document())
        return 1

    async def delete_by_id(self, id: str) -> int:
        key = str(parse_object_id(id))
        if self._storage.pop(key, None) is None:
            return 0
        return 1

    async def list_all(self) -> list[User]:
        return [User.from_document(data) for data in self._storage.values()]

    def clear(self) -> None:
        """Clear all users (useful for test setup)."""
        self._storage.clear()
