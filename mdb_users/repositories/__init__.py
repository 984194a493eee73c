"""
User repositories.

Usage:
    from mdb_users.repositories import MongoUserRepository, UserRepository

    class UserService:
        def __init__(self, users: UserRepository):
            self._users = users

        async def rename(self, id: str, name: str) -> None:
            user = await self._users.get_by_id(id)
            user.name = name
            await self._users.update_by_id(id, user)
"""

from .base import InMemoryUserRepository, UserRepository, parse_object_id
from .mongo import MongoUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "MongoUserRepository",
    "parse_object_id",
]
