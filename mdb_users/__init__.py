"""
MDB_USERS - user records over MongoDB

A small FastAPI service exposing create, read, update, delete and list
operations for a single "user" collection.
"""

__version__ = "0.1.0"

from .config import ServiceConfig
from .exceptions import (
    ConfigurationError,
    InitializationError,
    InvalidIdentifierError,
    InvalidInputError,
    StorageError,
    UserNotFoundError,
    UserServiceError,
)
from .models import InsertAcknowledgment, User
from .repositories import InMemoryUserRepository, MongoUserRepository, UserRepository

__all__ = [
    "__version__",
    "ServiceConfig",
    "User",
    "InsertAcknowledgment",
    "UserRepository",
    "MongoUserRepository",
    "InMemoryUserRepository",
    "UserServiceError",
    "InvalidInputError",
    "InvalidIdentifierError",
    "UserNotFoundError",
    "StorageError",
    "ConfigurationError",
    "InitializationError",
]
