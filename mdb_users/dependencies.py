"""
FastAPI Dependencies for MDB Users

The connection manager and repository are built once in the application
lifespan and stored on ``app.state``; these dependencies hand them to route
handlers.

Usage:
    from fastapi import Depends
    from mdb_users.dependencies import get_user_repository

    @router.get("/user/{user_id}")
    async def get_user(user_id: str, users: UserRepository = Depends(get_user_repository)):
        return await users.get_by_id(user_id)
"""

import logging

from fastapi import HTTPException, Request

from .core import ConnectionManager
from .repositories import UserRepository

logger = logging.getLogger(__name__)


async def get_connection_manager(request: Request) -> ConnectionManager:
    """Get the ConnectionManager instance from app state."""
    manager = getattr(request.app.state, "connection_manager", None)
    if manager is None:
        raise HTTPException(503, "Database connection not configured")
    if not manager.initialized:
        raise HTTPException(503, "Database connection not initialized")
    return manager


async def get_user_repository(request: Request) -> UserRepository:
    """Get the shared UserRepository from app state."""
    repository = getattr(request.app.state, "user_repository", None)
    if repository is None:
        logger.error("User repository requested before application startup completed")
        raise HTTPException(503, "User repository not initialized")
    return repository
