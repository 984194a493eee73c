"""
FastAPI application factory.

The MongoDB connection and the user repository are created once in the
lifespan and passed to handlers through ``app.state``.

Usage:
    from mdb_users.application import create_app
    from mdb_users.config import ServiceConfig

    app = create_app(ServiceConfig(mongo_uri="mongodb://localhost:27017"))
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import ServiceConfig
from .core import ConnectionManager
from .middleware import CorrelationIdMiddleware
from .repositories import MongoUserRepository
from .routing import health_router, users_router

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """
    Build the user service application.

    Args:
        config: Service configuration (read from the environment when omitted).
            It is validated when the application starts, not here.
    """
    config = config or ServiceConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        config.validate()
        manager = ConnectionManager(config)
        await manager.initialize()

        app.state.connection_manager = manager
        app.state.user_repository = MongoUserRepository(manager.users_collection)
        logger.info(
            f"User service ready (db={config.db_name}, collection={config.collection_name})"
        )
        try:
            yield
        finally:
            app.state.user_repository = None
            await manager.shutdown()

    app = FastAPI(
        title="MDB Users",
        description="CRUD service for user records stored in MongoDB",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.connection_manager = None
    app.state.user_repository = None

    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(users_router)
    app.include_router(health_router)
    return app
