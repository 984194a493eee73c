"""
Connection management for the user service.

This module handles MongoDB connection initialization, shutdown, and
hands out the users collection once connected.
"""

import logging
import time

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from ..config import ServiceConfig
from ..constants import APP_NAME, DEFAULT_MAX_IDLE_TIME_MS
from ..exceptions import InitializationError
from ..observability import get_logger as get_contextual_logger
from ..observability import record_operation

logger = logging.getLogger(__name__)
contextual_logger = get_contextual_logger(__name__)


class ConnectionManager:
    """
    Manages the MongoDB client lifecycle for one ServiceConfig.

    Created once at process startup; the collection it exposes is shared by
    every request.
    """

    def __init__(self, config: ServiceConfig) -> None:
        self.config = config

        self._mongo_client: AsyncIOMotorClient | None = None
        self._mongo_db: AsyncIOMotorDatabase | None = None
        self._initialized: bool = False

    async def initialize(self) -> None:
        """
        Connect to MongoDB and verify the connection with a ping.

        Raises:
            InitializationError: If the server cannot be reached or the
                client cannot be built from the configuration
        """
        start_time = time.time()

        if self._initialized:
            logger.warning("ConnectionManager already initialized. Skipping re-initialization.")
            return

        contextual_logger.info(
            "Initializing MongoDB connection",
            extra={
                "db_name": self.config.db_name,
                "collection_name": self.config.collection_name,
                "max_pool_size": self.config.max_pool_size,
                "min_pool_size": self.config.min_pool_size,
            },
        )

        try:
            self._mongo_client = AsyncIOMotorClient(
                self.config.mongo_uri,
                serverSelectionTimeoutMS=self.config.server_selection_timeout_ms,
                appname=APP_NAME,
                maxPoolSize=self.config.max_pool_size,
                minPoolSize=self.config.min_pool_size,
                maxIdleTimeMS=DEFAULT_MAX_IDLE_TIME_MS,
                retryWrites=True,
                retryReads=True,
            )

            await self._mongo_client.admin.command("ping")
            self._mongo_db = self._mongo_client[self.config.db_name]

            self._initialized = True
            duration_ms = (time.time() - start_time) * 1000
            record_operation("connection.initialize", duration_ms, success=True)
            contextual_logger.info(
                "MongoDB connection initialized successfully",
                extra={
                    "db_name": self.config.db_name,
                    "duration_ms": round(duration_ms, 2),
                },
            )
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            duration_ms = (time.time() - start_time) * 1000
            record_operation("connection.initialize", duration_ms, success=False)
            contextual_logger.critical(
                "MongoDB connection failed",
                extra={
                    "error_type": type(e).__name__,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            self._close_client()
            raise InitializationError(
                f"Failed to connect to MongoDB: {e}",
                db_name=self.config.db_name,
                context={"error_type": type(e).__name__},
            ) from e
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            duration_ms = (time.time() - start_time) * 1000
            record_operation("connection.initialize", duration_ms, success=False)
            contextual_logger.critical(
                "ConnectionManager initialization failed",
                extra={
                    "error_type": type(e).__name__,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            self._close_client()
            raise InitializationError(
                f"ConnectionManager initialization failed: {e}",
                db_name=self.config.db_name,
                context={"error_type": type(e).__name__},
            ) from e

    def _close_client(self) -> None:
        if self._mongo_client is not None:
            self._mongo_client.close()
        self._mongo_client = None
        self._mongo_db = None

    async def shutdown(self) -> None:
        """
        Close the MongoDB client. Safe to call more than once.
        """
        if not self._initialized:
            return

        start_time = time.time()
        contextual_logger.info("Shutting down MongoDB connection...")

        self._close_client()
        self._initialized = False

        duration_ms = (time.time() - start_time) * 1000
        record_operation("connection.shutdown", duration_ms, success=True)
        contextual_logger.info(
            "MongoDB connection shutdown complete",
            extra={"duration_ms": round(duration_ms, 2)},
        )

    @property
    def mongo_client(self) -> AsyncIOMotorClient:
        """
        Get the MongoDB client.

        Raises:
            RuntimeError: If connection is not initialized
        """
        if not self._initialized:
            raise RuntimeError("ConnectionManager not initialized. Call initialize() first.")
        return self._mongo_client

    @property
    def mongo_db(self) -> AsyncIOMotorDatabase:
        """
        Get the MongoDB database.

        Raises:
            RuntimeError: If connection is not initialized
        """
        if not self._initialized:
            raise RuntimeError("ConnectionManager not initialized. Call initialize() first.")
        return self._mongo_db

    @property
    def users_collection(self) -> AsyncIOMotorCollection:
        """The collection holding user documents."""
        return self.mongo_db[self.config.collection_name]

    @property
    def initialized(self) -> bool:
        return self._initialized
