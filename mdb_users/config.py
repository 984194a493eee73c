"""
Configuration management for MDB_USERS.

Settings come from explicit arguments first, then environment variables.
A ``.env`` file in the working directory is loaded (without overriding
variables that are already set) whenever a config is built.
"""

import os

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_DB_NAME,
    DEFAULT_MAX_POOL_SIZE,
    DEFAULT_MIN_POOL_SIZE,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    MIN_SERVER_SELECTION_TIMEOUT_MS,
    VALID_LOG_LEVELS,
)
from .exceptions import ConfigurationError


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", config_key=name, config_value=raw
        ) from e


class ServiceConfig:
    """
    User service configuration.

    Example:
        # Using environment variables (MONGOURI, DB_NAME, ...)
        config = ServiceConfig()
        config.validate()

        # Or using direct parameters
        config = ServiceConfig(
            mongo_uri="mongodb://localhost:27017",
            db_name="my_db",
        )
    """

    def __init__(
        self,
        mongo_uri: str | None = None,
        db_name: str | None = None,
        collection_name: str | None = None,
        max_pool_size: int | None = None,
        min_pool_size: int | None = None,
        server_selection_timeout_ms: int | None = None,
        log_level: str | None = None,
        load_env_file: bool = True,
    ):
        """
        Initialize configuration.

        Args:
            mongo_uri: MongoDB connection URI (defaults to MONGOURI, then MONGO_URI)
            db_name: Database name (defaults to DB_NAME or "rustDB")
            collection_name: Users collection (defaults to USERS_COLLECTION or "User")
            max_pool_size: Maximum connection pool size (defaults to 50 or MONGO_MAX_POOL_SIZE)
            min_pool_size: Minimum connection pool size (defaults to 10 or MONGO_MIN_POOL_SIZE)
            server_selection_timeout_ms: Server selection timeout in ms (defaults to 5000)
            log_level: Logging level name (defaults to LOG_LEVEL or INFO)
            load_env_file: Whether to read a .env file before consulting the environment
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        self.mongo_uri = mongo_uri or os.getenv("MONGOURI") or os.getenv("MONGO_URI", "")
        self.db_name = db_name or os.getenv("DB_NAME") or DEFAULT_DB_NAME
        self.collection_name = (
            collection_name or os.getenv("USERS_COLLECTION") or DEFAULT_COLLECTION_NAME
        )
        self.max_pool_size = (
            max_pool_size
            if max_pool_size is not None
            else _env_int("MONGO_MAX_POOL_SIZE", DEFAULT_MAX_POOL_SIZE)
        )
        self.min_pool_size = (
            min_pool_size
            if min_pool_size is not None
            else _env_int("MONGO_MIN_POOL_SIZE", DEFAULT_MIN_POOL_SIZE)
        )
        self.server_selection_timeout_ms = (
            server_selection_timeout_ms
            if server_selection_timeout_ms is not None
            else _env_int("MONGO_SERVER_SELECTION_TIMEOUT_MS", DEFAULT_SERVER_SELECTION_TIMEOUT_MS)
        )
        self.log_level = (log_level or os.getenv("LOG_LEVEL") or "INFO").upper()

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        if not self.mongo_uri:
            raise ConfigurationError(
                "mongo_uri is required (set MONGOURI environment variable or pass directly)",
                config_key="mongo_uri",
            )

        if not self.db_name:
            raise ConfigurationError("db_name is required", config_key="db_name")

        if not self.collection_name:
            raise ConfigurationError("collection_name is required", config_key="collection_name")

        if self.max_pool_size < 1:
            raise ConfigurationError(
                f"max_pool_size must be >= 1, got {self.max_pool_size}",
                config_key="max_pool_size",
                config_value=self.max_pool_size,
            )

        if self.min_pool_size < 1:
            raise ConfigurationError(
                f"min_pool_size must be >= 1, got {self.min_pool_size}",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.min_pool_size > self.max_pool_size:
            raise ConfigurationError(
                f"min_pool_size ({self.min_pool_size}) cannot be greater than "
                f"max_pool_size ({self.max_pool_size})",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.server_selection_timeout_ms < MIN_SERVER_SELECTION_TIMEOUT_MS:
            raise ConfigurationError(
                f"server_selection_timeout_ms must be >= {MIN_SERVER_SELECTION_TIMEOUT_MS}, "
                f"got {self.server_selection_timeout_ms}",
                config_key="server_selection_timeout_ms",
                config_value=self.server_selection_timeout_ms,
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}, "
                f"got {self.log_level!r}",
                config_key="log_level",
                config_value=self.log_level,
            )
