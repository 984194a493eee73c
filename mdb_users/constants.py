"""
Constants for MDB_USERS.

This module contains all shared constants used across the codebase to avoid
magic numbers and improve maintainability.
"""

from typing import Final

# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

DEFAULT_DB_NAME: Final[str] = "rustDB"
"""Default database holding the users collection."""

DEFAULT_COLLECTION_NAME: Final[str] = "User"
"""Default collection holding user documents."""

# Connection pool defaults
DEFAULT_MAX_POOL_SIZE: Final[int] = 50
"""Default maximum MongoDB connection pool size."""

DEFAULT_MIN_POOL_SIZE: Final[int] = 10
"""Default minimum MongoDB connection pool size."""

DEFAULT_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 5000
"""Default server selection timeout in milliseconds."""

MIN_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 1000
"""Lowest accepted server selection timeout in milliseconds."""

DEFAULT_MAX_IDLE_TIME_MS: Final[int] = 45000
"""Default maximum idle time before closing connections (milliseconds)."""

APP_NAME: Final[str] = "MDB_USERS"
"""Application name reported to the MongoDB server."""

# ============================================================================
# HTTP CONSTANTS
# ============================================================================

USER_DELETED_MESSAGE: Final[str] = "User successfully deleted!"
"""Confirmation body returned by a successful delete."""

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
"""Header carrying the request correlation ID."""

DEFAULT_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 8000

# ============================================================================
# METRICS CONSTANTS
# ============================================================================

MAX_TRACKED_METRICS: Final[int] = 10000
"""Maximum number of distinct metric keys kept before LRU eviction."""

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE"}
)
"""Level names accepted by both the root logger setup and uvicorn."""
