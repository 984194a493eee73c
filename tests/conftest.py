"""
Pytest configuration and shared fixtures for MDB_USERS tests.

This module provides:
- Mock Motor collection fixtures
- In-memory repository and FastAPI test client fixtures
- Test data factories
"""

from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from motor.motor_asyncio import AsyncIOMotorCollection

from mdb_users.application import create_app
from mdb_users.config import ServiceConfig
from mdb_users.dependencies import get_user_repository
from mdb_users.observability import get_metrics_collector
from mdb_users.repositories import InMemoryUserRepository

# ============================================================================
# MOCK MONGODB FIXTURES
# ============================================================================


@pytest.fixture
def inserted_id() -> ObjectId:
    return ObjectId()


@pytest.fixture
def mock_users_collection(inserted_id: ObjectId) -> MagicMock:
    """Create a mock users collection with successful default results."""
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.name = "User"
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=inserted_id))
    collection.find_one = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(
        return_value=MagicMock(matched_count=1, modified_count=1)
    )
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))

    # find() is synchronous in Motor and returns a cursor
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


@pytest.fixture
def service_config() -> ServiceConfig:
    """Provide a configuration that does not read the environment file."""
    return ServiceConfig(
        mongo_uri="mongodb://localhost:27017",
        db_name="test_db",
        collection_name="User",
        max_pool_size=10,
        min_pool_size=1,
        load_env_file=False,
    )


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(service_config: ServiceConfig, memory_repository: InMemoryUserRepository):
    """FastAPI app whose repository dependency is the in-memory repository."""
    application = create_app(service_config)
    application.dependency_overrides[get_user_repository] = lambda: memory_repository
    return application


@pytest.fixture
def client(app) -> TestClient:
    """Test client that does not run the lifespan (no MongoDB connection)."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Keep the process-wide metrics collector isolated between tests."""
    get_metrics_collector().reset()
    yield
    get_metrics_collector().reset()


# ============================================================================
# TEST DATA FACTORIES
# ============================================================================


@pytest.fixture
def sample_user_payload() -> Dict[str, Any]:
    return {"name": "A", "location": "B", "title": "C"}


@pytest.fixture
def sample_user_document(inserted_id: ObjectId) -> Dict[str, Any]:
    return {
        "_id": inserted_id,
        "name": "Ada Lovelace",
        "location": "London",
        "title": "Analyst",
    }
