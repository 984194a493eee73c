"""
Unit tests for ConnectionManager.

Tests connection initialization, error handling and shutdown.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from mdb_users.core.connection import ConnectionManager
from mdb_users.exceptions import InitializationError


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client


class TestConnectionManagerInitialize:
    @pytest.mark.asyncio
    async def test_initialize_success(self, service_config, mock_client):
        with patch(
            "mdb_users.core.connection.AsyncIOMotorClient", return_value=mock_client
        ) as client_cls:
            manager = ConnectionManager(service_config)
            await manager.initialize()

        assert manager.initialized
        mock_client.admin.command.assert_awaited_once_with("ping")
        kwargs = client_cls.call_args.kwargs
        assert client_cls.call_args.args == ("mongodb://localhost:27017",)
        assert kwargs["maxPoolSize"] == 10
        assert kwargs["minPoolSize"] == 1
        assert kwargs["serverSelectionTimeoutMS"] == 5000

    @pytest.mark.asyncio
    async def test_users_collection(self, service_config, mock_client):
        with patch("mdb_users.core.connection.AsyncIOMotorClient", return_value=mock_client):
            manager = ConnectionManager(service_config)
            await manager.initialize()

        database = mock_client.__getitem__.return_value
        assert manager.mongo_db is database
        assert manager.users_collection is database.__getitem__.return_value
        mock_client.__getitem__.assert_called_with("test_db")
        database.__getitem__.assert_called_with("User")

    @pytest.mark.asyncio
    async def test_initialize_twice_is_noop(self, service_config, mock_client):
        with patch(
            "mdb_users.core.connection.AsyncIOMotorClient", return_value=mock_client
        ) as client_cls:
            manager = ConnectionManager(service_config)
            await manager.initialize()
            await manager.initialize()

        assert client_cls.call_count == 1

    @pytest.mark.asyncio
    async def test_initialize_unreachable_server(self, service_config, mock_client):
        mock_client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )

        with patch("mdb_users.core.connection.AsyncIOMotorClient", return_value=mock_client):
            manager = ConnectionManager(service_config)

            with pytest.raises(InitializationError) as exc_info:
                await manager.initialize()

        assert "Failed to connect to MongoDB" in str(exc_info.value)
        assert exc_info.value.context["error_type"] == "ServerSelectionTimeoutError"
        assert not manager.initialized
        mock_client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_initialize_value_error(self, service_config):
        with patch(
            "mdb_users.core.connection.AsyncIOMotorClient",
            side_effect=ValueError("bad uri"),
        ):
            manager = ConnectionManager(service_config)

            with pytest.raises(InitializationError) as exc_info:
                await manager.initialize()

        assert "ConnectionManager initialization failed" in str(exc_info.value)
        assert exc_info.value.context["error_type"] == "ValueError"


class TestConnectionManagerShutdown:
    @pytest.mark.asyncio
    async def test_shutdown_closes_client(self, service_config, mock_client):
        with patch("mdb_users.core.connection.AsyncIOMotorClient", return_value=mock_client):
            manager = ConnectionManager(service_config)
            await manager.initialize()

        await manager.shutdown()
        await manager.shutdown()

        mock_client.close.assert_called_once()
        assert not manager.initialized

    def test_properties_require_initialization(self, service_config):
        manager = ConnectionManager(service_config)

        with pytest.raises(RuntimeError):
            _ = manager.mongo_client
        with pytest.raises(RuntimeError):
            _ = manager.users_collection
