"""
Unit tests for custom exceptions.

Tests exception hierarchy and error messages.
"""

from mdb_users.exceptions import (
    ConfigurationError,
    InitializationError,
    InvalidIdentifierError,
    InvalidInputError,
    StorageError,
    UserNotFoundError,
    UserServiceError,
)


class TestExceptionHierarchy:
    """Test exception inheritance hierarchy."""

    def test_user_service_error_is_runtime_error(self):
        assert isinstance(UserServiceError("boom"), RuntimeError)

    def test_invalid_identifier_is_invalid_input(self):
        error = InvalidIdentifierError("bad id", identifier="xyz")
        assert isinstance(error, InvalidInputError)
        assert isinstance(error, UserServiceError)

    def test_not_found_and_storage_are_distinct(self):
        assert not isinstance(UserNotFoundError("missing"), StorageError)
        assert not isinstance(StorageError("down"), UserNotFoundError)

    def test_configuration_and_initialization_errors(self):
        assert isinstance(ConfigurationError("bad"), UserServiceError)
        assert isinstance(InitializationError("bad"), UserServiceError)


class TestExceptionMessages:
    """Test exception message formatting."""

    def test_message_without_context(self):
        error = UserServiceError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.context == {}

    def test_message_with_context(self):
        error = UserServiceError("Something went wrong", context={"operation": "get"})
        assert "context:" in str(error)
        assert "operation=get" in str(error)

    def test_invalid_identifier_records_identifier(self):
        error = InvalidIdentifierError("bad id", identifier="not-an-id")
        assert error.identifier == "not-an-id"
        assert error.context["identifier"] == "not-an-id"

    def test_not_found_records_user_id(self):
        error = UserNotFoundError("missing", user_id="abc")
        assert error.user_id == "abc"
        assert "user_id=abc" in str(error)

    def test_storage_error_records_operation(self):
        error = StorageError("insert failed", operation="create")
        assert error.operation == "create"
        assert error.context == {"operation": "create"}

    def test_configuration_error_records_key_and_value(self):
        error = ConfigurationError("too small", config_key="max_pool_size", config_value=0)
        assert error.config_key == "max_pool_size"
        assert error.config_value == 0
        assert error.context["config_value"] == 0

    def test_initialization_error_records_connection_details(self):
        error = InitializationError(
            "Connection failed", mongo_uri="mongodb://localhost:27017", db_name="test_db"
        )
        assert error.mongo_uri == "mongodb://localhost:27017"
        assert error.db_name == "test_db"
        assert "db_name" in error.context
