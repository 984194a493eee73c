"""
Custom exceptions for MDB_USERS.

Every failure the repository or the service layer can raise derives from
UserServiceError, which itself is a RuntimeError.
"""

from typing import Any, Dict, Optional


class UserServiceError(RuntimeError):
    """
    Base exception for user service errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (user_id,
                 operation, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class InvalidInputError(UserServiceError):
    """Raised when request input is unusable (e.g. an empty path identifier)."""


class InvalidIdentifierError(InvalidInputError):
    """
    Raised when an identifier cannot be parsed into an ObjectId.

    Attributes:
        identifier: The rejected identifier string
    """

    def __init__(
        self,
        message: str,
        identifier: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if identifier is not None:
            context["identifier"] = identifier
        super().__init__(message, context=context)
        self.identifier = identifier


class UserNotFoundError(UserServiceError):
    """
    Raised when no user document matches an identifier.

    Attributes:
        user_id: Identifier that matched nothing
    """

    def __init__(
        self,
        message: str,
        user_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if user_id is not None:
            context["user_id"] = user_id
        super().__init__(message, context=context)
        self.user_id = user_id


class StorageError(UserServiceError):
    """
    Raised when the MongoDB driver reports a failure.

    Connectivity problems, write errors and server-side failures all
    collapse into this one kind.

    Attributes:
        operation: Repository operation that failed (if available)
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if operation:
            context["operation"] = operation
        super().__init__(message, context=context)
        self.operation = operation


class ConfigurationError(UserServiceError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value


class InitializationError(UserServiceError):
    """
    Raised when the MongoDB connection cannot be established at startup.

    Attributes:
        message: Error message
        mongo_uri: MongoDB connection URI (if available)
        db_name: Database name (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        mongo_uri: Optional[str] = None,
        db_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if mongo_uri:
            context["mongo_uri"] = mongo_uri
        if db_name:
            context["db_name"] = db_name
        super().__init__(message, context=context)
        self.mongo_uri = mongo_uri
        self.db_name = db_name
