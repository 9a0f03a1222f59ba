"""
Exception hierarchy for the document chatbot.

Provides layered exception structure for configuration, request, cache,
storage, and document errors. All exceptions include context for logging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChatbotError(Exception):
    """Base exception for all document chatbot errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ChatbotError):
    """Raised when required settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            missing: Names of missing environment variables
            details: Additional context
        """
        details = details or {}
        if missing:
            details["missing"] = missing
        super().__init__(message, details)


class RequestParseError(ChatbotError):
    """Raised when an incoming HTTP request body cannot be parsed."""

    pass


class StorageError(ChatbotError):
    """Raised when an object storage operation fails (permissions, connectivity, throttling)."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (exists, read, write, load)
            key: Object key involved
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key
        super().__init__(message, details)


class ChunkCacheError(ChatbotError):
    """Base exception for chunk cache errors."""

    def __init__(
        self,
        message: str,
        cache_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if cache_key:
            details["cache_key"] = cache_key
        super().__init__(message, details)


class NotFoundError(ChunkCacheError):
    """Raised when no chunk set is cached under a key."""

    def __init__(self, cache_key: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Chunk set not found: {cache_key}", cache_key, details)


class SerializationError(ChunkCacheError):
    """Raised when a cached payload cannot be decoded into a chunk set."""

    pass


class DocumentProcessingError(ChatbotError):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_key: Storage key of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_key:
            details["document_key"] = document_key
        super().__init__(message, details)


class DocumentNotFoundError(DocumentProcessingError):
    """Raised when the source document does not exist in storage."""

    def __init__(self, document_key: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Document not found: {document_key}", document_key, details)


class DocumentDecodeError(DocumentProcessingError):
    """Raised when document bytes are not valid text."""

    pass
