"""Shared exceptions for the todo API."""

from __future__ import annotations

from typing import Optional


class TodoApiError(Exception):
    """Base exception for the todo API."""

    default_message = "Todo API error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# PUBLIC_INTERFACE
class InvalidInputError(TodoApiError):
    """Raised when a request carries malformed or invalid input (HTTP 400)."""

    default_message = "Invalid input"


# PUBLIC_INTERFACE
class NotFoundError(TodoApiError):
    """Raised when no todo matches the requested id (HTTP 404)."""

    default_message = "Todo not found"


# PUBLIC_INTERFACE
class PersistenceError(TodoApiError):
    """Raised when the todo list could not be written to the store (HTTP 500)."""

    default_message = "Failed to save todos"


# PUBLIC_INTERFACE
class StartupError(TodoApiError):
    """Raised when the store cannot be loaded at startup. Fatal."""

    default_message = "Failed to load todos"


class StorageError(TodoApiError):
    """Base exception for the file storage layer."""

    default_message = "Storage error"


class DeserializationError(StorageError):
    """The store file exists but does not hold valid JSON for the target type."""

    default_message = "Failed to decode stored data"


class SerializationError(StorageError):
    """The value could not be encoded as JSON."""

    default_message = "Failed to encode data"


class StorageIOError(StorageError):
    """Reading or writing the store file failed."""

    default_message = "Storage I/O failure"
