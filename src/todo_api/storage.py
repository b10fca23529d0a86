from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DeserializationError, SerializationError, StorageIOError

T = TypeVar("T")

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Storage(ABC, Generic[T]):
    """Abstract whole-document storage for a single serializable value."""

    @abstractmethod
    def load(self, default: T) -> T:
        """
        Return the stored value, or `default` unchanged if nothing has been
        stored yet.
        """

    @abstractmethod
    def save(self, value: T) -> None:
        """Replace the stored value with `value`."""


class JsonFileStorage(Storage[T]):
    """
    Stores one value as an indented JSON document in a single file.

    Writes truncate and rewrite the file in place; a crash mid-write can
    leave it truncated.
    """

    def __init__(self, path: str, value_type: Any) -> None:
        self._path = path
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    @property
    def path(self) -> str:
        return self._path

    def load(self, default: T) -> T:
        try:
            with open(self._path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.info("Store file %s not found, starting empty", self._path)
            return default
        except OSError as e:
            raise StorageIOError(f"Failed to read {self._path}: {e}") from e

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            raise DeserializationError(f"Invalid data in {self._path}: {e}") from e

    def save(self, value: T) -> None:
        try:
            data = self._adapter.dump_json(value, indent=2)
        except PydanticSerializationError as e:
            raise SerializationError(f"Failed to encode data for {self._path}: {e}") from e

        try:
            os.makedirs(os.path.dirname(self._path) or ".", exist_ok=True)
            with open(self._path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageIOError(f"Failed to write {self._path}: {e}") from e
