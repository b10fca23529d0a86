from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone
from threading import RLock
from typing import List

from .errors import InvalidInputError, NotFoundError, PersistenceError, StartupError, StorageError
from .models import Todo, Todos
from .schemas import TodoCreate, TodoUpdate
from .storage import JsonFileStorage, Storage

logger = logging.getLogger(__name__)

_HEX = "[0-9a-f]"
_CANONICAL_UUID = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
# Hyphenated, braced, urn:uuid: prefixed or bare 32 hex digits
_UUID_PATTERN = re.compile(
    rf"{_CANONICAL_UUID}|\{{{_CANONICAL_UUID}\}}|urn:uuid:{_CANONICAL_UUID}|{_HEX}{{32}}",
    re.IGNORECASE,
)


def parse_todo_id(raw: str) -> str:
    """
    Validate that `raw` is a well-formed UUID and return its canonical
    lowercase hyphenated form. Raises InvalidInputError otherwise.
    """
    if not isinstance(raw, str) or _UUID_PATTERN.fullmatch(raw) is None:
        raise InvalidInputError("Invalid UUID format")
    return str(uuid.UUID(raw))


# PUBLIC_INTERFACE
class TodoRepository:
    """
    Holds the shared todo list for the process lifetime and persists the full
    list through a Storage after every mutation.

    All reads and read-modify-persist sequences run under a single lock.
    Mutations are applied to a copy of the list which only replaces the live
    list once it has been saved, so a failed save leaves memory matching the
    last persisted state.
    """

    def __init__(self, storage: Storage[Todos]) -> None:
        self._lock = RLock()
        self._storage = storage
        self._items: List[Todo] = []

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def load(self) -> None:
        """
        Replace the in-memory list with the stored one. A missing store means an
        empty list. Raises StartupError if the store cannot be read or parsed.
        """
        with self._lock:
            try:
                self._items = list(self._storage.load([]))
            except StorageError as e:
                raise StartupError(f"Failed to load todos: {e.message}") from e
            logger.info("Loaded %d todos", len(self._items))

    def _commit(self, items: List[Todo]) -> None:
        try:
            self._storage.save(items)
        except StorageError as e:
            logger.exception("Failed to save todos")
            raise PersistenceError() from e
        self._items = items

    def _index_of(self, todo_id: str) -> int:
        for i, todo in enumerate(self._items):
            if todo.id == todo_id:
                return i
        raise NotFoundError()

    def list(self) -> List[Todo]:
        """Return all todos in insertion order."""
        with self._lock:
            return [t.model_copy() for t in self._items]

    def get(self, todo_id: str) -> Todo:
        """Return the todo with the given id. Raises NotFoundError if absent."""
        with self._lock:
            return self._items[self._index_of(todo_id)].model_copy()

    def create(self, data: TodoCreate) -> Todo:
        """Create, persist and return a new todo with a server-assigned id and timestamp."""
        now = self._now()
        todo = Todo(
            id=str(uuid.uuid4()),
            title=data.title,
            completed=data.completed,
            created_at=now,
            completed_at=now if data.completed else None,
            priority=data.priority,
            notes=data.notes,
        )
        with self._lock:
            self._commit([*self._items, todo])
            logger.info("Created todo %s", todo.id)
            return todo.model_copy()

    def update(self, todo_id: str, data: TodoUpdate) -> Todo:
        """
        Apply the fields present in `data` to the todo with the given id, persist
        and return it. Raises NotFoundError if absent.
        """
        changes = data.provided_fields()
        with self._lock:
            index = self._index_of(todo_id)
            # Update only provided fields
            updated = self._items[index].model_copy(update=changes)
            if "completed" in changes:
                updated.completed_at = self._now() if updated.completed else None

            items = list(self._items)
            items[index] = updated
            self._commit(items)
            logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(changes)))
            return updated.model_copy()

    def delete(self, todo_id: str) -> None:
        """Remove the todo with the given id and persist. Raises NotFoundError if absent."""
        with self._lock:
            index = self._index_of(todo_id)
            self._commit(self._items[:index] + self._items[index + 1 :])
            logger.info("Deleted todo %s", todo_id)


# PUBLIC_INTERFACE
def build_repository(todos_file: str) -> TodoRepository:
    """
    Create a repository backed by the JSON file at `todos_file` and load it.
    Raises StartupError if the file exists but cannot be read or parsed.
    """
    repo = TodoRepository(JsonFileStorage(todos_file, Todos))
    repo.load()
    return repo
