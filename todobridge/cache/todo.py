"""Process-local cache of todos mirrored from the task API."""

import logging
from collections.abc import Iterable

from todobridge.cache.base import BaseCacheManager
from todobridge.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoCache(BaseCacheManager[Todo]):
    """Keyed store of todos; every key equals the id of its value.

    Lookups return ``None`` for unknown ids rather than an empty todo.
    """

    def __init__(self) -> None:
        super().__init__("todo")

    def save(self, key: str, data: Todo) -> None:
        if key != data.id:
            raise ValueError(f"Cache key '{key}' does not match todo id '{data.id}'")
        with self.lock:
            self._store[key] = data
        logger.debug(f"Cached todo {key}")

    def load(self, key: str) -> Todo | None:
        with self.lock:
            return self._store.get(key)

    def put(self, todo: Todo) -> None:
        """Insert or replace the entry for ``todo.id``."""
        self.save(todo.id, todo)

    def get(self, todo_id: str) -> Todo | None:
        """Look up a todo, returning None when it is not cached."""
        return self.load(todo_id)

    def delete(self, todo_id: str) -> None:
        """Remove a todo; unknown ids are ignored."""
        if self.delete_item(todo_id):
            logger.debug(f"Removed todo {todo_id} from cache")

    def delete_many(self, todo_ids: Iterable[str]) -> list[Todo]:
        """Remove several todos in one locked step.

        Args:
            todo_ids: Ids to remove; unknown ids are ignored

        Returns:
            The todos that were actually removed
        """
        removed = []
        with self.lock:
            for todo_id in todo_ids:
                todo = self._store.pop(todo_id, None)
                if todo is not None:
                    removed.append(todo)
        return removed
