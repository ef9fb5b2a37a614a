"""Todo bridge: forwards todo operations to the task API and mirrors confirmed results locally."""

import logging
from typing import Protocol

from todobridge.cache.todo import TodoCache
from todobridge.core.validation import require_non_empty, require_uuid
from todobridge.exceptions import DecodeError, NotImplementedOperationError, TodoBridgeError, ValidationError
from todobridge.models.remote import EmptySuccess, Payload
from todobridge.models.todo import Todo

logger = logging.getLogger(__name__)


class TaskAPI(Protocol):
    """Outbound operations the bridge needs from the task API client."""

    def create(
        self, todo_id: str, title: str, description: str, timeout: float | None = None
    ) -> Payload | EmptySuccess: ...

    def bulk_delete(self, ids: list[str], timeout: float | None = None) -> Payload | EmptySuccess: ...

    def get(self, todo_id: str, timeout: float | None = None) -> Payload | EmptySuccess: ...


class TodoBridgeService:
    """Orchestrates todo operations between callers, the task API and the cache.

    Local state changes only after the task API confirms an operation. Any
    error raised by the client propagates unchanged and leaves the cache as
    it was.
    """

    def __init__(self, client: TaskAPI, cache: TodoCache | None = None, require_uuid_ids: bool = False) -> None:
        """Initialize the bridge.

        Args:
            client: Task API client
            cache: Todo cache (a fresh one if omitted)
            require_uuid_ids: Reject ids that are not UUIDs
        """
        self.client = client
        self.cache = cache if cache is not None else TodoCache()
        self.require_uuid_ids = require_uuid_ids

    def _validate_id(self, field: str, todo_id: str) -> str:
        require_non_empty(field, todo_id)
        if self.require_uuid_ids:
            require_uuid(field, todo_id)
        return todo_id

    def create_todo(self, todo_id: str, title: str, description: str = "", timeout: float | None = None) -> Todo:
        """Create a todo remotely, then cache it.

        Args:
            todo_id: Caller-supplied id
            title: Todo title
            description: Todo description
            timeout: Deadline in seconds for the remote call

        Returns:
            The cached todo
        """
        self._validate_id("id", todo_id)
        require_non_empty("title", title)

        try:
            self.client.create(todo_id, title, description, timeout=timeout)
        except TodoBridgeError as e:
            logger.warning(f"Create of todo {todo_id} failed: {e}")
            raise

        todo = Todo(id=todo_id, title=title, description=description, completed=False)
        self.cache.put(todo)
        logger.info(f"Created todo {todo_id}")
        return todo

    def bulk_delete_todo(self, ids: list[str], timeout: float | None = None) -> None:
        """Delete todos remotely in one request, then drop them from the cache.

        Only an empty reply counts as confirmation. The task API does not
        report per-id outcomes, so any other reply leaves every cached todo in
        place even if some ids may have been removed remotely.

        Args:
            ids: Ids to delete
            timeout: Deadline in seconds for the remote call

        Raises:
            DecodeError: If the task API answered with a payload
        """
        if not ids:
            raise ValidationError("ids", ids, "ids must not be empty")
        for todo_id in ids:
            self._validate_id("ids", todo_id)

        try:
            result = self.client.bulk_delete(list(ids), timeout=timeout)
        except TodoBridgeError as e:
            logger.warning(f"Bulk delete of {len(ids)} todo(s) failed: {e}")
            raise

        if isinstance(result, Payload):
            logger.warning(f"Bulk delete of {len(ids)} todo(s) returned a payload; cache left unchanged")
            raise DecodeError("BulkDeleteTodo", "Unexpected payload in delete confirmation", result.text)

        removed = self.cache.delete_many(ids)
        for todo in removed:
            logger.info(f"Deleted todo {todo.id} ({todo.title!r})")
        logger.debug(f"Bulk delete confirmed for {len(ids)} id(s), {len(removed)} were cached")

    def get_todo(self, todo_id: str, timeout: float | None = None) -> Todo | None:
        """Look up a todo.

        The task API is queried first and its errors propagate, but its reply
        is not reconciled into the cache: the result is whatever the cache
        holds, which may be None for items created by another process.

        Args:
            todo_id: Todo id
            timeout: Deadline in seconds for the remote call

        Returns:
            The cached todo or None
        """
        self._validate_id("id", todo_id)
        try:
            self.client.get(todo_id, timeout=timeout)
        except TodoBridgeError as e:
            logger.warning(f"Lookup of todo {todo_id} failed: {e}")
            raise
        return self.cache.get(todo_id)

    def update_todo(
        self,
        todo_id: str,
        title: str = "",
        description: str = "",
        completed: bool = False,
        timeout: float | None = None,
    ) -> Todo:
        """Update a todo.

        The task API exposes no update call, so this always fails and the
        cache is left alone.

        Raises:
            NotImplementedOperationError: Always
        """
        raise NotImplementedOperationError("UpdateTodo")

    def list_todos(self, timeout: float | None = None) -> list[Todo]:
        """List todos. Not supported by the task API; always raises NotImplementedOperationError."""
        raise NotImplementedOperationError("ListTodos")
