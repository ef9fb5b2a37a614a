"""Client for the todo bridge RPC server."""

import logging
from typing import Any

import requests

from todobridge.core.constants import DEADLINE_HEADER, DEADLINE_MARGIN, RPC_SERVICE_PREFIX
from todobridge.exceptions import DeadlineExceededError, RpcError, TransportError
from todobridge.models.todo import (
    BulkDeleteTodoRequest,
    CreateTodoRequest,
    GetTodoRequest,
    ListTodosResponse,
    Todo,
    UpdateTodoRequest,
)


class TodoServiceClient:
    """Calls TodoService methods on a running bridge server."""

    def __init__(self, server_url: str, timeout: float) -> None:
        """Initialize the RPC client.

        Args:
            server_url: Base URL of the bridge server
            timeout: Deadline in seconds for every call
        """
        self.logger = logging.getLogger(__name__)
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.session: requests.Session | None = None

    def __enter__(self) -> "TodoServiceClient":
        """Enter context."""
        self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        if self.session:
            self.session.close()
            self.session = None

    @property
    def server_budget(self) -> float:
        """Deadline sent to the server, kept below our own timeout so its answer arrives in time."""
        return max(self.timeout - DEADLINE_MARGIN, self.timeout / 2)

    def _call(self, method: str, body: dict[str, Any]) -> dict[str, Any]:
        """Invoke one RPC method.

        Raises:
            DeadlineExceededError: If the server does not answer in time
            TransportError: If the server cannot be reached
            RpcError: If the server answers with an error envelope
        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        url = f"{self.server_url}{RPC_SERVICE_PREFIX}/{method}"
        self.logger.debug(f"Calling {method}")

        try:
            response = self.session.post(
                url,
                json=body,
                headers={DEADLINE_HEADER: str(self.server_budget)},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise DeadlineExceededError(method, self.timeout) from None
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Couldn't connect to server at {self.server_url}: {e}") from e

        if response.ok:
            return response.json()

        try:
            envelope = response.json()
        except ValueError:
            envelope = {}
        if not isinstance(envelope, dict):
            envelope = {}
        raise RpcError(
            envelope.get("error", "Unknown"),
            envelope.get("message") or response.text,
            response.status_code,
            envelope.get("detail"),
        )

    def create_todo(self, todo_id: str, title: str, description: str) -> Todo:
        request = CreateTodoRequest(id=todo_id, title=title, description=description)
        return Todo.model_validate(self._call("CreateTodo", request.model_dump()))

    def get_todo(self, todo_id: str) -> Todo:
        request = GetTodoRequest(id=todo_id)
        return Todo.model_validate(self._call("GetTodo", request.model_dump()))

    def update_todo(self, todo_id: str, title: str, description: str, completed: bool = False) -> Todo:
        request = UpdateTodoRequest(id=todo_id, title=title, description=description, completed=completed)
        return Todo.model_validate(self._call("UpdateTodo", request.model_dump()))

    def bulk_delete_todo(self, ids: list[str]) -> None:
        request = BulkDeleteTodoRequest(ids=ids)
        self._call("BulkDeleteTodo", request.model_dump())

    def list_todos(self) -> list[Todo]:
        return ListTodosResponse.model_validate(self._call("ListTodos", {})).todos
