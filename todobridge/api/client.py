"""Task API client: issues outbound calls and classifies their responses."""

import logging
import math
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

import requests
from pydantic import BaseModel

from todobridge.config import Config
from todobridge.core.constants import READ_CHUNK_SIZE, Endpoints
from todobridge.exceptions import (
    DeadlineExceededError,
    DecodeError,
    MissingCredentialsError,
    RemoteRejectedError,
    RemoteStatusError,
    TransportError,
    ValidationError,
)
from todobridge.models.remote import EmptySuccess, Payload, RemoteError, RemoteResult, classify_response_body
from todobridge.models.todo import BulkDeleteTaskPayload, CreateTaskPayload


class RemoteActionClient:
    """Client for the external task API.

    Each call performs exactly one request and returns a classified result.
    The client never retries and never touches the todo cache.

    The deadline of a call covers the whole exchange, body included. The
    request runs on a short-lived worker thread and the caller stops waiting
    once the deadline passes, so a remote that trickles its reply cannot hold
    the caller past it.

    One ``requests.Session`` is shared by every calling thread. Its
    connections come from urllib3's pool, which is thread-safe, and the client
    passes all per-call state as request arguments without mutating the
    session after ``open()``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        default_timeout: float | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the task API client.

        Args:
            api_key: Bearer credential (defaults to SC_API_KEY)
            base_url: Task API base URL
            default_timeout: Deadline in seconds when a call supplies none
            config: Application config (falls back to environment)

        Raises:
            MissingCredentialsError: If no credential is available

        """
        self.logger = logging.getLogger(__name__)

        self.config = config or Config()

        self.api_key = api_key
        if not self.api_key and self.config.api_key:
            self.api_key = self.config.api_key.get_secret_value()

        if not self.api_key:
            self.logger.error("Task API credential not provided")
            raise MissingCredentialsError()

        self.base_url = (base_url or self.config.api_base_url).rstrip("/")
        self.default_timeout = default_timeout if default_timeout is not None else self.config.request_timeout
        self.session: requests.Session | None = None
        self.logger.debug(f"RemoteActionClient initialized for {self.base_url}")

    def __enter__(self) -> "RemoteActionClient":
        """Enter context."""
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        self.close()

    def open(self) -> None:
        """Open the HTTP session."""
        if self.session is None:
            self.logger.info("Opening task API session")
            self.session = requests.Session()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.logger.info("Closing task API session")
            self.session.close()
            self.session = None
        else:
            self.logger.warning("No session to close")

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "authorization": f"Bearer {self.api_key}",
        }

    def _read_reply(
        self,
        session: requests.Session,
        method: str,
        url: str,
        data: str | None,
        deadline: float,
        deadline_at: float,
        method_name: str,
    ) -> tuple[int, bytes]:
        """Send one request and read its body until the deadline passes."""
        response = session.request(method, url, headers=self.headers, data=data, timeout=deadline, stream=True)
        try:
            chunks = []
            for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
                if time.monotonic() > deadline_at:
                    raise DeadlineExceededError(method_name, deadline)
                chunks.append(chunk)
            return response.status_code, b"".join(chunks)
        finally:
            response.close()

    def _run_request(self, future: Future, *args: Any) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(self._read_reply(*args))
        except Exception as e:
            future.set_exception(e)

    def _make_request(
        self,
        method: str,
        endpoint: str,
        payload: BaseModel | None = None,
        timeout: float | None = None,
    ) -> Payload | EmptySuccess:
        """Issue one request and classify the reply.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            payload: JSON body model
            timeout: Deadline in seconds for the whole exchange

        Returns:
            The successful classification

        Raises:
            ValidationError: If the deadline is not a positive finite number
            DeadlineExceededError: If the deadline expires
            TransportError: If the request fails at the network level
            RemoteStatusError: On a non-2xx reply without an error envelope
            RemoteRejectedError: If the body is an error envelope
            DecodeError: If a 2xx body is not valid JSON

        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        url = f"{self.base_url}{endpoint}"
        method_name = f"{method} {endpoint}"
        deadline = timeout if timeout is not None else self.default_timeout
        if not math.isfinite(deadline) or deadline <= 0:
            raise ValidationError("timeout", deadline, "timeout must be a positive number of seconds")
        data = payload.model_dump_json() if payload is not None else None

        self.logger.debug(f"Making request: {method_name}")

        deadline_at = time.monotonic() + deadline
        future: Future = Future()
        worker = threading.Thread(
            target=self._run_request,
            args=(future, self.session, method, url, data, deadline, deadline_at, method_name),
            name=f"task-api {method_name}",
            daemon=True,
        )
        worker.start()

        try:
            status_code, body = future.result(timeout=deadline)
        except (FutureTimeoutError, requests.exceptions.Timeout):
            self.logger.warning(f"{method_name} exceeded its {deadline}s deadline")
            raise DeadlineExceededError(method_name, deadline) from None
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Transport failure in {method_name}: {e}")
            raise TransportError(f"Failed to reach task API in {method_name}: {e}") from e

        result: RemoteResult = classify_response_body(body)
        self.logger.debug(f"{method_name} -> {status_code} ({result.kind})")

        if isinstance(result, RemoteError):
            raise RemoteRejectedError(method_name, result.code, result.message, result.detail)

        if not 200 <= status_code < 300:
            raise RemoteStatusError(
                status_code,
                f"Unexpected response status {status_code} in {method_name}",
                body.decode("utf-8", errors="replace"),
            )

        if isinstance(result, Payload):
            try:
                result.decode_json()
            except ValueError:
                raise DecodeError(method_name, "Response body is not valid JSON", result.text) from None

        return result

    def create(
        self,
        todo_id: str,
        title: str,
        description: str,
        timeout: float | None = None,
    ) -> Payload | EmptySuccess:
        """Create a task.

        Args:
            todo_id: Caller-supplied task id
            title: Task title
            description: Task description
            timeout: Deadline in seconds

        Returns:
            The classified result
        """
        self.logger.info(f"Creating task {todo_id}")
        payload = CreateTaskPayload(task_id=todo_id, title=title, description=description)
        return self._make_request("POST", Endpoints.ACTIONS, payload=payload, timeout=timeout)

    def bulk_delete(self, ids: list[str], timeout: float | None = None) -> Payload | EmptySuccess:
        """Delete several tasks in one request.

        Args:
            ids: Task ids to delete
            timeout: Deadline in seconds

        Returns:
            The classified result
        """
        self.logger.info(f"Deleting {len(ids)} task(s)")
        payload = BulkDeleteTaskPayload(ids=list(ids))
        return self._make_request("POST", Endpoints.BULK_DELETE, payload=payload, timeout=timeout)

    def get(self, todo_id: str, timeout: float | None = None) -> Payload | EmptySuccess:
        """Fetch a task.

        Args:
            todo_id: Task id
            timeout: Deadline in seconds

        Returns:
            The classified result
        """
        self.logger.info(f"Fetching task {todo_id}")
        return self._make_request("GET", f"{Endpoints.ACTIONS}/{todo_id}", timeout=timeout)
