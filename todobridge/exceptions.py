"""Custom exceptions for the todo bridge."""

from typing import Any


class TodoBridgeError(Exception):
    """Base exception for all todo bridge errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize todo bridge error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TodoBridgeError):
    """Raised when configuration is invalid or missing."""


class MissingCredentialsError(ConfigurationError):
    """Raised when the bearer credential for the task API is not set."""

    def __init__(self, credential_name: str = "SC_API_KEY") -> None:
        super().__init__(f"Missing credential: {credential_name} is not set", {"credential": credential_name})
        self.credential_name = credential_name


class ValidationError(TodoBridgeError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class TransportError(TodoBridgeError):
    """Raised when the task API cannot be reached or the exchange breaks down."""


class DeadlineExceededError(TransportError):
    """Raised when an outbound call does not finish before its deadline."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        message = f"Operation '{operation}' timed out after {timeout_seconds} seconds"
        super().__init__(message, {"operation": operation, "timeout_seconds": timeout_seconds})
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class RemoteStatusError(TransportError):
    """Raised on a non-2xx reply that does not carry an error envelope."""

    def __init__(self, status_code: int, message: str, response_text: str | None = None) -> None:
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
        self.response_text = response_text


class RemoteRejectedError(TodoBridgeError):
    """Raised when the task API answers with an error envelope."""

    def __init__(
        self,
        operation: str,
        remote_code: Any,
        remote_message: str | None,
        response_text: str,
    ) -> None:
        """Initialize remote rejection.

        Args:
            operation: Outbound operation that was rejected
            remote_code: Value of the envelope's error-code field
            remote_message: Envelope message, if present
            response_text: Raw response body

        """
        message = f"Task API rejected {operation}: {remote_message or response_text}"
        super().__init__(message, {"operation": operation, "code": remote_code})
        self.operation = operation
        self.remote_code = remote_code
        self.remote_message = remote_message
        self.response_text = response_text


class DecodeError(TodoBridgeError):
    """Raised when a response body cannot be interpreted as expected."""

    def __init__(self, operation: str, message: str, response_text: str | None = None) -> None:
        super().__init__(f"{message} in {operation}", {"operation": operation})
        self.operation = operation
        self.response_text = response_text


class NotImplementedOperationError(TodoBridgeError):
    """Raised for operations that are declared but not supported."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not implemented", {"operation": operation})
        self.operation = operation


class TodoNotFoundError(TodoBridgeError):
    """Raised when a todo is not present in the local cache."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo '{todo_id}' not found", {"id": todo_id})
        self.todo_id = todo_id


class RpcError(TodoBridgeError):
    """Raised by the RPC client when the bridge server answers with an error."""

    def __init__(self, kind: str, message: str, status_code: int, detail: Any = None) -> None:
        super().__init__(message, {"kind": kind, "status_code": status_code})
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
