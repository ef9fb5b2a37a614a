"""Data models for the todo bridge."""

from todobridge.models.remote import EmptySuccess, Payload, RemoteError, RemoteResult, classify_response_body
from todobridge.models.todo import Todo

__all__ = [
    "EmptySuccess",
    "Payload",
    "RemoteError",
    "RemoteResult",
    "Todo",
    "classify_response_body",
]
