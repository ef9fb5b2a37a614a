"""Classified results of task API responses."""

import json
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from todobridge.core.constants import ERROR_CODE_KEY, ERROR_MESSAGE_KEY


class Payload(BaseModel):
    """The operation succeeded and the task API returned a body."""

    kind: Literal["payload"] = "payload"
    body: bytes

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def decode_json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return json.loads(self.body)


class EmptySuccess(BaseModel):
    """The operation succeeded and the task API returned no body."""

    kind: Literal["empty"] = "empty"


class RemoteError(BaseModel):
    """The task API answered with an error envelope."""

    kind: Literal["error"] = "error"
    detail: str = Field(description="Raw response body")
    code: Any = Field(default=None, description="Value of the error-code field")
    message: str | None = Field(default=None, description="Envelope message, if present")


RemoteResult = Annotated[Payload | EmptySuccess | RemoteError, Field(discriminator="kind")]


def classify_response_body(body: bytes) -> RemoteResult:
    """Classify a task API response body.

    A JSON object carrying the error-code key is a ``RemoteError``, an empty
    body is an ``EmptySuccess`` and anything else is a ``Payload``.

    Args:
        body: Raw response body

    Returns:
        The classified result
    """
    try:
        document = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        document = None

    if isinstance(document, dict) and ERROR_CODE_KEY in document:
        message = document.get(ERROR_MESSAGE_KEY)
        return RemoteError(
            detail=body.decode("utf-8", errors="replace"),
            code=document[ERROR_CODE_KEY],
            message=message if isinstance(message, str) else None,
        )

    # Whitespace-only bodies count as empty
    if not body.strip():
        return EmptySuccess()

    return Payload(body=body)
