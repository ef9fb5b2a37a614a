"""
Constants and configuration values for the todo bridge.
"""

from enum import IntEnum, StrEnum

# Task API
API_BASE_URL = "https://api.safetyculture.io"
ERROR_CODE_KEY = "code"
ERROR_MESSAGE_KEY = "message"
READ_CHUNK_SIZE = 8192

# Version
PACKAGE_VERSION = "0.1.0"

# RPC transport
RPC_SERVICE_PREFIX = "/todo.TodoService"
DEADLINE_HEADER = "X-Request-Timeout"
# Seconds the RPC client keeps back from the budget it sends the server
DEADLINE_MARGIN = 0.5


class Endpoints(StrEnum):
    """Task API endpoint paths."""

    ACTIONS = "/tasks/v1/actions"
    BULK_DELETE = "/tasks/v1/actions/delete"


class APIConstants(IntEnum):
    """Task API limits."""

    REQUEST_TIMEOUT = 30


class RPCConstants(IntEnum):
    """RPC transport defaults."""

    DEFAULT_PORT = 50051
    CALL_TIMEOUT = 5


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


class MenuOption(StrEnum):
    """Interactive menu choices."""

    CREATE = "1"
    GET = "2"
    UPDATE = "3"
    DELETE = "4"
    LIST = "5"
    EXIT = "6"
