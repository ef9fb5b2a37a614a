"""CLI utilities module."""

from todobridge.cli.utils.options import (
    HOST_OPTION,
    PORT_OPTION,
    SERVER_URL_OPTION,
    TIMEOUT_OPTION,
    VERBOSE_OPTION,
)
from todobridge.cli.utils.output import handle_error_output, handle_json_output
from todobridge.cli.utils.rpc_client import TodoServiceClient

__all__ = [
    "HOST_OPTION",
    "PORT_OPTION",
    "SERVER_URL_OPTION",
    "TIMEOUT_OPTION",
    "VERBOSE_OPTION",
    "TodoServiceClient",
    "handle_error_output",
    "handle_json_output",
]
