"""Shared CLI options for commands."""

from typing import Annotated

import typer

SERVER_URL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--server-url",
        "-s",
        help="Bridge server URL (auto-detected from TODO_BRIDGE_SERVER_URL env var)",
    ),
]

TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        "-t",
        help="Deadline in seconds for each call",
        min=0.1,
    ),
]

HOST_OPTION = Annotated[
    str | None,
    typer.Option(
        "--host",
        help="Bind address (auto-detected from TODO_BRIDGE_HOST env var)",
    ),
]

PORT_OPTION = Annotated[
    int | None,
    typer.Option(
        "--port",
        "-p",
        help="Port to listen on (auto-detected from TODO_BRIDGE_PORT env var)",
        min=1,
        max=65535,
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
