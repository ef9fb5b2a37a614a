"""Serve command implementation."""

import logging

import typer
import uvicorn
from rich.console import Console

from todobridge.cli.utils.options import HOST_OPTION, PORT_OPTION
from todobridge.config import load_config
from todobridge.exceptions import ConfigurationError
from todobridge.server import app, build_bridge_service, set_bridge_service

console = Console()
logger = logging.getLogger(__name__)


def serve(
    host: HOST_OPTION = None,
    port: PORT_OPTION = None,
) -> None:
    """Run the todo bridge RPC server.

    The task API credential is read from SC_API_KEY (environment or .env).
    """
    config = load_config()
    bind_host = host or config.host
    bind_port = port or config.port

    try:
        service = build_bridge_service(config)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("[dim]Set SC_API_KEY in the environment or a .env file.[/dim]")
        raise typer.Exit(1) from e

    set_bridge_service(service)
    console.print(f"[bold blue]Todo bridge listening on {bind_host}:{bind_port}[/bold blue]")
    try:
        uvicorn.run(app, host=bind_host, port=bind_port, log_level=config.log_level.lower())
    finally:
        service.client.close()  # type: ignore[attr-defined]
        set_bridge_service(None)
        logger.info("Todo bridge stopped")
