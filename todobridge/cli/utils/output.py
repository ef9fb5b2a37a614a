"""Shared output handlers for CLI commands."""

import json
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from todobridge.core.constants import FormattingConstants
from todobridge.exceptions import RpcError, TodoBridgeError

console = Console()


def handle_json_output(data: Any, heading: str | None = None) -> None:
    """Print a reply as indented JSON.

    Args:
        data: Pydantic model, list of models, or plain data
        heading: Optional line printed before the JSON
    """
    if isinstance(data, BaseModel):
        output_data = data.model_dump()
    elif isinstance(data, list):
        output_data = [item.model_dump() if isinstance(item, BaseModel) else item for item in data]
    else:
        output_data = data

    json_content = json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str)

    if heading:
        console.print(f"[bold green]{escape(heading)}[/bold green]")
    print(json_content)


def handle_error_output(action: str, error: TodoBridgeError) -> None:
    """Print an error, including the raw task API text when the server sent it."""
    console.print(f"[red]Error {escape(action)}:[/red] {escape(str(error))}", soft_wrap=True)
    if isinstance(error, RpcError) and error.detail:
        console.print(f"[dim]{escape(str(error.detail))}[/dim]", soft_wrap=True)
