"""Interactive todo menu command implementation."""

import logging

import typer
from rich.console import Console
from rich.markup import escape

from todobridge.cli.utils.options import SERVER_URL_OPTION, TIMEOUT_OPTION
from todobridge.cli.utils.output import handle_error_output, handle_json_output
from todobridge.cli.utils.rpc_client import TodoServiceClient
from todobridge.config import load_config
from todobridge.core.constants import MenuOption
from todobridge.core.validation import is_valid_uuid
from todobridge.exceptions import TodoBridgeError

console = Console()
logger = logging.getLogger(__name__)

MENU_ENTRIES = [
    (MenuOption.CREATE, "Create Todo"),
    (MenuOption.GET, "Get Todo"),
    (MenuOption.UPDATE, "Update Todo"),
    (MenuOption.DELETE, "Delete Todo"),
    (MenuOption.LIST, "List Todos"),
    (MenuOption.EXIT, "Exit"),
]


def _print_menu() -> None:
    console.print("\n[bold]Todo CLI[/bold]")
    for option, label in MENU_ENTRIES:
        console.print(f"{option.value}. {label}")


def _prompt_uuid(label: str) -> str | None:
    """Prompt for a single id, returning None if it is not a UUID."""
    todo_id = typer.prompt(label).strip()
    if not is_valid_uuid(todo_id):
        console.print(f"[yellow]Inputted {escape(todo_id)} is not a valid UUID[/yellow]")
        return None
    return todo_id


def _prompt_uuid_list(label: str) -> list[str] | None:
    """Prompt for comma-separated ids, returning None if any is not a UUID."""
    raw = typer.prompt(label)
    ids = [part.strip() for part in raw.split(",") if part.strip()]
    if not ids:
        console.print("[yellow]No ids entered[/yellow]")
        return None
    invalid = [todo_id for todo_id in ids if not is_valid_uuid(todo_id)]
    if invalid:
        for todo_id in invalid:
            console.print(f"[yellow]Inputted {escape(todo_id)} is not a valid UUID[/yellow]")
        return None
    return ids


def create_todo(client: TodoServiceClient) -> None:
    todo_id = _prompt_uuid("Enter TODO ID")
    if todo_id is None:
        return
    title = typer.prompt("Enter title").strip()
    description = typer.prompt("Enter description", default="", show_default=False).strip()

    try:
        todo = client.create_todo(todo_id, title, description)
    except TodoBridgeError as e:
        handle_error_output("creating todo", e)
        return
    handle_json_output(todo, heading="Created Todo:")


def get_todo(client: TodoServiceClient) -> None:
    todo_id = _prompt_uuid("Enter TODO ID")
    if todo_id is None:
        return
    try:
        todo = client.get_todo(todo_id)
    except TodoBridgeError as e:
        handle_error_output("getting todo", e)
        return
    handle_json_output(todo, heading="Todo:")


def update_todo(client: TodoServiceClient) -> None:
    todo_id = _prompt_uuid("Enter TODO ID")
    if todo_id is None:
        return
    title = typer.prompt("Enter title").strip()
    description = typer.prompt("Enter description", default="", show_default=False).strip()
    completed = typer.confirm("Completed?", default=False)

    try:
        todo = client.update_todo(todo_id, title, description, completed)
    except TodoBridgeError as e:
        handle_error_output("updating todo", e)
        return
    handle_json_output(todo, heading="Updated Todo:")


def bulk_delete_todo(client: TodoServiceClient) -> None:
    ids = _prompt_uuid_list("Enter Todo ID(s) to delete (comma-separated)")
    if ids is None:
        return
    try:
        client.bulk_delete_todo(ids)
    except TodoBridgeError as e:
        handle_error_output("deleting todo", e)
        return
    console.print("[green]✓ Successfully deleted todo item(s):[/green]")
    for todo_id in ids:
        console.print(f"  {todo_id}")


def list_todos(client: TodoServiceClient) -> None:
    try:
        todos = client.list_todos()
    except TodoBridgeError as e:
        handle_error_output("listing todos", e)
        return
    handle_json_output(todos, heading=f"{len(todos)} Todo(s):")


ACTIONS = {
    MenuOption.CREATE: create_todo,
    MenuOption.GET: get_todo,
    MenuOption.UPDATE: update_todo,
    MenuOption.DELETE: bulk_delete_todo,
    MenuOption.LIST: list_todos,
}


def menu(
    server_url: SERVER_URL_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
) -> None:
    """Manage todos interactively through a running bridge server.

    Ids are checked to be UUIDs before anything is sent. Errors from the task
    API are shown as returned.
    """
    config = load_config()
    url = server_url or config.server_url
    deadline = timeout or config.rpc_timeout
    logger.debug(f"Connecting to {url} with a {deadline}s deadline")

    with TodoServiceClient(url, deadline) as client:
        while True:
            _print_menu()
            option = typer.prompt("Choose an option").strip()

            if option == MenuOption.EXIT:
                console.print("Exiting...")
                return

            action = ACTIONS.get(option)  # type: ignore[call-overload]
            if action is None:
                console.print("[yellow]Invalid option[/yellow]")
                continue
            action(client)
