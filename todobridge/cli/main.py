"""Main CLI entry point for the todo bridge."""

import logging

import typer

from todobridge.cli.commands.menu import menu
from todobridge.cli.commands.serve import serve
from todobridge.cli.utils.options import VERBOSE_OPTION
from todobridge.config import load_config
from todobridge.logging_setup import setup_logging

app = typer.Typer(
    name="todo-bridge",
    help="Todo Bridge - Todo service backed by the task API",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    Todo Bridge CLI
    """
    setup_logging(logging.DEBUG if verbose else load_config().log_level)


app.command("serve", help="Run the RPC server that bridges todo calls to the task API")(serve)
app.command("menu", help="Interactive todo menu against a running server")(menu)


if __name__ == "__main__":
    app()
