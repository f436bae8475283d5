"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from kubectl_fzf import __version__
from kubectl_fzf.cli.commands import describe, get
from kubectl_fzf.logging.config import configure_logging

app = typer.Typer(
    name="kubectl-fzf",
    help="kubectl commands with fzf.",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kubectl-fzf version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """Select Kubernetes resources interactively with fzf."""
    configure_logging(verbose=verbose, debug=debug)


# Register subcommands
app.command()(get.get)
app.command()(describe.describe)


if __name__ == "__main__":
    app()
