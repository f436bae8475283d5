"""Shared options, error handling and execution for CLI commands."""

from __future__ import annotations

import sys
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from kubectl_fzf.core.config import WorkflowConfig
from kubectl_fzf.integrations.kubernetes.exceptions import (
    ConfigurationError,
    InvalidEnvironmentOverrideError,
    KubectlFzfError,
    NoResourcesFoundError,
    SelectionFailedError,
)
from kubectl_fzf.integrations.kubernetes.models import OutputFormat, PreviewFormat
from kubectl_fzf.integrations.runner import CommandRunner, SubprocessRunner
from kubectl_fzf.services.flows import build_workflow

logger = structlog.get_logger()

# stdout carries the selection; everything for humans goes to stderr
err_console = Console(stderr=True)


# =============================================================================
# Common Typer Argument/Option Annotations
# =============================================================================

ResourceArgument = Annotated[
    str,
    typer.Argument(
        help="Kind of Kubernetes resource, e.g. pods, svc, 'pods,svc' or all",
        show_default=False,
    ),
]

NamespaceOption = Annotated[
    str | None,
    typer.Option(
        "--namespace",
        "-n",
        help="Kubernetes namespace (defaults to the current context's)",
    ),
]

QueryOption = Annotated[
    str | None,
    typer.Option(
        "--query",
        "-q",
        help="Start fzf with this query",
    ),
]

PreviewFormatOption = Annotated[
    PreviewFormat,
    typer.Option(
        "--preview-format",
        "-p",
        help="Format of the preview pane: describe or yaml",
        case_sensitive=False,
    ),
]

OutputFormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--output",
        "-o",
        help="Output format: name, describe, yaml or json",
        case_sensitive=False,
    ),
]


# =============================================================================
# Error Handling
# =============================================================================


def handle_error(error: KubectlFzfError) -> None:
    """Print an error with user-friendly output.

    Args:
        error: The error to report.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    message = escape(str(error))

    if isinstance(error, ConfigurationError):
        err_console.print(f"[red]Error:[/red] Invalid arguments: {message}")

    elif isinstance(error, InvalidEnvironmentOverrideError):
        err_console.print(f"[red]Error:[/red] failed to get fzf option: {message}")
        err_console.print(
            "\n[dim]Hint: only $KUBECTL_FZF_FZF_PREVIEW_OPTION and "
            "$KUBECTL_FZF_FZF_BIND_OPTION can be used in KUBECTL_FZF_FZF_OPTION.[/dim]"
        )

    elif isinstance(error, NoResourcesFoundError):
        err_console.print(f"[red]Error:[/red] {message}")
        if error.namespace:
            err_console.print(
                "\n[dim]Hint: check the namespace with "
                f"kubectl get namespace {escape(error.namespace)}[/dim]"
            )

    elif isinstance(error, SelectionFailedError) and error.stderr:
        err_console.print(f"[red]Error:[/red] {message}")
        err_console.print(f"  fzf stderr: {escape(error.stderr.strip())}")

    else:
        err_console.print(f"[red]Error:[/red] {message}")

    raise typer.Exit(1)


# =============================================================================
# Execution
# =============================================================================


def create_runner() -> CommandRunner:
    """Return the runner used for real invocations."""
    return SubprocessRunner()


def run_selection(
    resource: str,
    *,
    namespace: str | None,
    query: str | None,
    preview_format: str | PreviewFormat,
    output_format: str | OutputFormat,
) -> None:
    """Validate the arguments, then list, select and print.

    Exits 0 on success and when the user cancels fzf; exits 1 on any error.
    """
    log = logger.bind(resource=resource, namespace=namespace)
    try:
        config = WorkflowConfig.create(
            resource,
            namespace=namespace,
            preview_format=preview_format,
            output_format=output_format,
            query=query,
        )
        workflow = build_workflow(config, create_runner())
        workflow.run(sys.stdout)
    except KubectlFzfError as e:
        log.debug("command_failed", error=str(e), error_type=type(e).__name__)
        handle_error(e)
