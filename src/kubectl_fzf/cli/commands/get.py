"""Get command: pick resources with fzf and print them."""

from __future__ import annotations

from kubectl_fzf.cli.commands.base import (
    NamespaceOption,
    OutputFormatOption,
    PreviewFormatOption,
    QueryOption,
    ResourceArgument,
    run_selection,
)
from kubectl_fzf.integrations.kubernetes.models import OutputFormat, PreviewFormat


def get(
    resource: ResourceArgument,
    namespace: NamespaceOption = None,
    query: QueryOption = None,
    preview_format: PreviewFormatOption = PreviewFormat.DESCRIBE,
    output: OutputFormatOption = OutputFormat.NAME,
) -> None:
    """kubectl get resources with fzf.

    Prints the selected names by default; use --output for describe, yaml
    or json.
    """
    run_selection(
        resource,
        namespace=namespace,
        query=query,
        preview_format=preview_format,
        output_format=output,
    )
