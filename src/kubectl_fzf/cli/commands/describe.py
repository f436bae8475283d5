"""Describe command: pick resources with fzf and describe them."""

from __future__ import annotations

from kubectl_fzf.cli.commands.base import (
    NamespaceOption,
    QueryOption,
    ResourceArgument,
    run_selection,
)
from kubectl_fzf.integrations.kubernetes.models import OutputFormat, PreviewFormat


def describe(
    resource: ResourceArgument,
    namespace: NamespaceOption = None,
    query: QueryOption = None,
) -> None:
    """kubectl describe resources with fzf."""
    run_selection(
        resource,
        namespace=namespace,
        query=query,
        preview_format=PreviewFormat.DESCRIBE,
        output_format=OutputFormat.DESCRIBE,
    )
