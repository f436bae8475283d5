"""The list, select, print workflow behind ``get`` and ``describe``.

Everything that can be rejected is rejected in ``build_workflow``, before
any process is started. ``SelectionWorkflow.run`` then goes strictly in
order: ``kubectl get``, fzf, optional follow-up kubectl call, write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

import structlog

from kubectl_fzf.core.config import SelectorSettings, WorkflowConfig
from kubectl_fzf.integrations.fzf.client import FzfClient
from kubectl_fzf.integrations.kubernetes.client import KubectlClient
from kubectl_fzf.integrations.kubernetes.exceptions import NoResourcesFoundError
from kubectl_fzf.integrations.kubernetes.models import (
    Cancelled,
    CommandSpec,
    ResourceReference,
    SelectionOutcome,
)
from kubectl_fzf.integrations.runner import CommandRunner
from kubectl_fzf.services.dispatcher import OutputDispatcher
from kubectl_fzf.services.preview import namespace_suffix, render_preview_command
from kubectl_fzf.services.selector_options import build_selector_options

logger = structlog.get_logger()


def ensure_listing_has_rows(listing: str, resource: ResourceReference) -> None:
    """Fail when ``kubectl get`` printed nothing selectable.

    The listing is kubectl's stdout alone; "No resources found" arrives on
    stderr and leaves it empty. Single-resource listings start with a header
    line; multi-resource ones are fetched with ``--no-headers``.

    Raises:
        NoResourcesFoundError: If there is no data row.
    """
    lines = [line for line in listing.strip().splitlines() if line.strip()]
    header_lines = 0 if resource.has_multiple_resources else 1
    if len(lines) <= header_lines:
        raise NoResourcesFoundError(
            resource_type=resource.resource_type,
            namespace=resource.namespace or None,
        )


def listing_command(resource: ResourceReference) -> CommandSpec:
    """Return the ``kubectl get`` call that produces fzf's candidates."""
    options = {"--no-headers": "true"} if resource.has_multiple_resources else {}
    return CommandSpec("get", resource.resource_type, (), options)


@dataclass
class SelectionWorkflow:
    """A fully configured invocation, ready to run."""

    config: WorkflowConfig
    fzf_options: str
    kubectl: KubectlClient
    fzf: FzfClient
    dispatcher: OutputDispatcher

    def run(self, out: IO[str], stderr: IO[str] | None = None) -> SelectionOutcome:
        """List, let the user pick, print.

        Returns:
            The selection, or ``Cancelled`` if the user dismissed fzf, in
            which case nothing is written.

        Raises:
            ExternalCommandFailedError: If a kubectl call fails.
            NoResourcesFoundError: If the listing has no rows.
            SelectionFailedError: If fzf fails.
        """
        resource = self.config.resource
        log = logger.bind(resource=resource.resource_type, namespace=resource.namespace or None)

        listing = self.kubectl.run(listing_command(resource), merge_stderr=False)
        ensure_listing_has_rows(listing, resource)

        # --multi is part of the default options, so every printed line counts
        outcome = self.fzf.select(listing, self.fzf_options, multi=True, stderr=stderr)
        if isinstance(outcome, Cancelled):
            log.info("workflow_cancelled")
            return outcome

        log.info(
            "resources_selected",
            identifiers=list(outcome.identifiers),
            output=self.config.output_format.value,
        )
        self.dispatcher.emit(outcome.identifiers, self.config.output_format, resource, out)
        return outcome


def build_workflow(
    config: WorkflowConfig,
    runner: CommandRunner,
    settings: SelectorSettings | None = None,
) -> SelectionWorkflow:
    """Resolve preview and fzf options and wire the clients together.

    Raises:
        InvalidPreviewKindError: If the preview format is unknown.
        InvalidEnvironmentOverrideError: If ``KUBECTL_FZF_FZF_OPTION`` is invalid.
    """
    resource = config.resource
    preview_resource = "" if resource.has_multiple_resources else resource.resource_type
    preview_command = render_preview_command(
        config.preview_format,
        preview_resource,
        options_suffix=namespace_suffix(resource.namespace),
    )
    fzf_options = build_selector_options(
        preview_command,
        resource.has_multiple_resources,
        query=config.query,
        settings=settings,
    ).render()
    logger.debug("workflow_configured", preview=preview_command, fzf_options=fzf_options)

    kubectl = KubectlClient.for_resource(runner, resource)
    return SelectionWorkflow(
        config=config,
        fzf_options=fzf_options,
        kubectl=kubectl,
        fzf=FzfClient(runner),
        dispatcher=OutputDispatcher(kubectl),
    )
