"""Prints the selected resources in the requested output format."""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO

import structlog

from kubectl_fzf.integrations.kubernetes.client import KubectlClient
from kubectl_fzf.integrations.kubernetes.models import (
    CommandSpec,
    OutputFormat,
    ResourceReference,
)

logger = structlog.get_logger()


class OutputDispatcher:
    """Turns a selection into output.

    ``name`` is answered locally; every other format is one more kubectl call
    whose raw output is written unchanged.
    """

    def __init__(self, kubectl: KubectlClient) -> None:
        self._kubectl = kubectl

    @staticmethod
    def command_for(
        identifiers: Sequence[str],
        output_format: OutputFormat,
        resource: ResourceReference,
    ) -> CommandSpec | None:
        """Return the follow-up kubectl call, or None when no call is needed."""
        # Multi-resource rows are already kind/name, so the resource is left out
        kind = "" if resource.has_multiple_resources else resource.resource_type
        names = tuple(identifiers)
        match output_format:
            case OutputFormat.NAME:
                return None
            case OutputFormat.DESCRIBE:
                return CommandSpec("describe", kind, names)
            case OutputFormat.YAML | OutputFormat.JSON:
                return CommandSpec("get", kind, names, {"-o": output_format.value})

    def emit(
        self,
        identifiers: Sequence[str],
        output_format: OutputFormat,
        resource: ResourceReference,
        out: IO[str],
    ) -> None:
        """Write the selection to ``out``.

        Raises:
            ExternalCommandFailedError: If the follow-up kubectl call fails.
        """
        spec = self.command_for(identifiers, output_format, resource)
        if spec is None:
            out.write("\n".join(identifiers) + "\n")
        else:
            out.write(self._kubectl.run(spec))
        out.flush()
        logger.debug("output_written", format=output_format.value, count=len(identifiers))
