"""Configuration models with Pydantic validation."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from kubectl_fzf.integrations.kubernetes.models import (
    OutputFormat,
    PreviewFormat,
    ResourceReference,
)

ENV_FZF_OPTION = "KUBECTL_FZF_FZF_OPTION"
ENV_FZF_BIND_OPTION = "KUBECTL_FZF_FZF_BIND_OPTION"
# Placeholder only; never read from the environment
ENV_FZF_PREVIEW_OPTION = "KUBECTL_FZF_FZF_PREVIEW_OPTION"


class SelectorSettings(BaseModel):
    """fzf overrides taken from the environment.

    An empty string means the variable is unset or empty; callers fall back
    to the built-in defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fzf_option: str = ""
    fzf_bind_option: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorSettings:
        """Read the overrides.

        Supported environment variables:
            KUBECTL_FZF_FZF_OPTION: Full fzf option template
            KUBECTL_FZF_FZF_BIND_OPTION: Value for the key-binding placeholder
        """
        env = os.environ if environ is None else environ
        return cls(
            fzf_option=env.get(ENV_FZF_OPTION, ""),
            fzf_bind_option=env.get(ENV_FZF_BIND_OPTION, ""),
        )


class WorkflowConfig(BaseModel):
    """Validated choices for one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    resource_type: str
    namespace: str = ""
    preview_format: PreviewFormat = PreviewFormat.DESCRIBE
    output_format: OutputFormat = OutputFormat.NAME
    query: str = ""

    @classmethod
    def create(
        cls,
        resource_type: str,
        *,
        namespace: str | None = None,
        preview_format: str | PreviewFormat = PreviewFormat.DESCRIBE,
        output_format: str | OutputFormat = OutputFormat.NAME,
        query: str | None = None,
    ) -> WorkflowConfig:
        """Validate raw values and build the config.

        Raises:
            ConfigurationError: For an empty resource type.
            InvalidPreviewKindError: For an unknown preview format.
            InvalidOutputFormatError: For an unknown output format.
        """
        resource = ResourceReference(resource_type, namespace or "")
        return cls(
            resource_type=resource.resource_type,
            namespace=resource.namespace,
            preview_format=PreviewFormat.parse(preview_format),
            output_format=OutputFormat.parse(output_format),
            query=query or "",
        )

    @property
    def resource(self) -> ResourceReference:
        return ResourceReference(self.resource_type, self.namespace)
