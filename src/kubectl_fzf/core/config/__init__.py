"""Configuration management with Pydantic validation."""

from kubectl_fzf.core.config.models import (
    ENV_FZF_BIND_OPTION,
    ENV_FZF_OPTION,
    ENV_FZF_PREVIEW_OPTION,
    SelectorSettings,
    WorkflowConfig,
)

__all__ = [
    "ENV_FZF_BIND_OPTION",
    "ENV_FZF_OPTION",
    "ENV_FZF_PREVIEW_OPTION",
    "SelectorSettings",
    "WorkflowConfig",
]
