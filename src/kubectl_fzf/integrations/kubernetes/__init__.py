"""kubectl integration - shared types and exceptions."""

from kubectl_fzf.integrations.kubernetes.exceptions import (
    BinaryNotFoundError,
    ConfigurationError,
    ExternalCommandFailedError,
    InvalidEnvironmentOverrideError,
    InvalidOutputFormatError,
    InvalidPreviewKindError,
    KubectlFzfError,
    NoResourcesFoundError,
    SelectionFailedError,
)
from kubectl_fzf.integrations.kubernetes.models import (
    Cancelled,
    CommandSpec,
    HeaderMode,
    OutputFormat,
    PreviewFormat,
    ResourceReference,
    Selection,
    SelectionOutcome,
    SelectorOptions,
)

__all__ = [
    "BinaryNotFoundError",
    "Cancelled",
    "CommandSpec",
    "ConfigurationError",
    "ExternalCommandFailedError",
    "HeaderMode",
    "InvalidEnvironmentOverrideError",
    "InvalidOutputFormatError",
    "InvalidPreviewKindError",
    "KubectlFzfError",
    "NoResourcesFoundError",
    "OutputFormat",
    "PreviewFormat",
    "ResourceReference",
    "Selection",
    "SelectionFailedError",
    "SelectionOutcome",
    "SelectorOptions",
]
