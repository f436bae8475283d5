"""Preview command rendering for the fzf preview pane."""

from __future__ import annotations

from kubectl_fzf.integrations.kubernetes.exceptions import InvalidPreviewKindError
from kubectl_fzf.integrations.kubernetes.models import PreviewFormat
from kubectl_fzf.integrations.runner import KUBECTL_BINARY

# fzf replaces {1} with the first field of the highlighted row
ROW_PLACEHOLDER = "{1}"


def namespace_suffix(namespace: str | None) -> str:
    """Return ``" -n <namespace>"``, or an empty string without a namespace."""
    return f" -n {namespace}" if namespace else ""


def render_preview_command(
    kind: PreviewFormat | str,
    resource: str,
    placeholder: str = ROW_PLACEHOLDER,
    options_suffix: str = "",
    cli: str = KUBECTL_BINARY,
) -> str:
    """Render the command fzf runs for the highlighted row.

    An empty ``resource`` is dropped, for rows already shaped ``kind/name``.

    Example:
        >>> render_preview_command("describe", "pods", options_suffix=" -n default")
        'kubectl describe pods {1} -n default'

    Raises:
        InvalidPreviewKindError: If ``kind`` is not describe or yaml.
    """
    match kind:
        case PreviewFormat.DESCRIBE:
            tokens = [cli, "describe", resource, placeholder]
        case PreviewFormat.YAML:
            tokens = [cli, "get", resource, placeholder, "-o", "yaml"]
        case _:
            raise InvalidPreviewKindError(kind)
    return " ".join(token for token in tokens if token) + options_suffix
