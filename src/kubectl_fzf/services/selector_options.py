"""fzf option resolution.

The option string starts from a template (built-in, or the
``KUBECTL_FZF_FZF_OPTION`` override) holding shell-style placeholders:

    $KUBECTL_FZF_FZF_PREVIEW_OPTION  the rendered preview command
    $KUBECTL_FZF_FZF_BIND_OPTION     key bindings (override or default)

Any other placeholder in the template is an error.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import structlog

from kubectl_fzf.core.config import (
    ENV_FZF_BIND_OPTION,
    ENV_FZF_OPTION,
    ENV_FZF_PREVIEW_OPTION,
    SelectorSettings,
)
from kubectl_fzf.integrations.kubernetes.exceptions import InvalidEnvironmentOverrideError
from kubectl_fzf.integrations.kubernetes.models import HeaderMode, SelectorOptions

logger = structlog.get_logger()

DEFAULT_FZF_BIND_OPTION = (
    "ctrl-k:kill-line,"
    "ctrl-alt-t:toggle-preview,"
    "ctrl-alt-n:preview-down,"
    "ctrl-alt-p:preview-up,"
    "ctrl-alt-v:preview-page-down"
)
DEFAULT_FZF_OPTION = (
    "--inline-info --multi --layout reverse "
    f"--preview '${ENV_FZF_PREVIEW_OPTION}' "
    "--preview-window down:70% "
    f"--bind ${ENV_FZF_BIND_OPTION}"
)

# Shell expansion syntax: ${NAME}, $NAME, or a one-character special such as
# $1 or $@. An empty or unclosed brace is malformed and dropped; a $ followed
# by anything else stays literal.
_PLACEHOLDER = re.compile(
    r"\$(?:"
    r"\{(?P<braced>[^}]*)\}"
    r"|(?P<special>[*#$@!?\-0-9])"
    r"|(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<malformed>\{)"
    r")"
)


def expand_template(template: str, values: Mapping[str, str]) -> tuple[str, list[str]]:
    """Substitute placeholders in ``template``.

    Returns:
        The expanded string and the unresolved names, each once, in the order
        they first appear. Unresolved placeholders expand to nothing.
    """
    unresolved: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        name = match.group("braced") or match.group("special") or match.group("bare")
        if not name:
            return ""
        value = values.get(name, "")
        if not value:
            if name not in unresolved:
                unresolved.append(name)
            return ""
        return value

    return _PLACEHOLDER.sub(_replace, template), unresolved


def build_selector_options(
    preview_command: str,
    has_multiple_resources: bool,
    query: str | None = None,
    settings: SelectorSettings | None = None,
) -> SelectorOptions:
    """Resolve the fzf options for one invocation.

    Args:
        preview_command: Rendered preview command.
        has_multiple_resources: The listing mixes kinds and carries no header.
        query: Initial fzf query.
        settings: Environment overrides; read from ``os.environ`` if omitted.

    Raises:
        InvalidEnvironmentOverrideError: If the template references a
            placeholder other than the preview and bind ones.
    """
    settings = settings or SelectorSettings.from_env()

    template = settings.fzf_option or DEFAULT_FZF_OPTION
    header_mode = HeaderMode.NONE
    if not settings.fzf_option and not has_multiple_resources:
        header_mode = HeaderMode.FIRST_LINE_IS_HEADER

    expanded, unresolved = expand_template(
        template,
        {
            ENV_FZF_PREVIEW_OPTION: preview_command,
            ENV_FZF_BIND_OPTION: settings.fzf_bind_option or DEFAULT_FZF_BIND_OPTION,
        },
    )
    if unresolved:
        logger.error("invalid_fzf_option_template", invalid_names=unresolved)
        raise InvalidEnvironmentOverrideError(ENV_FZF_OPTION, unresolved)

    return SelectorOptions(base_options=expanded, query=query or None, header_mode=header_mode)


def resolve_selector_options(
    preview_command: str,
    has_multiple_resources: bool,
    query: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the fzf option string, reading overrides from ``environ``.

    Example output for ``("kubectl describe pods {1}", False)`` and no overrides:
        --inline-info --multi --layout reverse --preview 'kubectl describe pods {1}'
        --preview-window down:70% --bind ctrl-k:kill-line,... --header-lines 1
    """
    settings = SelectorSettings.from_env(environ)
    return build_selector_options(
        preview_command,
        has_multiple_resources,
        query=query,
        settings=settings,
    ).render()
