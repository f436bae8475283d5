"""Value types shared across kubectl-fzf.

Nothing here outlives a single invocation.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import StrEnum

from kubectl_fzf.integrations.kubernetes.exceptions import (
    ConfigurationError,
    InvalidOutputFormatError,
    InvalidPreviewKindError,
)

# Resource type that makes kubectl list every kind at once
ALL_RESOURCES = "all"


class OutputFormat(StrEnum):
    """How the selected resource is printed."""

    NAME = "name"
    DESCRIBE = "describe"
    YAML = "yaml"
    JSON = "json"

    @classmethod
    def parse(cls, value: str | OutputFormat) -> OutputFormat:
        """Convert a raw value, raising InvalidOutputFormatError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidOutputFormatError(value) from None


class PreviewFormat(StrEnum):
    """What fzf shows in its preview pane."""

    DESCRIBE = "describe"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str | PreviewFormat) -> PreviewFormat:
        """Convert a raw value, raising InvalidPreviewKindError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidPreviewKindError(value) from None


class HeaderMode(StrEnum):
    """Whether fzf should treat the first input line as a column header."""

    NONE = "none"
    FIRST_LINE_IS_HEADER = "first_line_is_header"


@dataclass(frozen=True)
class ResourceReference:
    """The resource type (and optional namespace) an invocation works on."""

    resource_type: str
    namespace: str = ""

    def __post_init__(self) -> None:
        if not self.resource_type or not self.resource_type.strip():
            raise ConfigurationError("1st argument must be the kind of kubernetes resources")

    @property
    def has_multiple_resources(self) -> bool:
        """True when the listing mixes kinds, e.g. ``all`` or ``pods,svc``.

        Rows are then printed as ``kind/name`` and carry no header.
        """
        return self.resource_type == ALL_RESOURCES or "," in self.resource_type


@dataclass(frozen=True)
class CommandSpec:
    """One kubectl invocation, before it is turned into arguments."""

    operation: str
    resource: str = ""
    names: tuple[str, ...] = ()
    options: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SelectorOptions:
    """Resolved fzf options for one invocation."""

    base_options: str
    query: str | None = None
    header_mode: HeaderMode = HeaderMode.NONE

    def render(self) -> str:
        """Return the option string passed to fzf."""
        rendered = self.base_options
        if self.header_mode is HeaderMode.FIRST_LINE_IS_HEADER:
            rendered += " --header-lines 1"
        if self.query:
            # The option string runs through sh -c
            rendered += f" --query {shlex.quote(self.query)}"
        return rendered


@dataclass(frozen=True)
class Selection:
    """Identifiers the user picked, in fzf output order."""

    identifiers: tuple[str, ...]


@dataclass(frozen=True)
class Cancelled:
    """The user dismissed fzf without choosing anything."""


SelectionOutcome = Selection | Cancelled
