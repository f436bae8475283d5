"""Unit tests for shared value types."""

from __future__ import annotations

import dataclasses

import pytest

from kubectl_fzf.integrations.kubernetes.exceptions import (
    ConfigurationError,
    InvalidOutputFormatError,
    InvalidPreviewKindError,
)
from kubectl_fzf.integrations.kubernetes.models import (
    HeaderMode,
    OutputFormat,
    PreviewFormat,
    ResourceReference,
    SelectorOptions,
)


@pytest.mark.unit
class TestResourceReference:
    """Tests for ResourceReference."""

    def test_defaults_to_no_namespace(self) -> None:
        ref = ResourceReference("pods")
        assert ref.namespace == ""

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_empty_resource_type(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="kind of kubernetes resources"):
            ResourceReference(value)

    def test_is_immutable(self) -> None:
        ref = ResourceReference("pods", "default")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ref.namespace = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("resource_type", "expected"),
        [
            ("pods", False),
            ("deployments.apps", False),
            ("all", True),
            ("pods,svc", True),
        ],
    )
    def test_has_multiple_resources(self, resource_type: str, expected: bool) -> None:
        assert ResourceReference(resource_type).has_multiple_resources is expected


@pytest.mark.unit
class TestFormatParsing:
    """Tests for OutputFormat.parse and PreviewFormat.parse."""

    @pytest.mark.parametrize("value", ["name", "describe", "yaml", "json"])
    def test_output_format_accepts_known(self, value: str) -> None:
        assert OutputFormat.parse(value) == value

    def test_output_format_rejects_unknown(self) -> None:
        with pytest.raises(InvalidOutputFormatError):
            OutputFormat.parse("wide")

    def test_output_format_passes_enum_through(self) -> None:
        assert OutputFormat.parse(OutputFormat.JSON) is OutputFormat.JSON

    @pytest.mark.parametrize("value", ["", "unknown", "json"])
    def test_preview_format_rejects_unknown(self, value: str) -> None:
        with pytest.raises(InvalidPreviewKindError):
            PreviewFormat.parse(value)


@pytest.mark.unit
class TestSelectorOptions:
    """Tests for SelectorOptions.render."""

    def test_base_only(self) -> None:
        assert SelectorOptions("--inline-info").render() == "--inline-info"

    def test_header_then_query(self) -> None:
        options = SelectorOptions(
            "--inline-info", query="nginx", header_mode=HeaderMode.FIRST_LINE_IS_HEADER
        )
        assert options.render() == "--inline-info --header-lines 1 --query nginx"

    def test_empty_query_ignored(self) -> None:
        assert SelectorOptions("--multi", query="").render() == "--multi"

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("foo bar", "--multi --query 'foo bar'"),
            ("a; touch x", "--multi --query 'a; touch x'"),
            ("^web$", "--multi --query '^web$'"),
        ],
    )
    def test_query_is_shell_quoted(self, query: str, expected: str) -> None:
        assert SelectorOptions("--multi", query=query).render() == expected
