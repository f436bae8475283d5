"""Tests for version module."""

from __future__ import annotations

import pytest

from kubectl_fzf import __version__
from kubectl_fzf.__version__ import __version__ as version_string


class TestVersion:
    """Test version information."""

    @pytest.mark.unit
    def test_version_format(self) -> None:
        """Version is numeric major.minor at least."""
        parts = __version__.split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts[:2])

    @pytest.mark.unit
    def test_version_importable(self) -> None:
        """Package and module expose the same version."""
        assert __version__ == version_string
