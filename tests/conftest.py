"""Shared pytest fixtures for kubectl_fzf tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kubectl_fzf.logging import config as log_config
from tests.fakes import ALL_LISTING, POD_LISTING, FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a FakeRunner with nothing queued."""
    return FakeRunner()


@pytest.fixture
def pod_listing() -> str:
    """``kubectl get pods`` output: a header and two rows."""
    return POD_LISTING


@pytest.fixture
def all_listing() -> str:
    """``kubectl get all --no-headers`` output: kind/name rows."""
    return ALL_LISTING


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear KUBECTL_FZF_ prefixed environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("KUBECTL_FZF_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolate_log_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the rotating log file out of the real home directory."""
    log_dir = tmp_path / "state"
    monkeypatch.setattr("kubectl_fzf.logging.config.LOG_DIR", log_dir)
    monkeypatch.setattr("kubectl_fzf.logging.config.LOG_FILE", log_dir / "kubectl-fzf.log")


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None]:
    """Remove handlers added by configure_logging after each test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    yield
    log_config._installed_handlers.clear()
    for handler in root.handlers:
        if handler not in original_handlers and isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers = original_handlers
