"""Unit tests for logging configuration."""

from __future__ import annotations

import io
import json
import logging
import os
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from kubectl_fzf.logging import config as log_config
from kubectl_fzf.logging.config import (
    RETENTION_DAYS,
    _file_handler,
    _prune_old_logs,
    _stderr_handler,
    configure_logging,
)


def _age(path: Path, days: int) -> None:
    old_time = (datetime.now() - timedelta(days=days)).timestamp()
    os.utime(path, (old_time, old_time))


def _flush_all() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


@pytest.mark.unit
class TestPruneOldLogs:
    """Tests for _prune_old_logs function."""

    def test_missing_log_dir(self) -> None:
        """Nothing happens when the directory was never created."""
        assert not log_config.LOG_DIR.exists()
        _prune_old_logs()

    def test_deletes_only_old_log_files(self) -> None:
        """Rotated files past retention are removed; recent ones and strangers stay."""
        log_config.LOG_DIR.mkdir(parents=True)
        old = log_config.LOG_DIR / "kubectl-fzf.log.1"
        recent = log_config.LOG_DIR / "kubectl-fzf.log"
        other = log_config.LOG_DIR / "notes.txt"
        for path in (old, recent, other):
            path.write_text("data")
        _age(old, RETENTION_DAYS + 5)
        _age(other, RETENTION_DAYS + 5)

        _prune_old_logs()

        assert not old.exists()
        assert recent.exists()
        assert other.exists()

    def test_ignores_os_errors(self) -> None:
        """A file that cannot be removed is skipped."""
        log_config.LOG_DIR.mkdir(parents=True)
        old = log_config.LOG_DIR / "kubectl-fzf.log.2"
        old.write_text("data")
        _age(old, RETENTION_DAYS + 5)

        with patch.object(Path, "unlink", side_effect=OSError("permission denied")):
            _prune_old_logs()

        assert old.exists()


@pytest.mark.unit
class TestHandlers:
    """Tests for the stderr and file handler factories."""

    def test_stderr_handler_uses_current_stderr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """stdout is reserved for the selection."""
        fake_stderr = io.StringIO()
        monkeypatch.setattr("sys.stderr", fake_stderr)

        handler = _stderr_handler(logging.INFO, debug=False)

        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is fake_stderr
        assert handler.level == logging.INFO

    def test_file_handler_creates_directory(self) -> None:
        handler = _file_handler()

        assert isinstance(handler, RotatingFileHandler)
        assert handler.level == logging.DEBUG
        assert log_config.LOG_DIR.exists()
        handler.close()

    def test_file_handler_unwritable_directory(self) -> None:
        """No file handler when the state dir cannot be created."""
        with patch.object(Path, "mkdir", side_effect=OSError("read-only")):
            assert _file_handler() is None


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging function."""

    @pytest.mark.parametrize(
        ("kwargs", "level"),
        [
            ({}, logging.WARNING),
            ({"verbose": True}, logging.INFO),
            ({"debug": True}, logging.DEBUG),
            ({"verbose": True, "debug": True}, logging.DEBUG),
        ],
    )
    def test_console_level(self, kwargs: dict[str, bool], level: int) -> None:
        """The console handler level follows the flags."""
        configure_logging(log_to_file=False, **kwargs)

        handler = logging.getLogger().handlers[-1]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == level

    def test_log_to_file_adds_handler(self) -> None:
        """By default a file handler is added next to the console one."""
        root = logging.getLogger()
        initial_count = len(root.handlers)

        configure_logging()

        assert len(root.handlers) == initial_count + 2
        assert log_config.LOG_DIR.exists()

    def test_unwritable_state_dir_keeps_console(self) -> None:
        root = logging.getLogger()
        initial_count = len(root.handlers)

        with patch.object(Path, "mkdir", side_effect=OSError("read-only")):
            configure_logging()

        assert len(root.handlers) == initial_count + 1

    def test_reconfigure_replaces_handlers(self) -> None:
        """A second call does not stack another pair of handlers."""
        root = logging.getLogger()
        initial_count = len(root.handlers)

        configure_logging()
        configure_logging(verbose=True)

        assert len(root.handlers) == initial_count + 2

    def test_file_log_is_json(self) -> None:
        """File records are JSON objects carrying the event name."""
        configure_logging()
        logging.getLogger("kubectl_fzf.test").warning("file_event")
        _flush_all()

        line = log_config.LOG_FILE.read_text().strip().splitlines()[-1]
        assert json.loads(line)["event"] == "file_event"

    def test_debug_events_reach_file_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The file keeps DEBUG events that the default console level hides."""
        configure_logging()
        structlog.get_logger("kubectl_fzf.test").debug("quiet_event", resource="pods")
        _flush_all()

        record = json.loads(log_config.LOG_FILE.read_text().strip().splitlines()[-1])
        assert record["event"] == "quiet_event"
        assert record["resource"] == "pods"
        captured = capsys.readouterr()
        assert "quiet_event" not in captured.err
        assert "quiet_event" not in captured.out

    def test_console_only_filters_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_to_file=False)
        log = structlog.get_logger("kubectl_fzf.test")
        log.info("hidden_event")
        log.warning("shown_event")

        captured = capsys.readouterr()
        assert "hidden_event" not in captured.err
        assert "shown_event" in captured.err
        assert captured.out == ""
