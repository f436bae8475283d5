"""Structured logging for kubectl-fzf.

stdout carries the selected resources and is usually piped into another
command, so console logs only ever go to stderr. Every event, whatever the
console level, is also kept as JSON in a rotating file under
~/.local/state/kubectl-fzf/.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

LOG_DIR = Path.home() / ".local" / "state" / "kubectl-fzf"
LOG_FILE = LOG_DIR / "kubectl-fzf.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
RETENTION_DAYS = 30

# Runs on structlog events and on records from plain stdlib loggers alike
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

# Handlers added by the most recent configure_logging call
_installed_handlers: list[logging.Handler] = []


def _console_level(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    return logging.INFO if verbose else logging.WARNING


def _stderr_handler(level: int, debug: bool) -> logging.Handler:
    """Human-readable handler; colours only when stderr is a terminal."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=debug),
            ),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )
    return handler


def _prune_old_logs() -> None:
    """Delete log files older than RETENTION_DAYS."""
    cutoff = (datetime.now() - timedelta(days=RETENTION_DAYS)).timestamp()
    for path in LOG_DIR.glob(f"{LOG_FILE.name}*"):
        with contextlib.suppress(OSError):
            if path.stat().st_mtime < cutoff:
                path.unlink()


def _file_handler() -> logging.Handler | None:
    """Return the rotating JSON handler, or None when LOG_DIR is not writable."""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None

    _prune_old_logs()

    handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )
    return handler


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    log_to_file: bool = True,
) -> None:
    """Route structlog through stdlib logging to stderr and the log file.

    Calling it again replaces the handlers of the previous call.

    Args:
        verbose: Show INFO events on stderr.
        debug: Show DEBUG events on stderr, with locals in tracebacks.
        log_to_file: Also write every event to the rotating log file.
    """
    console_level = _console_level(verbose, debug)

    handlers = [_stderr_handler(console_level, debug)]
    if log_to_file:
        file_handler = _file_handler()
        if file_handler is not None:
            handlers.append(file_handler)

    # The file wants DEBUG events even when the console does not
    event_level = logging.DEBUG if len(handlers) > 1 else console_level
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(event_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = handlers
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)
