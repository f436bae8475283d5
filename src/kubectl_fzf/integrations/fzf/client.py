"""fzf wrapper for interactive selection.

fzf reads the candidate rows on stdin, reads keystrokes from the terminal
and prints the chosen line(s) on stdout.
"""

from __future__ import annotations

from typing import IO

import structlog

from kubectl_fzf.integrations.kubernetes.exceptions import SelectionFailedError
from kubectl_fzf.integrations.kubernetes.models import Cancelled, Selection, SelectionOutcome
from kubectl_fzf.integrations.runner import CommandRunner

logger = structlog.get_logger()

# fzf exits with 130 when interrupted with Ctrl-C or Esc (POSIX SIGINT convention)
FZF_EXIT_INTERRUPTED = 130


def parse_selection(output: str, multi: bool = False) -> tuple[str, ...]:
    """Extract identifiers from fzf output.

    The identifier is the first whitespace-separated field of each line.
    Single-select keeps only the first line.

    Example:
        >>> parse_selection("pod1  2/2  Running  2d")
        ('pod1',)
    """
    identifiers = tuple(
        line.split()[0] for line in output.strip().splitlines() if line.strip()
    )
    if not multi:
        return identifiers[:1]
    return identifiers


class FzfClient:
    """Runs fzf through a CommandRunner and interprets its exit status."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def select(
        self,
        candidates: str,
        options: str,
        *,
        multi: bool = False,
        stderr: IO[str] | None = None,
    ) -> SelectionOutcome:
        """Let the user pick rows from ``candidates``.

        Args:
            candidates: Listing text, one row per line.
            options: Resolved fzf option string.
            multi: Collect every selected line instead of only the first.
            stderr: Stream fzf draws on. None inherits the caller's.

        Returns:
            ``Selection`` with the picked identifiers, or ``Cancelled``.

        Raises:
            SelectionFailedError: If fzf could not be started, exited with any
                status other than 0 or 130, or printed nothing.
        """
        try:
            result = self._runner.run_selector(candidates, options, stderr)
        except OSError as e:
            logger.error("fzf_spawn_failed", error=str(e))
            raise SelectionFailedError(
                message=f"failed to run fzf {options}: {e}",
                original_error=e,
            ) from e

        if result.returncode == FZF_EXIT_INTERRUPTED:
            logger.info("selection_cancelled")
            return Cancelled()

        if not result.success:
            logger.error("fzf_failed", returncode=result.returncode, stderr=result.stderr)
            raise SelectionFailedError(
                message=f"failed to run fzf {options}: exit status {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        identifiers = parse_selection(result.stdout, multi=multi)
        if not identifiers:
            raise SelectionFailedError(
                message="fzf returned no selection",
                returncode=result.returncode,
                stderr=result.stderr,
            )
        logger.debug("selection_made", identifiers=list(identifiers))
        return Selection(identifiers=identifiers)
