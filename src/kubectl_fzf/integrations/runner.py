"""Process execution boundary for kubectl and fzf.

Every side effect kubectl-fzf has on the outside world goes through a
``CommandRunner``. Workflows receive one explicitly, so tests can swap in
a fake without patching globals.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO

import structlog

from kubectl_fzf.integrations.kubernetes.exceptions import BinaryNotFoundError

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

KUBECTL_BINARY = "kubectl"
FZF_BINARY = "fzf"
KUBECTL_INSTALL_URL = "https://kubernetes.io/docs/tasks/tools/"
FZF_INSTALL_URL = "https://github.com/junegunn/fzf#installation"


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class CommandResult:
    """Outcome of one external process."""

    args: list[str]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


# ---------------------------------------------------------------------------
# Runner interface
# ---------------------------------------------------------------------------


class CommandRunner(ABC):
    """Capability to run kubectl and the fzf selector."""

    @abstractmethod
    def run_kubectl(self, args: Sequence[str], merge_stderr: bool = True) -> CommandResult:
        """Run kubectl with ``args``.

        Args:
            args: Arguments after the binary name.
            merge_stderr: Capture stderr interleaved into stdout. When False
                stderr is captured on its own, so listings stay free of
                "No resources found" and "Warning:" lines.
        """

    @abstractmethod
    def run_selector(
        self,
        candidates: str,
        options: str,
        stderr: IO[str] | None = None,
    ) -> CommandResult:
        """Run fzf on ``candidates`` and capture the chosen line(s).

        Args:
            candidates: Rows fed to fzf on its standard input.
            options: Shell-quoted option string, e.g. ``--preview 'kubectl ...'``.
            stderr: Stream fzf draws its interface on. None inherits ours.
        """


# ---------------------------------------------------------------------------
# Subprocess implementation
# ---------------------------------------------------------------------------


def find_binary(name: str, binary_path: str | None = None, install_hint: str = "") -> str:
    """Locate an executable.

    Args:
        name: Executable name searched on PATH.
        binary_path: Explicit path or None to search PATH.
        install_hint: URL shown when the binary is missing.

    Returns:
        Path to the binary.

    Raises:
        BinaryNotFoundError: If not found.
    """
    if binary_path:
        path = Path(binary_path)
        if not path.exists():
            raise BinaryNotFoundError(name, install_hint)
        return str(path.resolve())

    found = shutil.which(name)
    if not found:
        raise BinaryNotFoundError(name, install_hint)

    return found


class SubprocessRunner(CommandRunner):
    """Runs the real kubectl and fzf binaries.

    No timeouts are applied: fzf waits on a human, and a slow ``describe``
    can be interrupted from the terminal.
    """

    def __init__(
        self,
        kubectl_path: str | None = None,
        fzf_path: str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            kubectl_path: Optional explicit path to kubectl.
            fzf_path: Optional explicit path to fzf.

        Raises:
            BinaryNotFoundError: If either binary is not found.
        """
        self._kubectl = find_binary(KUBECTL_BINARY, kubectl_path, KUBECTL_INSTALL_URL)
        self._fzf = find_binary(FZF_BINARY, fzf_path, FZF_INSTALL_URL)
        self._log = logger.bind(kubectl=self._kubectl, fzf=self._fzf)
        self._log.debug("subprocess_runner_initialized")

    def run_kubectl(self, args: Sequence[str], merge_stderr: bool = True) -> CommandResult:
        cmd = [self._kubectl, *args]
        self._log.debug("running_kubectl_command", args=list(args), merge_stderr=merge_stderr)
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            text=True,
            check=False,
        )
        return CommandResult(
            args=cmd,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr or "",
        )

    def run_selector(
        self,
        candidates: str,
        options: str,
        stderr: IO[str] | None = None,
    ) -> CommandResult:
        # Options arrive pre-quoted (the preview command sits in single quotes),
        # so they go through the shell rather than being split here.
        command_line = f"{shlex.quote(self._fzf)} {options}"
        self._log.debug("running_fzf", command=command_line)
        result = subprocess.run(
            command_line,
            shell=True,
            input=candidates,
            stdout=subprocess.PIPE,
            stderr=stderr,
            text=True,
            check=False,
        )
        return CommandResult(
            args=["sh", "-c", command_line],
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr or "",
        )
