"""kubectl-fzf custom exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class KubectlFzfError(Exception):
    """Base exception for kubectl-fzf.

    Attributes:
        message: Human-readable error message.
        resource_type: Kubernetes resource type involved (e.g., "pods").
        namespace: Namespace involved (if any).
    """

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubectlFzfError.

        Args:
            message: Human-readable error message.
            resource_type: Resource type involved.
            namespace: Namespace involved.
        """
        super().__init__(message)
        self.message = message
        self.resource_type = resource_type
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.resource_type:
            loc = f"[{self.resource_type}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class ConfigurationError(KubectlFzfError):
    """Raised when the requested invocation is invalid.

    Always detected before any subprocess is spawned.
    """


class InvalidPreviewKindError(ConfigurationError):
    """Raised when the preview format is not one of the supported kinds."""

    def __init__(self, value: object) -> None:
        super().__init__(message=f"preview format must be one of [describe, yaml], got {value!r}")
        self.value = value


class InvalidOutputFormatError(ConfigurationError):
    """Raised when the output format is not one of the supported formats."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"output format must be one of [name, describe, yaml, json], got {value!r}"
        )
        self.value = value


class InvalidEnvironmentOverrideError(KubectlFzfError):
    """Raised when an fzf option template references unknown variables.

    Attributes:
        variable: Environment variable holding the template.
        invalid_names: Every unresolved placeholder name, each listed once.
    """

    def __init__(self, variable: str, invalid_names: Sequence[str]) -> None:
        self.variable = variable
        self.invalid_names = list(invalid_names)
        super().__init__(
            message=(
                f"{variable} has invalid environment variables: {','.join(self.invalid_names)}"
            ),
        )


class NoResourcesFoundError(KubectlFzfError):
    """Raised when the listing has no selectable rows.

    The usual cause is a namespace that does not exist.
    """

    def __init__(self, resource_type: str | None = None, namespace: str | None = None) -> None:
        super().__init__(
            message="No resources found. Namespace may not exist",
            resource_type=resource_type,
            namespace=namespace,
        )


class SelectionFailedError(KubectlFzfError):
    """Raised when fzf fails for a reason other than user cancellation."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize SelectionFailedError.

        Args:
            message: Human-readable error message.
            returncode: fzf exit status, if it ran.
            stderr: Captured error output, if any.
            original_error: The exception that caused this error.
        """
        super().__init__(message=message)
        self.returncode = returncode
        self.stderr = stderr
        self.original_error = original_error


class ExternalCommandFailedError(KubectlFzfError):
    """Raised when kubectl exits with a non-zero status.

    The captured output is kept because it is usually the most useful
    diagnostic (e.g. "the server doesn't have a resource type").
    """

    def __init__(
        self,
        args: Sequence[str],
        returncode: int | None = None,
        output: str = "",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize ExternalCommandFailedError.

        Args:
            args: Arguments passed to kubectl.
            returncode: kubectl exit status, if it ran.
            output: Combined stdout/stderr captured from kubectl.
            original_error: The exception that caused this error.
        """
        self.command_args = list(args)
        self.returncode = returncode
        self.output = output
        self.original_error = original_error
        if returncode is not None:
            cause = f"exit status {returncode}"
        else:
            cause = str(original_error) if original_error else "unknown error"
        message = f"failed get kubernetes resource: {cause}"
        if output.strip():
            message += f". kubectl output: {output.strip()}"
        super().__init__(message=message)


class BinaryNotFoundError(KubectlFzfError):
    """Raised when kubectl or fzf is not found."""

    def __init__(self, binary: str, install_hint: str = "") -> None:
        message = f"{binary} binary not found in PATH."
        if install_hint:
            message += f" Install from: {install_hint}"
        super().__init__(message=message)
        self.binary = binary
