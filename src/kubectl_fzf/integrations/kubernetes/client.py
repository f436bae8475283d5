"""kubectl command construction and execution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from kubectl_fzf.integrations.kubernetes.exceptions import ExternalCommandFailedError
from kubectl_fzf.integrations.kubernetes.models import CommandSpec, ResourceReference
from kubectl_fzf.integrations.runner import KUBECTL_BINARY, CommandRunner

logger = structlog.get_logger()


def build_arguments(
    operation: str,
    resource: str = "",
    names: Sequence[str] = (),
    namespace: str = "",
    options: Mapping[str, str] | None = None,
) -> list[str]:
    """Build the kubectl argument list.

    Order is operation, resource, names, ``-n=<namespace>``, then each option
    as ``key=value``. Empty resource and namespace contribute nothing.

    Example:
        >>> build_arguments("get", "pods", ["pod1"], "default", {"-o": "yaml"})
        ['get', 'pods', 'pod1', '-n=default', '-o=yaml']
    """
    args = [operation]
    if resource:
        args.append(resource)
    args.extend(names)
    if namespace:
        args.append(f"-n={namespace}")
    for key, value in (options or {}).items():
        args.append(f"{key}={value}")
    return args


class KubectlClient:
    """kubectl bound to one namespace.

    The resource type is passed per call because multi-resource follow-ups
    (``kubectl describe pod/a svc/b``) carry the kind inside each name.
    """

    def __init__(self, runner: CommandRunner, namespace: str = "") -> None:
        self._runner = runner
        self.namespace = namespace
        self._log = logger.bind(namespace=namespace or None)

    @classmethod
    def for_resource(cls, runner: CommandRunner, resource: ResourceReference) -> KubectlClient:
        return cls(runner, namespace=resource.namespace)

    def get_arguments(self, spec: CommandSpec) -> list[str]:
        return build_arguments(
            spec.operation,
            spec.resource,
            spec.names,
            self.namespace,
            spec.options,
        )

    def get_command(self, spec: CommandSpec) -> str:
        """Render the invocation as a shell-style string, for logs and messages."""
        return " ".join([KUBECTL_BINARY, *self.get_arguments(spec)])

    def run(self, spec: CommandSpec, merge_stderr: bool = True) -> str:
        """Run kubectl and return its output.

        Args:
            spec: The invocation to run.
            merge_stderr: Return stderr interleaved with stdout. When False only
                stdout is returned and stderr is kept for error messages.

        Raises:
            ExternalCommandFailedError: On non-zero exit or spawn failure.
        """
        args = self.get_arguments(spec)
        self._log.debug("running_kubectl", command=self.get_command(spec))
        try:
            result = self._runner.run_kubectl(args, merge_stderr=merge_stderr)
        except OSError as e:
            self._log.error("kubectl_spawn_failed", args=args, error=str(e))
            raise ExternalCommandFailedError(args, original_error=e) from e

        if not result.success:
            output = result.stdout + result.stderr
            self._log.error(
                "kubectl_command_failed",
                args=args,
                returncode=result.returncode,
                output=output,
            )
            raise ExternalCommandFailedError(args, returncode=result.returncode, output=output)

        if result.stderr:
            self._log.debug("kubectl_stderr", args=args, stderr=result.stderr.strip())
        return result.stdout
