"""kubectl-fzf: pick Kubernetes resources interactively with fzf."""

from kubectl_fzf.__version__ import __version__

__all__ = ["__version__"]
