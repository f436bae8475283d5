"""Version information for kubectl_fzf."""

__version__ = "0.3.0"
