"""Logging configuration for kubectl_fzf."""

from kubectl_fzf.logging.config import configure_logging

__all__ = ["configure_logging"]
