"""fzf integration."""

from kubectl_fzf.integrations.fzf.client import FZF_EXIT_INTERRUPTED, FzfClient, parse_selection

__all__ = ["FZF_EXIT_INTERRUPTED", "FzfClient", "parse_selection"]
