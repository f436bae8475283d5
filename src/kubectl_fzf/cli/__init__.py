"""Command-line interface for kubectl-fzf."""
