"""Core configuration for kubectl-fzf."""
