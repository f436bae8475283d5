"""Wrappers around the external binaries kubectl-fzf delegates to."""
