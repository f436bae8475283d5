"""Test suite for kubectl_fzf."""
