"""Command construction, selection and output services."""
