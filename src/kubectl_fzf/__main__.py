"""Allow ``python -m kubectl_fzf``."""

from kubectl_fzf.cli.main import app

app()
