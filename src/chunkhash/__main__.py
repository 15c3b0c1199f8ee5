"""Allow running as ``python -m chunkhash``."""

from chunkhash.cli.app import app

app()
