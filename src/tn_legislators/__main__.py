"""Entry point for ``python -m tn_legislators``."""

from tn_legislators.cli.app import app

app()
