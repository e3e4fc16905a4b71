"""Entry point for python -m vendorprune."""

from vendorprune.cli import app

app()
