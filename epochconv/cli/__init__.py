"""CLI package public API shim."""

from .click_app import cli, main  # Click entrypoint

__all__ = ["cli", "main"]
