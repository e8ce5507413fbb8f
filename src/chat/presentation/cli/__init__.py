"""Command-line interface."""

from chat.presentation.cli.app import app

__all__ = ["app"]
