"""Command line interface for art3a."""

from art3a.cli.main import main

__all__ = ["main"]
