"""Command-line interface for linear-reorder."""

from linear_reorder.cli.main import cli

__all__ = ["cli"]
