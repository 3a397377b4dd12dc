"""CLI commands for linear-reorder."""

from linear_reorder.cli.commands.bench import bench
from linear_reorder.cli.commands.reorder import reorder
from linear_reorder.cli.commands.verify import verify

__all__ = ["reorder", "verify", "bench"]
