"""Entry point for the linear-reorder command line."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from linear_reorder import __version__
from linear_reorder.cli.commands import bench, reorder, verify
from linear_reorder.config import Config
from linear_reorder.exceptions import ConfigError

console = Console()


def setup_logging(level: str) -> None:
    """Route library logging through rich at ``level``."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="linear-reorder")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.option("-v", "--verbose", is_flag=True, help="Shortcut for --log-level DEBUG")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    verbose: bool,
) -> None:
    """Reorder bidi runs from logical to visual order (UAX #9 rule L2)."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    if verbose:
        log_level = "DEBUG"
    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(reorder)
cli.add_command(verify)
cli.add_command(bench)


if __name__ == "__main__":
    cli()
