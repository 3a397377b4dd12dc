"""Verify command - cross-check the linear sweep against brute-force L2."""

from __future__ import annotations

import random

import click
from rich.console import Console

from linear_reorder.config import Config
from linear_reorder.reference import reorder_by_reversal
from linear_reorder.reorder import Reorderer

console = Console()


@click.command()
@click.option("-n", "--count", type=click.IntRange(min=1), default=1000, help="Sequences to check")
@click.option("--max-length", type=click.IntRange(min=0), default=20, help="Longest sequence")
@click.option("--max-level", type=click.IntRange(min=0), default=6, help="Highest level generated")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible runs")
@click.pass_context
def verify(
    ctx: click.Context,
    count: int,
    max_length: int,
    max_level: int,
    seed: int | None,
) -> None:
    """Check random level sequences against the brute-force L2 rule."""
    config = (ctx.obj or {}).get("config") or Config.load()
    if max_level > config.max_level:
        console.print(
            f"[red]Error:[/red] --max-level {max_level} exceeds configured "
            f"max_level {config.max_level}"
        )
        raise SystemExit(1)

    rng = random.Random(seed)
    reorderer = Reorderer(config)

    with console.status(f"[bold green]Checking {count} sequences..."):
        for _ in range(count):
            length = rng.randint(0, max_length)
            levels = [rng.randint(0, max_level) for _ in range(length)]
            actual = reorderer.visual_order(levels)
            expected = reorder_by_reversal(levels)
            if actual != expected:
                console.print("[red]Mismatch:[/red]")
                console.print(f"  [blue]Levels:[/blue]   {levels}")
                console.print(f"  [blue]Linear:[/blue]   {actual}")
                console.print(f"  [blue]Expected:[/blue] {expected}")
                raise SystemExit(1)

    console.print(f"[green]OK:[/green] {count} sequences match the reference order")
