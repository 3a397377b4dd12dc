"""Bench command - measure how sweep time scales with line length."""

from __future__ import annotations

import random
import time

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from linear_reorder.config import Config
from linear_reorder.reorder import Reorderer
from linear_reorder.runs import Line

console = Console()


def parse_sizes(value: str) -> list[int]:
    """Parse a comma-separated list of positive line lengths."""
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"not a list of integers: {value!r}") from None
    if len(sizes) < 2 or any(size < 1 for size in sizes):
        raise click.BadParameter("need at least two positive sizes")
    return sorted(sizes)


def time_sweep(reorderer: Reorderer, levels: list[int], repeat: int) -> float:
    """Return the best wall time of ``repeat`` sweeps over fresh lines."""
    best = float("inf")
    for _ in range(repeat):
        line = Line.from_levels(levels)
        start = time.perf_counter()
        reorderer.reorder_line(line)
        best = min(best, time.perf_counter() - start)
    return best


def scaling_exponent(sizes: list[int], seconds: list[float]) -> float:
    """Least-squares slope of log(time) against log(size); ~1.0 means linear."""
    slope, _intercept = np.polyfit(np.log(sizes), np.log(seconds), 1)
    return float(slope)


@click.command()
@click.option("--sizes", default="1000,10000,100000", help="Comma-separated line lengths")
@click.option("-r", "--repeat", type=click.IntRange(min=1), default=3, help="Timings per size")
@click.option("--max-level", type=click.IntRange(min=0), default=10, help="Highest level generated")
@click.option("--seed", type=int, default=0, help="Random seed")
@click.option("--max-slope", type=float, default=None, help="Fail if the scaling exponent exceeds this")
@click.pass_context
def bench(
    ctx: click.Context,
    sizes: str,
    repeat: int,
    max_level: int,
    seed: int,
    max_slope: float | None,
) -> None:
    """Time the sweep over random lines of growing length."""
    config = (ctx.obj or {}).get("config") or Config.load()
    size_list = parse_sizes(sizes)
    if max_level > config.max_level:
        console.print(
            f"[red]Error:[/red] --max-level {max_level} exceeds configured "
            f"max_level {config.max_level}"
        )
        raise SystemExit(1)

    rng = random.Random(seed)
    reorderer = Reorderer(config)

    table = Table(title="Sweep Timing")
    table.add_column("Runs", style="cyan", justify="right")
    table.add_column("Best (ms)", style="yellow", justify="right")
    table.add_column("ns / run", style="green", justify="right")

    timings: list[float] = []
    with console.status("[bold green]Timing..."):
        for size in size_list:
            levels = [rng.randint(0, max_level) for _ in range(size)]
            seconds = max(time_sweep(reorderer, levels, repeat), 1e-9)
            timings.append(seconds)
            table.add_row(
                str(size), f"{seconds * 1e3:.3f}", f"{seconds / size * 1e9:.1f}"
            )

    console.print(table)
    slope = scaling_exponent(size_list, timings)
    console.print(f"\n[bold]Scaling exponent:[/bold] {slope:.2f}")

    if max_slope is not None and slope > max_slope:
        console.print(f"[red]FAIL:[/red] exponent above {max_slope}")
        raise SystemExit(1)
