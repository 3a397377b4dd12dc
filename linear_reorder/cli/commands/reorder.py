"""Reorder command - print runs of a level sequence in visual order."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from linear_reorder.config import Config
from linear_reorder.exceptions import LinearReorderError
from linear_reorder.reorder import Reorderer
from linear_reorder.runs import Line
from linear_reorder.validation import parse_levels

console = Console()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("levels", nargs=-1, required=True)
@click.option("--labels", help="Comma-separated label for each run, in logical order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def reorder(
    ctx: click.Context,
    levels: tuple[str, ...],
    labels: str | None,
    as_json: bool,
) -> None:
    """Show the visual order of runs with the given embedding levels.

    LEVELS: Embedding level of each run in logical order, separated by spaces
    or commas (e.g. "0 1 2 1 0").

    Odd-level runs are marked RTL; their content must be reversed for display.
    """
    config = (ctx.obj or {}).get("config") or Config.load()

    try:
        max_level = config.max_level if config.validate_levels else None
        level_list = parse_levels(" ".join(levels), max_level)
        label_list = labels.split(",") if labels is not None else None
        if label_list is not None and len(label_list) != len(level_list):
            raise click.BadParameter(
                f"expected {len(level_list)} labels, got {len(label_list)}",
                param_hint="--labels",
            )
        line = Reorderer(config).reorder_line(Line.from_levels(level_list, label_list))
    except LinearReorderError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    order = list(line.indices())

    if as_json:
        console.print_json(
            data={
                "levels": level_list,
                "visual_order": order,
                "runs": [
                    {
                        "index": index,
                        "level": line.runs[index].level,
                        "rtl": line.runs[index].is_rtl,
                        "label": line.runs[index].payload,
                    }
                    for index in order
                ],
            }
        )
        return

    table = Table(title="Visual Order")
    table.add_column("Position", style="dim", justify="right")
    table.add_column("Run", style="cyan", justify="right")
    table.add_column("Level", style="yellow", justify="right")
    table.add_column("Direction", style="green")
    if label_list is not None:
        table.add_column("Label")

    for position, index in enumerate(order):
        run = line.runs[index]
        row = [str(position), str(index), str(run.level), "RTL" if run.is_rtl else "LTR"]
        if label_list is not None:
            row.append(str(run.payload))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[bold]Visual order:[/bold] {' '.join(str(i) for i in order)}")
