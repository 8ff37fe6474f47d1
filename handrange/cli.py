import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from handrange.cells import RANKS, cell_code, range_pct, sort_codes, total_combos
from handrange.config import get_config
from handrange.errors import RangeSyntaxError
from handrange.matrix import range_highlight
from handrange.presets import get_spot, list_spots
from handrange.ranges import parse_range_expression

console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise click.exceptions.Exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log ignored tokens and config lookup.")
def main(verbose: bool):
    """Expand and inspect poker hand-range notation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("spec")
@click.option("--strict", is_flag=True, help="Fail on tokens that expand to nothing.")
def expand(spec: str, strict: bool):
    """Print the hands a range expression denotes."""
    try:
        sets = parse_range_expression(spec, strict=strict or get_config().parser.strict)
    except RangeSyntaxError as e:
        _fail(str(e))

    base = sort_codes(sets.base)
    emph = sort_codes(sets.emph)
    console.print(f"[bold]Range:[/bold] {', '.join(base) or '-'}")
    if emph:
        console.print(f"[bold]Emphasized:[/bold] {', '.join(emph)}")
    console.print(f"[dim]{len(base)} hands, {total_combos(base)} combos "
                  f"({range_pct(base):.1f}%)[/dim]")
    if sets.rejected:
        console.print(f"[yellow]Ignored:[/yellow] {escape(', '.join(sets.rejected))}")


@main.command()
@click.argument("spec")
@click.option("--base-color", default=None, help="Background for base cells.")
@click.option("--emph-color", default=None, help="Background for emphasized cells.")
def grid(spec: str, base_color: Optional[str], emph_color: Optional[str]):
    """Draw the 13x13 matrix with the range highlighted."""
    style = range_highlight(spec, base_color=base_color, emphasize_color=emph_color)
    table = Table(show_header=False, show_lines=False, padding=(0, 1), box=None)
    for _ in RANKS:
        table.add_column(justify="center")
    for row in range(len(RANKS)):
        cells = []
        for col in range(len(RANKS)):
            code = cell_code(row, col)
            rich_style = style(code).rich_style
            cells.append(f"[{rich_style}]{code}[/]" if rich_style else f"[dim]{code}[/dim]")
        table.add_row(*cells)
    console.print(table)


@main.command()
@click.argument("spot", required=False)
def presets(spot: Optional[str]):
    """List preset spots, or show the ranges of one spot."""
    if spot is None:
        for key in list_spots():
            console.print(key)
        return
    try:
        data = get_spot(spot)
    except KeyError as e:
        _fail(e.args[0])

    table = Table(title=data.key)
    table.add_column("Line", style="cyan")
    table.add_column("Range")
    table.add_column("Combos", justify="right")
    for row in data.rows():
        table.add_row(row.label, escape(row.range), str(total_combos(row.sets.base)))
    console.print(table)


if __name__ == "__main__":
    main()
