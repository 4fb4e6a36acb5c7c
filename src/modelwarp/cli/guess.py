"""
Guess command - show the ranked candidate types of every column.
"""
from typing import List, Optional

import click
from rich.table import Table

from modelwarp.cli.console import console
from modelwarp.cli.helpers import get_settings, run_guess
from modelwarp.guesser import GuessResult


@click.command('guess')
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--sheet', help='Excel sheet name (first sheet if not provided)')
@click.option('--limit', type=click.IntRange(min=0), help='Number of rows to scan')
@click.pass_context
def guess_command(ctx: click.Context, file_path: str, sheet: Optional[str], limit: Optional[int]):
    """Guess logical model types for the columns of FILE_PATH."""
    settings = get_settings(ctx)
    limit = settings.sample_limit if limit is None else limit

    guesser, guess = run_guess(file_path, sheet, limit, settings)
    display_guess_table(guesser.headers, guess, file_path)


def display_guess_table(headers: List[str], guess: GuessResult, filename: str) -> None:
    """Display a table of columns with their candidate types, most preferred first."""
    table = Table(title=f"Column types in {filename}")
    table.add_column("#", style="dim", width=3)
    table.add_column("Column", style="bold")
    table.add_column("Candidates", style="type")

    shown = set()
    for i, header in enumerate(headers, 1):
        if header in shown:
            continue
        shown.add(header)
        candidates = guess.get(header, [])
        table.add_row(
            str(i),
            header,
            ", ".join(str(t) for t in candidates) if candidates else "[warning]none[/]",
        )
    console.print(table)

    empty = [h for h in shown if not guess.get(h)]
    if empty:
        console.print(f"\n  [warning]{len(empty)} column(s) with no candidate type[/]")
