"""
Describe command - prescan a data file, pick a type per column and save
the model description.
"""
import os
from typing import List, Optional

import click
from rich.prompt import Prompt

from modelwarp.cli.console import console
from modelwarp.cli.helpers import get_settings, run_guess
from modelwarp.model import DatasetDescription, choose_column_types
from modelwarp.utils import dataset_name_from_path

QUESTION_FMT = 'Select data type of column #{} ({})'


def ask_column_type(number: int, header: str, options: List[str]) -> str:
    """Prompt for one of the candidate types of a column."""
    if len(options) == 1:
        console.print(f"{QUESTION_FMT.format(number, header)}: [type]{options[0]}[/] [muted](only candidate)[/]")
        return options[0]
    return Prompt.ask(QUESTION_FMT.format(number, header), choices=options, console=console)


@click.command('describe')
@click.option('--file-csv', 'file_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='Path to the CSV (or Excel) file')
@click.option('--sheet', help='Excel sheet name (first sheet if not provided)')
@click.option('--name', help='Name of the dataset (prompted if not provided)')
@click.option('--output', help='Output JSON file for the model description (prompted if not provided)')
@click.option('--limit', type=click.IntRange(min=0), help='Number of rows to scan')
@click.pass_context
def describe_command(
    ctx: click.Context,
    file_path: str,
    sheet: Optional[str],
    name: Optional[str],
    output: Optional[str],
    limit: Optional[int],
):
    """
    Describe a dataset.

    Prescans the file, picks possible logical model types for its columns
    and asks you to confirm one per column. Only one column can be the
    connection point.
    """
    settings = get_settings(ctx)
    limit = settings.sample_limit if limit is None else limit

    guesser, guess = run_guess(file_path, sheet, limit, settings)
    console.print(f"\n[info]Describing:[/] {file_path} [muted]({len(guesser.headers)} columns)[/]\n")

    columns = choose_column_types(guesser.headers, guess, ask_column_type)

    name = name or Prompt.ask("Enter the dataset name", default=dataset_name_from_path(file_path), console=console)
    output = output or Prompt.ask(
        "Enter path to the file where to save the model description",
        default=f"{name}.json",
        console=console,
    )

    description = DatasetDescription(title=name, columns=columns)
    try:
        description.save(output)
    except OSError as e:
        console.print(f"[error]Cannot write {output}: {e.strerror}[/]")
        raise SystemExit(1)

    console.print(f"\n[success]Model description saved to {os.path.abspath(output)}[/]")
