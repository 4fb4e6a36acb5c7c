"""
Shared utility functions for modelwarp CLI commands.
"""
import csv
import os
from typing import Optional, Tuple

import click

from modelwarp.cli.console import console
from modelwarp.config import Settings
from modelwarp.exceptions import GuessError
from modelwarp.guesser import Guesser, GuessResult
from modelwarp.loader import get_sheet_names, open_row_source
from modelwarp.loader.sources import EXCEL_EXTENSIONS


def get_settings(ctx: click.Context) -> Settings:
    """Settings loaded by the command group, or from the environment when run standalone."""
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return Settings.from_env()


def check_sheet(file_path: str, sheet: Optional[str]) -> None:
    """Exit with status 1 if an Excel file has no sheet called `sheet`."""
    if not sheet:
        return
    if os.path.splitext(file_path)[1].lower() not in EXCEL_EXTENSIONS:
        console.print(f"[warning]--sheet is ignored for {os.path.basename(file_path)}[/]")
        return

    try:
        sheets = get_sheet_names(file_path)
    except (OSError, ValueError) as e:
        console.print(f"[error]Cannot read {file_path}: {e}[/]")
        raise SystemExit(1)
    if sheet not in sheets:
        console.print(f"[error]Sheet '{sheet}' not found. Available: {', '.join(sheets)}[/]")
        raise SystemExit(1)


def run_guess(file_path: str, sheet: Optional[str], limit: int, settings: Settings) -> Tuple[Guesser, GuessResult]:
    """
    Open a data file and guess its column types.

    Prints the error and exits with status 1 if the file cannot be read or
    its rows are malformed.
    """
    check_sheet(file_path, sheet)
    try:
        source = open_row_source(file_path, sheet, encoding=settings.csv_encoding)
        with console.status(f"Scanning up to {limit} rows..."):
            guesser = Guesser(source)
            guess = guesser.guess(limit)
    except GuessError as e:
        console.print(f"[error]Cannot guess column types of {file_path}: {e}[/]")
        raise SystemExit(1)
    except (OSError, ValueError, csv.Error) as e:
        console.print(f"[error]Cannot read {file_path}: {e}[/]")
        raise SystemExit(1)
    return guesser, guess
