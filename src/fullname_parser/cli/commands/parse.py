from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from fullname_parser.cli.utils import build_parser, records_table, write_json

console = Console()


def parse_command(
    names: List[str] = typer.Argument(..., help="One or more names (quote each one)"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
    dictionary: Optional[Path] = typer.Option(
        None,
        "--dictionary",
        "-d",
        exists=True,
        readable=True,
        help="YAML file overriding the built-in tables",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Parse names given on the command line.
    """
    parser = build_parser(dictionary, verbose=verbose)
    records = [parser.parse(name) for name in names]

    if as_json:
        write_json(records)
        return

    console.print(records_table(records))
