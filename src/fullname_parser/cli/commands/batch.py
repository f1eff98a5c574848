from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fullname_parser.batch import FORMATS
from fullname_parser.config import get_config
from fullname_parser.core.context import BatchContext
from fullname_parser.core.exceptions import PipelineError
from fullname_parser.core.pipeline import BatchPipeline
from fullname_parser.logging import get_logger, set_debug

console = Console()


def batch_command(
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        help="Name list file, or a directory of them",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output directory (or file, for a single input file)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: csv or json",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        help="Field delimiter for csv output",
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
    Parse every line of a name list and write a csv or json table.
    """
    cfg = get_config()
    if verbose:
        set_debug(True)

    fmt = fmt or cfg.batch.get("format") or "csv"
    if fmt not in FORMATS:
        raise typer.BadParameter(f"expected one of {', '.join(FORMATS)}", param_hint="--format")

    ctx = BatchContext(
        config=cfg,
        logger=get_logger("cli.batch"),
        input_path=str(input_path),
        output_path=str(out or cfg.paths.get("output_dir") or "."),
        format=fmt,
        delimiter=delimiter or cfg.batch.get("delimiter") or ",",
        dictionary_path=str(dictionary) if dictionary else None,
        debug=verbose,
    )

    try:
        counts = BatchPipeline(ctx).run()
    except PipelineError as exc:
        console.print(f"[red]Batch failed:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="Batch Summary")
    table.add_column("Input file", style="bold")
    table.add_column("Records", justify="right")

    for name, count in counts.items():
        table.add_row(name, str(count))
    table.add_row("Total", str(ctx.stats["records"]))

    console.print(table)
