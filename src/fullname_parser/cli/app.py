from __future__ import annotations

import typer
from rich.console import Console

from fullname_parser.cli.commands.batch import batch_command
from fullname_parser.cli.commands.parse import parse_command

app = typer.Typer(
    name="fullname-parser",
    help="Split personal names into prefix, first, middle, last and suffix",
    add_completion=False,
)

console = Console()

app.command("parse")(parse_command)
app.command("batch")(batch_command)


def main():
    app()


if __name__ == "__main__":
    main()
