from __future__ import annotations

import json
import time
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from fullname_parser.dictionary import load_dictionary
from fullname_parser.logging import set_debug
from fullname_parser.models import NameRecord
from fullname_parser.parsing import FullNameParser

console = Console()


def build_parser(dictionary: Optional[Path] = None, *, verbose: bool = False) -> FullNameParser:
    """
    Parser for one CLI invocation: the given tables file, else the configured
    one, else the built-in tables.
    """
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()
    parser = FullNameParser(load_dictionary(dictionary))
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded dictionary in {elapsed:.3f}s")

    return parser


def records_table(records: Sequence[NameRecord], *, title: str = "Parsed Names") -> Table:
    table = Table(title=title)
    table.add_column("Full name", style="bold")
    table.add_column("Prefix")
    table.add_column("First")
    table.add_column("Middle")
    table.add_column("Last")
    table.add_column("Suffix")

    for record in records:
        table.add_row(*record.to_row())

    return table


def write_json(records: List[NameRecord], *, pretty: bool = True):
    """
    Print records as a JSON list to stdout.
    """
    data = [record.to_dict() for record in records]
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    print(payload)
