"""
writer.py
Delimited-table and JSON output for parsed name records.

Both formats keep the NameRecord field order:

    full_name, prefix, first, middle, last, suffix
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable, TextIO, Union

from fullname_parser.logging import get_logger
from fullname_parser.models import NameRecord

log = get_logger(__name__)

FORMATS = ("csv", "json")


def dump_records(
    records: Iterable[NameRecord],
    stream: TextIO,
    *,
    fmt: str = "csv",
    delimiter: str = ",",
) -> int:
    """
    Write records to an open text stream. Returns the number written.

    csv:  header row of the six field names, then one row per record
    json: a list of objects keyed by field name
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported output format {fmt!r}; expected one of {FORMATS}")

    count = 0
    if fmt == "csv":
        writer = csv.writer(stream, delimiter=delimiter, lineterminator="\n")
        writer.writerow(NameRecord.FIELDS)
        for record in records:
            writer.writerow(record.to_row())
            count += 1
        return count

    rows = [record.to_dict() for record in records]
    json.dump(rows, stream, ensure_ascii=False, indent=2)
    stream.write("\n")
    return len(rows)


def write_records(
    records: Iterable[NameRecord],
    path: Union[str, Path],
    *,
    fmt: str = "csv",
    delimiter: str = ",",
) -> int:
    """Write records to ``path`` (parent directories are created)."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with out_path.open("w", encoding="utf-8", newline="") as f:
        count = dump_records(records, f, fmt=fmt, delimiter=delimiter)

    log.info("Wrote %d records to %s", count, out_path)
    return count
