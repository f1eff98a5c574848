"""
Name list reader.

Resolves batch inputs and yields one name per non-empty line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Union

from fullname_parser.core.exceptions import BatchInputError
from fullname_parser.logging import get_logger

log = get_logger(__name__)


def resolve_input_path(path: Union[str, Path]) -> Path:
    """
    Convert a user-provided path into an absolute, existing path.

    Raises:
        BatchInputError: if nothing exists at ``path``.
    """
    abs_path = Path(os.path.abspath(path))
    log.debug("Resolving input path: %s", abs_path)

    if not abs_path.exists():
        log.error("Input path does not exist: %s", abs_path)
        raise BatchInputError(f"Input path not found: {abs_path}")

    return abs_path


def locate_inputs(path: Union[str, Path]) -> List[Path]:
    """
    Files to process for ``path``.

    A file is returned as-is; a directory yields its regular, non-hidden
    files in name order.
    """
    resolved = resolve_input_path(path)
    if resolved.is_file():
        return [resolved]

    files = sorted(
        p for p in resolved.iterdir()
        if p.is_file() and not p.name.startswith(".")
    )
    log.debug("Found %d input files in %s", len(files), resolved)
    return files


def read_names(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield the stripped, non-empty lines of a UTF-8 name list.

    Raises:
        BatchInputError: if ``path`` is not a readable file.
    """
    file_path = Path(path)

    if not file_path.is_file():
        log.error("Input path is not a file: %s", file_path)
        raise BatchInputError(f"Name list not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        for raw_line in f:
            name = raw_line.strip()
            if not name:
                continue
            yield name
