"""
Batch I/O: read name lists, write parsed tables.
"""

from __future__ import annotations

from .reader import locate_inputs, read_names, resolve_input_path
from .writer import FORMATS, dump_records, write_records

__all__ = [
    "FORMATS",
    "dump_records",
    "locate_inputs",
    "read_names",
    "resolve_input_path",
    "write_records",
]
