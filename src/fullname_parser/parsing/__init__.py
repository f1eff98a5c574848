# src/fullname_parser/parsing/__init__.py

"""
Public interface for the name decomposition stages.

    from fullname_parser.parsing import (
        FullNameParser,
        parse_name,
        fix_case,
        break_words,
        split_surname,
    )
"""

from __future__ import annotations

from .casing import fix_case, is_camel_case
from .fallback import fallback_record
from .nickname import find_nickname
from .parser import FullNameParser, default_parser, parse_name
from .segmenter import is_initial, segment_given_names
from .stripper import strip_line_suffixes, strip_prefix_and_suffix, strip_prefixes
from .suffixes import ProfessionalSuffixMatcher, match_line_suffix, split_professional_suffix
from .surname import compose_surname, split_surname
from .tokenizer import break_words, repack

__all__ = [
    "FullNameParser",
    "ProfessionalSuffixMatcher",
    "break_words",
    "compose_surname",
    "default_parser",
    "fallback_record",
    "find_nickname",
    "fix_case",
    "is_camel_case",
    "is_initial",
    "match_line_suffix",
    "parse_name",
    "repack",
    "segment_given_names",
    "split_professional_suffix",
    "split_surname",
    "strip_line_suffixes",
    "strip_prefix_and_suffix",
    "strip_prefixes",
]
