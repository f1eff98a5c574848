"""
fullname_parser

Splits free-form personal names into prefix, first, middle, last and suffix.

    from fullname_parser import parse

    parse("Anthony Von Fange III, PhD").last   # "Von Fange"
"""

from fullname_parser.dictionary import Dictionary, DictionaryError, PrefixGroup, load_dictionary
from fullname_parser.models import NameRecord
from fullname_parser.parsing import FullNameParser, fix_case, parse_name

parse = parse_name

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "DictionaryError",
    "FullNameParser",
    "NameRecord",
    "PrefixGroup",
    "fix_case",
    "load_dictionary",
    "parse",
    "parse_name",
]
