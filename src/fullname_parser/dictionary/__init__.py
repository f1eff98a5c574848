"""
Lookup tables for honorifics, suffixes and surname particles.
"""

from fullname_parser.dictionary.dictionary import (
    Dictionary,
    DictionaryError,
    PrefixGroup,
    load_dictionary,
    order_professional_suffixes,
    prefix_key,
)

__all__ = [
    "Dictionary",
    "DictionaryError",
    "PrefixGroup",
    "load_dictionary",
    "order_professional_suffixes",
    "prefix_key",
]
