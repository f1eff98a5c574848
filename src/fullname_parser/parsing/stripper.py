"""
Peel honorific prefixes off the front of a token list and lineage suffixes
off the back.
"""

from __future__ import annotations

from typing import List, Tuple

from fullname_parser.dictionary import Dictionary
from fullname_parser.models import ParseState
from fullname_parser.parsing.suffixes import match_line_suffix


def strip_prefixes(tokens: List[str], dictionary: Dictionary) -> Tuple[str, List[str]]:
    """
    Remove leading honorifics, chained ones included ("Rev. Dr.").

    Returns the space-joined display forms and the remaining tokens.
    """
    shown: List[str] = []
    remaining = list(tokens)
    while remaining:
        group = dictionary.find_prefix(remaining[0])
        if group is None:
            break
        display = group.display(remaining[0]).strip()
        if display:
            shown.append(display)
        remaining.pop(0)
    return " ".join(shown), remaining


def strip_line_suffixes(
    tokens: List[str],
    suffix: str,
    original: str,
    dictionary: Dictionary,
) -> Tuple[str, List[str]]:
    """
    Remove trailing lineage suffixes, rightmost first.

    Each match is put in front of what was already collected, so
    "Kameda II Jr." yields "II, Jr." and an existing professional suffix
    stays last ("III, PhD").
    """
    remaining = list(tokens)
    while remaining:
        matched = match_line_suffix(remaining[-1], original, dictionary)
        if matched is None:
            break
        suffix = f"{matched}, {suffix}" if suffix else matched
        remaining.pop()
    return suffix.strip(), remaining


def strip_prefix_and_suffix(
    state: ParseState,
    tokens: List[str],
    dictionary: Dictionary,
) -> List[str]:
    """
    Strip both ends and record the results on ``state``.

    When nothing but titles and suffixes was given, there is no name to
    attach them to and both fields are cleared.
    """
    prefix, remaining = strip_prefixes(tokens, dictionary)
    suffix, remaining = strip_line_suffixes(remaining, state.suffix, state.full_name, dictionary)

    if not remaining:
        prefix = suffix = ""

    state.prefix = prefix
    state.suffix = suffix
    return remaining
