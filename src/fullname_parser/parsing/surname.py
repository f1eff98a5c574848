"""
Surname composition.

A surname is any number of compound particles (de, la, van, St.) plus exactly
one base word: "De Los Angeles", "Von Stroheim", "Del DelPiero".
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from fullname_parser.dictionary import Dictionary
from fullname_parser.models import Ambiguous, ParseState
from fullname_parser.parsing.casing import fix_case


def compose_surname(
    state: ParseState,
    tokens: List[str],
    dictionary: Dictionary,
) -> Optional[Ambiguous]:
    """
    Build ``state.last`` from ``tokens[state.cursor:]``.

    A lone token for the whole name is a first name ("Adam"). A second
    non-particle word after the base means the surname can't be told apart
    from the rest ("Coral Del Mar Lopez Rosario") and the parse is ambiguous.
    """
    if not tokens:
        state.first = ""
        return None

    if len(tokens) == 1:
        state.first = fix_case(tokens[0], dictionary.vowels)
        return None

    parts: List[str] = []
    base_set = False
    for word in tokens[state.cursor:]:
        if dictionary.is_compound(word):
            parts.append(fix_case(word, dictionary.vowels))
        elif not base_set:
            parts.append(fix_case(word, dictionary.vowels))
            base_set = True
        else:
            return state.ambiguous(f"second surname base {word!r}")

    state.last = " ".join(parts)
    return None


def split_surname(last: str, dictionary: Dictionary) -> Tuple[List[str], str]:
    """
    Split a composed surname into its particles and its base.

        "De La Vega"  -> (["De", "La"], "Vega")
        "Smith"       -> ([], "Smith")
    """
    particles: List[str] = []
    base = ""
    for word in last.split():
        if dictionary.is_compound(word):
            particles.append(word)
        elif not base:
            base = word
    return particles, base
