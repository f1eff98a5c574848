# src/fullname_parser/parsing/segmenter.py

from __future__ import annotations

from typing import List, Optional

from fullname_parser.dictionary import Dictionary
from fullname_parser.models import Ambiguous, ParseState
from fullname_parser.parsing.casing import fix_case


def is_initial(word: str) -> bool:
    """A single character, or a letter followed by a period ("J.")."""
    return len(word) == 1 or (len(word) == 2 and word[1] == ".")


def _append(existing: str, word: str) -> str:
    return f"{existing} {word}" if existing else word


def segment_given_names(
    state: ParseState,
    tokens: List[str],
    dictionary: Dictionary,
) -> Optional[Ambiguous]:
    """
    Fill ``state.first`` and ``state.middle`` from the front of ``tokens``.

    The last token is never consumed here; it belongs to the surname. The
    scan also stops at a compound-surname particle (van, de, St.) unless it is
    the very first word ("Von Fabella" is a first name). ``state.cursor`` is
    left at the first surname token.

    Initials go to the first name when they lead ("R. Jason Smith") and are
    otherwise collected into the middle name ("Roberta R. W. Kameda").
    A third plain word has no slot and makes the parse ambiguous.
    """
    index = 0
    while index < len(tokens) - 1:
        word = tokens[index]

        if index != 0 and dictionary.is_compound(word):
            break

        if is_initial(word):
            if not state.first:
                state.first = _append(state.first, word.upper())
            else:
                state.middle = _append(state.middle, word.upper())
        elif not state.first:
            state.first = fix_case(word, dictionary.vowels)
        elif not state.middle:
            state.middle = fix_case(word, dictionary.vowels)
        else:
            state.cursor = index
            return state.ambiguous(f"no first/middle slot left for {word!r}")

        index += 1

    state.cursor = index
    return None
