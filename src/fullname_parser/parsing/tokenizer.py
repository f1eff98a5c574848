# src/fullname_parser/parsing/tokenizer.py

from __future__ import annotations

from typing import Iterable, List

from fullname_parser.parsing.casing import is_letters


def break_words(name: str) -> List[str]:
    """
    Split a name on whitespace.

    Empty fragments and lone commas ("Smith , John") are dropped; commas
    attached to a word stay with it.
    """
    return [word for word in name.split() if word != ","]


def repack(tokens: Iterable[str]) -> List[str]:
    """
    Clean tokens before segmentation.

    Each token loses surrounding whitespace and a trailing comma. A remaining
    single character that is not a letter ("&", "-", "1") is noise and is
    dropped, as is anything left empty.
    """
    out: List[str] = []
    for token in tokens:
        word = token.strip().rstrip(",")
        if len(word) == 1 and not is_letters(word):
            continue
        if word.strip():
            out.append(word)
    return out
