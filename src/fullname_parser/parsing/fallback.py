from __future__ import annotations

from fullname_parser.models import Ambiguous, NameRecord
from fullname_parser.parsing.tokenizer import break_words


def fallback_record(full_name: str, outcome: Ambiguous) -> NameRecord:
    """
    Best effort for a name the heuristics could not segment.

    Exactly three words in the original input are taken as first, middle and
    last, as typed, keeping any prefix/suffix already separated. Anything
    else is left unparsed.
    """
    words = break_words(full_name)
    if len(words) != 3:
        return NameRecord(full_name=full_name)

    first, middle, last = (w.strip() for w in words)
    return NameRecord(
        full_name=full_name,
        prefix=outcome.prefix,
        first=first,
        middle=middle,
        last=last,
        suffix=outcome.suffix,
    )
