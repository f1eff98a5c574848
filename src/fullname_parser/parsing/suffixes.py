"""
Professional and lineage suffix matching.

Professional suffixes (PhD, M.D., BSc(hons)) are located anywhere after the
first word and cut the name at the earliest one; lineage suffixes (Jr, III,
Senior) are only ever peeled off the end, one token at a time, by the
stripper.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from fullname_parser.dictionary import Dictionary
from fullname_parser.parsing.tokenizer import break_words

# Lineage words that are also common surnames.
AMBIGUOUS_LINE_SUFFIXES = ("senior", "junior")

# "Justin Michael Lopez Senior" is a suffix, "Justin Michael Senior" a surname.
MIN_WORDS_FOR_AMBIGUOUS_SUFFIX = 4


class ProfessionalSuffixMatcher:
    """
    Compiled matcher for one professional-suffix table.

    A credential matches where it is preceded by whitespace or a comma and is
    not followed by another word character, or where it is the whole name.
    Case and periods are significant: "MEng" does not match "Meng".

    The table is expected longest-first (Dictionary guarantees it), so at any
    position the most specific credential is tried first.
    """

    def __init__(self, suffixes: Iterable[str]):
        self.suffixes: Tuple[str, ...] = tuple(suffixes)
        self._tokens = frozenset(self.suffixes)
        self._pattern: Optional[re.Pattern[str]] = None
        if self.suffixes:
            alternation = "|".join(re.escape(s) for s in self.suffixes)
            self._pattern = re.compile(rf"(?<=[,\s])(?:{alternation})(?!\w)")

    def boundary(self, name: str) -> Optional[int]:
        """Index where the earliest professional suffix starts, or None."""
        if name in self._tokens:
            return 0
        if self._pattern is None:
            return None
        m = self._pattern.search(name)
        return m.start() if m else None

    def is_suffix(self, word: str) -> bool:
        return word.strip().strip(",") in self._tokens


def split_professional_suffix(name: str, matcher: ProfessionalSuffixMatcher) -> Optional[Tuple[str, str]]:
    """
    Split ``name`` into (remaining name, professional suffix).

    Everything from the earliest credential to the end becomes the suffix,
    but only if every word there is itself a credential ("PhD, MD");
    otherwise None is returned and the caller treats the name as ambiguous.
    """
    start = matcher.boundary(name)
    if start is None:
        return name, ""

    tail = name[start:]
    words = break_words(tail)
    if len(words) > 1 and not all(matcher.is_suffix(w) for w in words):
        return None

    return name[:start], tail.strip().lstrip(",").strip()


def match_line_suffix(word: str, original: str, dictionary: Dictionary) -> Optional[str]:
    """
    Return ``word`` (minus a trailing comma) if it is a lineage suffix.

    Comparison ignores case and periods. "Senior"/"Junior" only count when
    the original name has at least four words and carries no other lineage
    suffix; otherwise they are read as a surname.
    """
    key = word.lower().replace(".", "").rstrip(",")
    lowered = [s.lower() for s in dictionary.line_suffixes]
    if key not in lowered:
        return None

    if key in AMBIGUOUS_LINE_SUFFIXES:
        if len(original.split()) < MIN_WORDS_FOR_AMBIGUOUS_SUFFIX:
            return None

        matched_at = lowered.index(key)
        for i, other in enumerate(dictionary.line_suffixes):
            if i == matched_at:
                continue
            if re.search(rf"\b{re.escape(other)}\b", original, re.IGNORECASE):
                return None

    return word.rstrip(",")
