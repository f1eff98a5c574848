"""
Case normalization for name tokens.

Letters are classified by Unicode general category (Lu / Ll / other L*), so
accented and non-Latin names ("Peña", "Ørsted") are handled the same way as
ASCII ones.
"""

from __future__ import annotations

import re
import unicodedata
from typing import FrozenSet

from fullname_parser.dictionary.defaults import VOWELS

# Signature alphabet: U = uppercase letter, l = lowercase letter,
# o = any other letter, "_" = not a letter.
_CAMEL_RE = re.compile(r"[Ulo](?:U*l+U|l*U+l)")


def _signature(word: str) -> str:
    out = []
    for ch in word:
        cat = unicodedata.category(ch)
        if cat == "Lu":
            out.append("U")
        elif cat == "Ll":
            out.append("l")
        elif cat.startswith("L"):
            out.append("o")
        else:
            out.append("_")
    return "".join(out)


def is_letters(text: str) -> bool:
    """True if every character is a letter (vacuously true for "")."""
    return all(unicodedata.category(ch).startswith("L") for ch in text)


def is_all_upper(text: str) -> bool:
    return all(unicodedata.category(ch) == "Lu" for ch in text)


def is_all_lower(text: str) -> bool:
    return all(unicodedata.category(ch) == "Ll" for ch in text)


def is_camel_case(word: str) -> bool:
    """
    Detect internal capitalization such as McDonald, MacElroy or DelPiero.

    An initial capital alone ("Smith") does not count; there must be an
    upper -> lower -> upper (or lower -> upper -> lower) run after a letter.
    """
    return bool(_CAMEL_RE.search(_signature(word)))


def ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def _fix_parts(word: str, separator: str) -> str:
    return separator.join(
        part if is_camel_case(part) else ucfirst(part.lower())
        for part in word.split(separator)
    )


def _fix_two_letters(word: str, vowels: FrozenSet[str]) -> str:
    first_vowel = word[0].lower() in vowels
    second_vowel = word[1].lower() in vowels

    # Consonant + vowel or "y" (Ma, Ty), vowel + consonant (Ed)
    if not first_vowel and (second_vowel or word[1].lower() == "y"):
        return ucfirst(word.lower())
    if first_vowel and not second_vowel:
        return ucfirst(word.lower())
    # Both vowels (AO) or both consonants (JD)
    return word.upper()


def fix_case(word: str, vowels: FrozenSet[str] = VOWELS) -> str:
    """
    Re-capitalize a single name token.

    - pieces between periods or hyphens are fixed one by one (J.P., Kimura-Fay)
    - single letters are uppercased
    - two-letter tokens follow the vowel/consonant rule
    - all-upper or all-lower tokens of 3+ characters are capitalized
    - anything else (mixed case, e.g. McDonald) is left as typed
    """
    if "." in word:
        word = _fix_parts(word, ".")

    if "-" in word:
        word = _fix_parts(word, "-")

    if len(word) == 1:
        return word.upper()

    if len(word) == 2:
        return _fix_two_letters(word, vowels)

    if len(word) >= 3 and (is_all_upper(word) or is_all_lower(word)):
        return ucfirst(word.lower())

    return word
