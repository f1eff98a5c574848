"""
Nickname detection.

A span wrapped in parentheses or double quotes - Jimmy (Bubba) Smith,
Robert "Bob" Jones - makes the rest of the name too unreliable to split, so
the parser leaves such names unparsed. Single quotes are not treated as
nickname markers because they show up inside real names (O'Brien, and
apostrophes in transliterated Arabic names).
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

_NICKNAME_RE = re.compile(r"[(\"].*?[)\"]")


def find_nickname(name: str, not_nicknames: Iterable[str] = ()) -> Optional[str]:
    """
    Return the first bracketed/quoted span, or None.

    Spans listed in ``not_nicknames`` (lowercase, brackets included, e.g.
    "(hons)") are part of a credential and are not reported.
    """
    m = _NICKNAME_RE.search(name)
    if not m:
        return None

    span = m.group(0)
    if span.lower() in not_nicknames:
        return None
    return span
