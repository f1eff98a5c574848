"""
Full name parser.

Splits a free-form personal name into prefix, first, middle, last and suffix:

    FullNameParser().parse("Dr. Juan Xavier Q. de la Vega III")
    -> prefix="Dr.", first="Juan", middle="Xavier Q.", last="De La Vega", suffix="III"

Stages, in order:

1. nickname check     - quoted/bracketed spans leave the name unparsed
2. professional suffix - cut at the earliest credential (PhD, M.D., ...)
3. strip              - leading honorifics, trailing lineage suffixes
4. repack             - drop punctuation-only tokens
5. segment            - first / middle names and initials
6. surname            - particles plus one base word
7. fallback           - on ambiguity, a blind three-word split or nothing

Parsing never raises: every input produces a NameRecord, possibly with
empty fields.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Optional, Tuple

from fullname_parser.dictionary import Dictionary, PrefixGroup
from fullname_parser.logging import get_logger
from fullname_parser.models import Ambiguous, NameRecord, ParseOutcome, ParseState, Parsed
from fullname_parser.parsing.fallback import fallback_record
from fullname_parser.parsing.nickname import find_nickname
from fullname_parser.parsing.segmenter import segment_given_names
from fullname_parser.parsing.stripper import strip_prefix_and_suffix
from fullname_parser.parsing.suffixes import ProfessionalSuffixMatcher, split_professional_suffix
from fullname_parser.parsing.surname import compose_surname
from fullname_parser.parsing.tokenizer import break_words, repack

log = get_logger(__name__)


class FullNameParser:
    """
    Parser bound to one immutable Dictionary.

    The ``set_*`` methods swap this instance's dictionary for an updated copy
    and rebuild the compiled suffix matcher; a parser shared between threads
    needs external locking around them. ``with_dictionary`` returns a new
    parser instead.
    """

    def __init__(self, dictionary: Optional[Dictionary] = None):
        self._dictionary: Dictionary = dictionary or Dictionary.create_default()
        self._matcher = ProfessionalSuffixMatcher(self._dictionary.professional_suffixes)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @dictionary.setter
    def dictionary(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary
        self._matcher = ProfessionalSuffixMatcher(dictionary.professional_suffixes)
        log.debug(
            "Dictionary replaced: %d prefix groups, %d line suffixes, %d professional suffixes, %d compound markers",
            len(dictionary.prefix_groups),
            len(dictionary.line_suffixes),
            len(dictionary.professional_suffixes),
            len(dictionary.compound_markers),
        )

    def with_dictionary(self, dictionary: Dictionary) -> "FullNameParser":
        return type(self)(dictionary)

    @property
    def prefixes(self) -> Tuple[PrefixGroup, ...]:
        return self._dictionary.prefix_groups

    def set_prefixes(self, groups: Any) -> "FullNameParser":
        self.dictionary = self._dictionary.with_prefixes(groups)
        return self

    @property
    def line_suffixes(self) -> Tuple[str, ...]:
        return self._dictionary.line_suffixes

    def set_line_suffixes(self, suffixes: Iterable[str]) -> "FullNameParser":
        self.dictionary = self._dictionary.with_line_suffixes(suffixes)
        return self

    @property
    def professional_suffixes(self) -> Tuple[str, ...]:
        return self._dictionary.professional_suffixes

    def set_professional_suffixes(self, suffixes: Iterable[str]) -> "FullNameParser":
        self.dictionary = self._dictionary.with_professional_suffixes(suffixes)
        return self

    @property
    def compound_markers(self) -> FrozenSet[str]:
        return self._dictionary.compound_markers

    def set_compound_markers(self, markers: Iterable[str]) -> "FullNameParser":
        self.dictionary = self._dictionary.with_compound_markers(markers)
        return self

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, name: Optional[str]) -> NameRecord:
        full_name = "" if name is None else str(name).strip()

        nickname = find_nickname(full_name, self._dictionary.not_nicknames)
        if nickname is not None:
            log.debug("Nickname %s in %r, leaving it unparsed", nickname, full_name)
            return NameRecord(full_name=full_name)

        outcome = self._decompose(full_name)
        if isinstance(outcome, Ambiguous):
            log.debug("Ambiguous name %r: %s", full_name, outcome.reason)
            return fallback_record(full_name, outcome)

        return outcome.record

    __call__ = parse

    def _decompose(self, full_name: str) -> ParseOutcome:
        state = ParseState(full_name=full_name)
        d = self._dictionary

        split = split_professional_suffix(full_name, self._matcher)
        if split is None:
            return state.ambiguous("words after a professional suffix are not all credentials")
        name, state.suffix = split

        tokens = strip_prefix_and_suffix(state, break_words(name), d)
        tokens = repack(tokens)

        problem = segment_given_names(state, tokens, d) or compose_surname(state, tokens, d)
        if problem is not None:
            return problem

        return Parsed(state.to_record())


_default_parser: Optional[FullNameParser] = None


def default_parser() -> FullNameParser:
    """Shared parser with the built-in tables. Never reconfigure it; make your own."""
    global _default_parser
    if _default_parser is None:
        _default_parser = FullNameParser()
    return _default_parser


def parse_name(name: Optional[str]) -> NameRecord:
    """Parse with the built-in tables."""
    return default_parser().parse(name)
