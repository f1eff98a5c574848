# tests/test_stripper.py

from __future__ import annotations

from fullname_parser.models import ParseState
from fullname_parser.parsing.stripper import (
    strip_line_suffixes,
    strip_prefix_and_suffix,
    strip_prefixes,
)


def test_strip_chained_prefixes(dictionary) -> None:
    prefix, remaining = strip_prefixes(["Rev.", "Dr", "John", "Doe"], dictionary)
    assert prefix == "Rev. Dr."
    assert remaining == ["John", "Doe"]


def test_strip_spelled_out_ranks(dictionary) -> None:
    prefix, remaining = strip_prefixes(["Lieutenant", "Colonel", "Erich"], dictionary)
    assert prefix == "Lt. Col."
    assert remaining == ["Erich"]


def test_article_is_dropped_from_prefix(dictionary) -> None:
    prefix, remaining = strip_prefixes(["The", "Reverend", "Al", "Green"], dictionary)
    assert prefix == "Rev."
    assert remaining == ["Al", "Green"]


def test_strip_stacked_line_suffixes(dictionary) -> None:
    original = "Roberta R. W. Kameda II Jr."
    suffix, remaining = strip_line_suffixes(original.split(), "", original, dictionary)
    assert suffix == "II, Jr."
    assert remaining == ["Roberta", "R.", "W.", "Kameda"]


def test_line_suffix_goes_before_professional_suffix(dictionary) -> None:
    original = "Anthony Von Fange III, PhD"
    suffix, remaining = strip_line_suffixes(["Anthony", "Von", "Fange", "III,"], "PhD", original, dictionary)
    assert suffix == "III, PhD"
    assert remaining == ["Anthony", "Von", "Fange"]


def test_titles_alone_are_discarded(dictionary) -> None:
    state = ParseState(full_name="Dr. Jr.")
    remaining = strip_prefix_and_suffix(state, ["Dr.", "Jr."], dictionary)
    assert remaining == []
    assert state.prefix == ""
    assert state.suffix == ""


def test_display_forms_are_not_synonyms(dictionary) -> None:
    prefix, remaining = strip_prefixes(["Maj", "Vasigh"], dictionary)
    assert prefix == ""
    assert remaining == ["Maj", "Vasigh"]
