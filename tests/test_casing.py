# tests/test_casing.py

from __future__ import annotations

import pytest

from fullname_parser.parsing.casing import fix_case, is_camel_case


@pytest.mark.parametrize(
    "word, expected",
    [
        ("j", "J"),
        ("JOHN", "John"),
        ("smith", "Smith"),
        ("McDonald", "McDonald"),
        ("ed", "Ed"),
        ("ma", "Ma"),
        ("TY", "Ty"),
        ("jd", "JD"),
        ("ao", "AO"),
        ("j.p.", "J.P."),
        ("kimura-fay", "Kimura-Fay"),
        ("peña", "Peña"),
        ("ÉMILE", "Émile"),
    ],
)
def test_fix_case(word: str, expected: str) -> None:
    assert fix_case(word) == expected


def test_fix_case_keeps_camel_case_hyphen_parts() -> None:
    assert fix_case("SMITH-McDonald") == "Smith-McDonald"


@pytest.mark.parametrize("word", ["McDonald", "MacElroy", "DelPiero", "iPhone"])
def test_is_camel_case_true(word: str) -> None:
    assert is_camel_case(word)


@pytest.mark.parametrize("word", ["Smith", "SMITH", "smith", "O'Brien", ""])
def test_is_camel_case_false(word: str) -> None:
    assert not is_camel_case(word)
