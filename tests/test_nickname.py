# tests/test_nickname.py

from __future__ import annotations

from fullname_parser.dictionary.defaults import NOT_NICKNAMES
from fullname_parser.parsing.nickname import find_nickname


def test_parenthesised_nickname() -> None:
    assert find_nickname("Jimmy (Bubba) Smith") == "(Bubba)"


def test_quoted_nickname() -> None:
    assert find_nickname('Robert "Bob" Jones') == '"Bob"'


def test_single_quotes_are_not_nicknames() -> None:
    assert find_nickname("Patrick O'Brien") is None


def test_credential_brackets_are_not_nicknames() -> None:
    assert find_nickname("Jane Smith BSc(hons)", NOT_NICKNAMES) is None


def test_no_nickname() -> None:
    assert find_nickname("Mark Peter Williams") is None
