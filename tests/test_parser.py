# tests/test_parser.py

from __future__ import annotations

import pytest

from fullname_parser import NameRecord, parse
from fullname_parser.parsing import FullNameParser

# (name, prefix, first, middle, last, suffix)
PARSED = [
    ("Adam", "", "Adam", "", "", ""),
    ("Rev. Dr John Doe", "Rev. Dr.", "John", "", "Doe", ""),
    ("Anthony Von Fange III, PhD", "", "Anthony", "", "Von Fange", "III, PhD"),
    ("Jason Senior", "", "Jason", "", "Senior", ""),
    ("Justin Michael Senior", "", "Justin", "Michael", "Senior", ""),
    ("Justin Michael Lopez Senior", "", "Justin", "Michael", "Lopez", "Senior"),
    ("Mark Peter Williams", "", "Mark", "Peter", "Williams", ""),
    ("Marc Jeffrey Del DelPiero", "", "Marc", "Jeffrey", "Del DelPiero", ""),
    ("Alyssa Ruiz De Esparza", "", "Alyssa", "Ruiz", "De Esparza", ""),
    ("Joseph Edward A. Connell Jr", "", "Joseph", "Edward A.", "Connell", "Jr"),
    ("Ms. Allyson De Guzman Junior", "Ms.", "Allyson", "", "De Guzman", "Junior"),
    ("Alejandro De Los Fernandez Jr.", "", "Alejandro", "", "De Los Fernandez", "Jr."),
    ("Gerardo De Los Angeles III", "", "Gerardo", "", "De Los Angeles", "III"),
    ("Roberta R. W. Kameda II Jr.", "", "Roberta", "R. W.", "Kameda", "II, Jr."),
    ("Marc Jeffrey Lopez Jr. Ph.D.", "", "Marc", "Jeffrey", "Lopez", "Jr., Ph.D."),
    ("Dr. Juan Xavier Q. de la Vega III", "Dr.", "Juan", "Xavier Q.", "De La Vega", "III"),
    ("Patricia J. Peña", "", "Patricia", "J.", "Peña", ""),
    ("Michael Richard Meng", "", "Michael", "Richard", "Meng", ""),
    ("JOHN SMITH", "", "John", "", "Smith", ""),
    ("Maj Vasigh", "", "Maj", "", "Vasigh", ""),
    ("Gen Tanaka", "", "Gen", "", "Tanaka", ""),
    ("Col Smith", "", "Col", "", "Smith", ""),
    ("Lieutenant Colonel Erich von Stroheim", "Lt. Col.", "Erich", "", "Von Stroheim", ""),
]

UNPARSED = [
    "Jimmy (Bubba) Smith",
    'Robert "Bob" Jones',
    "Julie Del V Catancio",
    "Gerardo De Los Ang Camacho III",
    "Manuel De Jesus Balam Jr",
    "Carol Frances Ma Molloy",
    "Coral Del Mar Lopez Rosario",
]


@pytest.mark.parametrize("name, prefix, first, middle, last, suffix", PARSED)
def test_parse(name, prefix, first, middle, last, suffix) -> None:
    record = parse(name)
    assert record == NameRecord(name, prefix, first, middle, last, suffix)


@pytest.mark.parametrize("name", UNPARSED)
def test_unparseable_names_keep_only_full_name(name) -> None:
    assert parse(name) == NameRecord(full_name=name)


def test_three_word_fallback() -> None:
    record = parse("John PhD Smith")
    assert (record.first, record.middle, record.last) == ("John", "PhD", "Smith")
    assert record.suffix == ""


def test_input_is_trimmed() -> None:
    assert parse("  Mark Peter Williams \n").full_name == "Mark Peter Williams"


@pytest.mark.parametrize(
    "name",
    [None, "", "   ", ",", "Dr.", "Jr.", "PhD", "(", '"', "-", "Ø", "a b c d e f g", "The", "de la"],
)
def test_never_raises(name) -> None:
    record = parse(name)
    assert isinstance(record, NameRecord)
    assert all(isinstance(v, str) for v in record.to_row())


@pytest.mark.parametrize("name", [row[0] for row in PARSED])
def test_reparse_of_joined_name(name) -> None:
    record = parse(name)
    assert isinstance(parse(record.name), NameRecord)


def test_parser_is_callable(parser) -> None:
    assert parser("Adam").first == "Adam"


# ---------------------------------------------------------------------------
# Reconfigured tables
# ---------------------------------------------------------------------------

@pytest.fixture
def custom_parser() -> FullNameParser:
    return (
        FullNameParser()
        .set_prefixes(
            [["mr", "mister"], ["mrs"], ["ms", "miss"], ["dr", "doctor"], ["lt", "lieutenant"], ["col", "colonel"]]
        )
        .set_line_suffixes(["I", "II", "III", "IV", "V", "jr", "sr"])
    )


@pytest.mark.parametrize(
    "name, prefix, first, middle, last, suffix",
    [
        ("Rev Jordan B Peck Jr.", "", "Rev", "Jordan B", "Peck", "Jr."),
        ("Maj Vasigh", "", "Maj", "", "Vasigh", ""),
        ("Major Ryan Thompson", "", "Major", "Ryan", "Thompson", ""),
        ("Da Mao", "", "Da", "", "Mao", ""),
        ("Mr Major Best Harding", "Mr", "Major", "Best", "Harding", ""),
        ("Lt. Col. Erich von Stroheim", "Lt. Col.", "Erich", "", "Von Stroheim", ""),
    ],
)
def test_custom_tables(custom_parser, name, prefix, first, middle, last, suffix) -> None:
    assert custom_parser.parse(name) == NameRecord(name, prefix, first, middle, last, suffix)


def test_setters_replace_the_dictionary(parser) -> None:
    before = parser.dictionary
    assert parser.set_compound_markers(["van"]) is parser
    assert parser.compound_markers == frozenset({"van"})
    assert before.is_compound("de")
    record = parser.parse("Alyssa De Esparza")
    assert (record.middle, record.last) == ("De", "Esparza")


def test_professional_suffix_setter_recompiles(parser) -> None:
    parser.set_professional_suffixes(["Esq"])
    assert parser.professional_suffixes == ("Esq",)
    assert parser.parse("John Smith Esq").suffix == "Esq"
    assert parser.parse("John Smith PhD").last == "PhD"


def test_with_dictionary_leaves_original_parser(parser) -> None:
    other = parser.with_dictionary(parser.dictionary.with_line_suffixes(["Jr"]))
    assert other is not parser
    assert parser.parse("Gerardo De Los Angeles III").suffix == "III"
    assert other.parse("Gerardo Angeles III").suffix == ""


def test_default_parser_is_shared() -> None:
    from fullname_parser.parsing import default_parser

    assert default_parser() is default_parser()
