# tests/test_batch.py

from __future__ import annotations

import io
import json

import pytest

from fullname_parser.batch import dump_records, locate_inputs, read_names, write_records
from fullname_parser.config import get_config
from fullname_parser.core.context import BatchContext
from fullname_parser.core.exceptions import BatchInputError
from fullname_parser.core.pipeline import BatchPipeline
from fullname_parser.logging import get_logger
from fullname_parser.models import NameRecord
from fullname_parser.utils import mock_file_path

HEADER = "full_name,prefix,first,middle,last,suffix"


def test_mock_file_exists() -> None:
    path = mock_file_path("names.txt")
    assert path.is_file(), f"Expected name list at: {path}"


def test_read_names_skips_blank_lines() -> None:
    names = list(read_names(mock_file_path("names.txt")))
    assert len(names) == 8
    assert names[0] == "Adam"
    assert all(n == n.strip() and n for n in names)


def test_read_names_missing_file(tmp_path) -> None:
    with pytest.raises(BatchInputError):
        list(read_names(tmp_path / "missing.txt"))


def test_locate_inputs_sorts_and_skips_hidden(tmp_path) -> None:
    (tmp_path / "b.txt").write_text("x\n", encoding="utf-8")
    (tmp_path / "a.txt").write_text("x\n", encoding="utf-8")
    (tmp_path / ".hidden").write_text("x\n", encoding="utf-8")
    (tmp_path / "sub").mkdir()

    assert [p.name for p in locate_inputs(tmp_path)] == ["a.txt", "b.txt"]


def test_locate_inputs_missing(tmp_path) -> None:
    with pytest.raises(BatchInputError):
        locate_inputs(tmp_path / "nope")


def test_dump_csv() -> None:
    buf = io.StringIO()
    count = dump_records([NameRecord("Adam", first="Adam")], buf)
    assert count == 1
    assert buf.getvalue().splitlines() == [HEADER, "Adam,,Adam,,,"]


def test_dump_csv_quotes_commas() -> None:
    buf = io.StringIO()
    dump_records([NameRecord("A B III, PhD", first="A", last="B", suffix="III, PhD")], buf)
    assert buf.getvalue().splitlines()[1] == '"A B III, PhD",,A,,B,"III, PhD"'


def test_dump_json_keeps_unicode() -> None:
    buf = io.StringIO()
    dump_records([NameRecord("Peña", first="Peña")], buf, fmt="json")
    assert "Peña" in buf.getvalue()
    assert json.loads(buf.getvalue())[0]["first"] == "Peña"


def test_dump_unknown_format() -> None:
    with pytest.raises(ValueError):
        dump_records([], io.StringIO(), fmt="xml")


def test_write_records_creates_parents(tmp_path) -> None:
    out = tmp_path / "nested" / "out.tsv"
    write_records([NameRecord("Adam", first="Adam")], out, delimiter="\t")
    assert out.read_text(encoding="utf-8").splitlines()[0] == HEADER.replace(",", "\t")


def _context(input_path, output_path, **kwargs) -> BatchContext:
    return BatchContext(
        config=get_config(),
        logger=get_logger("tests.batch"),
        input_path=str(input_path),
        output_path=str(output_path),
        **kwargs,
    )


def test_pipeline_single_file(tmp_path) -> None:
    out = tmp_path / "names.csv"
    ctx = _context(mock_file_path("names.txt"), out)

    counts = BatchPipeline(ctx).run()

    assert counts == {"names.txt": 8}
    assert ctx.stats["records"] == 8
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 9
    assert lines[3] == '"Anthony Von Fange III, PhD",,Anthony,,Von Fange,"III, PhD"'


def test_pipeline_directory_json(tmp_path) -> None:
    src = tmp_path / "in"
    src.mkdir()
    (src / "one.txt").write_text("Mark Peter Williams\n\n", encoding="utf-8")
    (src / "two.txt").write_text("Adam\nJason Senior\n", encoding="utf-8")
    dest = tmp_path / "out"

    ctx = _context(src, dest, format="json")
    counts = BatchPipeline(ctx).run()

    assert counts == {"one.txt": 1, "two.txt": 2}
    assert ctx.stats["files"] == 2
    rows = json.loads((dest / "two.txt.json").read_text(encoding="utf-8"))
    assert rows[1]["last"] == "Senior"


def test_pipeline_missing_input(tmp_path) -> None:
    ctx = _context(tmp_path / "missing", tmp_path / "out")
    with pytest.raises(BatchInputError):
        BatchPipeline(ctx).run()
    assert ctx.errors


def test_main_runs_batch(tmp_path) -> None:
    from fullname_parser.main import main

    main(["-i", str(mock_file_path("names.txt")), "-o", str(tmp_path), "-f", "json"])

    rows = json.loads((tmp_path / "names.txt.json").read_text(encoding="utf-8"))
    assert [r["first"] for r in rows][:2] == ["Adam", "John"]
