"""Tests for the JSON serializer."""

import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from dbdump.core.exceptions import OutputError, RecordShapeError
from dbdump.serializer.json_dumper import (
    DumpResult,
    build_document,
    build_row,
    derive_output_path,
    serialize,
    write_document,
)


@pytest.fixture
def reader(mocker: MockerFixture):
    """Reader stub for a database with tables ``t`` and ``empty``."""
    stub = mocker.Mock()
    stub.db_path = "test.db"
    stub.list_tables.return_value = ["t", "empty"]
    stub.list_columns.side_effect = lambda table: {"t": ["id", "name"], "empty": ["x"]}[table]
    stub.list_records.side_effect = lambda table: {
        "t": [["1", "Alice"], ["2", ""]],
        "empty": [],
    }[table]
    return stub


@pytest.mark.parametrize(
    "db_path,expected",
    [
        ("foo.db", "foo.json"),
        ("foo", "foo.json"),
        ("a.b.c", "a.json"),
        ("data/shop.sqlite3", "data/shop.json"),
        ("./data/shop.db", "./data/shop.json"),
        ("dir.v2/foo.db", "dir.v2/foo.json"),
        ("./shop.db", "./shop.json"),
    ],
)
def test_derive_output_path(db_path: str, expected: str) -> None:
    """Test output path derivation."""
    assert derive_output_path(db_path) == expected


def test_build_row_types_values() -> None:
    """Test that fields are typed and keyed by column."""
    row = build_row(["id", "price", "name", "note"], ["7", "9.5", "Widget", ""])

    assert row == {"id": 7, "price": 9.5, "name": "Widget", "note": None}
    assert list(row) == ["id", "price", "name", "note"]


def test_build_row_shape_mismatch() -> None:
    """Test that a field count mismatch raises RecordShapeError."""
    with pytest.raises(RecordShapeError) as exc_info:
        build_row(["id", "name"], ["1", "a", "b"], table="t")

    assert exc_info.value.details["table"] == "t"


def test_build_document(reader) -> None:
    """Test assembling the document from a reader."""
    document = build_document(reader)

    assert document == {
        "t": [{"id": 1, "name": "Alice"}, {"id": 2, "name": None}],
        "empty": [],
    }
    assert list(document) == ["t", "empty"]


def test_write_document(tmp_path: Path) -> None:
    """Test pretty-printed JSON output."""
    output = tmp_path / "out.json"

    write_document({"t": [{"id": 1, "name": "Zoë"}]}, output)

    text = output.read_text(encoding="utf-8")
    assert text.startswith('{\n    "t": [\n        {\n            "id": 1,')
    assert "Zoë" in text
    assert text.endswith("\n")
    assert json.loads(text) == {"t": [{"id": 1, "name": "Zoë"}]}


def test_write_document_overwrites(tmp_path: Path) -> None:
    """Test that an existing file is replaced."""
    output = tmp_path / "out.json"
    output.write_text("stale content that is longer than the new document")

    write_document({}, output)

    assert json.loads(output.read_text()) == {}


def test_write_document_unwritable(tmp_path: Path) -> None:
    """Test that write failures raise OutputError."""
    output = tmp_path / "missing" / "out.json"

    with pytest.raises(OutputError) as exc_info:
        write_document({}, output)

    assert exc_info.value.details["output_path"] == str(output)


def test_serialize(reader, tmp_path: Path) -> None:
    """Test a full dump with an explicit output path."""
    output = tmp_path / "test.json"

    result = serialize("test.db", str(output), indent=2, reader=reader)

    assert result == DumpResult(output_path=str(output), table_count=2, record_count=2)
    assert json.loads(output.read_text()) == {
        "t": [{"id": 1, "name": "Alice"}, {"id": 2, "name": None}],
        "empty": [],
    }
    assert output.read_text().startswith('{\n  "t"')


def test_serialize_derives_output_path(reader, tmp_path: Path) -> None:
    """Test that the output path is derived from the database path."""
    db_path = tmp_path / "test.db"

    result = serialize(str(db_path), reader=reader)

    assert result.output_path == str(tmp_path / "test.json")
    assert (tmp_path / "test.json").exists()
