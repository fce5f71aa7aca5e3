"""
JSON serializer for SQLite database contents.

The document maps each table name to an array of row objects keyed by
column name. Tables, rows and columns keep the order the external tool
reports them in.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dbdump.core.config import get_settings
from dbdump.core.exceptions import OutputError, RecordShapeError
from dbdump.core.logging import get_logger
from dbdump.database import SQLiteCLI
from dbdump.parser.values import infer

logger = get_logger(__name__)

JSON_SUFFIX = ".json"

Document = dict[str, list[dict[str, Any]]]


@dataclass(frozen=True)
class DumpResult:
    """Summary of a finished dump."""

    output_path: str
    table_count: int
    record_count: int


def derive_output_path(db_path: str) -> str:
    """Derive the JSON path for a database file.

    The file name is cut at its first dot and ``.json`` appended, so
    ``foo.db`` gives ``foo.json`` and ``a.b.c`` gives ``a.json``. The
    directory part is kept as is.
    """
    directory, name = os.path.split(db_path)
    stem = name.split(".", 1)[0]
    return os.path.join(directory, stem + JSON_SUFFIX)


def build_row(columns: list[str], record: list[str], table: str = "") -> dict[str, Any]:
    """Build one row object from a raw record.

    Raises:
        RecordShapeError: If the record and column counts differ
    """
    if len(record) != len(columns):
        raise RecordShapeError(
            f"Table {table!r} has {len(columns)} columns but a record has {len(record)} fields",
            details={"table": table, "columns": columns, "record": record},
        )

    return {column: infer(field).value for column, field in zip(columns, record)}


def build_document(reader: SQLiteCLI) -> Document:
    """Read every table through ``reader`` into an in-memory document."""
    document: Document = {}

    tables = reader.list_tables()
    logger.info("tables_found", db_path=reader.db_path, count=len(tables))

    for table in tables:
        columns = reader.list_columns(table)
        records = reader.list_records(table)

        document[table] = [build_row(columns, record, table) for record in records]
        logger.info("table_dumped", table=table, columns=len(columns), records=len(records))

    return document


def write_document(
    document: Document,
    output_path: str | Path,
    indent: int = 4,
    encoding: str = "utf-8",
    ensure_ascii: bool = False,
) -> None:
    """Write the document as pretty-printed JSON, replacing any existing file.

    Raises:
        OutputError: If the file cannot be written
    """
    try:
        with open(output_path, "w", encoding=encoding) as f:
            json.dump(document, f, indent=indent, ensure_ascii=ensure_ascii)
            f.write("\n")
    except OSError as e:
        raise OutputError(
            f"Failed to write {output_path}: {e}",
            details={"output_path": str(output_path)},
        ) from e

    logger.info("document_written", output_path=str(output_path))


def serialize(
    db_path: str,
    output_path: Optional[str] = None,
    *,
    binary: Optional[str] = None,
    indent: Optional[int] = None,
    reader: Optional[SQLiteCLI] = None,
) -> DumpResult:
    """
    Dump a database file to JSON.

    Args:
        db_path: Path to SQLite database file
        output_path: Target file (derived from ``db_path`` when omitted)
        binary: sqlite3 executable (default from settings)
        indent: JSON indentation (default from settings)
        reader: Prepared reader, mainly for tests

    Returns:
        Output path with table and record counts
    """
    settings = get_settings()
    output_path = output_path or derive_output_path(db_path)
    reader = reader or SQLiteCLI(db_path, binary=binary)

    document = build_document(reader)
    write_document(
        document,
        output_path,
        indent=settings.json_indent if indent is None else indent,
        encoding=settings.output_encoding,
        ensure_ascii=settings.ensure_ascii,
    )

    return DumpResult(
        output_path=output_path,
        table_count=len(document),
        record_count=sum(len(rows) for rows in document.values()),
    )
