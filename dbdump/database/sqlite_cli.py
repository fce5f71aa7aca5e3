"""
Schema and record reader backed by the sqlite3 command-line tool.

Every query launches the tool once against the database file and parses
its list-mode output:

- ``.tables`` prints table names separated by runs of spaces, wrapped over
  several lines when there are many tables
- ``PRAGMA table_info`` prints ``cid|name|type|notnull|dflt_value|pk`` per
  column
- ``SELECT *`` prints one pipe-delimited line per row, without a header
"""

from pathlib import Path
from typing import Callable, Optional, Sequence

from dbdump.core.config import get_settings
from dbdump.core.exceptions import SchemaParseError
from dbdump.core.logging import get_logger
from dbdump.parser.text_table import (
    LINE_SEPARATOR,
    NAME_SEPARATOR,
    filter_blank,
    split,
    split_fields,
    split_lines,
    trim,
)
from dbdump.process import runner

logger = get_logger(__name__)

# Pin list mode so a user's ~/.sqliterc cannot change the output layout
OUTPUT_OPTIONS = ("-batch", "-list", "-noheader", "-separator", "|")

# PRAGMA table_info fields: cid, name, type, notnull, dflt_value, pk
COLUMN_NAME_FIELD = 1

Runner = Callable[..., str]


def quote_identifier(name: str) -> str:
    """Quote a table name as an SQL identifier."""
    return '"' + name.replace('"', '""') + '"'


def quote_literal(name: str) -> str:
    """Quote a table name as an SQL string literal."""
    return "'" + name.replace("'", "''") + "'"


class SQLiteCLI:
    """
    Reader for a SQLite database file through the sqlite3 binary.

    Holds no state between queries apart from the database path and the
    tool settings.
    """

    def __init__(
        self,
        db_path: str | Path,
        binary: Optional[str] = None,
        timeout: Optional[float] = None,
        run: Optional[Runner] = None,
    ) -> None:
        """
        Initialize reader.

        Args:
            db_path: Path to SQLite database file
            binary: sqlite3 executable (default from settings)
            timeout: Seconds allowed per query (default from settings)
            run: Command runner, ``runner.run`` unless overridden
        """
        settings = get_settings()
        self.db_path = str(db_path)
        self.binary = binary or settings.sqlite_binary
        self.timeout = timeout if timeout is not None else settings.command_timeout
        self._run = run or runner.run

    def _query(self, command: str) -> str:
        """Run one dot-command or SQL statement and return its output."""
        args: Sequence[str] = [self.binary, *OUTPUT_OPTIONS, self.db_path, command]
        return self._run(args, timeout=self.timeout)

    def list_tables(self) -> list[str]:
        """
        List table names in the order the tool prints them.

        Returns:
            Table names
        """
        output = self._query(".tables")

        tables: list[str] = []
        for line in split_lines(output):
            tokens = filter_blank(split(line, NAME_SEPARATOR))
            tables.extend(trim(token) for token in tokens)

        logger.debug("tables_listed", db_path=self.db_path, tables=tables)
        return tables

    def list_columns(self, table: str) -> list[str]:
        """
        List column names of a table in declaration order.

        Args:
            table: Table name

        Returns:
            Column names

        Raises:
            SchemaParseError: If an introspection line has no name field
        """
        output = self._query(f"PRAGMA table_info({quote_identifier(table)});")

        columns: list[str] = []
        for line in split_lines(output):
            fields = split_fields(line)
            if len(fields) <= COLUMN_NAME_FIELD:
                raise SchemaParseError(
                    f"Unexpected column description for table {table!r}: {line!r}",
                    details={"table": table, "line": line},
                )
            columns.append(fields[COLUMN_NAME_FIELD])

        logger.debug("columns_listed", table=table, columns=columns)
        return columns

    def list_records(self, table: str) -> list[list[str]]:
        """
        List every row of a table as raw text fields.

        Lines whose fields are all empty are dropped.

        Args:
            table: Table name

        Returns:
            Records, each a list of fields in column order
        """
        output = self._query(f"SELECT * FROM {quote_literal(table)};")

        records: list[list[str]] = []
        for line in split(output, LINE_SEPARATOR):
            record = split_fields(line)
            if record and any(record):
                records.append(record)

        logger.debug("records_listed", table=table, count=len(records))
        return records
