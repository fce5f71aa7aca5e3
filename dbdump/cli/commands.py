"""CLI commands for the database dumper."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from dbdump import __version__
from dbdump.core.exceptions import DbDumpException, UsageError
from dbdump.core.logging import get_logger
from dbdump.serializer import serialize

app = typer.Typer(name="dbdump", help="Dump a SQLite database file to JSON", add_completion=False)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE = "Invalid utilisation : dbdump path-to-db-file.db"


def select_database(paths: Optional[List[str]]) -> str:
    """Return the single database path given on the command line.

    Raises:
        UsageError: If there is not exactly one path
    """
    if not paths:
        raise UsageError("Provide a database file to dump")
    if len(paths) != 1:
        raise UsageError(USAGE, details={"arguments": paths})
    return paths[0]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dbdump v{__version__}")
        raise typer.Exit()


@app.command()
def dump(
    db_files: Optional[List[str]] = typer.Argument(None, metavar="DB_FILE", help="SQLite database file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    sqlite_binary: Optional[str] = typer.Option(None, "--sqlite-binary", help="sqlite3 executable"),
    indent: Optional[int] = typer.Option(None, min=0, help="JSON indentation"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version."
    ),
) -> None:
    """Dump every table of DB_FILE to a JSON document.

    Args:
        db_files: Positional arguments, exactly one database path expected
        output: Output path, derived from the database path by default
        sqlite_binary: sqlite3 executable
        indent: JSON indentation
        version: Show version and exit
    """
    try:
        db_file = select_database(db_files)
    except UsageError as e:
        err_console.print(escape(e.message))
        raise typer.Exit(code=EXIT_USAGE)

    try:
        result = serialize(db_file, output, binary=sqlite_binary, indent=indent)
    except DbDumpException as e:
        logger.error("dump_failed", db_path=db_file, error=e.message, details=e.details)
        err_console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(code=EXIT_FAILURE)

    console.print(
        f"[green]✓[/green] Dumped {result.table_count} tables "
        f"({result.record_count} records) to {escape(result.output_path)}"
    )


if __name__ == "__main__":
    app()
