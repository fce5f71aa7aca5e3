"""
Database module for reading SQLite schema and rows.

Queries go through the sqlite3 command-line tool; its text output is parsed
into table names, column names and raw records.
"""

from .sqlite_cli import SQLiteCLI

__all__ = ["SQLiteCLI"]
