"""Dump the contents of a SQLite database file to a JSON document."""

__version__ = "0.1.0"
