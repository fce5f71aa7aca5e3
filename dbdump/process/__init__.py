"""
Process module for running the external SQLite command-line tool.
"""

from .runner import run

__all__ = ["run"]
