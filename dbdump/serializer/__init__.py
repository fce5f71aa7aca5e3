"""
Serializer module turning database contents into a JSON document.
"""

from .json_dumper import (
    DumpResult,
    build_document,
    build_row,
    derive_output_path,
    serialize,
    write_document,
)

__all__ = [
    "DumpResult",
    "build_document",
    "build_row",
    "derive_output_path",
    "serialize",
    "write_document",
]
