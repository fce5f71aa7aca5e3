"""
Parser module for the external tool's textual output.

Splits pipe-delimited command output into fields and infers scalar types.
"""

from .text_table import filter_blank, split, trim
from .values import TypedValue, ValueKind, infer

__all__ = [
    "split",
    "trim",
    "filter_blank",
    "infer",
    "TypedValue",
    "ValueKind",
]
