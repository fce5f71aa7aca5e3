"""Type inference for raw text fields."""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
REAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

Scalar = Union[None, int, float, str]


class ValueKind(str, Enum):
    """Scalar kinds a field can be inferred as."""

    NULL = "null"
    INTEGER = "integer"
    REAL = "real"
    STRING = "string"


@dataclass(frozen=True)
class TypedValue:
    """A field value tagged with its inferred kind."""

    kind: ValueKind
    value: Scalar


def infer(raw: str) -> TypedValue:
    """Infer the JSON scalar for a raw field.

    Numbers must be whole-string literals: ``"12abc"`` stays a string.

    Args:
        raw: Field text exactly as the external tool printed it

    Returns:
        Typed value (null for an empty field)
    """
    if not raw:
        return TypedValue(ValueKind.NULL, None)

    if INTEGER_PATTERN.fullmatch(raw):
        try:
            return TypedValue(ValueKind.INTEGER, int(raw))
        except ValueError:
            # Longer than the interpreter's int conversion limit
            return TypedValue(ValueKind.STRING, raw)

    if REAL_PATTERN.fullmatch(raw):
        real = float(raw)
        # Overflow to inf has no standard JSON form
        if math.isfinite(real):
            return TypedValue(ValueKind.REAL, real)

    return TypedValue(ValueKind.STRING, raw)
