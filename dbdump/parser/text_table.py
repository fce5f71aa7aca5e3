"""Primitives for splitting delimited text into fields."""

WHITESPACE = " \t\n\r"

LINE_SEPARATOR = "\n"
FIELD_SEPARATOR = "|"
NAME_SEPARATOR = " "


def split(text: str, separator: str) -> list[str]:
    """Split text on every occurrence of separator.

    Empty tokens are kept, so ``separator.join(split(text, separator))``
    always gives back ``text``.
    """
    return text.split(separator)


def trim(text: str) -> str:
    """Strip spaces, tabs, newlines and carriage returns from both ends."""
    return text.strip(WHITESPACE)


def filter_blank(tokens: list[str]) -> list[str]:
    """Drop tokens that are empty or whitespace only, keeping order."""
    return [token for token in tokens if trim(token)]


def split_lines(text: str) -> list[str]:
    """Split text into its non-blank lines."""
    return filter_blank(split(text, LINE_SEPARATOR))


def split_fields(line: str) -> list[str]:
    """Split one line of list-mode output into its pipe-delimited fields.

    A trailing carriage return left by CRLF output is removed first.
    """
    return split(line.rstrip("\r"), FIELD_SEPARATOR)
