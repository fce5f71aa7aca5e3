"""Custom exceptions for the database dumper."""


class DbDumpException(Exception):
    """Base exception for all dumper errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProcessException(DbDumpException):
    """Exceptions related to running the external tool."""

    pass


class ProcessLaunchError(ProcessException):
    """External tool could not be started."""

    pass


class ProcessTimeoutError(ProcessException):
    """External tool did not finish within the configured timeout."""

    pass


class ParserException(DbDumpException):
    """Exceptions related to parsing the external tool's output."""

    pass


class SchemaParseError(ParserException):
    """Column introspection output has an unexpected layout."""

    pass


class RecordShapeError(ParserException):
    """Record field count does not match the table's column count."""

    pass


class UsageError(DbDumpException):
    """Command line was invoked with the wrong arguments."""

    pass


class OutputError(DbDumpException):
    """Output document could not be written."""

    pass
