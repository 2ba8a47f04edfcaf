"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (options and locale lists)
        2000-2999: Query errors (malformed codes passed to DisplayNames.of)
    """

    # Construction errors (1000-1999)
    INVALID_OPTIONS_TYPE = 1001
    MISSING_REQUIRED_OPTION = 1002
    INVALID_OPTION_VALUE = 1003
    INVALID_LOCALE_LIST_ENTRY = 1004

    # Query errors (2000-2999)
    INVALID_LANGUAGE_TAG = 2001
    INVALID_REGION_SUBTAG = 2002
    INVALID_SCRIPT_SUBTAG = 2003
    INVALID_CURRENCY_CODE = 2004
    INVALID_CODE_TYPE = 2005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        argument_name: Option or argument that caused the error
        expected_type: Expected shape or vocabulary for the value
        received_type: Actual value or type received
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_REGION_SUBTAG]: Invalid region subtag 'XYZ1'
              = argument: code
              = expected: 2 ASCII letters or 3 digits
              = help: Pass an ISO 3166-1 alpha-2 or UN M.49 code such as 'US' or '419'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
