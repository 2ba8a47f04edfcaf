"""DisplayNames exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.
The two recoverable kinds also subclass the matching builtin (TypeError,
ValueError) so callers can catch them without importing this module.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DisplayNamesError(Exception):
    """Base exception for all displaynames errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DisplayNamesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DisplayNamesTypeError(DisplayNamesError, TypeError):
    """Construction or call received a value of the wrong kind.

    Raised for a missing required option, an option value outside its
    vocabulary, a non-mapping options argument, non-string locale list
    entries, and non-string codes. No instance is created when raised
    during construction.
    """


class DisplayNamesRangeError(DisplayNamesError, ValueError):
    """A string argument does not have the required shape.

    Raised by DisplayNames.of for malformed codes and by locale list
    canonicalization for structurally invalid language tags.

    Attributes:
        code: The offending value
        expected: Description of the accepted shape
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        code: str = "",
        expected: str = "",
    ) -> None:
        """Initialize DisplayNamesRangeError.

        Args:
            message: Error message string OR Diagnostic object
            code: The offending value
            expected: Description of the accepted shape
        """
        super().__init__(message)
        self.code = code
        self.expected = expected
