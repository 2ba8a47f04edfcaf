"""Diagnostic system for displaynames errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DisplayNamesError, DisplayNamesRangeError, DisplayNamesTypeError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DisplayNamesError",
    "DisplayNamesRangeError",
    "DisplayNamesTypeError",
    "ErrorTemplate",
    "OutputFormat",
]
