"""Tests for the diagnostics package: codes, templates, formatter and errors.

Tests DiagnosticFormatter in all output formats, ErrorTemplate message
shapes, and the DisplayNamesError hierarchy.

Python 3.13+.
"""

import json
from collections.abc import Callable

import pytest
from hypothesis import given
from hypothesis import strategies as st

from displaynames.constants import TYPE_VALUES
from displaynames.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DisplayNamesError,
    DisplayNamesRangeError,
    DisplayNamesTypeError,
    ErrorTemplate,
    OutputFormat,
)


class TestDiagnosticCode:
    """DiagnosticCode numbering."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_construction_range(self) -> None:
        """Construction errors live in 1000-1999."""
        for code in (
            DiagnosticCode.INVALID_OPTIONS_TYPE,
            DiagnosticCode.MISSING_REQUIRED_OPTION,
            DiagnosticCode.INVALID_OPTION_VALUE,
            DiagnosticCode.INVALID_LOCALE_LIST_ENTRY,
        ):
            assert 1000 <= code.value < 2000

    def test_query_range(self) -> None:
        """Query errors live in 2000-2999."""
        for code in (
            DiagnosticCode.INVALID_LANGUAGE_TAG,
            DiagnosticCode.INVALID_REGION_SUBTAG,
            DiagnosticCode.INVALID_SCRIPT_SUBTAG,
            DiagnosticCode.INVALID_CURRENCY_CODE,
            DiagnosticCode.INVALID_CODE_TYPE,
        ):
            assert 2000 <= code.value < 3000


class TestErrorTemplate:
    """ErrorTemplate message and metadata."""

    def test_missing_required_option(self) -> None:
        diagnostic = ErrorTemplate.missing_required_option("type", TYPE_VALUES)
        assert diagnostic.message == "Required option 'type' is missing"
        assert diagnostic.argument_name == "type"
        assert diagnostic.expected_type == "one of 'language', 'region', 'script', 'currency'"
        assert diagnostic.hint is not None
        assert "'type': 'language'" in diagnostic.hint

    def test_invalid_option_value(self) -> None:
        diagnostic = ErrorTemplate.invalid_option_value("style", "medium", ("short", "long"))
        assert diagnostic.message == "Invalid value 'medium' for option 'style'"
        assert diagnostic.received_type == "'medium'"

    def test_invalid_options_type(self) -> None:
        diagnostic = ErrorTemplate.invalid_options_type(["type"])
        assert diagnostic.message == "Options must be a mapping or None, got list"
        assert diagnostic.received_type == "list"

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (ErrorTemplate.invalid_region_subtag, ErrorTemplate.REGION_SUBTAG_SHAPE),
            (ErrorTemplate.invalid_script_subtag, ErrorTemplate.SCRIPT_SUBTAG_SHAPE),
            (ErrorTemplate.invalid_currency_code, ErrorTemplate.CURRENCY_CODE_SHAPE),
            (ErrorTemplate.invalid_language_tag, ErrorTemplate.LANGUAGE_TAG_SHAPE),
        ],
    )
    def test_shape_templates_name_code(
        self, factory: Callable[[str], Diagnostic], expected: str
    ) -> None:
        """Malformed-code templates quote the code and describe the shape."""
        diagnostic = factory("XYZ1")
        assert "'XYZ1'" in diagnostic.message
        assert diagnostic.expected_type == expected
        assert diagnostic.argument_name == "code"

    def test_invalid_code_type(self) -> None:
        diagnostic = ErrorTemplate.invalid_code_type(3.5)
        assert diagnostic.message == "Code must be a string, got float"
        assert diagnostic.code is DiagnosticCode.INVALID_CODE_TYPE


class TestDiagnosticFormatter:
    """DiagnosticFormatter output formats."""

    def test_rust_format(self) -> None:
        diagnostic = ErrorTemplate.invalid_region_subtag("XYZ1")
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()
        assert lines[0] == "error[INVALID_REGION_SUBTAG]: Invalid region subtag 'XYZ1'"
        assert "  = argument: code" in lines
        assert "  = expected: 2 ASCII letters or 3 digits" in lines
        assert any(line.startswith("  = help: ") for line in lines)

    def test_rust_format_with_url(self) -> None:
        diagnostic = ErrorTemplate.invalid_language_tag("!!")
        output = DiagnosticFormatter().format(diagnostic)
        assert "  = note: see https://www.rfc-editor.org/rfc/rfc5646#section-2.1" in output

    @pytest.mark.parametrize(
        "diagnostic",
        [
            ErrorTemplate.invalid_options_type([]),
            ErrorTemplate.missing_required_option("type", TYPE_VALUES),
            ErrorTemplate.invalid_locale_list_entry(7),
            ErrorTemplate.invalid_language_tag("!!"),
            ErrorTemplate.invalid_currency_code("US"),
            ErrorTemplate.invalid_code_type(None),
        ],
        ids=lambda d: d.code.name,
    )
    def test_every_template_renders_as_error(self, diagnostic: Diagnostic) -> None:
        """All templates share the bold red "error" label."""
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith(f"\033[1;31merror\033[0m[{diagnostic.code.name}]")

    def test_rust_format_error_color(self) -> None:
        diagnostic = ErrorTemplate.invalid_script_subtag("ab")
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;31merror\033[0m")

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.invalid_script_subtag("ab"))
        assert output == "INVALID_SCRIPT_SUBTAG: Invalid script subtag 'ab'"

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.invalid_currency_code("US")))
        assert data["code"] == "INVALID_CURRENCY_CODE"
        assert data["code_value"] == 2004
        assert data["message"] == "Invalid currency code 'US'"
        assert "severity" not in data
        assert data["expected_type"] == "3 ASCII letters"
        assert "received_type" not in data

    def test_json_keeps_non_ascii(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        output = formatter.format(ErrorTemplate.invalid_language_tag("français"))
        assert "français" in output

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        output = formatter.format(ErrorTemplate.invalid_language_tag("x" * 50))
        assert output == "INVALID_LANGUAGE_TAG: Invalid la..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.invalid_script_subtag("ab"), ErrorTemplate.invalid_currency_code("US")]
        )
        assert output.split("\n\n") == [
            "INVALID_SCRIPT_SUBTAG: Invalid script subtag 'ab'",
            "INVALID_CURRENCY_CODE: Invalid currency code 'US'",
        ]

    @given(code=st.text(max_size=30))
    def test_json_always_parses(self, code: str) -> None:
        """Property: JSON output is valid JSON for any offending code."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.invalid_region_subtag(code)))
        assert data["message"] == f"Invalid region subtag '{code}'"


class TestErrors:
    """DisplayNamesError hierarchy."""

    def test_plain_message(self) -> None:
        error = DisplayNamesError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message_formatted(self) -> None:
        diagnostic = ErrorTemplate.invalid_code_type(1)
        error = DisplayNamesTypeError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_type_error_kind(self) -> None:
        error = DisplayNamesTypeError("bad")
        assert isinstance(error, TypeError)
        assert isinstance(error, DisplayNamesError)
        assert not isinstance(error, ValueError)

    def test_range_error_kind(self) -> None:
        error = DisplayNamesRangeError("bad", code="XYZ1", expected="2 ASCII letters or 3 digits")
        assert isinstance(error, ValueError)
        assert isinstance(error, DisplayNamesError)
        assert not isinstance(error, TypeError)
        assert error.code == "XYZ1"
        assert error.expected == "2 ASCII letters or 3 digits"

    def test_range_error_defaults(self) -> None:
        error = DisplayNamesRangeError("bad")
        assert error.code == ""
        assert error.expected == ""

    def test_diagnostic_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.invalid_currency_code("US")
        assert str(diagnostic) == "Invalid currency code 'US'"
