"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _quote_all(values: Iterable[str]) -> str:
    return ", ".join(f"'{value}'" for value in values)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    _DOCS_BASE = "https://tc39.es/ecma402"

    # Shape descriptions, shared with DisplayNamesRangeError.expected
    LANGUAGE_TAG_SHAPE = "a structurally valid BCP-47 language tag"
    REGION_SUBTAG_SHAPE = "2 ASCII letters or 3 digits"
    SCRIPT_SUBTAG_SHAPE = "4 ASCII letters"
    CURRENCY_CODE_SHAPE = "3 ASCII letters"

    @staticmethod
    def invalid_options_type(received: object) -> Diagnostic:
        """Options argument is neither None nor a mapping.

        Args:
            received: The value passed as options

        Returns:
            Diagnostic for INVALID_OPTIONS_TYPE
        """
        type_name = type(received).__name__
        msg = f"Options must be a mapping or None, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPTIONS_TYPE,
            message=msg,
            argument_name="options",
            expected_type="Mapping[str, str] | None",
            received_type=type_name,
            hint="Pass options as a dict, e.g. {'type': 'language'}",
        )

    @staticmethod
    def missing_required_option(name: str, allowed: Iterable[str]) -> Diagnostic:
        """A required option was not supplied.

        Args:
            name: Option name
            allowed: Accepted values for the option

        Returns:
            Diagnostic for MISSING_REQUIRED_OPTION
        """
        allowed = tuple(allowed)
        msg = f"Required option '{name}' is missing"
        return Diagnostic(
            code=DiagnosticCode.MISSING_REQUIRED_OPTION,
            message=msg,
            argument_name=name,
            expected_type=f"one of {_quote_all(allowed)}",
            hint=f"Pass options={{'{name}': '{allowed[0]}'}} (or another supported value)",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-intl-displaynames-constructor",
        )

    @staticmethod
    def invalid_option_value(name: str, value: object, allowed: Iterable[str]) -> Diagnostic:
        """An option value is outside its vocabulary.

        Args:
            name: Option name
            value: Rejected value
            allowed: Accepted values for the option

        Returns:
            Diagnostic for INVALID_OPTION_VALUE
        """
        msg = f"Invalid value {value!r} for option '{name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPTION_VALUE,
            message=msg,
            argument_name=name,
            expected_type=f"one of {_quote_all(allowed)}",
            received_type=repr(value),
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-intl-displaynames-constructor",
        )

    @staticmethod
    def invalid_locale_list_entry(entry: object) -> Diagnostic:
        """A requested locale is not a string.

        Args:
            entry: Rejected locale list element

        Returns:
            Diagnostic for INVALID_LOCALE_LIST_ENTRY
        """
        type_name = type(entry).__name__
        msg = f"Locale list entries must be strings, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_LIST_ENTRY,
            message=msg,
            argument_name="locales",
            expected_type="str",
            received_type=type_name,
        )

    @staticmethod
    def invalid_language_tag(tag: str) -> Diagnostic:
        """Language tag is not structurally valid.

        Args:
            tag: The rejected tag

        Returns:
            Diagnostic for INVALID_LANGUAGE_TAG
        """
        msg = f"Invalid language tag '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE_TAG,
            message=msg,
            argument_name="code",
            expected_type=ErrorTemplate.LANGUAGE_TAG_SHAPE,
            hint="Use a tag such as 'en', 'pt-BR' or 'zh-Hant-TW'",
            help_url="https://www.rfc-editor.org/rfc/rfc5646#section-2.1",
        )

    @staticmethod
    def invalid_region_subtag(code: str) -> Diagnostic:
        """Region subtag is not 2 letters or 3 digits."""
        msg = f"Invalid region subtag '{code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REGION_SUBTAG,
            message=msg,
            argument_name="code",
            expected_type=ErrorTemplate.REGION_SUBTAG_SHAPE,
            hint="Pass an ISO 3166-1 alpha-2 or UN M.49 code such as 'US' or '419'",
        )

    @staticmethod
    def invalid_script_subtag(code: str) -> Diagnostic:
        """Script subtag is not 4 letters."""
        msg = f"Invalid script subtag '{code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SCRIPT_SUBTAG,
            message=msg,
            argument_name="code",
            expected_type=ErrorTemplate.SCRIPT_SUBTAG_SHAPE,
            hint="Pass an ISO 15924 code such as 'Latn' or 'Cyrl'",
        )

    @staticmethod
    def invalid_currency_code(code: str) -> Diagnostic:
        """Currency code is not 3 letters."""
        msg = f"Invalid currency code '{code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CURRENCY_CODE,
            message=msg,
            argument_name="code",
            expected_type=ErrorTemplate.CURRENCY_CODE_SHAPE,
            hint="Pass an ISO 4217 code such as 'EUR' or 'JPY'",
        )

    @staticmethod
    def invalid_code_type(code: object) -> Diagnostic:
        """Code passed to DisplayNames.of is not a string."""
        type_name = type(code).__name__
        msg = f"Code must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_TYPE,
            message=msg,
            argument_name="code",
            expected_type="str",
            received_type=type_name,
        )
