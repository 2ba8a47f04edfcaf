"""Core utilities shared across locale utilities and the runtime layer.

This package provides the language tag grammar that both locale negotiation
and DisplayNames.of() depend on. By isolating it here, we maintain a clean
dependency graph:

    diagnostics <- core <- locale_utils <- runtime

Exports:
    LanguageTag: Immutable parsed BCP-47 tag
    parse_language_tag: Parse and canonicalize a tag
    is_structurally_valid_*: Per-subtag shape checks

Python 3.13+.
"""

from .language_tag import (
    LanguageTag,
    is_structurally_valid_language_tag,
    is_structurally_valid_region_subtag,
    is_structurally_valid_script_subtag,
    is_well_formed_currency_code,
    parse_language_tag,
)

__all__ = [
    "LanguageTag",
    "is_structurally_valid_language_tag",
    "is_structurally_valid_region_subtag",
    "is_structurally_valid_script_subtag",
    "is_well_formed_currency_code",
    "parse_language_tag",
]
