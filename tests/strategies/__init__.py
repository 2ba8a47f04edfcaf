"""Hypothesis strategies for displaynames property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- locales: Language tags, subtags, currency codes and constructor options

Usage:
    from tests.strategies import language_tags, region_codes
    from tests.strategies.locales import display_names_options
"""

from .locales import (
    currency_codes,
    display_names_options,
    invalid_currency_codes,
    invalid_region_codes,
    invalid_script_codes,
    language_tags,
    region_codes,
    script_codes,
    supported_locales,
    valid_code_for_type,
)

__all__ = [
    "currency_codes",
    "display_names_options",
    "invalid_currency_codes",
    "invalid_region_codes",
    "invalid_script_codes",
    "language_tags",
    "region_codes",
    "script_codes",
    "supported_locales",
    "valid_code_for_type",
]
