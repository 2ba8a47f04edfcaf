"""Shared constants for displaynames.

This module provides centralized configuration constants used across the
core, locale utilities and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Environment default and the undetermined (root) tag
- Cache limits: Memory bounds for memoized Babel locales and lookup handles
- Input limits: DoS prevention via size constraints
- Option vocabularies: Accepted string tokens for constructor options

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "UNDETERMINED_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_LANGUAGE_TAG_LENGTH",
    # Option vocabularies
    "LOCALE_MATCHER_VALUES",
    "STYLE_VALUES",
    "TYPE_VALUES",
    "FALLBACK_VALUES",
    "DEFAULT_LOCALE_MATCHER",
    "CURRENCY_KEY",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when no other default is supplied and as the data fallback
# when Babel ships no CLDR data for a resolved locale.
DEFAULT_LOCALE: str = "en-US"

# BCP-47 "undetermined" language subtag. Negotiation yields this when no
# candidate locale is supported.
UNDETERMINED_LOCALE: str = "und"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized Babel Locale objects and lookup handles.
# 128 covers typical multi-region applications (major locales x styles).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest language tag accepted by the parser. Real tags rarely exceed 35
# characters; anything beyond this is malformed or adversarial.
MAX_LANGUAGE_TAG_LENGTH: int = 256

# ============================================================================
# OPTION VOCABULARIES
# ============================================================================

LOCALE_MATCHER_VALUES: tuple[str, ...] = ("lookup", "best fit")
DEFAULT_LOCALE_MATCHER: str = "best fit"

# "narrow" is accepted but resolves to the same short form as "short".
STYLE_VALUES: tuple[str, ...] = ("narrow", "short", "long")

TYPE_VALUES: tuple[str, ...] = ("language", "region", "script", "currency")

FALLBACK_VALUES: tuple[str, ...] = ("code", "none")

# Key used for key/value display-name lookups of currency codes.
CURRENCY_KEY: str = "currency"
