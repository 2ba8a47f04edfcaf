"""Babel-backed locale data for rendering display names.

This module provides the lookup handle that DisplayNames delegates to: an
immutable object bound to one (locale, style, fallback) triple that renders
CLDR names for language tags, region subtags, script subtags and currency
codes.

Architecture:
    - LocaleDisplayData: Immutable lookup handle wrapping a Babel Locale
    - create_lookup(): Memoized factory keyed by (locale, style, fallback)
    - No dependency on Python's locale module (avoids global state)

Babel's CLDR import keeps only the default form of each name (alternate
"short" forms are dropped), so DisplayStyle.SHORT and DisplayStyle.FULL
read the same tables. The style still participates in handle identity.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from displaynames.constants import CURRENCY_KEY, DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from displaynames.core import LanguageTag, parse_language_tag
from displaynames.enums import DisplayStyle, FallbackPolicy
from displaynames.locale_utils import clear_locale_cache, data_identifier, get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleDisplayData",
    "clear_display_data_cache",
    "create_lookup",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleDisplayData:
    """Immutable lookup handle for CLDR display names in one locale.

    Use create_lookup() to construct instances; it resolves the Babel locale
    and memoizes handles per (locale, style, fallback).

    Every lookup returns the CLDR name when one exists. Otherwise the
    result depends on ``fallback``: SUBSTITUTE returns the canonicalized
    code, NO_SUBSTITUTE returns None.

    Examples:
        >>> data = create_lookup("fr", DisplayStyle.SHORT, FallbackPolicy.SUBSTITUTE)
        >>> data.region_name("US")
        'États-Unis'
        >>> data.script_name("Qaaa")
        'Qaaa'

    Thread Safety:
        Instances are immutable; Babel Locale data is read-only once
        loaded. Multiple threads can share one handle without locking.

    Attributes:
        locale_code: BCP-47 tag the handle was requested for
        style: Display name length
        fallback: Policy for codes without CLDR data
        is_fallback: True if Babel had no data for locale_code and
            DEFAULT_LOCALE data is used instead
    """

    locale_code: str
    style: DisplayStyle
    fallback: FallbackPolicy
    _babel_locale: Locale
    is_fallback: bool = False

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale supplying the CLDR tables."""
        return self._babel_locale

    def _substitute(self, code: str) -> str | None:
        if self.fallback is FallbackPolicy.SUBSTITUTE:
            return code
        return None

    def language_name(self, tag: str) -> str | None:
        """Render a language tag, e.g. 'en-US' -> 'English (United States)'.

        Extensions and private use subtags are ignored. Script, region and
        variant names are appended in parentheses. With NO_SUBSTITUTE the
        result is None if any component lacks a name.

        Raises:
            DisplayNamesRangeError: If tag is not structurally valid
        """
        parsed = parse_language_tag(tag).strip_extensions()
        locale = self._babel_locale

        name = locale.languages.get(parsed.language)
        if name is None:
            name = self._substitute(parsed.language)
            if name is None:
                return None

        details: list[str] = []
        components: list[tuple[Mapping[str, str], str]] = []
        if parsed.script:
            components.append((locale.scripts, parsed.script))
        if parsed.region:
            components.append((locale.territories, parsed.region))
        components.extend((locale.variants, variant.upper()) for variant in parsed.variants)

        for table, code in components:
            detail = table.get(code)
            if detail is None:
                detail = self._substitute(code)
                if detail is None:
                    return None
            details.append(detail)

        if details:
            return f"{name} ({', '.join(details)})"
        return name

    def region_name(self, subtag: str) -> str | None:
        """Render a region subtag, e.g. 'DE' -> 'Germany', '419' -> 'Latin America'."""
        code = subtag.upper()
        name = self._babel_locale.territories.get(code)
        return name if name is not None else self._substitute(code)

    def script_name(self, subtag: str) -> str | None:
        """Render a script subtag, e.g. 'cyrl' -> 'Cyrillic'."""
        code = subtag.title()
        name = self._babel_locale.scripts.get(code)
        return name if name is not None else self._substitute(code)

    def key_value_name(self, key: str, value: str) -> str | None:
        """Render a keyed value; only the "currency" key is supported.

        Raises:
            ValueError: If key is not "currency"
        """
        if key != CURRENCY_KEY:
            msg = f"Unsupported display name key '{key}'; expected '{CURRENCY_KEY}'"
            raise ValueError(msg)
        code = value.upper()
        name = self._babel_locale.currencies.get(code)
        return name if name is not None else self._substitute(code)


def _resolve_babel_locale(locale_code: str) -> tuple[Locale, bool]:
    """Load Babel data for locale_code, truncating per RFC 4647 lookup.

    Each truncation also matches its likely-subtags expansion, so zh-TW
    loads zh_Hant_TW rather than truncating to zh.

    Returns the Locale and whether DEFAULT_LOCALE data had to be used.
    """
    tag: LanguageTag = parse_language_tag(locale_code)
    for candidate in tag.fallback_chain():
        identifier = data_identifier(candidate)
        if identifier is not None:
            return get_babel_locale(identifier), False

    logger.warning(
        "No CLDR data for locale '%s'. Falling back to %s", locale_code, DEFAULT_LOCALE
    )
    return get_babel_locale(DEFAULT_LOCALE), True


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def create_lookup(
    locale_code: str,
    style: DisplayStyle,
    fallback: FallbackPolicy,
) -> LocaleDisplayData:
    """Create (or reuse) the lookup handle for a locale/style/fallback triple.

    Thread-safe. Handles are immutable, so sharing them between DisplayNames
    instances is not observable.

    Args:
        locale_code: Canonical BCP-47 tag without extensions
        style: Display name length
        fallback: Policy for codes without CLDR data

    Returns:
        LocaleDisplayData bound to the triple

    Raises:
        DisplayNamesRangeError: If locale_code is not structurally valid
    """
    babel_locale, used_fallback = _resolve_babel_locale(locale_code)
    logger.debug(
        "Created display name lookup for %s (style=%s, fallback=%s, data=%s)",
        locale_code,
        style,
        fallback,
        babel_locale,
    )
    return LocaleDisplayData(
        locale_code=locale_code,
        style=style,
        fallback=fallback,
        _babel_locale=babel_locale,
        is_fallback=used_fallback,
    )


def clear_display_data_cache() -> None:
    """Clear memoized lookup handles and Babel locales.

    Call this to free memory or reset state in tests. Thread-safe.
    """
    create_lookup.cache_clear()
    clear_locale_cache()
