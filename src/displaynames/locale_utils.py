"""Locale utilities: BCP-47 to POSIX conversion and locale negotiation.

Centralizes locale format normalization used throughout the codebase and
implements the default locale-negotiation policy used by DisplayNames:
RFC 4647 lookup of the requested locales against the CLDR locales that
Babel ships data for.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from displaynames.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from displaynames.core import LanguageTag, parse_language_tag
from displaynames.diagnostics import DisplayNamesTypeError, ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale_list",
    "clear_locale_cache",
    "data_identifier",
    "get_babel_locale",
    "get_system_locale",
    "is_locale_available",
    "normalize_locale",
    "select_locale",
    "supported_locales",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved; Babel matches identifiers case-insensitively.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Babel loads CLDR data
    lazily on first attribute access, so cached instances also keep their
    loaded data.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects and data identifiers."""
    get_babel_locale.cache_clear()
    data_identifier.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding and
    modifier suffixes. Intended for callers that want to derive the
    ``default_locale`` passed to DisplayNames; the library itself never
    reads the environment.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale code in BCP-47 format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        detected = _posix_to_bcp47(system_locale)
        if detected is not None:
            return detected
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        detected = _posix_to_bcp47(os.environ.get(var))
        if detected is not None:
            return detected

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE


def _posix_to_bcp47(value: str | None) -> str | None:
    """Convert a POSIX locale value to BCP-47; None for pseudo-locales.

    de_DE.UTF-8@euro -> de-DE, C.UTF-8 -> None
    """
    if not value:
        return None
    bare = value.split(".")[0].split("@")[0]
    if bare in ("", "C", "POSIX"):
        return None
    return bare.replace("_", "-")


def canonicalize_locale_list(locales: str | Iterable[str] | None) -> tuple[str, ...]:
    """Validate and canonicalize requested locales.

    Args:
        locales: None, a single tag, or an iterable of tags in priority order

    Returns:
        Canonical BCP-47 tags with duplicates removed, order preserved

    Raises:
        DisplayNamesTypeError: If an entry is not a string
        DisplayNamesRangeError: If an entry is not a structurally valid tag

    Example:
        >>> canonicalize_locale_list(["EN-us", "fr", "en-US"])
        ('en-US', 'fr')
    """
    if locales is None:
        return ()
    if isinstance(locales, str):
        locales = (locales,)

    seen: dict[str, None] = {}
    for entry in locales:
        if not isinstance(entry, str):
            raise DisplayNamesTypeError(ErrorTemplate.invalid_locale_list_entry(entry))
        seen.setdefault(parse_language_tag(entry).to_language_tag(), None)
    return tuple(seen)


def _maximize(tag: LanguageTag) -> LanguageTag:
    """Fill in a missing script or region from CLDR likely subtags.

    Keys are tried most specific first (language_script_region,
    language_region, language_script, language); the first match supplies
    only the subtags the tag lacks.

    Example:
        zh-TW -> zh-Hant-TW, sr-RS -> sr-Cyrl-RS, en -> en-Latn-US
    """
    from babel.core import get_global, parse_locale  # noqa: PLC0415

    likely_subtags = get_global("likely_subtags")
    language, script, region = tag.language, tag.script, tag.region

    keys: list[str] = []
    if script and region:
        keys.append(f"{language}_{script}_{region}")
    if region:
        keys.append(f"{language}_{region}")
    if script:
        keys.append(f"{language}_{script}")
    keys.append(language)

    for key in keys:
        likely = likely_subtags.get(key)
        if likely is None:
            continue
        parts = parse_locale(likely)
        return replace(tag, script=script or parts[2], region=region or parts[1])
    return tag


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def data_identifier(tag: LanguageTag) -> str | None:
    """Return the Babel locale identifier whose CLDR data serves tag.

    Babel stores many locales only under their maximized form (zh_Hant_TW,
    sr_Cyrl_RS), so a tag matches either its own POSIX identifier or that
    of its likely-subtags expansion. No truncation is performed here.

    Extensions are ignored. The root locale is never served.

    Example:
        >>> data_identifier(parse_language_tag("zh-TW"))
        'zh_Hant_TW'
        >>> data_identifier(parse_language_tag("en-QQ")) is None
        True
    """
    tag = tag.strip_extensions()
    if tag.is_root:
        return None
    from babel import localedata  # noqa: PLC0415

    identifier = tag.to_posix()
    if localedata.exists(identifier):
        return identifier

    expanded = _maximize(tag).to_posix()
    if expanded != identifier and localedata.exists(expanded):
        return expanded
    return None


def is_locale_available(tag: LanguageTag) -> bool:
    """Check whether Babel ships CLDR data for this tag, without truncation.

    Extensions are ignored. The root locale is never reported as available.
    """
    return data_identifier(tag) is not None


def _lookup(tag: LanguageTag) -> LanguageTag | None:
    """Return the most specific available truncation of tag, if any."""
    for candidate in tag.fallback_chain():
        if is_locale_available(candidate):
            return candidate
    return None


def select_locale(candidates: Sequence[str]) -> LanguageTag:
    """Pick the best supported locale for the requested candidates.

    Candidates are tried in order; each is truncated per RFC 4647 lookup
    until a locale with CLDR data is found. A Unicode "u" extension on the
    winning request is carried over to the result; all other extensions
    are dropped.

    Args:
        candidates: Canonical BCP-47 tags in priority order

    Returns:
        Selected LanguageTag, or the root tag ("und") when nothing matches

    Example:
        >>> select_locale(["xx", "de-CH-u-co-phonebk"]).to_language_tag()
        'de-CH-u-co-phonebk'
        >>> select_locale([]).to_language_tag()
        'und'
    """
    for candidate in candidates:
        requested = parse_language_tag(candidate)
        matched = _lookup(requested)
        if matched is None:
            continue
        unicode_extensions = tuple(ext for ext in requested.extensions if ext.startswith("u-"))
        selected = replace(matched, extensions=unicode_extensions)
        logger.debug("Selected locale '%s' for request '%s'", selected, candidate)
        return selected

    logger.debug("No supported locale among %r", tuple(candidates))
    return LanguageTag.root()


def supported_locales(candidates: Sequence[str]) -> list[str]:
    """Return the requested tags that select_locale() could serve.

    Args:
        candidates: Canonical BCP-47 tags

    Returns:
        The supported subset of candidates, in request order and unmodified
    """
    return [
        candidate for candidate in candidates if _lookup(parse_language_tag(candidate)) is not None
    ]
