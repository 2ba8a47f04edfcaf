"""DisplayNames - locale-aware display names for language, region, script and currency codes.

Resolves the constructor options once into an immutable DisplayNamesConfig
and a lookup handle, then answers of() queries and resolved_options()
snapshots from that state.

Construction pipeline:
    1. Validate the options mapping and read localeMatcher/style/type/fallback
    2. Canonicalize the requested locale list
    3. resolve_options(): negotiate a locale, strip extensions, negotiate
       the default locale when negotiation yields root, map style/fallback
       tokens, create the lookup handle

Python 3.13+. Uses Babel (via LocaleDisplayData) for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import assert_never

from displaynames.constants import (
    CURRENCY_KEY,
    DEFAULT_LOCALE,
    DEFAULT_LOCALE_MATCHER,
    FALLBACK_VALUES,
    LOCALE_MATCHER_VALUES,
    STYLE_VALUES,
    TYPE_VALUES,
)
from displaynames.core import (
    LanguageTag,
    is_structurally_valid_language_tag,
    is_structurally_valid_region_subtag,
    is_structurally_valid_script_subtag,
    is_well_formed_currency_code,
    parse_language_tag,
)
from displaynames.diagnostics import (
    Diagnostic,
    DisplayNamesRangeError,
    DisplayNamesTypeError,
    ErrorTemplate,
)
from displaynames.enums import DisplayStyle, FallbackPolicy, SubjectType
from displaynames.locale_utils import canonicalize_locale_list, select_locale, supported_locales
from displaynames.runtime.locale_data import LocaleDisplayData, create_lookup

__all__ = [
    "DisplayNames",
    "DisplayNamesConfig",
    "LocaleSelector",
    "resolve_options",
]

logger = logging.getLogger(__name__)

type LocaleSelector = Callable[[Sequence[str]], LanguageTag]
"""Negotiation policy: requested canonical tags -> selected tag (root if none)."""


@dataclass(frozen=True, slots=True)
class DisplayNamesConfig:
    """Resolved, immutable DisplayNames configuration.

    Attributes:
        locale: Canonical BCP-47 tag without extensions; never "und".
        style: Display name length.
        subject_type: Category of codes accepted by of().
        fallback: Policy for codes without locale data.
    """

    locale: str
    style: DisplayStyle
    subject_type: SubjectType
    fallback: FallbackPolicy

    def to_resolved_options(self) -> dict[str, str]:
        """Project onto option tokens, keys in locale/style/type/fallback order."""
        return {
            "locale": self.locale,
            "style": str(self.style),
            "type": str(self.subject_type),
            "fallback": str(self.fallback),
        }


def resolve_options(
    candidate_locales: Sequence[str],
    requested_style: str | None,
    subject_type: SubjectType,
    requested_fallback: str | None,
    default_locale: str,
    *,
    select: LocaleSelector = select_locale,
) -> tuple[DisplayNamesConfig, LocaleDisplayData]:
    """Resolve construction inputs into a config and its lookup handle.

    Args:
        candidate_locales: Canonical BCP-47 tags in priority order
        requested_style: "long" selects FULL; anything else SHORT
        subject_type: Already-validated subject type
        requested_fallback: "none" selects NO_SUBSTITUTE; anything else SUBSTITUTE
        default_locale: Environment default used when negotiation yields root;
            negotiated with the same selector, DEFAULT_LOCALE if that fails too
        select: Locale negotiation policy

    Returns:
        (DisplayNamesConfig, LocaleDisplayData) created together

    Raises:
        DisplayNamesRangeError: If default_locale is not structurally valid
        TypeError: If subject_type is not a SubjectType (caller defect)
    """
    if not isinstance(subject_type, SubjectType):
        msg = f"subject_type must be a SubjectType member, got {subject_type!r}"
        raise TypeError(msg)

    default_tag = parse_language_tag(default_locale).strip_extensions()

    stripped = select(candidate_locales).strip_extensions()
    if stripped.is_root:
        # The resolved locale must be one that negotiation selects for itself.
        stripped = select((default_tag.to_language_tag(),)).strip_extensions()
        if stripped.is_root:
            stripped = parse_language_tag(DEFAULT_LOCALE)
        logger.warning(
            "No supported locale in %r; using default locale '%s'",
            tuple(candidate_locales),
            stripped,
        )

    style = DisplayStyle.FULL if requested_style == "long" else DisplayStyle.SHORT
    fallback = (
        FallbackPolicy.NO_SUBSTITUTE if requested_fallback == "none" else FallbackPolicy.SUBSTITUTE
    )

    config = DisplayNamesConfig(
        locale=stripped.to_language_tag(),
        style=style,
        subject_type=subject_type,
        fallback=fallback,
    )
    lookup = create_lookup(config.locale, style, fallback)
    logger.debug("Resolved DisplayNames options: %s", config)
    return config, lookup


def _check_options(options: object) -> Mapping[str, object]:
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise DisplayNamesTypeError(ErrorTemplate.invalid_options_type(options))
    return options


def _get_option(
    options: Mapping[str, object],
    name: str,
    allowed: tuple[str, ...],
    default: str | None,
) -> str | None:
    """Read a string option restricted to a vocabulary.

    None (or absent) yields default. Any other value must be one of allowed.
    """
    value = options.get(name)
    if value is None:
        return default
    if not isinstance(value, str) or value not in allowed:
        raise DisplayNamesTypeError(ErrorTemplate.invalid_option_value(name, value, allowed))
    return value


def _range_error(diagnostic: Diagnostic, code: str) -> DisplayNamesRangeError:
    return DisplayNamesRangeError(
        diagnostic,
        code=code,
        expected=diagnostic.expected_type or "",
    )


class DisplayNames:
    """Translate language, region, script and currency codes into display names.

    Configuration is resolved once at construction and never changes.
    Instances are immutable and safe to share between threads.

    Examples:
        >>> regions = DisplayNames(["fr"], {"type": "region"})
        >>> regions.of("US")
        'États-Unis'

        >>> currencies = DisplayNames(["en"], {"type": "currency", "fallback": "none"})
        >>> currencies.of("ZZZ") is None
        True

        >>> DisplayNames("en-GB-u-ca-buddhist", {"type": "script"}).resolved_options()
        {'locale': 'en-GB', 'style': 'short', 'type': 'script', 'fallback': 'code'}

    Args:
        locales: Requested locale(s): None, a BCP-47 tag, or an iterable of tags
        options: Mapping with keys ``type`` (required: "language", "region",
            "script", "currency"), ``style`` ("narrow", "short", "long"),
            ``fallback`` ("code", "none") and ``localeMatcher``
            ("lookup", "best fit")
        default_locale: Locale used when none of the requested locales is
            supported (e.g., from get_system_locale())

    Raises:
        DisplayNamesTypeError: Missing ``type``, unsupported option value,
            non-mapping options, or non-string locale entries
        DisplayNamesRangeError: Structurally invalid requested or default locale
    """

    __slots__ = ("_config", "_lookup")

    _config: DisplayNamesConfig
    _lookup: LocaleDisplayData

    def __init__(
        self,
        locales: str | Iterable[str] | None = None,
        options: Mapping[str, object] | None = None,
        *,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        requested = canonicalize_locale_list(locales)
        checked = _check_options(options)

        _get_option(checked, "localeMatcher", LOCALE_MATCHER_VALUES, DEFAULT_LOCALE_MATCHER)
        style = _get_option(checked, "style", STYLE_VALUES, None)
        type_token = _get_option(checked, "type", TYPE_VALUES, None)
        if type_token is None:
            raise DisplayNamesTypeError(ErrorTemplate.missing_required_option("type", TYPE_VALUES))
        fallback = _get_option(checked, "fallback", FALLBACK_VALUES, None)

        config, lookup = resolve_options(
            requested,
            style,
            SubjectType(type_token),
            fallback,
            default_locale,
        )
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_lookup", lookup)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable; cannot set '{name}'"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable; cannot delete '{name}'"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        c = self._config
        return (
            f"DisplayNames(locale={c.locale!r}, style={str(c.style)!r}, "
            f"type={str(c.subject_type)!r}, fallback={str(c.fallback)!r})"
        )

    @property
    def config(self) -> DisplayNamesConfig:
        """Resolved configuration."""
        return self._config

    @property
    def locale(self) -> str:
        """Resolved locale (BCP-47, no extensions)."""
        return self._config.locale

    @property
    def style(self) -> DisplayStyle:
        return self._config.style

    @property
    def subject_type(self) -> SubjectType:
        return self._config.subject_type

    @property
    def fallback(self) -> FallbackPolicy:
        return self._config.fallback

    def of(self, code: str) -> str | None:
        """Return the display name for code, or None if it is unknown.

        The code is validated against the shape required by the subject
        type before the lookup:

            language  structurally valid BCP-47 language tag
            region    2 ASCII letters or 3 digits
            script    4 ASCII letters
            currency  3 ASCII letters

        Args:
            code: Code to name

        Returns:
            Display name. For a well-formed code without locale data:
            the canonicalized code (fallback "code") or None (fallback "none").

        Raises:
            DisplayNamesTypeError: If code is not a string
            DisplayNamesRangeError: If code does not have the required shape
        """
        if not isinstance(code, str):
            raise DisplayNamesTypeError(ErrorTemplate.invalid_code_type(code))

        lookup = self._lookup
        match self._config.subject_type:
            case SubjectType.LANGUAGE:
                if not is_structurally_valid_language_tag(code):
                    raise _range_error(ErrorTemplate.invalid_language_tag(code), code)
                return lookup.language_name(code)
            case SubjectType.REGION:
                if not is_structurally_valid_region_subtag(code):
                    raise _range_error(ErrorTemplate.invalid_region_subtag(code), code)
                return lookup.region_name(code)
            case SubjectType.SCRIPT:
                if not is_structurally_valid_script_subtag(code):
                    raise _range_error(ErrorTemplate.invalid_script_subtag(code), code)
                return lookup.script_name(code)
            case SubjectType.CURRENCY:
                if not is_well_formed_currency_code(code):
                    raise _range_error(ErrorTemplate.invalid_currency_code(code), code)
                return lookup.key_value_name(CURRENCY_KEY, code)
            case _ as unreachable:
                # Construction only admits SubjectType members.
                assert_never(unreachable)

    def resolved_options(self) -> dict[str, str]:
        """Return a fresh snapshot of the resolved configuration.

        Keys are ordered locale, style, type, fallback. Values are the option
        tokens accepted by the constructor, so passing them back (with the
        locale as sole candidate) reproduces an equal snapshot.
        """
        return self._config.to_resolved_options()

    @staticmethod
    def supported_locales_of(
        locales: str | Iterable[str] | None,
        options: Mapping[str, object] | None = None,
    ) -> list[str]:
        """Return the requested locales that have CLDR display name data.

        Args:
            locales: Requested locale(s), as for the constructor
            options: Optional mapping; only ``localeMatcher`` is read

        Returns:
            Canonicalized supported tags, in request order

        Raises:
            DisplayNamesTypeError: Non-string entries, non-mapping options,
                or an unsupported localeMatcher
            DisplayNamesRangeError: Structurally invalid tags
        """
        requested = canonicalize_locale_list(locales)
        checked = _check_options(options)
        _get_option(checked, "localeMatcher", LOCALE_MATCHER_VALUES, DEFAULT_LOCALE_MATCHER)
        return supported_locales(requested)
