"""BCP-47 language tag parsing and subtag validation.

This module is the single source of truth for the language tag grammar used
when validating requested locales and the codes passed to DisplayNames.of().

Grammar (Unicode BCP-47 locale identifier, no legacy forms):
    tag        = language ["-" script] ["-" region] *("-" variant)
                 *("-" extension) ["-" privateuse]
    language   = 2*3ALPHA / 5*8ALPHA
    script     = 4ALPHA
    region     = 2ALPHA / 3DIGIT
    variant    = 5*8alphanum / (DIGIT 3alphanum)
    extension  = singleton 1*("-" 2*8alphanum)      ; singleton is not "x"
    privateuse = "x" 1*("-" 1*8alphanum)

    - Subtags are ASCII only and case-insensitive
    - Variants and extension singletons must not repeat
    - Only "-" separates subtags

Canonical case follows BCP-47 conventions: language lowercase, script
titlecase, region uppercase, everything else lowercase.

Thread Safety:
    All functions are pure; LanguageTag is an immutable value.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, replace

from displaynames.constants import MAX_LANGUAGE_TAG_LENGTH, UNDETERMINED_LOCALE
from displaynames.diagnostics import DisplayNamesRangeError, ErrorTemplate

__all__ = [
    "LanguageTag",
    "is_structurally_valid_language_tag",
    "is_structurally_valid_region_subtag",
    "is_structurally_valid_script_subtag",
    "is_well_formed_currency_code",
    "parse_language_tag",
]

# Subtag patterns operate on lowercased input; fullmatch() anchors both ends.
_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{2,3}|[a-z]{5,8}")
_SCRIPT_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{4}")
_REGION_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{2}|[0-9]{3}")
_VARIANT_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9]{5,8}|[0-9][a-z0-9]{3}")
_SINGLETON_PATTERN: re.Pattern[str] = re.compile(r"[0-9a-wyz]")
_EXTENSION_SUBTAG_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9]{2,8}")
_PRIVATE_USE_SUBTAG_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9]{1,8}")

# Standalone subtag shapes accepted by DisplayNames.of(); case-insensitive.
_REGION_CODE_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]{2}|[0-9]{3}")
_SCRIPT_CODE_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]{4}")
_CURRENCY_CODE_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z]{3}")


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Parsed, case-canonicalized BCP-47 language tag.

    Immutable, thread-safe, hashable.

    Attributes:
        language: Primary language subtag (lowercase), "und" for root.
        script: Script subtag (titlecase) or None.
        region: Region subtag (uppercase) or None.
        variants: Variant subtags (lowercase), in request order.
        extensions: Extension sequences such as "u-ca-buddhist" (lowercase).
        private_use: Private use subtags after "x-" or None.
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    private_use: str | None = None

    @classmethod
    def root(cls) -> LanguageTag:
        """Return the undetermined (root) tag."""
        return cls(language=UNDETERMINED_LOCALE)

    @property
    def is_root(self) -> bool:
        """True if this tag renders as the bare undetermined tag "und"."""
        return self.to_language_tag() == UNDETERMINED_LOCALE

    def strip_extensions(self) -> LanguageTag:
        """Return a copy without extension and private use subtags."""
        if not self.extensions and self.private_use is None:
            return self
        return replace(self, extensions=(), private_use=None)

    def to_language_tag(self) -> str:
        """Render as a canonical BCP-47 string (e.g., 'zh-Hant-TW')."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        parts.extend(self.extensions)
        if self.private_use:
            parts.append(f"x-{self.private_use}")
        return "-".join(parts)

    def to_posix(self) -> str:
        """Render as a Babel/POSIX identifier (e.g., 'ca_ES_VALENCIA').

        Extensions and private use subtags have no POSIX form and are dropped.
        """
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(variant.upper() for variant in self.variants)
        return "_".join(parts)

    def fallback_chain(self) -> Iterator[LanguageTag]:
        """Yield this tag and its truncations, most specific first.

        Implements the RFC 4647 lookup truncation over the extension-free
        tag: variants are removed last-first, then region, then script.

        Example:
            >>> [t.to_language_tag() for t in parse_language_tag("sr-Latn-RS").fallback_chain()]
            ['sr-Latn-RS', 'sr-Latn', 'sr']
        """
        tag = self.strip_extensions()
        yield tag
        variants = tag.variants
        while variants:
            variants = variants[:-1]
            yield replace(tag, variants=variants)
        if tag.region:
            yield LanguageTag(language=tag.language, script=tag.script)
        if tag.script:
            yield LanguageTag(language=tag.language)

    def __str__(self) -> str:
        return self.to_language_tag()


def _parse(tag: str) -> LanguageTag | None:
    """Parse tag, returning None when it is not structurally valid."""
    if not tag or len(tag) > MAX_LANGUAGE_TAG_LENGTH or not tag.isascii():
        return None

    subtags = tag.lower().split("-")
    if "" in subtags:
        return None

    count = len(subtags)
    language = subtags[0]
    if not _LANGUAGE_PATTERN.fullmatch(language):
        return None
    index = 1

    script: str | None = None
    if index < count and _SCRIPT_PATTERN.fullmatch(subtags[index]):
        script = subtags[index].title()
        index += 1

    region: str | None = None
    if index < count and _REGION_PATTERN.fullmatch(subtags[index]):
        region = subtags[index].upper()
        index += 1

    variants: list[str] = []
    while index < count and _VARIANT_PATTERN.fullmatch(subtags[index]):
        if subtags[index] in variants:
            return None
        variants.append(subtags[index])
        index += 1

    extensions: list[str] = []
    singletons: set[str] = set()
    while index < count and _SINGLETON_PATTERN.fullmatch(subtags[index]):
        singleton = subtags[index]
        if singleton in singletons:
            return None
        singletons.add(singleton)
        index += 1
        start = index
        while index < count and _EXTENSION_SUBTAG_PATTERN.fullmatch(subtags[index]):
            index += 1
        if index == start:
            return None
        extensions.append("-".join(subtags[start - 1 : index]))

    private_use: str | None = None
    if index < count and subtags[index] == "x":
        index += 1
        start = index
        while index < count and _PRIVATE_USE_SUBTAG_PATTERN.fullmatch(subtags[index]):
            index += 1
        if index == start:
            return None
        private_use = "-".join(subtags[start:index])

    if index != count:
        return None

    return LanguageTag(
        language=language,
        script=script,
        region=region,
        variants=tuple(variants),
        extensions=tuple(extensions),
        private_use=private_use,
    )


def parse_language_tag(tag: str) -> LanguageTag:
    """Parse a BCP-47 language tag into its canonical form.

    Args:
        tag: Language tag such as 'en-US' or 'de-DE-u-co-phonebk'

    Returns:
        Case-canonicalized LanguageTag

    Raises:
        DisplayNamesRangeError: If tag is not structurally valid

    Example:
        >>> parse_language_tag("ZH-hant-tw").to_language_tag()
        'zh-Hant-TW'
    """
    parsed = _parse(tag)
    if parsed is None:
        raise DisplayNamesRangeError(
            ErrorTemplate.invalid_language_tag(tag),
            code=tag,
            expected=ErrorTemplate.LANGUAGE_TAG_SHAPE,
        )
    return parsed


def is_structurally_valid_language_tag(tag: str) -> bool:
    """Check tag against the BCP-47 grammar above.

    Example:
        >>> is_structurally_valid_language_tag("en-US")
        True
        >>> is_structurally_valid_language_tag("!!")
        False
        >>> is_structurally_valid_language_tag("de-1996-1996")  # duplicate variant
        False
    """
    return _parse(tag) is not None


def is_structurally_valid_region_subtag(code: str) -> bool:
    """Check for 2 ASCII letters or 3 ASCII digits (e.g., 'US', '419')."""
    return _REGION_CODE_PATTERN.fullmatch(code) is not None


def is_structurally_valid_script_subtag(code: str) -> bool:
    """Check for 4 ASCII letters (e.g., 'Latn')."""
    return _SCRIPT_CODE_PATTERN.fullmatch(code) is not None


def is_well_formed_currency_code(code: str) -> bool:
    """Check for 3 ASCII letters (e.g., 'EUR'). Case-insensitive."""
    return _CURRENCY_CODE_PATTERN.fullmatch(code) is not None
