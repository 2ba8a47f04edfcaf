"""Enumerations for displaynames type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
Each member's value is the canonical option token reported by
DisplayNames.resolved_options(), so str(member) round-trips through the
constructor.

Python 3.13+.
"""

from enum import StrEnum


class DisplayStyle(StrEnum):
    """Length of the rendered display name.

    StrEnum provides automatic string conversion: str(DisplayStyle.FULL) == "long"
    """

    SHORT = "short"
    """Short form (also used for the "narrow" option)."""

    FULL = "long"
    """Full form, requested with style="long"."""


class SubjectType(StrEnum):
    """Category of code being named.

    StrEnum provides automatic string conversion: str(SubjectType.REGION) == "region"
    """

    LANGUAGE = "language"
    """BCP-47 language tag: en-US, zh-Hant"""

    REGION = "region"
    """Region subtag: US, 419"""

    SCRIPT = "script"
    """ISO 15924 script subtag: Latn, Cyrl"""

    CURRENCY = "currency"
    """ISO 4217 currency code: EUR, JPY"""


class FallbackPolicy(StrEnum):
    """What to return when the locale data has no name for a code.

    StrEnum provides automatic string conversion: str(FallbackPolicy.NO_SUBSTITUTE) == "none"
    """

    SUBSTITUTE = "code"
    """Return the canonicalized code itself."""

    NO_SUBSTITUTE = "none"
    """Return None."""


__all__ = [
    "DisplayStyle",
    "FallbackPolicy",
    "SubjectType",
]
