"""displaynames - locale-aware display names backed by CLDR data.

Converts language tags, region subtags, script subtags and currency codes
into human-readable names in a negotiated locale, with Intl.DisplayNames
option semantics (style, type, fallback) and an immutable resolved
configuration.

Public API:
    DisplayNames - Resolve options once, then name codes with of()
    DisplayNamesConfig - Immutable resolved configuration
    DisplayStyle, SubjectType, FallbackPolicy - Resolved option enums
    get_system_locale - Detect an environment default locale

Exceptions:
    DisplayNamesError - Base exception class
    DisplayNamesTypeError - Invalid options or argument types (TypeError)
    DisplayNamesRangeError - Malformed codes or locale tags (ValueError)

Submodules:
    displaynames.core - BCP-47 language tag grammar
    displaynames.locale_utils - Locale negotiation and Babel locale loading
    displaynames.runtime.locale_data - Babel-backed lookup handles
    displaynames.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import DisplayNamesError, DisplayNamesRangeError, DisplayNamesTypeError
from .enums import DisplayStyle, FallbackPolicy, SubjectType
from .locale_utils import get_system_locale
from .runtime import DisplayNames, DisplayNamesConfig

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("displaynames")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DisplayNames",
    "DisplayNamesConfig",
    "DisplayNamesError",
    "DisplayNamesRangeError",
    "DisplayNamesTypeError",
    "DisplayStyle",
    "FallbackPolicy",
    "SubjectType",
    "__version__",
    "get_system_locale",
]
